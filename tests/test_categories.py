"""Tests for categories.py and errors.py."""

from evangeliser.categories import Difficulty, PatternCategory, SemanticCategory, LEGEND_ORDER
from evangeliser.errors import (
    CatalogLoadError, DuplicatePatternError, EvangeliserError, GlyphTableError,
)


class TestParse:

    def test_value(self):
        assert PatternCategory.parse("OopToFp") is PatternCategory.OOP_TO_FP

    def test_name(self):
        assert PatternCategory.parse("OOP_TO_FP") is PatternCategory.OOP_TO_FP

    def test_case_insensitive(self):
        assert Difficulty.parse("intermediate") is Difficulty.INTERMEDIATE

    def test_member_passthrough(self):
        assert SemanticCategory.parse(SemanticCategory.DATA) is SemanticCategory.DATA

    def test_unknown(self):
        assert PatternCategory.parse("Quantum") is None
        assert PatternCategory.parse(None) is None
        assert PatternCategory.parse(3) is None

    def test_other_enum_rejected(self):
        assert PatternCategory.parse(Difficulty.BEGINNER) is None

    def test_str_is_value(self):
        assert str(PatternCategory.NULL_SAFETY) == "NullSafety"


class TestShape:

    def test_twenty_one_categories(self):
        assert len(PatternCategory) == 21

    def test_legend_order_covers_all(self):
        assert set(LEGEND_ORDER) == set(SemanticCategory)
        assert LEGEND_ORDER[0] is SemanticCategory.SAFETY


class TestErrors:

    def test_hierarchy(self):
        for cls in (DuplicatePatternError, GlyphTableError, CatalogLoadError):
            assert issubclass(cls, EvangeliserError)

    def test_duplicate_message(self):
        e = DuplicatePatternError("array-map")
        assert str(e) == "duplicate pattern id: array-map"
        assert e.pattern_id == "array-map"
