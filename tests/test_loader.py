"""Tests for catalog/loader.py - pattern data files."""

import json

import pytest

from evangeliser.catalog import (
    default_catalog, dump_catalog, load_catalog, pattern_from_dict, save_catalog,
)
from evangeliser.errors import CatalogLoadError


def _record(**overrides):
    data = {
        "id": "loop-push",
        "name": "Loop push",
        "category": "ArrayOperations",
        "difficulty": "Beginner",
        "detectionRule": r"\.push\(",
        "confidence": 0.6,
    }
    data.update(overrides)
    return data


class TestPatternFromDict:

    def test_minimal(self):
        p = pattern_from_dict(_record())
        assert p.id == "loop-push"
        assert p.glyphs == ("⋯", "⇒", "⊆")
        assert p.narrative.celebrate == ""

    def test_glyphs_in_file_ignored(self):
        p = pattern_from_dict(_record(glyphs=["x", "y"]))
        assert p.glyphs == ("⋯", "⇒", "⊆")

    def test_missing_keys(self):
        data = _record()
        del data["detectionRule"]
        del data["confidence"]
        with pytest.raises(CatalogLoadError, match="detectionRule, confidence"):
            pattern_from_dict(data)

    def test_bad_category(self):
        with pytest.raises(CatalogLoadError, match="category"):
            pattern_from_dict(_record(category="Quantum"))

    def test_bad_confidence(self):
        with pytest.raises(CatalogLoadError):
            pattern_from_dict(_record(confidence="very"))


class TestLoadCatalog:

    def test_round_trip_keeps_order(self, tmp_path):
        original = default_catalog()
        path = save_catalog(original, tmp_path / "patterns.json")
        loaded = load_catalog(path)
        assert [p.id for p in loaded] == [p.id for p in original]
        assert loaded.get_by_id("array-map") == original.get_by_id("array-map")

    def test_wrapped_in_object(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(json.dumps({"patterns": [_record()]}))
        assert load_catalog(path).count() == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError, match="cannot read"):
            load_catalog(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text("{not json")
        with pytest.raises(CatalogLoadError, match="not valid JSON"):
            load_catalog(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text('"hello"')
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_bad_rule_warns_and_keeps(self, tmp_path, capsys):
        path = tmp_path / "p.json"
        path.write_text(json.dumps([_record(detectionRule="(broken")]))
        cat = load_catalog(path)
        assert "loop-push" in cat
        assert "loop-push" in cat.rule_errors
        assert "does not compile" in capsys.readouterr().err

    def test_dump_is_json_list(self):
        data = json.loads(dump_catalog(default_catalog()))
        assert isinstance(data, list)
        assert data[0]["id"] == "null-check-basic"

    def test_dump_keeps_unicode(self):
        assert "◇" in dump_catalog(default_catalog())
