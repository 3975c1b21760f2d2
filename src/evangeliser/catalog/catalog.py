"""catalog.py - the ordered, read-only pattern collection.

insertion order matters: it is the tie-break the detector uses when two
patterns share a confidence, and it is the order lessons are taught in.

in the world: the syllabus. fixed before class starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from evangeliser.categories import Difficulty, PatternCategory
from evangeliser.catalog.types import Narrative, Pattern
from evangeliser.errors import DuplicatePatternError
from evangeliser.glyphs import REGISTRY, GlyphRegistry
from evangeliser.tools.regexutil import validate_rule


@dataclass(frozen=True)
class Statistics:
    """catalog counts, computed on demand."""

    total: int = 0
    by_category: dict[str, int] = field(default_factory=dict)
    by_difficulty: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "byCategory": dict(self.by_category),
            "byDifficulty": dict(self.by_difficulty),
        }


class PatternCatalog:
    """immutable, ordered patterns with id/category/difficulty lookups."""

    def __init__(self, patterns: Iterable[Pattern] = ()):
        self._patterns: tuple[Pattern, ...] = tuple(patterns)
        self._by_id: dict[str, Pattern] = {}
        for p in self._patterns:
            if p.id in self._by_id:
                raise DuplicatePatternError(p.id)
            self._by_id[p.id] = p

        errors = {}
        for p in self._patterns:
            ok, msg = validate_rule(p.detection_rule)
            if not ok:
                errors[p.id] = msg
        self._rule_errors = errors

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __contains__(self, pattern_id) -> bool:
        return pattern_id in self._by_id

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._patterns

    @property
    def rule_errors(self) -> dict[str, str]:
        """pattern id -> compile error for rules that will never match."""
        return dict(self._rule_errors)

    def count(self) -> int:
        return len(self._patterns)

    def get_by_id(self, pattern_id: str) -> Optional[Pattern]:
        return self._by_id.get(pattern_id)

    def get_by_category(self, category) -> list[Pattern]:
        cat = PatternCategory.parse(category)
        return [p for p in self._patterns if p.category is cat]

    def get_by_difficulty(self, difficulty) -> list[Pattern]:
        diff = Difficulty.parse(difficulty)
        return [p for p in self._patterns if p.difficulty is diff]

    def statistics(self) -> Statistics:
        """one pass. both breakdowns sum to total."""
        by_category: dict[str, int] = {}
        by_difficulty: dict[str, int] = {}
        for p in self._patterns:
            by_category[p.category.value] = by_category.get(p.category.value, 0) + 1
            by_difficulty[p.difficulty.value] = by_difficulty.get(p.difficulty.value, 0) + 1
        return Statistics(
            total=len(self._patterns),
            by_category=by_category,
            by_difficulty=by_difficulty,
        )


def build_pattern(id: str, name: str, category, difficulty, rule: str,
                  confidence: float, before: str, after: str,
                  narrative: Narrative, tags: Iterable[str] = (),
                  related: Iterable[str] = (), objectives: Iterable[str] = (),
                  mistakes: Iterable[str] = (), practices: Iterable[str] = (),
                  registry: GlyphRegistry = REGISTRY) -> Pattern:
    """construct a Pattern, deriving its glyphs from the category table."""
    cat = PatternCategory.parse(category)
    diff = Difficulty.parse(difficulty)
    if cat is None:
        raise ValueError(f"unknown pattern category: {category}")
    if diff is None:
        raise ValueError(f"unknown difficulty: {difficulty}")
    if not 0.0 <= confidence <= 1.0:
        raise ValueError(f"confidence out of range for {id}: {confidence}")
    return Pattern(
        id=id, name=name, category=cat, difficulty=diff,
        detection_rule=rule, confidence=float(confidence),
        before_example=before, after_example=after,
        narrative=narrative,
        glyphs=registry.glyphs_for_pattern_category(cat),
        tags=frozenset(tags),
        related_patterns=tuple(related),
        learning_objectives=tuple(objectives),
        common_mistakes=tuple(mistakes),
        best_practices=tuple(practices),
    )
