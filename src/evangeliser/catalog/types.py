"""types.py - the records the catalog is made of."""

from __future__ import annotations

from dataclasses import dataclass, field

from evangeliser.categories import Difficulty, PatternCategory


@dataclass(frozen=True)
class Narrative:
    """five-part explanation. celebrate what they did, then show the way."""

    celebrate: str = ""
    minimize: str = ""
    better: str = ""
    safety: str = ""
    example: str = ""

    def to_dict(self) -> dict:
        return {
            "celebrate": self.celebrate,
            "minimize": self.minimize,
            "better": self.better,
            "safety": self.safety,
            "example": self.example,
        }


@dataclass(frozen=True)
class Pattern:
    """a cataloged JS/TS idiom with its rule, metadata and narrative."""

    id: str
    name: str
    category: PatternCategory
    difficulty: Difficulty
    detection_rule: str
    confidence: float
    before_example: str
    after_example: str
    narrative: Narrative
    glyphs: tuple[str, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)
    related_patterns: tuple[str, ...] = ()
    learning_objectives: tuple[str, ...] = ()
    common_mistakes: tuple[str, ...] = ()
    best_practices: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """external camelCase shape, the one load_catalog() reads back."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "difficulty": self.difficulty.value,
            "detectionRule": self.detection_rule,
            "confidence": self.confidence,
            "beforeExample": self.before_example,
            "afterExample": self.after_example,
            "narrative": self.narrative.to_dict(),
            "glyphs": list(self.glyphs),
            "tags": sorted(self.tags),
            "relatedPatterns": list(self.related_patterns),
            "learningObjectives": list(self.learning_objectives),
            "commonMistakes": list(self.common_mistakes),
            "bestPractices": list(self.best_practices),
        }
