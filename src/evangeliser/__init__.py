"""evangeliser: spot the JavaScript you already write well, show the ReScript way.

detect known JS/TS idioms with fixed rules, explain each one with a
narrative that celebrates first, and annotate examples with glyphs.
"""

__version__ = "0.1.0"

from evangeliser.categories import PatternCategory, Difficulty, SemanticCategory
from evangeliser.errors import (
    EvangeliserError, DuplicatePatternError, GlyphTableError, CatalogLoadError,
)
from evangeliser.glyphs import Glyph, GlyphRegistry, REGISTRY
from evangeliser.catalog import (
    Narrative, Pattern, PatternCatalog, Statistics,
    default_catalog, load_catalog,
)
from evangeliser.detect import Detector, DetectResult, Match, detect
from evangeliser.narrative import NarrativeGenerator, TemplateStore, format_narrative

__all__ = [
    "PatternCategory", "Difficulty", "SemanticCategory",
    "EvangeliserError", "DuplicatePatternError", "GlyphTableError", "CatalogLoadError",
    "Glyph", "GlyphRegistry", "REGISTRY",
    "Narrative", "Pattern", "PatternCatalog", "Statistics",
    "default_catalog", "load_catalog",
    "Detector", "DetectResult", "Match", "detect",
    "NarrativeGenerator", "TemplateStore", "format_narrative",
]
