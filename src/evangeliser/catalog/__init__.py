"""catalog: the ordered, read-only collection of known JS/TS idioms."""

from .types import Narrative, Pattern
from .catalog import PatternCatalog, Statistics, build_pattern
from .data import BUILTIN_PATTERNS, default_catalog
from .loader import load_catalog, dump_catalog, save_catalog, pattern_from_dict

__all__ = [
    "Narrative", "Pattern",
    "PatternCatalog", "Statistics", "build_pattern",
    "BUILTIN_PATTERNS", "default_catalog",
    "load_catalog", "dump_catalog", "save_catalog", "pattern_from_dict",
]
