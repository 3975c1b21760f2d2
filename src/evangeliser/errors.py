"""errors.py - the few things that are allowed to go wrong loudly.

the engine degrades on bad input text. these are for bad static data:
duplicate ids, holes in the glyph table, unreadable data files. they
happen at load time, once, and a developer fixes them.
"""


class EvangeliserError(Exception):
    """base for every load-time error evangeliser raises."""


class DuplicatePatternError(EvangeliserError, ValueError):
    """two patterns in one catalog share an id."""

    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(f"duplicate pattern id: {pattern_id}")


class GlyphTableError(EvangeliserError, ValueError):
    """the category -> glyph table is incomplete or points at unknown symbols."""


class CatalogLoadError(EvangeliserError):
    """a pattern data file could not be read or is missing required keys."""
