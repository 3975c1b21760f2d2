"""categories.py - the classification axes.

pattern categories group patterns by transformation topic. semantic
categories group glyphs by meaning. difficulty orders the lessons.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class _Named(Enum):
    """enum whose value is its display name. parse() never raises."""

    @classmethod
    def parse(cls, value) -> Optional["_Named"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for member in cls:
            if value in (member.value, member.name):
                return member
        lowered = value.lower()
        for member in cls:
            if lowered in (member.value.lower(), member.name.lower()):
                return member
        return None

    def __str__(self) -> str:
        return self.value


class PatternCategory(_Named):
    NULL_SAFETY = "NullSafety"
    ASYNC = "Async"
    ERROR_HANDLING = "ErrorHandling"
    ARRAY_OPERATIONS = "ArrayOperations"
    CONDITIONALS = "Conditionals"
    DESTRUCTURING = "Destructuring"
    DEFAULTS = "Defaults"
    FUNCTIONAL = "Functional"
    TEMPLATES = "Templates"
    ARROW_FUNCTIONS = "ArrowFunctions"
    VARIANTS = "Variants"
    MODULES = "Modules"
    TYPE_SAFETY = "TypeSafety"
    IMMUTABILITY = "Immutability"
    PATTERN_MATCHING = "PatternMatching"
    PIPE_OPERATOR = "PipeOperator"
    OOP_TO_FP = "OopToFp"
    CLASS_TO_RECORD = "ClassToRecord"
    PROMISE_CHAIN = "PromiseChain"
    CALLBACKS = "Callbacks"
    DATA_MODELING = "DataModeling"


class Difficulty(_Named):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class SemanticCategory(_Named):
    TRANSFORMATION = "Transformation"
    SAFETY = "Safety"
    FLOW = "Flow"
    STRUCTURE = "Structure"
    STATE = "State"
    DATA = "Data"


# legend order, not declaration order
LEGEND_ORDER = (
    SemanticCategory.SAFETY,
    SemanticCategory.TRANSFORMATION,
    SemanticCategory.FLOW,
    SemanticCategory.STRUCTURE,
    SemanticCategory.STATE,
    SemanticCategory.DATA,
)
