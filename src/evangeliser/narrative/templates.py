"""templates.py - narrative template pools for variety mode.

each category maps to four pools (celebrate / minimize / better / safety).
resolve() never fails: unknown category -> "default" -> all-empty bundle.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from evangeliser.categories import PatternCategory
from evangeliser.errors import CatalogLoadError

DEFAULT_KEY = "default"
SLOTS = ("celebrate", "minimize", "better", "safety")


@dataclass(frozen=True)
class NarrativeTemplateBundle:
    """four pools of interchangeable sentences."""

    celebrate: tuple[str, ...] = ()
    minimize: tuple[str, ...] = ()
    better: tuple[str, ...] = ()
    safety: tuple[str, ...] = ()

    def pool(self, slot: str) -> tuple[str, ...]:
        return getattr(self, slot) if slot in SLOTS else ()

    @classmethod
    def from_dict(cls, data: Mapping) -> "NarrativeTemplateBundle":
        return cls(**{slot: tuple(data.get(slot, ())) for slot in SLOTS})

    def to_dict(self) -> dict:
        return {slot: list(self.pool(slot)) for slot in SLOTS}


EMPTY_BUNDLE = NarrativeTemplateBundle()


class TemplateStore:
    """read-only category -> bundle mapping with a default fallback."""

    def __init__(self, bundles: Mapping[str, NarrativeTemplateBundle]):
        self._bundles = {_key(k): v for k, v in bundles.items()}

    def __contains__(self, category) -> bool:
        return _key(category) in self._bundles

    def categories(self) -> list[str]:
        return list(self._bundles)

    def resolve(self, category) -> NarrativeTemplateBundle:
        bundle = self._bundles.get(_key(category))
        if bundle is not None:
            return bundle
        return self._bundles.get(DEFAULT_KEY, EMPTY_BUNDLE)

    @classmethod
    def from_json(cls, path) -> "TemplateStore":
        """load {category: {celebrate: [...], ...}} from a JSON file."""
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"cannot load templates from {path}: {e}") from e
        if not isinstance(raw, dict):
            raise CatalogLoadError(f"{path}: expected an object keyed by category")
        return cls({k: NarrativeTemplateBundle.from_dict(v) for k, v in raw.items()})


def _key(category) -> str:
    """enum members and their names resolve to the same key."""
    if isinstance(category, PatternCategory):
        return category.value
    cat = PatternCategory.parse(category)
    if cat is not None:
        return cat.value
    return str(category)


# ============================================================
# BUILT-IN POOLS
# ============================================================

def _b(celebrate, minimize, better, safety) -> NarrativeTemplateBundle:
    return NarrativeTemplateBundle(tuple(celebrate), tuple(minimize),
                                   tuple(better), tuple(safety))


DEFAULT_TEMPLATES: dict[str, NarrativeTemplateBundle] = {
    "NullSafety": _b(
        ["You're already thinking about missing values. That's the hard part!",
         "Guarding against null shows real care for the people using your code."],
        ["JavaScript can't tell you which values might be missing.",
         "It's easy to miss one null check among many."],
        ["ReScript's option type makes absence part of the type.",
         "With option<'a>, Some and None replace null and undefined."],
        ["The compiler makes you handle None before you use the value.",
         "Null reference errors simply can't happen with option types."],
    ),
    "Async": _b(
        ["You're writing asynchronous code that reads top to bottom. Nice!",
         "Handling work that finishes later is tricky, and you're doing it."],
        ["Promises in JavaScript don't say what they resolve to.",
         "An unawaited promise is an easy bug to write."],
        ["ReScript keeps async/await and types the value inside: promise<'a>.",
         "Pair promise with result to make failures explicit."],
        ["You can't await a promise<user> into the wrong shape.",
         "Typed promises catch mismatched results at compile time."],
    ),
    "ErrorHandling": _b(
        ["You're planning for failure. That's what robust code does!",
         "Thinking about the error path puts you ahead of most code out there."],
        ["Exceptions are invisible in function signatures.",
         "A caught-and-ignored error is hard to trace later."],
        ["ReScript's result<'a, 'e> makes failure an ordinary value.",
         "Return Ok or Error and let callers switch on it."],
        ["Callers must match on Error; failures can't be skipped by accident.",
         "Error variants are checked exhaustively."],
    ),
    "ArrayOperations": _b(
        ["You're transforming collections declaratively. Functional thinking!",
         "Using array methods instead of loops is a great habit."],
        ["JavaScript won't notice when an array holds mixed types.",
         "Callbacks can return the wrong thing without complaint."],
        ["ReScript's Array module has the same operations, piped with ->.",
         "The element type flows through every step."],
        ["Each callback is checked against the element type.",
         "array<int> stays array<int> unless you say otherwise."],
    ),
    "Conditionals": _b(
        ["You're handling the different cases clearly!",
         "Branching on values is exactly right here."],
        ["Long condition chains can hide a missing case."],
        ["In ReScript, if/else and switch are expressions that return values."],
        ["Both branches must return the same type."],
    ),
    "Variants": _b(
        ["You're modeling a closed set of states. Great instinct!"],
        ["Strings and numbers standing in for states are easy to mistype."],
        ["ReScript variants are named cases that can carry data."],
        ["Switch on a variant and the compiler checks you covered every case."],
    ),
    "PipeOperator": _b(
        ["You're composing small steps into a pipeline. Lovely design!"],
        ["Nested calls read inside out."],
        ["The -> pipe writes steps in the order they happen."],
        ["Each step's output must fit the next step's input."],
    ),
    "Immutability": _b(
        ["You're avoiding mutation. That makes code easier to reason about!"],
        ["JavaScript objects can be changed from anywhere."],
        ["ReScript records are immutable by default."],
        ["Changing a field that isn't marked mutable is a compile error."],
    ),
    DEFAULT_KEY: _b(
        ["Great code! You clearly know what you're doing.",
         "This is a solid, well-known JavaScript pattern. Nice work!",
         "You've written something idiomatic and readable."],
        ["JavaScript leaves some of the checking up to you.",
         "A few things here are only caught at runtime."],
        ["ReScript expresses the same idea with types the compiler understands.",
         "In ReScript this reads almost the same, with stronger guarantees."],
        ["The type system catches mistakes before the code ever runs.",
         "Whole classes of runtime errors become compile errors."],
    ),
}

DEFAULT_STORE = TemplateStore(DEFAULT_TEMPLATES)
