"""
detect/engine.py - which known idioms are in this snippet?

every rule is compiled once, when the detector is built. a rule either
fires on the text or it doesn't: one match per pattern, the first
occurrence. results are ranked by the pattern's fixed confidence, and
catalog order breaks ties so the same text always reads the same way.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Optional

from evangeliser.catalog import PatternCatalog, Pattern, default_catalog
from evangeliser.log import span
from evangeliser.tools.regexutil import compile_rule, line_of, line_starts


@dataclass(frozen=True)
class Match:
    """one pattern found in one piece of text."""

    pattern: Pattern
    matched_text: str
    start_offset: int
    end_offset: int
    start_line: int
    end_line: int
    confidence: float
    suggested_transformation: Optional[str] = None

    @property
    def pattern_id(self) -> str:
        return self.pattern.id

    def to_dict(self) -> dict:
        d = {
            "patternId": self.pattern.id,
            "matchedText": self.matched_text,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "confidence": self.confidence,
        }
        if self.suggested_transformation is not None:
            d["suggestedTransformation"] = self.suggested_transformation
        return d


@dataclass(frozen=True)
class DetectResult:
    """one detect call: the ranked matches and whether the budget cut it short."""

    matches: tuple[Match, ...] = ()
    truncated: bool = False

    def __iter__(self):
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)


class Detector:
    """runs every compiled rule in a catalog against source text.

    time_budget: seconds one call may spend. checked between rules, so a
    single rule runs to completion once started. built-in rules only use
    bounded scans, so each one is linear in the text.

    the detector holds nothing per call; one instance is safe to share.
    """

    def __init__(self, catalog: Optional[PatternCatalog] = None,
                 time_budget: Optional[float] = None,
                 min_confidence: float = 0.0):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.time_budget = time_budget
        self.min_confidence = min_confidence

        compiled: list[tuple[Pattern, re.Pattern]] = []
        skipped: list[str] = []
        for p in self.catalog:
            rx = compile_rule(p.detection_rule)
            if rx is None:
                skipped.append(p.id)
                continue
            compiled.append((p, rx))
        self._compiled = tuple(compiled)
        self.skipped = tuple(skipped)

    def detect(self, source_text: str) -> list[Match]:
        """every pattern present in source_text, highest confidence first."""
        return list(self.run(source_text).matches)

    def run(self, source_text: str) -> DetectResult:
        """detect(), plus whether the time budget stopped it early."""
        if not isinstance(source_text, str):
            return DetectResult()

        with span("detect", subsystem="detect",
                  patterns=len(self._compiled), chars=len(source_text)) as s:
            deadline = None
            if self.time_budget is not None:
                deadline = time.monotonic() + self.time_budget

            truncated = False
            starts = None
            matches: list[Match] = []
            for pattern, rx in self._compiled:
                if deadline is not None and time.monotonic() > deadline:
                    truncated = True
                    break
                if pattern.confidence < self.min_confidence:
                    continue
                m = rx.search(source_text)
                if m is None:
                    continue
                if starts is None:
                    starts = line_starts(source_text)
                end_char = max(m.end() - 1, m.start())
                matches.append(Match(
                    pattern=pattern,
                    matched_text=m.group(0),
                    start_offset=m.start(),
                    end_offset=m.end(),
                    start_line=line_of(starts, m.start()),
                    end_line=line_of(starts, end_char),
                    confidence=pattern.confidence,
                    suggested_transformation=pattern.after_example or None,
                ))

            # sorted() is stable: equal confidence keeps catalog order
            matches = sorted(matches, key=lambda mt: -mt.confidence)
            s.set_attribute("evangeliser.matches", len(matches))
            s.set_attribute("evangeliser.truncated", truncated)
            return DetectResult(matches=tuple(matches), truncated=truncated)


def detect(source_text: str, catalog: Optional[PatternCatalog] = None) -> list[Match]:
    """one-shot detection against the built-in (or given) catalog."""
    return Detector(catalog).detect(source_text)
