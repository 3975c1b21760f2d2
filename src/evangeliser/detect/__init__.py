"""detect: find known JS/TS idioms in a snippet, ranked by confidence."""

from .engine import Detector, DetectResult, Match, detect

__all__ = [
    "Detector",
    "DetectResult",
    "Match",
    "detect",
]
