"""loader.py - patterns from a JSON data file.

same shape Pattern.to_dict() writes: a JSON array of camelCase objects,
kept in file order because order is the detector's tie-break. glyphs in
the file are ignored and re-derived from the category table.
"""

import json
from pathlib import Path
from typing import Optional

from evangeliser.catalog.catalog import PatternCatalog, build_pattern
from evangeliser.catalog.types import Narrative
from evangeliser.errors import CatalogLoadError
from evangeliser.glyphs import REGISTRY, GlyphRegistry
from evangeliser.log import warn

_REQUIRED = ("id", "name", "category", "difficulty", "detectionRule", "confidence")


def pattern_from_dict(data: dict, registry: GlyphRegistry = REGISTRY):
    """build one Pattern from its external dict form."""
    missing = [k for k in _REQUIRED if k not in data]
    if missing:
        raise CatalogLoadError(
            f"pattern {data.get('id', '?')} is missing: {', '.join(missing)}"
        )
    n = data.get("narrative") or {}
    narrative = Narrative(
        celebrate=n.get("celebrate", ""),
        minimize=n.get("minimize", ""),
        better=n.get("better", ""),
        safety=n.get("safety", ""),
        example=n.get("example", ""),
    )
    try:
        return build_pattern(
            id=data["id"], name=data["name"],
            category=data["category"], difficulty=data["difficulty"],
            rule=data["detectionRule"], confidence=float(data["confidence"]),
            before=data.get("beforeExample", ""),
            after=data.get("afterExample", ""),
            narrative=narrative,
            tags=data.get("tags", ()),
            related=data.get("relatedPatterns", ()),
            objectives=data.get("learningObjectives", ()),
            mistakes=data.get("commonMistakes", ()),
            practices=data.get("bestPractices", ()),
            registry=registry,
        )
    except (TypeError, ValueError) as e:
        raise CatalogLoadError(f"pattern {data.get('id', '?')}: {e}") from e


def load_catalog(path, registry: Optional[GlyphRegistry] = None) -> PatternCatalog:
    """read a pattern data file into a catalog.

    raises CatalogLoadError for unreadable files or bad records. rules that
    don't compile are kept (they just never match) and logged here.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{path} is not valid JSON: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("patterns", [])
    if not isinstance(raw, list):
        raise CatalogLoadError(f"{path}: expected a list of patterns")

    reg = registry or REGISTRY
    catalog = PatternCatalog(pattern_from_dict(item, reg) for item in raw)
    for pid, msg in catalog.rule_errors.items():
        warn("catalog", f"rule for {pid} does not compile, it will never match: {msg}",
             pattern=pid)
    return catalog


def dump_catalog(catalog: PatternCatalog) -> str:
    """catalog -> JSON text that load_catalog() reads back in the same order."""
    return json.dumps([p.to_dict() for p in catalog], indent=2, ensure_ascii=False) + "\n"


def save_catalog(catalog: PatternCatalog, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_catalog(catalog), encoding="utf-8")
    return path
