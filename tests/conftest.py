"""Shared test fixtures."""

import os
import random
from unittest.mock import patch

import pytest

from evangeliser.catalog import Narrative, PatternCatalog, build_pattern, default_catalog


def _make_pattern(id="p", category="NullSafety", difficulty="Beginner", rule=r"foo",
                  confidence=0.5, **kw):
    return build_pattern(
        id=id, name=kw.pop("name", id.title()), category=category,
        difficulty=difficulty, rule=rule, confidence=confidence,
        before=kw.pop("before", "foo()"), after=kw.pop("after", "foo()"),
        narrative=kw.pop("narrative", Narrative("c", "m", "b", "s", "e")),
        **kw,
    )


@pytest.fixture
def make_pattern():
    """factory for small patterns in tests that don't care about the real data."""
    return _make_pattern


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def tiny_catalog():
    return PatternCatalog([
        _make_pattern("low", rule=r"foo", confidence=0.5),
        _make_pattern("high", rule=r"bar", confidence=0.9, category="Async"),
        _make_pattern("tie", rule=r"ba", confidence=0.9, category="Async"),
    ])


@pytest.fixture
def seeded():
    return random.Random(1234)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """no global config, no project config, no env overrides."""
    for key in list(os.environ):
        if key.startswith("EVANGELISER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    with patch("evangeliser.paths.GLOBAL_CONFIG", tmp_path / "home" / "config.json"):
        yield tmp_path
