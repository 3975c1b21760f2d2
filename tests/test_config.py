"""tests for configuration management."""

import json

import pytest

from evangeliser import paths
from evangeliser.config import (
    Config, DEFAULTS, coerce_value, is_valid,
    load_global, save_global, load_project, save_project,
    load_config, get_value, set_global_value, set_project_value,
    list_config, _env_overrides,
)


class TestConfig:

    def test_defaults(self):
        c = Config()
        assert c.get("target_language") == "ReScript"
        assert c.get("format") == DEFAULTS["format"]

    def test_override(self):
        c = Config(values={"format": "html"})
        assert c.get("format") == "html"

    def test_missing_key(self):
        assert Config().get("nonexistent", "fallback") == "fallback"

    def test_contains(self):
        c = Config()
        assert "variety" in c
        assert "nonexistent" not in c

    def test_getitem(self):
        assert Config(values={"seed": 3})["seed"] == 3

    def test_to_dict(self):
        d = Config(values={"format": "plain"}).to_dict()
        assert d["format"] == "plain"
        assert "time_budget_ms" in d

    def test_time_budget_seconds(self):
        assert Config(values={"time_budget_ms": 500}).time_budget == 0.5

    def test_time_budget_disabled(self):
        assert Config(values={"time_budget_ms": 0}).time_budget is None
        assert Config(values={"time_budget_ms": -5}).time_budget is None

    def test_null_falls_back_to_default(self):
        c = Config(values={"min_confidence": None, "format": None})
        assert c.get("min_confidence") == 0.0
        assert c.get("format") == "markdown"

    def test_wrong_type_falls_back_to_default(self):
        c = Config(values={"min_confidence": "abc", "time_budget_ms": "soon", "variety": "yes"})
        assert c.get("min_confidence") == 0.0
        assert c.get("time_budget_ms") == 250
        assert c.get("variety") is False
        assert c.time_budget == 0.25

    def test_seed_may_be_null(self):
        assert Config(values={"seed": None}).get("seed") is None

    def test_to_dict_uses_fallbacks(self):
        assert Config(values={"min_confidence": None}).to_dict()["min_confidence"] == 0.0


class TestValidation:

    def test_is_valid(self):
        assert is_valid("min_confidence", 0.5)
        assert is_valid("min_confidence", 1)
        assert not is_valid("min_confidence", None)
        assert not is_valid("min_confidence", 5.0)
        assert not is_valid("min_confidence", True)
        assert is_valid("seed", None)
        assert not is_valid("time_budget_ms", 2.5)
        assert not is_valid("glyphs", 1)
        assert not is_valid("format", 3)
        assert is_valid("not_a_key", object())

    def test_coerce_value(self):
        assert coerce_value("seed", "7") == 7
        assert coerce_value("min_confidence", "0.25") == 0.25
        assert coerce_value("variety", "YES") is True
        assert coerce_value("format", "html") == "html"

    @pytest.mark.parametrize("key, raw", [
        ("min_confidence", "abc"),
        ("min_confidence", "5"),
        ("min_confidence", "-0.1"),
        ("seed", "x"),
        ("time_budget_ms", "1.5"),
    ])
    def test_coerce_rejects(self, key, raw):
        assert coerce_value(key, raw) is None

    def test_null_in_project_file(self, isolated_config):
        save_project({"min_confidence": None}, str(isolated_config))
        assert load_config(str(isolated_config)).get("min_confidence") == 0.0


class TestGlobalConfig:

    def test_load_empty(self, isolated_config):
        assert load_global() == {}

    def test_save_and_load(self, isolated_config):
        save_global({"format": "plain"})
        assert load_global() == {"format": "plain"}
        assert paths.GLOBAL_CONFIG.exists()

    def test_corrupt_file_ignored(self, isolated_config):
        paths.GLOBAL_CONFIG.parent.mkdir(parents=True)
        paths.GLOBAL_CONFIG.write_text("{nope")
        assert load_global() == {}

    def test_set_value(self, isolated_config):
        set_global_value("seed", 9)
        assert load_global()["seed"] == 9


class TestProjectConfig:

    def test_load_empty(self, isolated_config):
        assert load_project(str(isolated_config)) == {}

    def test_save_and_load(self, isolated_config):
        save_project({"variety": True}, str(isolated_config))
        assert load_project(str(isolated_config)) == {"variety": True}

    def test_non_object_ignored(self, isolated_config):
        (isolated_config / ".evangeliser.json").write_text("[1, 2]")
        assert load_project(str(isolated_config)) == {}

    def test_set_value(self, isolated_config):
        set_project_value("format", "html", str(isolated_config))
        data = json.loads((isolated_config / ".evangeliser.json").read_text())
        assert data == {"format": "html"}


class TestLayering:

    def test_defaults_only(self, isolated_config):
        c = load_config(str(isolated_config))
        assert c.source == "defaults"
        assert c.get("format") == "markdown"

    def test_project_beats_global(self, isolated_config):
        save_global({"format": "plain", "seed": 1})
        save_project({"format": "html"}, str(isolated_config))
        c = load_config(str(isolated_config))
        assert c.get("format") == "html"
        assert c.get("seed") == 1
        assert c.source == "project"

    def test_env_beats_project(self, isolated_config, monkeypatch):
        save_project({"format": "html"}, str(isolated_config))
        monkeypatch.setenv("EVANGELISER_FORMAT", "plain")
        c = load_config(str(isolated_config))
        assert c.get("format") == "plain"
        assert c.source == "env"

    def test_get_value(self, isolated_config):
        save_project({"target_language": "OCaml"}, str(isolated_config))
        assert get_value("target_language", str(isolated_config)) == "OCaml"


class TestEnvOverrides:

    def test_types(self, isolated_config, monkeypatch):
        monkeypatch.setenv("EVANGELISER_SEED", "42")
        monkeypatch.setenv("EVANGELISER_MIN_CONFIDENCE", "0.8")
        monkeypatch.setenv("EVANGELISER_VARIETY", "yes")
        monkeypatch.setenv("EVANGELISER_GLYPHS", "false")
        env = _env_overrides()
        assert env == {"seed": 42, "min_confidence": 0.8, "variety": True, "glyphs": False}

    def test_bad_number_ignored(self, isolated_config, monkeypatch):
        monkeypatch.setenv("EVANGELISER_TIME_BUDGET_MS", "soon")
        assert "time_budget_ms" not in _env_overrides()

    def test_catalog_path(self, isolated_config, monkeypatch):
        monkeypatch.setenv("EVANGELISER_CATALOG", "/tmp/p.json")
        assert _env_overrides() == {"catalog_path": "/tmp/p.json"}


class TestListConfig:

    def test_sources(self, isolated_config, monkeypatch):
        save_global({"format": "plain"})
        save_project({"seed": 5}, str(isolated_config))
        monkeypatch.setenv("EVANGELISER_LOG_LEVEL", "warn")
        result = list_config(str(isolated_config))
        assert result["format"] == {"value": "plain", "source": "global"}
        assert result["seed"] == {"value": 5, "source": "project"}
        assert result["log_level"] == {"value": "warn", "source": "env"}
        assert result["target_language"]["source"] == "default"
        assert set(result) == set(DEFAULTS)
