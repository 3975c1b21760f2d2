"""config.py - configuration management.

layered config: defaults -> global (~/.evangeliser/config.json) ->
project (.evangeliser.json) -> environment.
target language, output format, variety mode, detection limits.

in the world: the classroom rules. the school sets them, each class
can adjust, and whoever is standing at the front has the last word.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from evangeliser import paths


# ============================================================
# DEFAULTS
# ============================================================

DEFAULTS = {
    "target_language": "ReScript",
    "format": "markdown",
    "variety": False,
    "seed": None,
    "min_confidence": 0.0,
    "time_budget_ms": 250,
    "catalog_path": "",
    "glyphs": True,
    "log_level": "info",
}

_ENV_MAP = {
    "EVANGELISER_TARGET_LANGUAGE": "target_language",
    "EVANGELISER_FORMAT": "format",
    "EVANGELISER_VARIETY": "variety",
    "EVANGELISER_SEED": "seed",
    "EVANGELISER_MIN_CONFIDENCE": "min_confidence",
    "EVANGELISER_TIME_BUDGET_MS": "time_budget_ms",
    "EVANGELISER_CATALOG": "catalog_path",
    "EVANGELISER_GLYPHS": "glyphs",
    "EVANGELISER_LOG_LEVEL": "log_level",
}

_INT_KEYS = ("seed", "time_budget_ms")
_FLOAT_KEYS = ("min_confidence",)
_BOOL_KEYS = ("variety", "glyphs")
_OPTIONAL_KEYS = ("seed",)


def is_valid(key: str, value) -> bool:
    """does value have the type this key needs? unknown keys pass."""
    if key not in DEFAULTS:
        return True
    if value is None:
        return key in _OPTIONAL_KEYS
    if key in _BOOL_KEYS:
        return isinstance(value, bool)
    if key in _INT_KEYS:
        return isinstance(value, int) and not isinstance(value, bool)
    if key in _FLOAT_KEYS:
        return (isinstance(value, (int, float)) and not isinstance(value, bool)
                and 0.0 <= value <= 1.0)
    return isinstance(value, str)


@dataclass
class Config:
    """merged configuration from all layers."""
    values: dict = field(default_factory=dict)
    source: str = ""  # which layer provided the final values

    def get(self, key: str, default=None):
        """stored value, or the default when it is missing or mistyped."""
        if key in self.values and is_valid(key, self.values[key]):
            return self.values[key]
        return DEFAULTS.get(key, default)

    def __getitem__(self, key: str):
        return self.get(key)

    def __contains__(self, key: str):
        return key in self.values or key in DEFAULTS

    def to_dict(self) -> dict:
        merged = dict(DEFAULTS)
        merged.update(self.values)
        return {k: self.get(k) for k in merged}

    @property
    def time_budget(self):
        """seconds, or None when the budget is disabled (<= 0)."""
        ms = self.get("time_budget_ms")
        if not ms or ms <= 0:
            return None
        return ms / 1000.0


# ============================================================
# CONFIG LOADING
# ============================================================

def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global() -> dict:
    """load global config from ~/.evangeliser/config.json."""
    return _read_json(paths.GLOBAL_CONFIG)


def save_global(config: dict):
    paths.ensure_dir(paths.GLOBAL_CONFIG.parent)
    paths.GLOBAL_CONFIG.write_text(json.dumps(config, indent=2) + "\n")


def load_project(root: str = ".") -> dict:
    """load project config from .evangeliser.json in project root."""
    return _read_json(Path(root) / paths.PROJECT_CONFIG_NAME)


def save_project(config: dict, root: str = "."):
    config_path = Path(root) / paths.PROJECT_CONFIG_NAME
    config_path.write_text(json.dumps(config, indent=2) + "\n")


def load_config(root: str = ".") -> Config:
    """load merged config: defaults -> global -> project -> env."""
    merged = dict(DEFAULTS)

    global_config = load_global()
    merged.update(global_config)

    project_config = load_project(root)
    merged.update(project_config)

    env_overrides = _env_overrides()
    merged.update(env_overrides)

    source = "defaults"
    if env_overrides:
        source = "env"
    elif project_config:
        source = "project"
    elif global_config:
        source = "global"

    return Config(values=merged, source=source)


def coerce_value(key: str, value: str):
    """env / command line strings -> config types. None means 'reject this value'."""
    if key in _INT_KEYS:
        try:
            return int(value)
        except ValueError:
            return None
    if key in _FLOAT_KEYS:
        try:
            number = float(value)
        except ValueError:
            return None
        return number if is_valid(key, number) else None
    if key in _BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    return value


def _env_overrides() -> dict:
    """extract config overrides from environment variables."""
    overrides = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        coerced = coerce_value(config_key, value)
        if coerced is not None:
            overrides[config_key] = coerced
    return overrides


# ============================================================
# CONFIG HELPERS
# ============================================================

def get_value(key: str, root: str = "."):
    """get a single config value (merged)."""
    return load_config(root).get(key)


def set_global_value(key: str, value):
    config = load_global()
    config[key] = value
    save_global(config)


def set_project_value(key: str, value, root: str = "."):
    config = load_project(root)
    config[key] = value
    save_project(config, root)


def list_config(root: str = ".") -> dict:
    """list all config values with their sources."""
    global_config = load_global()
    project_config = load_project(root)
    env = _env_overrides()

    result = {}
    for key in DEFAULTS:
        source = "default"
        value = DEFAULTS[key]

        if key in global_config:
            source = "global"
            value = global_config[key]
        if key in project_config:
            source = "project"
            value = project_config[key]
        if key in env:
            source = "env"
            value = env[key]

        result[key] = {"value": value, "source": source}

    return result
