"""paths.py - one place for all evangeliser paths.

every file that touches ~/.evangeliser/ imports from here.
"""

from pathlib import Path


def evangeliser_home() -> Path:
    """~/.evangeliser/ - the root of all evangeliser state."""
    return Path.home() / ".evangeliser"


def ensure_dir(path: Path) -> Path:
    """mkdir -p. returns the path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


# -- ~/.evangeliser/ paths --
GLOBAL_CONFIG = evangeliser_home() / "config.json"

# -- per-project --
PROJECT_CONFIG_NAME = ".evangeliser.json"
