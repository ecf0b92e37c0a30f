"""Configuration loading and defaults."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

from farmyard.models import SEX_NOTATIONS

CONFIG_DIRNAME = ".farmyard"

DEFAULT_CONFIG = {
    "animals": {
        "sex_notation": "en",
        "default_species": "dog",
    },
    "logging": {
        "level": "WARNING",
    },
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Merged view of the defaults and ``.farmyard/config.toml``.

    Values are checked when loaded, so a bad notation or log level fails
    with ValueError before any command runs.
    """

    def __init__(self, data: dict, config_dir: Path):
        self._data = data
        self.config_dir = config_dir
        self._check()

    @classmethod
    def load(cls, project_root: Path) -> "Config":
        config_dir = project_root / CONFIG_DIRNAME
        config_file = config_dir / "config.toml"

        overrides: dict = {}
        if config_file.exists():
            with open(config_file, "rb") as f:
                overrides = tomllib.load(f)
        return cls(_deep_merge(DEFAULT_CONFIG, overrides), config_dir)

    @classmethod
    def load_from_cwd(cls) -> "Config":
        return cls.load(find_project_root(Path.cwd()))

    @staticmethod
    def write_default(project_root: Path) -> tuple[Path, bool]:
        """Create ``.farmyard/config.toml``; returns (path, created)."""
        config_file = project_root / CONFIG_DIRNAME / "config.toml"
        if config_file.exists():
            return config_file, False
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(DEFAULT_CONFIG_TOML)
        return config_file, True

    def _check(self) -> None:
        notation = self.sex_notation
        if notation not in SEX_NOTATIONS:
            raise ValueError(
                f"animals.sex_notation must be one of {sorted(SEX_NOTATIONS)}, got {notation!r}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"logging.level must be one of {list(LOG_LEVELS)}, got {self._data['logging']['level']!r}"
            )

    # --- animals ---
    @property
    def sex_notation(self) -> str:
        return self._data["animals"]["sex_notation"]

    @property
    def default_species(self) -> str:
        return self._data["animals"]["default_species"]

    # --- logging ---
    @property
    def log_level(self) -> str:
        return str(self._data["logging"]["level"]).upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if isinstance(result.get(key), dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def find_project_root(start: Path) -> Path:
    """Nearest ancestor holding .farmyard/ or .git/, else ``start`` itself."""
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / CONFIG_DIRNAME).exists() or (candidate / ".git").exists():
            return candidate
    return start


DEFAULT_CONFIG_TOML = """\
[animals]
# "en": F = female, M = male
# "es": M = female (mujer), H = male (hombre)
sex_notation    = "en"
default_species = "dog"

[logging]
level = "WARNING"
"""
