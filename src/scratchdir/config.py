from __future__ import annotations
import yaml
from pathlib import Path
from .types_dir_types import CreationPolicy


DEFAULTS = {
    "base_dir": None,
    "prefix": "scratch-",
    "max_attempts": 1000,
    "suffix_length": 12,
    "log_file": None,
    "log_level": "INFO",
    }

class Settings:
    def __init__(self, data: dict | None = None):
        self._data = {**DEFAULTS, **(data or {})}

    @property
    def base_dir(self) -> Path | None:
        """Where new directories go; None means the system temp directory."""
        value = self._data["base_dir"]
        return Path(value).expanduser() if value else None

    @property
    def log_file(self) -> Path | None:
        value = self._data["log_file"]
        return Path(value).expanduser() if value else None

    @classmethod
    def from_file(cls, path: Path) -> "Settings":
        if not path.exists():
            return cls()
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls(data)

    def as_policy(self) -> CreationPolicy:
        return CreationPolicy(
        max_attempts=int(self._data["max_attempts"]),
        suffix_length=int(self._data["suffix_length"]),
        )

    def get(self, key: str, default=None):
        return self._data.get(key, default)
