from pathlib import Path

from scratchdir.config import DEFAULTS, Settings
from scratchdir.types_dir_types import CreationPolicy


def test_missing_file_gives_defaults(tmp_path: Path):
    settings = Settings.from_file(tmp_path / "absent.yaml")
    assert settings.get("prefix") == DEFAULTS["prefix"]
    assert settings.base_dir is None
    assert settings.as_policy() == CreationPolicy()


def test_empty_file_gives_defaults(tmp_path: Path):
    cfg = tmp_path / "scratchdir.yaml"
    cfg.write_text("", encoding="utf-8")
    assert Settings.from_file(cfg).get("max_attempts") == 1000


def test_file_overrides_defaults(tmp_path: Path):
    cfg = tmp_path / "scratchdir.yaml"
    cfg.write_text(
        f"base_dir: {tmp_path.as_posix()}\nprefix: build-\nmax_attempts: 10\nsuffix_length: 8\n",
        encoding="utf-8",
    )
    settings = Settings.from_file(cfg)
    assert settings.base_dir == tmp_path
    assert settings.get("prefix") == "build-"
    assert settings.as_policy() == CreationPolicy(max_attempts=10, suffix_length=8)
    assert settings.get("log_level") == "INFO"
