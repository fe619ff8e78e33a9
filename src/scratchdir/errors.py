from __future__ import annotations
from pathlib import Path

from .types_dir_types import CleanupFailure


class TempDirError(Exception):
    pass


class CreationExhausted(TempDirError):
    def __init__(self, base: Path, prefix: str, attempts: int):
        super().__init__(
            f"too many temporary directories already exist in {base} "
            f"(prefix {prefix!r}, {attempts} attempts)"
        )
        self.base = base
        self.prefix = prefix
        self.attempts = attempts


class CreationFailed(TempDirError):
    def __init__(self, path: Path, error: OSError):
        super().__init__(f"could not create {path}: {error.strerror or error}")
        self.path = path
        self.errno = error.errno


class CleanupFailed(TempDirError):
    def __init__(self, path: Path, failures: list[CleanupFailure]):
        first = failures[0] if failures else None
        detail = f": {first}" if first else ""
        more = f" (+{len(failures) - 1} more)" if len(failures) > 1 else ""
        super().__init__(f"could not fully remove {path}{detail}{more}")
        self.path = path
        self.failures = list(failures)


class HandleReleased(TempDirError):
    """Raised when a handle that no longer owns its directory is asked to give it up."""
