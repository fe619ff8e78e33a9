from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import string

BASE36 = string.ascii_lowercase + string.digits
MIN_SUFFIX_LENGTH = 6

@dataclass(frozen=True)
class CreationPolicy:
    max_attempts: int = 1000
    suffix_length: int = 12
    alphabet: str = BASE36

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.suffix_length < MIN_SUFFIX_LENGTH:
            raise ValueError(f"suffix_length must be at least {MIN_SUFFIX_LENGTH}, got {self.suffix_length}")

@dataclass
class CleanupFailure:
    """One entry that could not be removed during a cleanup."""
    path: Path
    operation: str
    error: OSError

    def __str__(self) -> str:
        return f"{self.operation} {self.path}: {self.error}"
