from __future__ import annotations
from pathlib import Path
from typing import Iterator
import os
import random

from ..types_dir_types import BASE36, MIN_SUFFIX_LENGTH


class NameGenerator:
    """
    Endless source of candidate directory names: ``<prefix><random suffix>``.

    The suffix only has to be hard to guess by accident, so a plain
    ``random.Random`` is enough. The generator re-seeds itself after a fork
    so parent and child never produce the same sequence.
    """

    def __init__(self, prefix: str = "", suffix_length: int = 12, alphabet: str = BASE36):
        if suffix_length < MIN_SUFFIX_LENGTH:
            raise ValueError(f"suffix_length must be at least {MIN_SUFFIX_LENGTH}, got {suffix_length}")
        if len(set(alphabet)) < 16:
            raise ValueError("alphabet needs at least 16 distinct characters")
        if os.sep in alphabet or (os.altsep and os.altsep in alphabet):
            raise ValueError("alphabet must not contain a path separator")
        self.prefix = prefix
        self.suffix_length = suffix_length
        self.alphabet = alphabet
        self._rng_pid: int | None = None
        self._rng_cache: random.Random | None = None

    @property
    def _rng(self) -> random.Random:
        pid = os.getpid()
        if self._rng_cache is None or pid != self._rng_pid:
            self._rng_cache = random.Random()
            self._rng_pid = pid
        return self._rng_cache

    def next(self) -> str:
        suffix = "".join(self._rng.choices(self.alphabet, k=self.suffix_length))
        return self.prefix + suffix

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()

    def candidates(self, base: Path, limit: int) -> Iterator[Path]:
        """Yield at most ``limit`` candidate paths under ``base``."""
        for _ in range(limit):
            yield base / self.next()
