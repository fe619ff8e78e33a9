from __future__ import annotations
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator
import logging
import os
import tempfile
import warnings
import weakref

from ..errors import CleanupFailed, CreationExhausted, CreationFailed, HandleReleased
from ..types_dir_types import CleanupFailure, CreationPolicy
from .name_generator import NameGenerator
from .remove_tree import remove_tree

logger = logging.getLogger(__name__)

_ACTIVE, _RELEASED, _CLOSED = "active", "released", "closed"


def _make_dir(base: Path, prefix: str, policy: CreationPolicy, names: Iterable[str] | None) -> Path:
    if names is None:
        names = NameGenerator(prefix, policy.suffix_length, policy.alphabet)
    attempts = 0
    for name in islice(names, policy.max_attempts):
        attempts += 1
        candidate = base / name
        try:
            os.mkdir(candidate, 0o700)
        except FileExistsError:
            logger.debug("Name already taken, retrying: %s", candidate)
            continue
        except PermissionError as exc:
            # Windows reports access denied for a directory that is pending deletion.
            if os.name == "nt" and base.is_dir() and os.access(base, os.W_OK):
                logger.debug("Access denied on %s, retrying", candidate)
                continue
            raise CreationFailed(candidate, exc) from exc
        except OSError as exc:
            raise CreationFailed(candidate, exc) from exc
        logger.debug("Created %s (attempt %d)", candidate, attempts)
        return candidate
    raise CreationExhausted(base, prefix, attempts)


def _log_failures(path: Path, failures: list[CleanupFailure]) -> list[CleanupFailure]:
    for failure in failures:
        logger.warning("Cleanup of %s left %s", path, failure)
    return failures


def _implicit_cleanup(path: Path, message: str) -> None:
    warnings.warn(message, ResourceWarning)
    _log_failures(path, remove_tree(path))


class TemporaryDirectory:
    """
    A freshly created, uniquely named directory that is deleted with everything
    in it when the handle goes out of scope.

    Use it as a context manager to get deterministic cleanup at the end of the
    ``with`` block. ``close()`` does the same but raises ``CleanupFailed`` when
    something could not be removed; the ``with`` exit only logs such failures
    and records them in ``cleanup_errors``. ``into_path()`` hands the directory
    over to the caller and disables deletion.

    A handle that is garbage collected while still active is cleaned up as a
    last resort, with a ``ResourceWarning``.
    """

    def __init__(
        self,
        base: str | os.PathLike | None = None,
        prefix: str = "",
        *,
        policy: CreationPolicy | None = None,
        names: Iterable[str] | None = None,
    ):
        policy = policy or CreationPolicy()
        base = Path(tempfile.gettempdir()) if base is None else Path(base)
        if not base.is_absolute():
            base = Path.cwd() / base
        self._path = _make_dir(base, prefix, policy, names)
        self._state = _ACTIVE
        self.cleanup_errors: list[CleanupFailure] = []
        self._finalizer = weakref.finalize(
            self, _implicit_cleanup, self._path, f"Implicitly cleaning up {self!r}"
        )

    @classmethod
    def create(cls, base: str | os.PathLike | None = None, prefix: str = "", **kwargs) -> "TemporaryDirectory":
        return cls(base, prefix, **kwargs)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return str(self._path)

    @property
    def active(self) -> bool:
        return self._state == _ACTIVE

    def into_path(self) -> Path:
        """Stop managing the directory and return it; the caller now owns cleanup."""
        if not self.active:
            raise HandleReleased(f"{self!r} no longer owns its directory")
        self._finalizer.detach()
        self._state = _RELEASED
        logger.debug("Released %s", self._path)
        return self._path

    def close(self) -> None:
        """Delete the directory now. A no-op if it was already closed or released."""
        failures = self._cleanup()
        if failures:
            raise CleanupFailed(self._path, failures) from failures[0].error

    def _cleanup(self) -> list[CleanupFailure]:
        if not self.active:
            return []
        self._finalizer.detach()
        self._state = _CLOSED
        self.cleanup_errors = remove_tree(self._path)
        if not self.cleanup_errors:
            logger.debug("Removed %s", self._path)
        return self.cleanup_errors

    def __enter__(self) -> "TemporaryDirectory":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _log_failures(self._path, self._cleanup())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self._state}>"

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} owns its directory and cannot be copied")

    def __deepcopy__(self, memo):
        self.__copy__()

    def __reduce_ex__(self, protocol):
        raise TypeError(f"cannot pickle {type(self).__name__}")


@contextmanager
def temp_dir(
    base: str | os.PathLike | None = None,
    prefix: str = "",
    *,
    policy: CreationPolicy | None = None,
    names: Iterable[str] | None = None,
) -> Iterator[Path]:
    """Yield the path of a new temporary directory, removed when the block exits."""
    with TemporaryDirectory(base, prefix, policy=policy, names=names) as handle:
        yield handle.path
