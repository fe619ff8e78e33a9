from __future__ import annotations
from pathlib import Path
import shutil
import sys

from ..types_dir_types import CleanupFailure

def remove_tree(root: Path) -> list[CleanupFailure]:
    """
    Delete ``root`` and everything below it, depth first.

    Symlinks are unlinked, never followed. A failing entry does not stop the
    walk: siblings are still removed and every failure is returned, in the
    order it happened. An empty list means the tree is gone.
    """
    failures: list[CleanupFailure] = []

    def _record(func, path, exc: BaseException) -> None:
        if not isinstance(exc, OSError):
            raise exc
        failures.append(CleanupFailure(Path(path), getattr(func, "__name__", str(func)), exc))

    if sys.version_info >= (3, 12):
        shutil.rmtree(root, onexc=_record)
    else:
        shutil.rmtree(root, onerror=lambda func, path, exc_info: _record(func, path, exc_info[1]))
    return failures
