"""scratchdir - uniquely named temporary directories removed when their handle goes out of scope."""

from scratchdir.errors import CleanupFailed, CreationExhausted, CreationFailed, HandleReleased, TempDirError
from scratchdir.services.name_generator import NameGenerator
from scratchdir.services.temp_utils import TemporaryDirectory, temp_dir
from scratchdir.types_dir_types import CleanupFailure, CreationPolicy

__version__ = "1.0.0"
__all__ = [
    "CleanupFailed",
    "CleanupFailure",
    "CreationExhausted",
    "CreationFailed",
    "CreationPolicy",
    "HandleReleased",
    "NameGenerator",
    "TempDirError",
    "TemporaryDirectory",
    "temp_dir",
]
