"""uncpath - convert UNC paths to local POSIX mount paths."""

__version__ = "0.1.0"

from .convert import convert_to_posix
from .errors import (
    UncPathError,
    InvalidFormatError,
    MappingNotFoundError,
    InvalidMappingError,
    ConfigSourceError,
)
from .mapping import MappingTable, MountMapping
from .parsers import parse_unc_path, UncPath

__all__ = [
    "__version__",
    "convert_to_posix",
    "parse_unc_path", "UncPath",
    "MappingTable", "MountMapping",
    "UncPathError", "InvalidFormatError", "MappingNotFoundError",
    "InvalidMappingError", "ConfigSourceError",
]
