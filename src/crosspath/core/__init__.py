"""Core components for crosspath."""

from .errors import (
    PathError, PathErrorKind, InvalidPathError, EncodingError, SecurityError,
    PlatformError, NormalizationError, ParseError, PathIOError,
    UnsupportedFormatError, DriveMappingError,
)
from .models import PathStyle, PathConfig, ParsedPath, FileAttributes, DiskInfo
from .parser import PathParser
from .converter import PathConverter
from .formatter import PathFormatter
from .cross_path import CrossPath, to_cross_path, to_windows_path, to_unix_path

__all__ = [
    "PathError",
    "PathErrorKind",
    "InvalidPathError",
    "EncodingError",
    "SecurityError",
    "PlatformError",
    "NormalizationError",
    "ParseError",
    "PathIOError",
    "UnsupportedFormatError",
    "DriveMappingError",
    "PathStyle",
    "PathConfig",
    "ParsedPath",
    "FileAttributes",
    "DiskInfo",
    "PathParser",
    "PathConverter",
    "PathFormatter",
    "CrossPath",
    "to_cross_path",
    "to_windows_path",
    "to_unix_path",
]
