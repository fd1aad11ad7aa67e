"""crosspath: convert, check and normalize paths across Windows and Unix."""

__version__ = "0.1.0"

from .core import (
    CrossPath, PathConfig, PathStyle, ParsedPath, PathParser, PathConverter,
    PathFormatter, FileAttributes, DiskInfo, to_cross_path, to_windows_path,
    to_unix_path, PathError, PathErrorKind, InvalidPathError, EncodingError,
    SecurityError, PlatformError, NormalizationError, ParseError, PathIOError,
    UnsupportedFormatError, DriveMappingError,
)
from .utils import (
    EncodingNormalizer, PathSecurityChecker, PlatformInfo, get_platform,
    set_platform, check_path_security, sanitize_path,
)

__all__ = [
    "CrossPath",
    "PathConfig",
    "PathStyle",
    "ParsedPath",
    "PathParser",
    "PathConverter",
    "PathFormatter",
    "FileAttributes",
    "DiskInfo",
    "to_cross_path",
    "to_windows_path",
    "to_unix_path",
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
    "EncodingNormalizer",
    "PathSecurityChecker",
    "PlatformInfo",
    "get_platform",
    "set_platform",
    "check_path_security",
    "sanitize_path",
]
