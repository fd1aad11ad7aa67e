"""
Error types for crosspath.

Every failure raised by the library is a PathError subclass. The subclass
identifies the error kind; the detail string is meant for humans.
"""

from enum import Enum
from typing import Optional


class PathErrorKind(Enum):
    """Closed set of error kinds with their display labels."""
    INVALID_PATH = "Invalid path"
    ENCODING = "Encoding error"
    SECURITY = "Security error"
    PLATFORM = "Platform error"
    NORMALIZATION = "Normalization error"
    PARSE = "Parse error"
    IO = "IO error"
    UNSUPPORTED_FORMAT = "Unsupported format"
    DRIVE_MAPPING = "Drive mapping error"

    @property
    def label(self) -> str:
        return self.value


class PathError(Exception):
    """Base class for all crosspath errors."""

    kind: PathErrorKind = PathErrorKind.INVALID_PATH

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.label}: {self.detail}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PathError):
            return NotImplemented
        return self.kind is other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))


class InvalidPathError(PathError):
    kind = PathErrorKind.INVALID_PATH


class EncodingError(PathError):
    kind = PathErrorKind.ENCODING


class SecurityError(PathError):
    kind = PathErrorKind.SECURITY


class PlatformError(PathError):
    kind = PathErrorKind.PLATFORM


class NormalizationError(PathError):
    kind = PathErrorKind.NORMALIZATION


class ParseError(PathError):
    kind = PathErrorKind.PARSE


class PathIOError(PathError):
    kind = PathErrorKind.IO

    @classmethod
    def from_os_error(cls, error: OSError, path: Optional[str] = None) -> "PathIOError":
        """Wrap an OSError, keeping the offending path in the detail."""
        reason = error.strerror or str(error)
        if path:
            return cls(f"{reason}: {path}")
        return cls(reason)


class UnsupportedFormatError(PathError):
    kind = PathErrorKind.UNSUPPORTED_FORMAT


class DriveMappingError(PathError):
    kind = PathErrorKind.DRIVE_MAPPING
