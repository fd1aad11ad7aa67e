"""
Core data models for crosspath.

This module contains the value types shared by the parser, converter,
formatter and the CrossPath facade: path styles, conversion configuration,
parsed path structure and the shapes reported by metadata providers.
"""

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING
from dotenv import load_dotenv

from .errors import DriveMappingError, PlatformError

if TYPE_CHECKING:
    from ..utils.platform import PlatformInfo

# Load environment variables from .env file
load_dotenv()

DRIVE_KEY_PATTERN = re.compile(r'^[A-Za-z]:$')

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


class PathStyle(Enum):
    """Path styles. AUTO is a request for the host style, never a detection result."""
    WINDOWS = "windows"
    UNIX = "unix"
    AUTO = "auto"

    @property
    def separator(self) -> str:
        """Separator used by a concrete style."""
        if self is PathStyle.WINDOWS:
            return '\\'
        if self is PathStyle.UNIX:
            return '/'
        raise PlatformError("AUTO has no separator until resolved")

    @classmethod
    def parse(cls, value: str) -> 'PathStyle':
        """Parse a style name such as 'windows', 'Unix' or 'AUTO'."""
        if isinstance(value, PathStyle):
            return value
        text = (value or '').strip().lower()
        for style in cls:
            if text in (style.value, style.name.lower()):
                return style
        raise PlatformError(f"Unknown path style: {value!r}")


def default_drive_mappings() -> List[Tuple[str, str]]:
    """Built-in drive letter mappings, in lookup order."""
    return [
        ('C:', '/mnt/c'),
        ('D:', '/mnt/d'),
        ('E:', '/mnt/e'),
    ]


def parse_drive_mappings(text: str) -> List[Tuple[str, str]]:
    """
    Parse mappings written as ``"Z:=/network;C:=/mnt/c"``.

    Args:
        text: Semicolon or comma separated ``drive=prefix`` pairs.

    Returns:
        Ordered list of (windows_drive, unix_prefix) pairs.
    """
    mappings = []
    for item in re.split(r'[;,]', text):
        item = item.strip()
        if not item:
            continue
        drive, sep, prefix = item.partition('=')
        if not sep:
            raise DriveMappingError(f"Expected DRIVE=PREFIX, got {item!r}")
        mappings.append((drive.strip(), prefix.strip()))
    return mappings


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise PlatformError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class PathConfig:
    """Configuration settings for path conversion."""

    style: PathStyle = PathStyle.AUTO  # Target for "platform appropriate" output
    preserve_encoding: bool = True  # to_bytes() re-encodes with the source encoding
    security_check: bool = True  # is_safe() runs the checks
    # Ordered (windows_drive, unix_prefix) pairs; first match wins both ways
    drive_mappings: List[Tuple[str, str]] = field(default_factory=default_drive_mappings)
    normalize: bool = True  # Formatter normalizes its output

    def __post_init__(self):
        self.style = PathStyle.parse(self.style)
        self.drive_mappings = [self._validate_mapping(m) for m in self.drive_mappings]

    @staticmethod
    def _validate_mapping(mapping) -> Tuple[str, str]:
        try:
            drive, prefix = mapping
        except (TypeError, ValueError):
            raise DriveMappingError(f"Mapping must be a (drive, prefix) pair: {mapping!r}") from None

        if not isinstance(drive, str) or not DRIVE_KEY_PATTERN.match(drive):
            raise DriveMappingError(f"Invalid drive designator: {drive!r}")
        if not isinstance(prefix, str) or not prefix.startswith('/'):
            raise DriveMappingError(f"Unix prefix must be absolute: {prefix!r}")

        if prefix != '/':
            prefix = prefix.rstrip('/') or '/'
        return drive, prefix

    @classmethod
    def from_env(cls) -> 'PathConfig':
        """
        Build a configuration from CROSSPATH_* environment variables.

        Unset variables keep their defaults. A ``.env`` file in the working
        directory is honoured.
        """
        load_dotenv()
        kwargs = {
            'preserve_encoding': _env_flag('CROSSPATH_PRESERVE_ENCODING', True),
            'security_check': _env_flag('CROSSPATH_SECURITY_CHECK', True),
            'normalize': _env_flag('CROSSPATH_NORMALIZE', True),
        }
        style = os.getenv('CROSSPATH_STYLE')
        if style:
            kwargs['style'] = PathStyle.parse(style)
        mappings = os.getenv('CROSSPATH_DRIVE_MAPPINGS')
        if mappings:
            kwargs['drive_mappings'] = parse_drive_mappings(mappings)
        return cls(**kwargs)

    def lookup_unix_prefix(self, drive: str) -> Optional[str]:
        """Return the Unix prefix mapped to ``drive`` (exact, case-sensitive key)."""
        for windows_drive, unix_prefix in self.drive_mappings:
            if windows_drive == drive:
                return unix_prefix
        return None

    def lookup_windows_drive(self, unix_path: str) -> Optional[Tuple[str, str]]:
        """
        Find the first mapping whose Unix prefix contains ``unix_path``.

        Returns:
            Tuple of (windows_drive, remainder) where remainder is the part of
            the path after the prefix, or None when no mapping applies.
        """
        for windows_drive, unix_prefix in self.drive_mappings:
            if unix_prefix == '/':
                if unix_path.startswith('/'):
                    return windows_drive, unix_path
                continue
            if unix_path == unix_prefix or unix_path.startswith(unix_prefix + '/'):
                return windows_drive, unix_path[len(unix_prefix):]
        return None

    def resolve_style(self, platform: Optional['PlatformInfo'] = None) -> PathStyle:
        """Resolve AUTO to the host style."""
        if self.style is not PathStyle.AUTO:
            return self.style
        from ..utils.platform import get_platform
        return (platform or get_platform()).current_style()


@dataclass
class ParsedPath:
    """Structured decomposition of one path string."""

    original: str
    components: List[str] = field(default_factory=list)
    is_absolute: bool = False
    has_drive: bool = False
    drive_letter: Optional[str] = None  # Single uppercase ASCII letter
    is_unc: bool = False
    server: Optional[str] = None
    share: Optional[str] = None

    @property
    def drive(self) -> Optional[str]:
        """Drive designator such as 'C:', or None."""
        if self.drive_letter is None:
            return None
        return f"{self.drive_letter}:"

    @property
    def file_name(self) -> Optional[str]:
        """Last component, if any."""
        return self.components[-1] if self.components else None


@dataclass
class FileAttributes:
    """File attributes reported by a metadata provider."""

    size: int
    is_directory: bool
    is_hidden: bool
    is_readonly: bool
    creation_time: Optional[int] = None  # Unix seconds
    modification_time: Optional[int] = None  # Unix seconds


@dataclass
class DiskInfo:
    """Disk usage reported by a metadata provider."""

    total_space: int
    free_space: int
    filesystem_type: str

    @property
    def used_space(self) -> int:
        return self.total_space - self.free_space
