"""
Path security checks.

The checks are textual pattern matches. A path that passes is not thereby
safe to open; a path that fails contains a known dangerous pattern.
"""

import os
import re
import logging
from typing import List, Optional, Union

from ..core.errors import SecurityError
from ..core.models import ParsedPath, PathStyle
from .path_utils import PathUtils
from .platform import PlatformInfo, get_platform

logger = logging.getLogger(__name__)

PATH_TRAVERSAL_PATTERN = re.compile(r'(\.\./|\.\.\\)')

DANGEROUS_EXTENSIONS = ('exe', 'bat', 'cmd', 'sh', 'php', 'py', 'js')

DANGEROUS_PATTERNS = [
    re.compile(r'(?i)\.(' + '|'.join(DANGEROUS_EXTENSIONS) + r')$'),
    re.compile(r'^/proc/'),
    re.compile(r'^/dev/'),
    re.compile(r'^/sys/'),
]

RESERVED_NAMES = frozenset(
    ['CON', 'PRN', 'AUX', 'NUL']
    + [f'COM{i}' for i in range(1, 10)]
    + [f'LPT{i}' for i in range(1, 10)]
)

WINDOWS_SYSTEM_DIRS = [
    r'C:\Windows',
    r'C:\System32',
    r'C:\Program Files',
    r'C:\ProgramData',
]

UNIX_SYSTEM_DIRS = [
    '/bin', '/sbin', '/usr/bin', '/usr/sbin', '/etc', '/root',
    '/var', '/lib', '/boot', '/dev', '/proc', '/sys',
]

ANDROID_SYSTEM_DIRS = ['/system', '/data', '/cache', '/vendor', '/oem', '/odm']

MACOS_SYSTEM_DIRS = ['/System', '/Library', '/private', '/Volumes', '/Network']

# Characters replaced by sanitize()
SANITIZE_CHARS = ['<', '>', ':', '"', '|', '?', '*', '\\', '/', '\0']
MAX_SANITIZED_LENGTH = 255

PathInput = Union[str, os.PathLike, ParsedPath]


class PathSecurityChecker:
    """Checks path strings against dangerous patterns."""

    def __init__(self, platform: Optional[PlatformInfo] = None):
        """
        Initialize the checker.

        Args:
            platform: Host platform; selects the system directory list and
                      the default evaluation style.
        """
        self._platform = platform

    @property
    def platform(self) -> PlatformInfo:
        return self._platform or get_platform()

    def check(self, path: PathInput, style: Optional[PathStyle] = None) -> bool:
        """
        Run every check against ``path``.

        Args:
            path: Path string, os.PathLike or ParsedPath.
            style: Style whose rules apply. None or AUTO means the host style.

        Returns:
            True when no check fails.

        Raises:
            SecurityError: On the first failing check.
        """
        text = self._as_text(path)
        style = self._resolve_style(style)

        if self.detect_path_traversal(text):
            self._fail(text, "Path traversal attack detected")

        if self.contains_dangerous_patterns(text):
            self._fail(text, "Path contains dangerous patterns")

        if style is PathStyle.WINDOWS and self.contains_reserved_names(text):
            self._fail(text, "Path contains Windows reserved names")

        if self.accesses_system_directories(text, style):
            self._fail(text, "Attempt to access system directories")

        return True

    def is_safe(self, path: PathInput, style: Optional[PathStyle] = None) -> bool:
        """Like check(), but answers False instead of raising."""
        try:
            return self.check(path, style)
        except SecurityError:
            return False

    @staticmethod
    def detect_path_traversal(path: str) -> bool:
        return bool(PATH_TRAVERSAL_PATTERN.search(path))

    @staticmethod
    def contains_dangerous_patterns(path: str) -> bool:
        return any(pattern.search(path) for pattern in DANGEROUS_PATTERNS)

    @staticmethod
    def contains_reserved_names(path: str) -> bool:
        """True when the file name, minus extension, is a Windows device name."""
        components = PathUtils.split_components(path)
        if not components:
            return False
        name_without_ext = components[-1].split('.')[0]
        return name_without_ext.upper() in RESERVED_NAMES

    def system_directories(self, style: PathStyle) -> List[str]:
        """System directory prefixes that apply to ``style`` on this host."""
        if style is PathStyle.WINDOWS:
            return list(WINDOWS_SYSTEM_DIRS)

        dirs = list(UNIX_SYSTEM_DIRS)
        flavor = self.platform.flavor
        if flavor == 'android':
            dirs.extend(ANDROID_SYSTEM_DIRS)
        elif flavor == 'macos':
            dirs.extend(MACOS_SYSTEM_DIRS)
        return dirs

    def accesses_system_directories(self, path: str, style: Optional[PathStyle] = None) -> bool:
        """True when ``path`` is a system directory or lies under one."""
        style = self._resolve_style(style)

        if style is PathStyle.WINDOWS:
            candidate = PathUtils.to_windows_separators(path).casefold()
            for directory in self.system_directories(style):
                directory = directory.casefold()
                if candidate == directory or candidate.startswith(directory + '\\'):
                    return True
            return False

        for directory in self.system_directories(style):
            if path == directory or path.startswith(directory + '/'):
                return True
        return False

    @staticmethod
    def sanitize(path: str) -> str:
        """
        Best-effort cleanup of a path string.

        Removes traversal sequences, replaces reserved characters with '_'
        and truncates to 255 characters. The result is not guaranteed to
        pass check().
        """
        sanitized = path.replace('../', '').replace('..\\', '')

        for char in SANITIZE_CHARS:
            sanitized = sanitized.replace(char, '_')

        if len(sanitized) > MAX_SANITIZED_LENGTH:
            sanitized = sanitized[:MAX_SANITIZED_LENGTH]

        return sanitized

    def _resolve_style(self, style: Optional[PathStyle]) -> PathStyle:
        if style is None or style is PathStyle.AUTO:
            return self.platform.current_style()
        return style

    @staticmethod
    def _as_text(path: PathInput) -> str:
        if isinstance(path, ParsedPath):
            return path.original
        return os.fspath(path)

    @staticmethod
    def _fail(path: str, message: str):
        logger.debug(f"Security check failed for {path!r}: {message}")
        raise SecurityError(message)


def check_path_security(path: PathInput, style: Optional[PathStyle] = None) -> bool:
    """Check ``path`` with a default checker."""
    return PathSecurityChecker().check(path, style)


def sanitize_path(path: str) -> str:
    """Sanitize ``path`` with the default rules."""
    return PathSecurityChecker.sanitize(path)
