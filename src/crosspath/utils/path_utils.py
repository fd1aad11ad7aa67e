"""Separator handling shared by the parser, converter and formatter."""

import re
from typing import List

WINDOWS_SEP = '\\'
UNIX_SEP = '/'
UNC_PREFIX = '\\\\'

_BARE_DRIVE = re.compile(r'^[A-Za-z]:$')
_REPEATED_BACKSLASH = re.compile(r'\\{2,}')
_REPEATED_SLASH = re.compile(r'/{2,}')
_ANY_SEPARATOR = re.compile(r'[\\/]')


class PathUtils:
    """Utilities for consistent separator handling across path styles."""

    @staticmethod
    def split_components(path: str) -> List[str]:
        """
        Split a path on either separator, dropping empty segments.

        Args:
            path: File path to split

        Returns:
            List of non-empty path components
        """
        return [part for part in _ANY_SEPARATOR.split(path) if part]

    @staticmethod
    def join_path_components(components: List[str], separator: str = UNIX_SEP) -> str:
        """
        Join path components with the given separator.

        Args:
            components: List of path components
            separator: Separator to join with

        Returns:
            Joined path
        """
        return separator.join(components)

    @staticmethod
    def has_backslash(path: str) -> bool:
        return WINDOWS_SEP in path

    @staticmethod
    def has_slash(path: str) -> bool:
        return UNIX_SEP in path

    @staticmethod
    def is_bare_drive(path: str) -> bool:
        """True for a two-character drive designator such as 'C:'."""
        return bool(_BARE_DRIVE.match(path))

    @staticmethod
    def normalize_windows(path: str) -> str:
        """
        Unify to backslashes, collapse repeats and trim one trailing backslash.

        A leading UNC double backslash is kept. The trailing backslash is kept
        when removing it would leave a bare drive ('C:') or nothing.
        """
        result = path.replace('/', WINDOWS_SEP)

        if result.startswith(UNC_PREFIX):
            body = result[2:].lstrip(WINDOWS_SEP)
            result = UNC_PREFIX + _REPEATED_BACKSLASH.sub(r'\\', body)
        else:
            result = _REPEATED_BACKSLASH.sub(r'\\', result)

        if result.endswith(WINDOWS_SEP) and result != UNC_PREFIX:
            remainder = result[:-1]
            if remainder and not PathUtils.is_bare_drive(remainder):
                result = remainder

        return result

    @staticmethod
    def normalize_unix(path: str) -> str:
        """Unify to slashes, collapse repeats and trim one trailing slash (except root)."""
        result = _REPEATED_SLASH.sub('/', path.replace('\\', UNIX_SEP))

        if result.endswith(UNIX_SEP) and result != UNIX_SEP:
            result = result[:-1]

        return result

    @staticmethod
    def to_unix_separators(path: str) -> str:
        return path.replace(WINDOWS_SEP, UNIX_SEP)

    @staticmethod
    def to_windows_separators(path: str) -> str:
        return path.replace(UNIX_SEP, WINDOWS_SEP)
