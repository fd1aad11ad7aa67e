"""
String-to-string path conversion between Windows and Unix styles.

Windows drive paths go through the configured drive mappings, UNC paths
become '//server/share' paths, and absolute Unix paths outside any mapping
land on drive C:.
"""

import re
import logging
from typing import Optional

from .errors import ParseError, UnsupportedFormatError
from .models import PathConfig, PathStyle
from .parser import PathParser
from ..utils.path_utils import PathUtils, UNC_PREFIX, WINDOWS_SEP, UNIX_SEP
from ..utils.platform import PlatformInfo

logger = logging.getLogger(__name__)

DRIVE_LETTER_PATTERN = re.compile(r'^[a-zA-Z]:$')
DEFAULT_WINDOWS_DRIVE = 'C:'
DEFAULT_MOUNT_ROOT = '/mnt'

CONCRETE_STYLES = (PathStyle.WINDOWS, PathStyle.UNIX)


class PathConverter:
    """Converts path strings between Windows and Unix conventions."""

    def __init__(self, config: Optional[PathConfig] = None,
                 platform: Optional[PlatformInfo] = None):
        self.config = config or PathConfig()
        self.parser = PathParser(platform)

    def convert(self, path: str, target_style: PathStyle) -> str:
        """
        Convert a path to the target style.

        A path already written purely in the target style is returned
        unchanged. A path of the target style that also contains the other
        separator is normalized into the target style.

        Raises:
            UnsupportedFormatError: If the target is not WINDOWS or UNIX.
            ParseError: If a UNC path lacks a server or share.
        """
        source_style = self.detect_style(path)

        if target_style not in CONCRETE_STYLES:
            raise UnsupportedFormatError(
                f"Unsupported conversion: {source_style.name} -> {target_style.name}"
            )

        if source_style is target_style:
            if not self._has_foreign_separator(path, target_style):
                return path
            if target_style is PathStyle.WINDOWS:
                return PathUtils.normalize_windows(path)
            return PathUtils.normalize_unix(path)

        if target_style is PathStyle.UNIX:
            return self.windows_to_unix(path)
        return self.unix_to_windows(path)

    def detect_style(self, path: str) -> PathStyle:
        """
        Source style of ``path``.

        A bare drive such as 'C:' counts as Windows. A path mixing both
        separators is Windows when it starts with a UNC '\\\\' or contains
        ':\\'; other paths go to the parser's detection.
        """
        if DRIVE_LETTER_PATTERN.match(path):
            return PathStyle.WINDOWS

        mixed = PathUtils.has_backslash(path) and PathUtils.has_slash(path)
        if mixed and not path.startswith(UNIX_SEP):
            if path.startswith(UNC_PREFIX) or ':' + WINDOWS_SEP in path:
                return PathStyle.WINDOWS
        return self.parser.detect_style(path)

    def windows_to_unix(self, path: str) -> str:
        """Convert a Windows path to Unix form."""
        normalized = PathUtils.normalize_windows(path)

        if normalized.startswith(UNC_PREFIX):
            return self._convert_unc_path(normalized)

        drive = normalized[:2]
        if DRIVE_LETTER_PATTERN.match(drive):
            return self._map_drive_to_unix(drive, normalized[2:])

        return PathUtils.to_unix_separators(normalized)

    def unix_to_windows(self, path: str) -> str:
        """Convert a Unix path to Windows form."""
        normalized = PathUtils.normalize_unix(path)

        mapped = self.config.lookup_windows_drive(normalized)
        if mapped:
            drive, rest = mapped
            return drive + (PathUtils.to_windows_separators(rest) or WINDOWS_SEP)

        if normalized.startswith(UNIX_SEP):
            logger.debug(f"No drive mapping for {normalized!r}, defaulting to {DEFAULT_WINDOWS_DRIVE}")
            return DEFAULT_WINDOWS_DRIVE + PathUtils.to_windows_separators(normalized)

        return PathUtils.to_windows_separators(normalized)

    def _map_drive_to_unix(self, drive: str, rest: str) -> str:
        """Map a drive designator and the remainder of the path to Unix form."""
        mount_point = self.config.lookup_unix_prefix(drive)
        if mount_point is None:
            mount_point = f"{DEFAULT_MOUNT_ROOT}/{drive[0].lower()}"
            logger.debug(f"No drive mapping for {drive}, defaulting to {mount_point}")

        rest = PathUtils.to_unix_separators(rest)
        if rest == UNIX_SEP:
            return mount_point
        if rest and not rest.startswith(UNIX_SEP):
            # Drive-relative path such as 'C:foo'
            rest = UNIX_SEP + rest
        if mount_point == UNIX_SEP:
            return rest or UNIX_SEP
        return mount_point + rest

    def _convert_unc_path(self, path: str) -> str:
        r"""Convert '\\server\share\rest' to '//server/share/rest'."""
        parts = path.split(WINDOWS_SEP)
        if len(parts) < 4 or not parts[2] or not parts[3]:
            raise ParseError(f"Invalid UNC path: {path}")

        server, share = parts[2], parts[3]
        rest = UNIX_SEP.join(parts[4:])
        unix_path = f"//{server}/{share}/{rest}"
        if unix_path.endswith(UNIX_SEP):
            unix_path = unix_path[:-1]
        return unix_path

    @staticmethod
    def _has_foreign_separator(path: str, style: PathStyle) -> bool:
        if style is PathStyle.WINDOWS:
            return PathUtils.has_slash(path)
        return PathUtils.has_backslash(path)
