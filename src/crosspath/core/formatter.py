"""
Formatting of already-parsed paths.

PathFormatter serializes a ParsedPath into a target style without reparsing,
so one parse can be rendered in several styles.
"""

import logging
from typing import Optional

from .errors import ParseError
from .models import ParsedPath, PathConfig, PathStyle
from .converter import DEFAULT_MOUNT_ROOT, DEFAULT_WINDOWS_DRIVE
from ..utils.path_utils import PathUtils, WINDOWS_SEP, UNIX_SEP
from ..utils.platform import PlatformInfo, get_platform

logger = logging.getLogger(__name__)


class PathFormatter:
    """Generates styled path strings from ParsedPath values."""

    def __init__(self, config: Optional[PathConfig] = None,
                 platform: Optional[PlatformInfo] = None):
        self.config = config or PathConfig()
        self._platform = platform

    def format(self, parsed: ParsedPath, target_style: PathStyle) -> str:
        """
        Format a parsed path in the target style.

        AUTO resolves to the host style.

        Raises:
            ParseError: If a UNC path is missing its server or share.
        """
        if target_style is PathStyle.WINDOWS:
            return self.format_windows(parsed)
        if target_style is PathStyle.UNIX:
            return self.format_unix(parsed)

        current = (self._platform or get_platform()).current_style()
        return self.format(parsed, current)

    def format_windows(self, parsed: ParsedPath) -> str:
        if parsed.is_unc:
            server, share = self._unc_root(parsed)
            return WINDOWS_SEP.join(['', '', server, share] + parsed.components)

        if parsed.drive:
            result = parsed.drive
        elif parsed.is_absolute:
            result = DEFAULT_WINDOWS_DRIVE
        else:
            result = ''

        if parsed.is_absolute:
            result += WINDOWS_SEP
        result += PathUtils.join_path_components(parsed.components, WINDOWS_SEP)

        if self.config.normalize:
            result = PathUtils.normalize_windows(result)
        return result

    def format_unix(self, parsed: ParsedPath) -> str:
        if parsed.is_unc:
            server, share = self._unc_root(parsed)
            return UNIX_SEP.join(['', '', server, share] + parsed.components)

        components = PathUtils.join_path_components(parsed.components, UNIX_SEP)
        if parsed.has_drive:
            mount_point = self._mount_point(parsed)
            if not components:
                result = mount_point
            elif mount_point.endswith(UNIX_SEP):
                result = mount_point + components
            else:
                result = mount_point + UNIX_SEP + components
        elif parsed.is_absolute:
            result = UNIX_SEP + components
        else:
            result = components

        if self.config.normalize:
            result = PathUtils.normalize_unix(result)
        return result

    def _mount_point(self, parsed: ParsedPath) -> str:
        """Unix mount point for the drive of ``parsed``."""
        # Keys are matched as written in the original string, like the converter does
        written = parsed.original[:2]
        if not PathUtils.is_bare_drive(written):
            written = parsed.drive
        mount_point = self.config.lookup_unix_prefix(written)
        if mount_point is not None:
            return mount_point

        mount_point = f"{DEFAULT_MOUNT_ROOT}/{parsed.drive_letter.lower()}"
        logger.debug(f"No drive mapping for {parsed.drive}, defaulting to {mount_point}")
        return mount_point

    @staticmethod
    def _unc_root(parsed: ParsedPath):
        if not parsed.server or not parsed.share:
            raise ParseError(f"Invalid UNC path: {parsed.original}")
        return parsed.server, parsed.share

    def __repr__(self) -> str:
        return f"PathFormatter(config={self.config!r})"
