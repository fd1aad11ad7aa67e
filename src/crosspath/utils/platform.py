"""
Host platform lookup.

The host platform is the only environment input of the conversion engine.
It is read through a single PlatformInfo instance so tests can pin it with
set_platform().
"""

import sys
import logging
from typing import Optional

from ..core.models import PathStyle

logger = logging.getLogger(__name__)


def _detect_system() -> str:
    if hasattr(sys, 'getandroidapilevel'):
        return 'android'
    return sys.platform


class PlatformInfo:
    """Describes the host platform and its native path style."""

    def __init__(self, system: Optional[str] = None):
        """
        Initialize platform info.

        Args:
            system: A ``sys.platform`` style name ('win32', 'linux', 'darwin',
                    'android', ...). Detected from the interpreter when None.
        """
        self.system = system if system is not None else _detect_system()

    @property
    def is_windows(self) -> bool:
        return self.system.startswith('win')

    @property
    def flavor(self) -> str:
        """One of 'windows', 'macos', 'android' or 'unix'."""
        if self.is_windows:
            return 'windows'
        if self.system == 'darwin':
            return 'macos'
        if self.system == 'android':
            return 'android'
        return 'unix'

    def current_style(self) -> PathStyle:
        """Native path style of the host."""
        return PathStyle.WINDOWS if self.is_windows else PathStyle.UNIX

    @property
    def separator(self) -> str:
        return self.current_style().separator

    def __repr__(self) -> str:
        return f"PlatformInfo(system={self.system!r})"


_platform = PlatformInfo()


def get_platform() -> PlatformInfo:
    """Get the process-wide platform info."""
    return _platform


def set_platform(platform: PlatformInfo) -> PlatformInfo:
    """
    Replace the process-wide platform info.

    Returns:
        The previous PlatformInfo, so callers can restore it.
    """
    global _platform
    previous = _platform
    _platform = platform
    logger.debug(f"Platform set to {platform.system} (was {previous.system})")
    return previous


def current_style() -> PathStyle:
    """Native path style of the current host."""
    return _platform.current_style()
