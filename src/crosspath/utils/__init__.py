"""Utility modules for crosspath."""

from .encodings import EncodingNormalizer
from .path_utils import PathUtils
from .platform import PlatformInfo, get_platform, set_platform, current_style
from .security import PathSecurityChecker, check_path_security, sanitize_path

__all__ = [
    "EncodingNormalizer",
    "PathUtils",
    "PlatformInfo",
    "get_platform",
    "set_platform",
    "current_style",
    "PathSecurityChecker",
    "check_path_security",
    "sanitize_path",
]
