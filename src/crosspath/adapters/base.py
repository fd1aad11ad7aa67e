"""
Base metadata provider interface.

This module defines the abstract interface for the filesystem probes the
conversion engine itself never performs: file attributes, disk usage and
accessibility. Each platform strategy implements it once.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.models import DiskInfo, FileAttributes
from ..utils.platform import PlatformInfo, get_platform


class MetadataProvider(ABC):
    """
    Abstract base class for filesystem metadata providers.

    Implementations never raise for missing or unreadable paths; they
    report None (or False) instead.
    """

    def __init__(self, platform: Optional[PlatformInfo] = None):
        """Initialize provider for a host platform."""
        self.platform = platform or get_platform()

    @abstractmethod
    def get_attributes(self, path: str) -> Optional[FileAttributes]:
        """
        Get attributes of a file or directory.

        Args:
            path: Native path on the host.

        Returns:
            FileAttributes, or None if the path cannot be inspected.
        """
        pass

    @abstractmethod
    def get_disk_info(self, path: str) -> Optional[DiskInfo]:
        """
        Get usage of the volume holding ``path``.

        Returns:
            DiskInfo, or None if the volume cannot be inspected.
        """
        pass

    @abstractmethod
    def is_accessible(self, path: str) -> bool:
        """Check whether ``path`` exists and can be reached."""
        pass


class NullMetadataProvider(MetadataProvider):
    """Provider that reports nothing; for hosts where probing is unwanted."""

    def get_attributes(self, path: str) -> Optional[FileAttributes]:
        return None

    def get_disk_info(self, path: str) -> Optional[DiskInfo]:
        return None

    def is_accessible(self, path: str) -> bool:
        return False
