"""Local filesystem metadata provider implementation."""
import os
import stat
import shutil
import logging
from typing import Optional

from ..core.models import DiskInfo, FileAttributes
from .base import MetadataProvider

logger = logging.getLogger(__name__)

MOUNTS_FILE = '/proc/self/mounts'
UNKNOWN_FILESYSTEM = 'unknown'


class LocalMetadataProvider(MetadataProvider):
    """Provider backed by os.stat and shutil.disk_usage on the host."""

    def get_attributes(self, path: str) -> Optional[FileAttributes]:
        """Get file attributes for a native host path."""
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot stat {path!r}: {e}")
            return None

        creation_time = getattr(st, 'st_birthtime', None)
        if creation_time is None and self.platform.is_windows:
            creation_time = st.st_ctime

        return FileAttributes(
            size=st.st_size,
            is_directory=stat.S_ISDIR(st.st_mode),
            is_hidden=self._is_hidden(path, st),
            is_readonly=self._is_readonly(st),
            creation_time=int(creation_time) if creation_time is not None else None,
            modification_time=int(st.st_mtime),
        )

    def get_disk_info(self, path: str) -> Optional[DiskInfo]:
        """Get usage of the volume holding a native host path."""
        try:
            usage = shutil.disk_usage(path)
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot read disk usage for {path!r}: {e}")
            return None

        return DiskInfo(
            total_space=usage.total,
            free_space=usage.free,
            filesystem_type=self._filesystem_type(path),
        )

    def is_accessible(self, path: str) -> bool:
        try:
            return os.path.exists(path)
        except ValueError:
            return False

    def _is_hidden(self, path: str, st: os.stat_result) -> bool:
        name = os.path.basename(os.path.normpath(path))
        dot_file = name.startswith('.') and name not in ('.', '..')

        if self.platform.is_windows:
            attributes = getattr(st, 'st_file_attributes', 0)
            return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
        if self.platform.flavor == 'macos':
            flags = getattr(st, 'st_flags', 0)
            return dot_file or bool(flags & stat.UF_HIDDEN)
        return dot_file

    def _is_readonly(self, st: os.stat_result) -> bool:
        if self.platform.is_windows:
            attributes = getattr(st, 'st_file_attributes', 0)
            return bool(attributes & stat.FILE_ATTRIBUTE_READONLY)
        # Matches the usual definition: no write bit for anyone
        return not st.st_mode & (stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH)

    def _filesystem_type(self, path: str) -> str:
        """Filesystem type from the mount table (Linux), else 'unknown'."""
        if not os.path.exists(MOUNTS_FILE):
            return UNKNOWN_FILESYSTEM

        target = os.path.realpath(path)
        best_mount, best_type = '', UNKNOWN_FILESYSTEM
        try:
            with open(MOUNTS_FILE, 'r', encoding='utf-8', errors='replace') as f:
                for line in f:
                    fields = line.split()
                    if len(fields) < 3:
                        continue
                    # Mount points escape spaces as \040
                    mount_point = fields[1].replace('\\040', ' ')
                    inside = (target == mount_point or mount_point == '/'
                              or target.startswith(mount_point.rstrip('/') + '/'))
                    if inside and len(mount_point) >= len(best_mount):
                        best_mount, best_type = mount_point, fields[2]
        except OSError as e:
            logger.debug(f"Cannot read {MOUNTS_FILE}: {e}")
            return UNKNOWN_FILESYSTEM

        return best_type
