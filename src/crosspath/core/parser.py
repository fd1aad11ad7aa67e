"""
Path parsing for crosspath.

This module turns raw path strings into ParsedPath structures, classifies
strings by style and resolves '.' and '..' segments. Everything here is
purely syntactic; the filesystem is never consulted.
"""

import re
import logging
from typing import Iterator, List, Optional, Tuple

from .models import ParsedPath, PathStyle
from ..utils.path_utils import PathUtils, UNC_PREFIX
from ..utils.platform import PlatformInfo, get_platform

logger = logging.getLogger(__name__)

UNC_PATTERN = re.compile(r'^\\\\[^\\]+\\[^\\]+')
WINDOWS_ABSOLUTE_PATTERN = re.compile(r'^[a-zA-Z]:[/\\]')
UNIX_ABSOLUTE_PATTERN = re.compile(r'^/')
DRIVE_PREFIX_PATTERN = re.compile(r'^([a-zA-Z]:)([/\\]?)')

CURRENT_DIR = '.'
PARENT_DIR = '..'

# Component kinds produced while normalizing
ANCHOR = 'anchor'
PARENT = 'parent'
NORMAL = 'normal'


class PathParser:
    """Parses path strings into structured components."""

    def __init__(self, platform: Optional[PlatformInfo] = None):
        """
        Initialize the parser.

        Args:
            platform: Host platform used to break ties in style detection.
                      The process-wide platform is used when None.
        """
        self._platform = platform

    @property
    def platform(self) -> PlatformInfo:
        return self._platform or get_platform()

    def parse(self, path: str) -> ParsedPath:
        """
        Parse a path into a ParsedPath.

        Precedence is UNC, Windows absolute, Unix absolute, then relative.
        Any string parses; the relative branch accepts everything else.
        """
        parsed = ParsedPath(original=path)

        if UNC_PATTERN.match(path):
            parsed.is_unc = True
            parsed.is_absolute = True
            parts = PathUtils.split_components(path)
            # Without server and share the path stays flagged as UNC and
            # formatting it fails later with a ParseError.
            if len(parts) >= 2:
                parsed.server, parsed.share = parts[0], parts[1]
                parsed.components = parts[2:]
            return parsed

        if WINDOWS_ABSOLUTE_PATTERN.match(path):
            parsed.is_absolute = True
            parsed.has_drive = True
            parsed.drive_letter = path[0].upper()
            parsed.components = PathUtils.split_components(path[2:])
            return parsed

        if UNIX_ABSOLUTE_PATTERN.match(path):
            parsed.is_absolute = True
            parsed.components = [part for part in path.split('/') if part]
            return parsed

        parsed.components = PathUtils.split_components(path)
        return parsed

    def detect_style(self, path: str) -> PathStyle:
        """
        Classify a path as WINDOWS or UNIX.

        Strings with no separator, or with both separators and no absolute
        prefix, fall back to the host style.
        """
        if UNC_PATTERN.match(path) or WINDOWS_ABSOLUTE_PATTERN.match(path):
            return PathStyle.WINDOWS
        if UNIX_ABSOLUTE_PATTERN.match(path):
            return PathStyle.UNIX

        has_backslash = PathUtils.has_backslash(path)
        has_slash = PathUtils.has_slash(path)
        if has_backslash and not has_slash:
            return PathStyle.WINDOWS
        if has_slash and not has_backslash:
            return PathStyle.UNIX

        style = self.platform.current_style()
        logger.debug(f"Ambiguous path {path!r}, using host style {style.value}")
        return style

    def normalize_path(self, path: str) -> str:
        """
        Resolve '.' and '..' segments and redundant separators.

        Leading '..' segments of a relative path are kept, as is a '..'
        directly after the root. The result uses the separator of the path's
        detected style; an empty relative result becomes '.'. A relative
        result starting with a drive-like component such as 'C:' is
        prefixed with './'. Normalizing the result again returns it
        unchanged.
        """
        style = self.detect_style(path)
        separator = style.separator

        stack: List[Tuple[str, str]] = []
        for kind, text in self._components(path, separator):
            if kind == ANCHOR:
                stack.clear()
                stack.append((kind, text))
            elif kind == PARENT:
                if not stack or stack[-1][0] in (ANCHOR, PARENT):
                    stack.append((kind, text))
                else:
                    stack.pop()
            else:
                stack.append((kind, text))

        anchor = ''
        if stack and stack[0][0] == ANCHOR:
            anchor = stack.pop(0)[1]
        elif stack and DRIVE_PREFIX_PATTERN.match(stack[0][1]):
            # A relative path whose first component reads as a drive keeps
            # its './' so it is not reparsed as a drive path
            anchor = CURRENT_DIR + separator
        result = anchor + separator.join(text for _, text in stack)
        return result or CURRENT_DIR

    def _components(self, path: str, separator: str) -> Iterator[Tuple[str, str]]:
        """Yield (kind, text) pairs; the root marker, if any, comes first."""
        rest = path
        unc_parts = PathUtils.split_components(path) if UNC_PATTERN.match(path) else []
        drive = DRIVE_PREFIX_PATTERN.match(path)

        if len(unc_parts) >= 2:
            yield ANCHOR, UNC_PREFIX + unc_parts[0] + '\\' + unc_parts[1] + '\\'
            rest = '\\'.join(unc_parts[2:])
        elif drive:
            letter, root = drive.groups()
            yield ANCHOR, letter + (separator if root else '')
            rest = path[drive.end():]
        elif path[:1] in ('/', '\\'):
            yield ANCHOR, separator

        for part in PathUtils.split_components(rest):
            if part == CURRENT_DIR:
                continue
            if part == PARENT_DIR:
                yield PARENT, part
            else:
                yield NORMAL, part


_default_parser = PathParser()


def parse(path: str) -> ParsedPath:
    """Parse with the default parser."""
    return _default_parser.parse(path)


def detect_style(path: str) -> PathStyle:
    """Detect style with the default parser."""
    return _default_parser.detect_style(path)


def normalize_path(path: str) -> str:
    """Normalize with the default parser."""
    return _default_parser.normalize_path(path)
