"""
The CrossPath facade.

A CrossPath owns one path string and a PathConfig and routes conversion,
formatting, normalization and security checks to the components that do
the work.
"""

import os
import logging
from dataclasses import replace
from typing import Optional, Union

from .converter import PathConverter
from .errors import InvalidPathError
from .formatter import PathFormatter
from .models import ParsedPath, PathConfig, PathStyle
from .parser import PathParser
from ..utils.encodings import EncodingNormalizer, UTF8, UTF16_LE, UTF16_LE_BOM
from ..utils.security import PathSecurityChecker

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class CrossPath:
    """A path string that can be rendered in Windows or Unix style."""

    def __init__(self, path: PathLike, config: Optional[PathConfig] = None,
                 encoding: str = UTF8):
        """
        Create a cross-platform path.

        Args:
            path: Path string (or os.PathLike) in any style.
            config: Conversion settings; defaults to PathConfig().
            encoding: Encoding the path text came from, used by to_bytes().

        Raises:
            InvalidPathError: If ``path`` is not text.
        """
        if isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            raise InvalidPathError(f"Expected a path string, got {type(path).__name__}")

        self._parser = PathParser()
        self._path = path
        self._original_style = self._parser.detect_style(path)
        self._config = config if config is not None else PathConfig()
        self._encoding = encoding

    @classmethod
    def with_config(cls, path: PathLike, config: PathConfig) -> 'CrossPath':
        """Create a path with custom configuration."""
        return cls(path, config)

    @classmethod
    def from_bytes(cls, content: bytes, config: Optional[PathConfig] = None,
                   encoding: Optional[str] = None) -> 'CrossPath':
        """
        Create a path from raw bytes.

        Args:
            content: Encoded path.
            config: Conversion settings.
            encoding: Declared encoding; detected when None.

        Raises:
            EncodingError: If the bytes cannot be decoded.
        """
        text, used = EncodingNormalizer().decode_bytes(content, encoding)
        return cls(text, config, encoding=used)

    @property
    def original_style(self) -> PathStyle:
        """Style detected when the path was created."""
        return self._original_style

    @property
    def config(self) -> PathConfig:
        return self._config

    @property
    def encoding(self) -> str:
        return self._encoding

    def set_config(self, config: PathConfig) -> None:
        """Replace the configuration."""
        self._config = config

    def as_original(self) -> str:
        """The owned path string, as given (or as last normalized)."""
        return self._path

    def to_style(self, style: PathStyle) -> str:
        """
        Convert to the given style.

        Raises:
            UnsupportedFormatError: If ``style`` is AUTO.
            ParseError: If the path is a malformed UNC path.
        """
        return PathConverter(self._config).convert(self._path, style)

    def to_platform(self) -> str:
        """Convert to the configured style, or the host style for AUTO."""
        return self.to_style(self._config.resolve_style())

    def to_windows(self) -> str:
        return self.to_style(PathStyle.WINDOWS)

    def to_unix(self) -> str:
        return self.to_style(PathStyle.UNIX)

    def parse(self) -> ParsedPath:
        """Structured view of the owned path."""
        return self._parser.parse(self._path)

    def format(self, style: PathStyle) -> str:
        """Render the parsed path in ``style``; AUTO uses the host style."""
        return PathFormatter(self._config).format(self.parse(), style)

    def normalize(self) -> None:
        """Resolve '.' and '..' segments of the owned path in place."""
        normalized = self._parser.normalize_path(self._path)
        logger.debug(f"Normalized {self._path!r} to {normalized!r}")
        self._path = normalized

    def is_safe(self) -> bool:
        """
        Run the security checks against the owned path.

        The checks follow the configured style (AUTO means the host). With
        ``security_check`` disabled this always returns True.

        Raises:
            SecurityError: If a check fails.
        """
        if not self._config.security_check:
            logger.debug(f"Security checks disabled, skipping {self._path!r}")
            return True
        return PathSecurityChecker().check(self._path, self._config.resolve_style())

    def to_bytes(self, style: Optional[PathStyle] = None) -> bytes:
        """
        Encode the converted path.

        Args:
            style: Target style; the platform-appropriate style when None.

        Returns:
            The path encoded with the source encoding when
            ``preserve_encoding`` is set, UTF-8 otherwise. UTF-16 LE output
            starts with its byte order mark, so from_bytes() reads it back.

        Raises:
            EncodingError: If the path cannot be represented.
        """
        text = self.to_platform() if style is None else self.to_style(style)
        encoding = self._encoding if self._config.preserve_encoding else UTF8

        normalizer = EncodingNormalizer()
        content = normalizer.convert_from_utf8(text, encoding)
        if normalizer.canonical_name(encoding) == UTF16_LE:
            content = UTF16_LE_BOM + content
        return content

    def copy(self) -> 'CrossPath':
        """Independent copy with its own configuration."""
        clone = CrossPath(self._path, replace(self._config), encoding=self._encoding)
        clone._original_style = self._original_style
        return clone

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"CrossPath({self._path!r}, style={self._original_style.value})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CrossPath):
            return NotImplemented
        return (self._path, self._original_style, self._config) == \
            (other._path, other._original_style, other._config)

    def __hash__(self) -> int:
        return hash((self._path, self._original_style))


def to_cross_path(path: PathLike) -> CrossPath:
    """Create a CrossPath with the default configuration."""
    return CrossPath(path)


def to_windows_path(path: PathLike) -> str:
    """Convert any path to Windows style with the default configuration."""
    return CrossPath(path).to_windows()


def to_unix_path(path: PathLike) -> str:
    """Convert any path to Unix style with the default configuration."""
    return CrossPath(path).to_unix()
