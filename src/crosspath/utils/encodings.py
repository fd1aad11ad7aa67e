"""
Encoding detection and conversion for path strings.

This module decodes raw path bytes into text, re-encodes text for a target
code page, and strips characters a platform will not accept in a path.
"""

import codecs
import logging
import unicodedata
from typing import Optional, Tuple

from ..core.errors import EncodingError

UTF8 = 'utf-8'
UTF16_LE = 'utf-16-le'
WINDOWS_1252 = 'cp1252'  # Legacy Windows code page

UTF16_LE_BOM = b'\xff\xfe'

WINDOWS_INVALID_CHARS = ['<', '>', ':', '"', '|', '?', '*']

# Set up module logger
logger = logging.getLogger(__name__)


class EncodingNormalizer:
    """Handles encoding detection and conversion of path text."""

    @staticmethod
    def canonical_name(encoding: str) -> str:
        """
        Resolve an encoding alias to its codec name.

        Raises:
            EncodingError: If Python has no codec for ``encoding``.
        """
        try:
            return codecs.lookup(encoding).name
        except (LookupError, TypeError):
            raise EncodingError(f"Unknown encoding: {encoding!r}") from None

    def detect_encoding(self, content: bytes) -> str:
        """
        Detect the encoding of raw path bytes.

        Valid UTF-8 wins; a UTF-16 LE byte order mark comes next; anything
        else is assumed to be Windows-1252.

        Args:
            content: Raw bytes to analyze.

        Returns:
            Codec name: 'utf-8', 'utf-16-le' or 'cp1252'.
        """
        try:
            content.decode(UTF8)
            return UTF8
        except UnicodeDecodeError:
            pass

        if content.startswith(UTF16_LE_BOM):
            return UTF16_LE

        return WINDOWS_1252

    def convert_to_utf8(self, content: bytes, encoding: Optional[str] = None) -> str:
        """
        Decode raw bytes to text.

        Args:
            content: Raw bytes to decode.
            encoding: Declared encoding; detected when None.

        Returns:
            Decoded text.

        Raises:
            EncodingError: If the bytes cannot be decoded without substitution.
        """
        text, _ = self.decode_bytes(content, encoding)
        return text

    def decode_bytes(self, content: bytes, encoding: Optional[str] = None) -> Tuple[str, str]:
        """
        Decode raw bytes and report which encoding was used.

        Returns:
            Tuple of (decoded_text, encoding_used).
        """
        encoding = self.canonical_name(encoding) if encoding else self.detect_encoding(content)

        payload = content
        if encoding == UTF16_LE and content.startswith(UTF16_LE_BOM):
            payload = content[len(UTF16_LE_BOM):]

        try:
            decoded = payload.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug(f"Decoding as {encoding} failed at byte {e.start}")
            raise EncodingError(
                f"Encoding conversion encountered errors ({encoding}, byte {e.start})"
            ) from e

        logger.debug(f"Decoded {len(content)} bytes using {encoding}")
        return decoded, encoding

    def convert_from_utf8(self, text: str, target_encoding: str) -> bytes:
        """
        Encode text for a target encoding.

        Raises:
            EncodingError: If a character has no mapping in the target encoding.
        """
        target_encoding = self.canonical_name(target_encoding)
        try:
            return text.encode(target_encoding)
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"Encoding conversion encountered errors ({target_encoding}, "
                f"character {e.start})"
            ) from e

    def convert_path_encoding(self, text: str, from_encoding: str, to_encoding: str) -> str:
        """
        Reinterpret text encoded under one encoding as another.

        The text is encoded with ``from_encoding`` and the bytes decoded with
        ``to_encoding``. Identical encodings return the text unchanged.

        Raises:
            EncodingError: If either step fails.
        """
        source = self.canonical_name(from_encoding)
        target = self.canonical_name(to_encoding)
        if source == target:
            return text

        try:
            return text.encode(source).decode(target)
        except UnicodeError as e:
            raise EncodingError(f"Path encoding conversion failed ({source} -> {target})") from e

    def has_bom(self, content: bytes) -> Tuple[bool, Optional[str]]:
        """
        Check if content starts with a Byte Order Mark (BOM).

        Args:
            content: Raw bytes to check.

        Returns:
            Tuple of (has_bom, encoding_name).
        """
        bom_checks = [
            (b'\xef\xbb\xbf', 'utf-8-sig'),
            (b'\xff\xfe\x00\x00', 'utf-32-le'),
            (b'\x00\x00\xfe\xff', 'utf-32-be'),
            (b'\xff\xfe', 'utf-16-le'),
            (b'\xfe\xff', 'utf-16-be'),
        ]

        for bom, encoding in bom_checks:
            if content.startswith(bom):
                return True, encoding

        return False, None

    @staticmethod
    def normalize_windows_path_text(text: str) -> str:
        """Replace characters Windows rejects with '_' and drop control characters."""
        for char in WINDOWS_INVALID_CHARS:
            text = text.replace(char, '_')
        return _strip_control_chars(text)

    @staticmethod
    def normalize_unix_path_text(text: str) -> str:
        """Drop NUL and other control characters."""
        return _strip_control_chars(text.replace('\0', ''))


def _strip_control_chars(text: str) -> str:
    return ''.join(char for char in text if unicodedata.category(char) != 'Cc')
