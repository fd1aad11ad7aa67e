"""Filesystem metadata providers for different hosts."""
import os
from typing import Optional

from ..core.errors import PlatformError
from ..utils.platform import PlatformInfo
from .base import MetadataProvider, NullMetadataProvider
from .local import LocalMetadataProvider

PROVIDERS = {
    'local': LocalMetadataProvider,
    'null': NullMetadataProvider,
}


def create_metadata_provider(name: Optional[str] = None,
                             platform: Optional[PlatformInfo] = None) -> MetadataProvider:
    """
    Create the metadata provider to use for this process.

    Args:
        name: 'local' or 'null'. Defaults to CROSSPATH_METADATA_PROVIDER,
              then 'local'.
        platform: Host platform the provider should assume.

    Returns:
        MetadataProvider instance

    Raises:
        PlatformError: If the provider name is unknown
    """
    name = (name or os.getenv('CROSSPATH_METADATA_PROVIDER') or 'local').strip().lower()
    try:
        provider_class = PROVIDERS[name]
    except KeyError:
        raise PlatformError(
            f"Unknown metadata provider: {name}\n"
            f"Expected one of: {', '.join(sorted(PROVIDERS))}"
        ) from None
    return provider_class(platform)


__all__ = ['MetadataProvider', 'LocalMetadataProvider', 'NullMetadataProvider',
           'create_metadata_provider']
