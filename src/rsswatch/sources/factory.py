"""Source factory: turns a source identifier into a feed source."""

from pathlib import Path

import structlog

from rsswatch.exceptions import ConfigurationError
from rsswatch.sources.file import FileSource
from rsswatch.sources.network import NetworkSource

logger = structlog.get_logger()

NETWORK_PREFIXES = ("http://", "https://")


def is_network_locator(identifier: str) -> bool:
    """Whether ``identifier`` names an HTTP(S) resource rather than a path."""
    return identifier.lower().startswith(NETWORK_PREFIXES)


def resolve_source(identifier: str | Path) -> FileSource | NetworkSource:
    """Create the source for a file path or URL.

    The kind of source is decided here, once; a feed keeps the returned
    object for all of its updates.

    Args:
        identifier: URL (``http://`` or ``https://``) or local file path.

    Returns:
        NetworkSource for URLs, FileSource for everything else.

    Raises:
        ConfigurationError: If the identifier is empty.
    """
    if isinstance(identifier, Path):
        return FileSource(identifier)

    identifier = identifier.strip()
    if not identifier:
        raise ConfigurationError("Feed source identifier is empty")

    if is_network_locator(identifier):
        logger.debug("Network source resolved", source_id=identifier)
        return NetworkSource(identifier)

    logger.debug("File source resolved", source_id=identifier)
    return FileSource(identifier)
