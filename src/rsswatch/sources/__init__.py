"""Sources package."""

from rsswatch.sources.base import FeedSource
from rsswatch.sources.factory import is_network_locator, resolve_source
from rsswatch.sources.file import FileSource
from rsswatch.sources.network import NetworkSource

__all__ = [
    "FeedSource",
    "FileSource",
    "NetworkSource",
    "is_network_locator",
    "resolve_source",
]
