"""rsswatch: RSS feed parsing and polling with new-item notifications."""

from rsswatch.exceptions import (
    AcquisitionError,
    ConfigurationError,
    DateFormatError,
    ParseError,
    RSSWatchError,
)
from rsswatch.feed import (
    Feed,
    feed_from_file,
    feed_from_source,
    feed_from_url,
    parse_feed,
    serve,
)
from rsswatch.models import Channel, FeedSnapshot, Item
from rsswatch.notifiers import Notifier, NotifierRegistry
from rsswatch.scheduler import FeedPoller, PollerState, stop_all

__version__ = "0.1.0"

__all__ = [
    "AcquisitionError",
    "Channel",
    "ConfigurationError",
    "DateFormatError",
    "Feed",
    "FeedPoller",
    "FeedSnapshot",
    "Item",
    "Notifier",
    "NotifierRegistry",
    "ParseError",
    "PollerState",
    "RSSWatchError",
    "feed_from_file",
    "feed_from_source",
    "feed_from_url",
    "parse_feed",
    "serve",
    "stop_all",
]
