"""Feed: a parsed RSS document plus its polling state.

Coordinates acquisition, parsing, the recency diff and notifier dispatch
for one feed source.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import structlog

from rsswatch.diff import latest_item, newer_items
from rsswatch.exceptions import ConfigurationError
from rsswatch.models.feed import Channel, FeedSnapshot, Item
from rsswatch.notifiers.base import Notifier
from rsswatch.notifiers.registry import NotifierRegistry
from rsswatch.parsers.base import FeedParser
from rsswatch.parsers.rss_parser import RSSParser
from rsswatch.scheduler import FeedPoller
from rsswatch.sources.base import FeedSource
from rsswatch.sources.factory import is_network_locator, resolve_source

logger = structlog.get_logger()


class Feed:
    """One syndication feed.

    The parsed content lives in an immutable :class:`FeedSnapshot` that
    :meth:`update` replaces wholesale, so readers always see a complete
    document. Only one driver (manual ``update`` calls or the poller
    started by :meth:`serve`) may operate on a feed at a time.
    """

    def __init__(
        self,
        snapshot: FeedSnapshot,
        source: FeedSource | None = None,
        origin: bytes = b"",
        parser: FeedParser | None = None,
    ):
        """Initialize feed.

        Args:
            snapshot: Parsed document content.
            source: Where updates are read from. None for feeds built from
                bytes, which cannot be updated.
            origin: The raw bytes the snapshot was parsed from.
            parser: Parser used on update. Defaults to RSSParser.
        """
        self._snapshot = snapshot
        self._source = source
        self._origin = origin
        self._parser = parser or RSSParser()
        self._last_update_at = datetime.now(timezone.utc)
        self._notifiers = NotifierRegistry()
        self._poller: FeedPoller | None = None

    @property
    def snapshot(self) -> FeedSnapshot:
        """Current document content."""
        return self._snapshot

    @property
    def version(self) -> str:
        return self._snapshot.version

    @property
    def channel(self) -> Channel:
        return self._snapshot.channel

    @property
    def items(self) -> tuple[Item, ...]:
        return self._snapshot.channel.items

    @property
    def source(self) -> FeedSource | None:
        return self._source

    @property
    def source_id(self) -> str:
        """File path or URL of the source, empty when there is none."""
        return self._source.source_id if self._source is not None else ""

    @property
    def origin(self) -> bytes:
        """Raw bytes of the last successfully parsed document."""
        return self._origin

    @property
    def last_update_at(self) -> datetime:
        return self._last_update_at

    @property
    def notifiers(self) -> NotifierRegistry:
        return self._notifiers

    @property
    def poller(self) -> FeedPoller | None:
        """The poller started by :meth:`serve`, if any."""
        return self._poller

    def register_notifier(self, notifier: Notifier) -> None:
        """Subscribe ``notifier`` to the new items found by later updates."""
        self._notifiers.register(notifier)

    async def update(self) -> list[Item]:
        """Re-read the source and replace the feed content.

        Either the whole snapshot is replaced or, on any failure, nothing
        changes.

        Returns:
            Items of the new document published strictly after the latest
            item of the previous one. Empty when the previous document had
            no items.

        Raises:
            ConfigurationError: If the feed has no source.
            AcquisitionError: If the source cannot be read.
            ParseError: If the new document is invalid.
        """
        log = logger.bind(source_id=self.source_id)
        if self._source is None:
            log.error("Feed update without a source")
            raise ConfigurationError("Feed has no source to update from")

        latest = latest_item(self.items)

        log.debug("Updating feed")
        try:
            raw = await self._source.fetch_raw()
            snapshot = self._parser.parse(raw, self.source_id)
        except Exception as e:
            log.error("Feed update failed", error=str(e), error_type=type(e).__name__)
            raise

        self._snapshot = snapshot
        self._origin = raw
        self._last_update_at = datetime.now(timezone.utc)

        new_items = newer_items(snapshot.channel.items, latest)
        log.debug("Feed updated", item_count=len(snapshot.channel.items), new_count=len(new_items))
        return new_items

    async def serve(self, interval: timedelta | float | None = None) -> None:
        """Poll the source until :meth:`stop` is called or an update fails.

        New items are dispatched to the registered notifiers without
        waiting for them.

        Args:
            interval: Time between updates (seconds when a number). When
                unset, the channel ttl is used, then the configured default.

        Raises:
            RuntimeError: If this feed is already being served.
            RSSWatchError: The error of the update that stopped the poller.
        """
        if self._poller is not None and not self._poller.stopped:
            raise RuntimeError(f"Feed {self.source_id!r} is already being served")

        self._poller = FeedPoller(self, interval)
        await self._poller.serve()

    def stop(self) -> None:
        """Ask the poller to stop at its next wait. No-op when not serving."""
        if self._poller is not None:
            self._poller.stop()

    def to_json(self, indent: int | None = 2) -> str:
        """Render source, version and channel as JSON."""
        return self._snapshot.to_json(source=self.source_id, indent=indent)

    def __str__(self) -> str:
        return f"version={self.version!r}, channel={{{self.channel}}}"

    def __repr__(self) -> str:
        return f"<Feed source={self.source_id!r} items={len(self.items)}>"


def parse_feed(raw: bytes, parser: FeedParser | None = None) -> Feed:
    """Build a feed from raw document bytes.

    The feed has no source, so it cannot be updated or served.

    Raises:
        ParseError: If the document is invalid.
    """
    parser = parser or RSSParser()
    return Feed(parser.parse(raw), origin=raw, parser=parser)


async def feed_from_source(
    source: str | Path | FeedSource,
    parser: FeedParser | None = None,
) -> Feed:
    """Acquire and parse a feed from a URL, a file path or a FeedSource.

    Raises:
        ConfigurationError: If the identifier is empty.
        AcquisitionError: If the source cannot be read.
        ParseError: If the document is invalid.
    """
    if isinstance(source, (str, Path)):
        source = resolve_source(source)
    parser = parser or RSSParser()

    try:
        raw = await source.fetch_raw()
        snapshot = parser.parse(raw, source.source_id)
    except Exception as e:
        logger.error("Feed acquisition failed", source_id=source.source_id, error=str(e))
        raise

    return Feed(snapshot, source=source, origin=raw, parser=parser)


async def feed_from_file(path: str | Path, parser: FeedParser | None = None) -> Feed:
    """Acquire and parse a feed from a local file."""
    return await feed_from_source(Path(path), parser)


async def feed_from_url(url: str, parser: FeedParser | None = None) -> Feed:
    """Acquire and parse a feed from an HTTP(S) URL."""
    if not is_network_locator(url):
        raise ConfigurationError(f"Not an HTTP(S) URL: {url!r}")
    return await feed_from_source(url, parser)


async def serve(
    source: str | Path | FeedSource,
    notifier: Notifier,
    interval: timedelta | float | None = None,
) -> Feed:
    """Acquire a feed and poll it until stopped.

    ``notifier`` is registered and first receives every item of the initial
    document, then the new items of each update. Use
    :func:`rsswatch.scheduler.stop_all` (or ``feed.stop()`` from a
    notifier) to end the loop.

    Returns:
        The feed, once its poller has stopped.
    """
    feed = await feed_from_source(source)
    feed.register_notifier(notifier)
    if feed.items:
        feed.notifiers.notify(feed.items)
    await feed.serve(interval)
    return feed
