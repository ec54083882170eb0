"""Interval polling of a single feed.

Each feed gets its own :class:`FeedPoller` with its own stop event;
:func:`stop_all` stops every poller that is currently serving.
"""

import asyncio
import weakref
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from rsswatch.config.settings import settings

if TYPE_CHECKING:
    from rsswatch.feed import Feed

logger = structlog.get_logger()

_live_pollers: "weakref.WeakSet[FeedPoller]" = weakref.WeakSet()


class PollerState(str, Enum):
    """Lifecycle of a poller. STOPPED is terminal."""

    IDLE = "idle"
    SERVING = "serving"
    STOPPED = "stopped"


def resolve_interval(
    interval: timedelta | float | None,
    ttl_minutes: int = 0,
    default_minutes: int | None = None,
) -> timedelta:
    """Pick the polling interval.

    An explicit non-zero interval wins, then the channel ttl (minutes) when
    positive, then the configured default.

    Args:
        interval: Caller-supplied interval (seconds when a number).
        ttl_minutes: Channel ttl, 0 when unset.
        default_minutes: Fallback, defaults to ``settings.default_ttl_minutes``.
    """
    if interval is not None and not isinstance(interval, timedelta):
        interval = timedelta(seconds=interval)
    if interval:
        return interval
    if ttl_minutes > 0:
        return timedelta(minutes=ttl_minutes)
    if default_minutes is None:
        default_minutes = settings.default_ttl_minutes
    return timedelta(minutes=default_minutes)


class FeedPoller:
    """Updates a feed on a fixed interval and dispatches its new items.

    Updates run strictly one after another; the wait for the next tick
    starts once the previous update has completed. Dispatch to notifiers
    is not awaited. Any update failure stops the poller and is raised from
    :meth:`serve`.
    """

    def __init__(self, feed: "Feed", interval: timedelta | float | None = None):
        """Initialize poller.

        Args:
            feed: The feed to keep updated.
            interval: Explicit interval; see :func:`resolve_interval`.
        """
        self._feed = feed
        self._interval = interval
        self._state = PollerState.IDLE
        self._stop_event = asyncio.Event()
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def state(self) -> PollerState:
        return self._state

    @property
    def stopped(self) -> bool:
        return self._state is PollerState.STOPPED

    @property
    def interval(self) -> timedelta:
        """The interval the poller uses (or would use) between updates."""
        return resolve_interval(self._interval, self._feed.channel.ttl)

    async def serve(self) -> None:
        """Run the polling loop until stopped.

        Raises:
            RuntimeError: If the poller was already started or stopped.
            Exception: Whatever the failing update raised.
        """
        if self._state is not PollerState.IDLE:
            raise RuntimeError(f"Poller cannot serve from state {self._state.value}")

        interval = self.interval
        self._loop = asyncio.get_running_loop()
        self._state = PollerState.SERVING
        _live_pollers.add(self)

        log = logger.bind(source_id=self._feed.source_id, interval=interval.total_seconds())
        log.info("Feed poller started")

        try:
            while not await self._wait(interval):
                log.debug("Polling feed")
                try:
                    new_items = await self._feed.update()
                except Exception as e:
                    log.error("Feed poller stopped by failed update", error=str(e))
                    raise

                if new_items:
                    log.info("New items found", count=len(new_items))
                    self._feed.notifiers.notify(new_items)
        finally:
            self._state = PollerState.STOPPED
            _live_pollers.discard(self)

        log.info("Feed poller stopped")

    def stop(self) -> None:
        """Ask the loop to stop at its next wait.

        Never blocks and may be called from any thread. An update already
        in progress completes first.
        """
        if self._state is PollerState.IDLE:
            self._state = PollerState.STOPPED
            return

        loop = self._loop
        if loop is not None and not loop.is_closed() and _running_loop() is not loop:
            loop.call_soon_threadsafe(self._stop_event.set)
        else:
            self._stop_event.set()

    async def _wait(self, interval: timedelta) -> bool:
        """Wait one interval. Returns True if stop was requested."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=interval.total_seconds())
        except asyncio.TimeoutError:
            return False
        return True


def stop_all() -> int:
    """Stop every serving poller.

    Returns:
        Number of pollers asked to stop.
    """
    pollers = list(_live_pollers)
    for poller in pollers:
        poller.stop()
    if pollers:
        logger.info("Stopping all feed pollers", count=len(pollers))
    return len(pollers)


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
