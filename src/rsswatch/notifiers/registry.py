"""Registry of subscribers that fans new items out to all of them."""

import asyncio
import inspect
import threading
from collections.abc import Sequence

import structlog

from rsswatch.models.feed import Item
from rsswatch.notifiers.base import Notifier

logger = structlog.get_logger()


class NotifierRegistry:
    """Ordered, lock-guarded collection of notifiers.

    Registration may happen from any thread at any time, including while a
    poller is dispatching. Each dispatch runs every notifier concurrently;
    a failing or slow notifier never keeps the others from being called.
    """

    def __init__(self, notifiers: Sequence[Notifier] = ()):
        self._lock = threading.Lock()
        self._notifiers: list[Notifier] = list(notifiers)
        self._pending: set[asyncio.Task] = set()

    def register(self, notifier: Notifier) -> None:
        """Add a notifier. It takes part in every later dispatch."""
        with self._lock:
            self._notifiers.append(notifier)
            count = len(self._notifiers)
        logger.debug("Notifier registered", notifier=_name(notifier), count=count)

    @property
    def notifiers(self) -> tuple[Notifier, ...]:
        """Snapshot of the registered notifiers, in registration order."""
        with self._lock:
            return tuple(self._notifiers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._notifiers)

    def notify(self, items: Sequence[Item]) -> asyncio.Task | None:
        """Start a dispatch of ``items`` to every registered notifier.

        Does not wait for the notifiers; must be called from a running
        event loop.

        Args:
            items: The new items. Copied into a tuple shared by all notifiers.

        Returns:
            The dispatch task, or None when there was nothing to dispatch.
        """
        items = tuple(items)
        notifiers = self.notifiers
        if not items or not notifiers:
            return None

        task = asyncio.get_running_loop().create_task(self._dispatch(notifiers, items))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait until every dispatch started so far has finished."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def _dispatch(self, notifiers: tuple[Notifier, ...], items: tuple[Item, ...]) -> int:
        """Call all notifiers concurrently.

        Returns:
            Number of notifiers that completed without raising.
        """
        results = await asyncio.gather(
            *[self._invoke(n, items) for n in notifiers],
            return_exceptions=True,
        )

        failures = 0
        for notifier, result in zip(notifiers, results):
            if isinstance(result, Exception):
                failures += 1
                logger.warning(
                    "Notifier failed",
                    notifier=_name(notifier),
                    error=str(result),
                    error_type=type(result).__name__,
                )

        logger.debug(
            "New items dispatched",
            item_count=len(items),
            notifier_count=len(notifiers),
            failures=failures,
        )
        return len(notifiers) - failures

    async def _invoke(self, notifier: Notifier, items: tuple[Item, ...]) -> None:
        if inspect.iscoroutinefunction(notifier) or inspect.iscoroutinefunction(
            getattr(notifier, "__call__", None)
        ):
            await notifier(items)
            return

        # Plain callables may block, so they run in a worker thread.
        result = await asyncio.to_thread(notifier, items)
        if inspect.isawaitable(result):
            await result


def _name(notifier: Notifier) -> str:
    return getattr(notifier, "__qualname__", None) or type(notifier).__name__
