"""Notifier interface using Protocol."""

from collections.abc import Awaitable, Sequence
from typing import Protocol

from rsswatch.models.feed import Item


class Notifier(Protocol):
    """Subscriber called with the items found new by an update.

    Either a plain callable or a coroutine function. The return value is
    ignored. The items are an immutable tuple; reading the feed afterwards
    may show a newer state than the one the subscriber was notified about.
    """

    def __call__(self, new_items: Sequence[Item]) -> Awaitable[None] | None:
        ...
