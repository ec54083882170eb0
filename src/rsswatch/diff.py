"""Recency comparison between two item sets of the same feed."""

from collections.abc import Iterable, Sequence

from rsswatch.models.feed import Item


def latest_item(items: Sequence[Item]) -> Item | None:
    """Return the item with the greatest publish date.

    Items without a date are only returned when no item has one; ties go to
    the earliest item in document order. Returns None for an empty sequence.
    """
    if not items:
        return None

    latest = items[0]
    for item in items[1:]:
        if item.pub_date is None:
            continue
        if latest.pub_date is None or item.pub_date > latest.pub_date:
            latest = item
    return latest


def newer_items(items: Iterable[Item], latest: Item | None) -> list[Item]:
    """Return the items published strictly after ``latest``.

    Undated items are never newer, and nothing is newer than an undated or
    missing reference item. No deduplication by GUID is done.
    """
    if latest is None or latest.pub_date is None:
        return []
    return [item for item in items if item.pub_date is not None and item.pub_date > latest.pub_date]
