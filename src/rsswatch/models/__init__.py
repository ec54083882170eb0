"""Models package."""

from rsswatch.models.feed import (
    Category,
    Channel,
    Cloud,
    Enclosure,
    FeedSnapshot,
    Guid,
    Image,
    Item,
    ItemSource,
    TextInput,
)

__all__ = [
    "Category",
    "Channel",
    "Cloud",
    "Enclosure",
    "FeedSnapshot",
    "Guid",
    "Image",
    "Item",
    "ItemSource",
    "TextInput",
]
