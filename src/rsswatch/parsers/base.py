"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from rsswatch.models.feed import FeedSnapshot


class FeedParser(Protocol):
    """Feed document parser abstraction protocol."""

    def parse(self, raw_content: bytes, source_id: str = "<bytes>") -> FeedSnapshot:
        """Parse a raw document into a snapshot.

        Args:
            raw_content: Raw document bytes from a feed source.
            source_id: Source identifier used in errors and log events.

        Returns:
            The parsed snapshot.

        Raises:
            ParseError: When parsing fails.
        """
        ...
