"""Abstract feed source interface using Protocol."""

from typing import Protocol


class FeedSource(Protocol):
    """Feed document source abstraction protocol.

    A source is decided once, when the feed is created, and is re-used for
    every update.
    """

    @property
    def source_id(self) -> str:
        """The file path or URL this source reads from."""
        ...

    async def fetch_raw(self) -> bytes:
        """Read the whole feed document.

        Returns:
            bytes: Raw document content.

        Raises:
            AcquisitionError: When the document cannot be read.
        """
        ...
