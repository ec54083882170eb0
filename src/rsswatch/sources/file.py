"""Local file feed source implementation."""

import asyncio
from pathlib import Path

from rsswatch.exceptions import AcquisitionError


class FileSource:
    """Feed source read from a local file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def source_id(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        """Path of the feed document."""
        return self._path

    async def fetch_raw(self) -> bytes:
        """Read the whole file into memory.

        Raises:
            AcquisitionError: On any I/O failure.
        """
        try:
            return await asyncio.to_thread(self._path.read_bytes)
        except OSError as e:
            raise AcquisitionError(str(self._path), e.strerror or str(e)) from e

    def __repr__(self) -> str:
        return f"FileSource({str(self._path)!r})"
