"""Custom exceptions for rsswatch.

Provides a structured exception hierarchy for the acquisition, parsing and
polling stages of a feed.
"""


class RSSWatchError(Exception):
    """Base exception class for all rsswatch errors."""

    pass


class AcquisitionError(RSSWatchError):
    """Raised when a feed document cannot be read from its source.

    Attributes:
        source_id: The file path or URL that failed.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to acquire {source_id}: {message}")


class ParseError(RSSWatchError):
    """Raised when a feed document is not well-formed or has invalid fields.

    Attributes:
        source_id: The identifier of the document with the parse error.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to parse {source_id}: {message}")


class DateFormatError(RSSWatchError):
    """Raised when a timestamp matches none of the accepted layouts.

    Attributes:
        value: The literal date text that could not be parsed.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unrecognized date format: {value!r}")


class ConfigurationError(RSSWatchError):
    """Raised when a feed is missing something it needs, such as a source."""

    pass
