"""RFC 822 timestamp normalization.

Feed producers disagree on how the zone of an RFC 822 date is written, so
dates are tried against a short ordered chain of layout parsers and the
first one that succeeds wins. New layouts are added with
:func:`register_date_parser`.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from rsswatch.exceptions import DateFormatError

DateParser = Callable[[str], datetime]

_STAMP_LAYOUT = "%a, %d %b %Y %H:%M:%S"

# RFC 822 section 5.1 zone names, in hours east of UTC.
_ZONE_OFFSETS = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}


def parse_zone_abbreviation(value: str) -> datetime:
    """Parse ``Mon, 02 Jan 2006 15:04:05 MST``.

    Unknown abbreviations are read as a zero offset.
    """
    stamp, sep, zone = value.rpartition(" ")
    if not sep or not zone.isalpha():
        raise ValueError(f"no zone abbreviation in {value!r}")

    offset = timedelta(hours=_ZONE_OFFSETS.get(zone.upper(), 0))
    parsed = datetime.strptime(stamp, _STAMP_LAYOUT)
    return parsed.replace(tzinfo=timezone(offset))


def parse_numeric_offset(value: str) -> datetime:
    """Parse ``Mon, 02 Jan 2006 15:04:05 -0700``."""
    return datetime.strptime(value, f"{_STAMP_LAYOUT} %z")


DATE_PARSERS: list[DateParser] = [
    parse_zone_abbreviation,
    parse_numeric_offset,
]


def register_date_parser(parser: DateParser) -> None:
    """Append a parser to the end of the chain.

    A parser takes the stripped date text and returns an aware datetime,
    raising ``ValueError`` when the text is not in its layout.
    """
    DATE_PARSERS.append(parser)


def parse_date(value: str) -> datetime:
    """Parse a feed timestamp into an aware UTC datetime.

    Args:
        value: Literal date text from the document.

    Returns:
        The instant in UTC.

    Raises:
        DateFormatError: When no parser in the chain accepts the text.
    """
    text = value.strip()
    for parser in DATE_PARSERS:
        try:
            parsed = parser(text)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise DateFormatError(value)
