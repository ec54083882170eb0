"""Parsers package."""

from rsswatch.parsers.base import FeedParser
from rsswatch.parsers.dates import parse_date, register_date_parser
from rsswatch.parsers.rss_parser import RSSParser

__all__ = [
    "FeedParser",
    "RSSParser",
    "parse_date",
    "register_date_parser",
]
