"""Notifiers package."""

from rsswatch.notifiers.base import Notifier
from rsswatch.notifiers.registry import NotifierRegistry

__all__ = [
    "Notifier",
    "NotifierRegistry",
]
