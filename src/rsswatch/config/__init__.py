"""Config package."""

from rsswatch.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
