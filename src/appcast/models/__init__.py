"""Data models for appcast."""

from appcast.models.feed import Channel, Feed
from appcast.models.release import Download, PublishedDateTime, Release
from appcast.models.releases import Releases, Sort

__all__ = [
    "Channel",
    "Download",
    "Feed",
    "PublishedDateTime",
    "Release",
    "Releases",
    "Sort",
]
