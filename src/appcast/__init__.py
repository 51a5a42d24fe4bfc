"""Appcast - normalize software update feeds into sortable, filterable releases."""

__version__ = "0.1.0"

from appcast.core.appcast import Appcast
from appcast.core.checksum import Checksum, ChecksumAlgorithm
from appcast.core.errors import (
    AppcastError,
    ConfigError,
    FeedSyntaxError,
    NoSourceError,
    ReleaseError,
    UnmarshalError,
)
from appcast.core.provider import Provider
from appcast.core.source import LocalSource, RemoteSource, Source
from appcast.models import Channel, Download, Feed, Release, Releases, Sort

__all__ = [
    "Appcast",
    "AppcastError",
    "Channel",
    "Checksum",
    "ChecksumAlgorithm",
    "ConfigError",
    "Download",
    "Feed",
    "FeedSyntaxError",
    "LocalSource",
    "NoSourceError",
    "Provider",
    "Release",
    "ReleaseError",
    "Releases",
    "RemoteSource",
    "Sort",
    "Source",
    "UnmarshalError",
]
