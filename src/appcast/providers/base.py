"""Helpers shared by the provider unmarshallers."""

import xml.etree.ElementTree as ET
from typing import Callable

import structlog

from appcast.core.errors import DateTimeParseError, ReleaseError, UnmarshalError
from appcast.core.xmltree import child_text
from appcast.models.feed import Channel
from appcast.models.release import PublishedDateTime, Release
from appcast.models.releases import Releases

logger = structlog.get_logger()


def create_releases(
    items: list[ET.Element],
    create_release: Callable[[int, ET.Element], Release],
) -> Releases:
    """Build releases from feed items.

    create_release receives the 1-based item index and raises ReleaseError
    for items that can't become a release. Every item is tried; if any
    failed, UnmarshalError carries all failures and no releases are returned.
    """
    releases = []
    errors = []

    for index, item in enumerate(items, start=1):
        try:
            releases.append(create_release(index, item))
        except ReleaseError as e:
            errors.append(e)

    if errors:
        logger.warning("releases_rejected", failed=len(errors), total=len(items))
        raise UnmarshalError(errors)

    return Releases(releases)


def parse_published_datetime(text: str, index: int) -> PublishedDateTime:
    """Parse an item date, falling back to an empty value."""
    if not text:
        return PublishedDateTime()
    try:
        return PublishedDateTime.parse(text)
    except DateTimeParseError:
        logger.warning("published_datetime_unparsed", release=index, value=text)
        return PublishedDateTime()


def find_channel(root: ET.Element) -> ET.Element:
    """Get the RSS <channel>, or an empty one when the feed has none."""
    channel = root.find("channel")
    if channel is None:
        channel = ET.Element("channel")
    return channel


def read_channel(channel: ET.Element) -> Channel:
    """Read RSS channel metadata."""
    return Channel(
        title=child_text(channel, "title"),
        link=child_text(channel, "link"),
        description=child_text(channel, "description"),
        language=child_text(channel, "language"),
    )
