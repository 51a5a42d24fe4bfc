"""SourceForge RSS Feed support.

SourceForge lists every uploaded file as its own item, so the version is
taken from the file path in the title. Downloads come from the
``media:content`` element.
"""

import xml.etree.ElementTree as ET

from appcast.core.errors import MalformedVersionError, NoVersionFoundError, ReleaseError
from appcast.core.extract import extract_semantic_versions
from appcast.core.xmltree import child_text, int_attribute, parse_document
from appcast.models.feed import Feed
from appcast.models.release import Download, Release
from appcast.providers.base import (
    create_releases,
    find_channel,
    parse_published_datetime,
    read_channel,
)


def _extract_version(title: str, description: str) -> str:
    for text in (title, description):
        try:
            return extract_semantic_versions(text)[0]
        except NoVersionFoundError:
            continue
    return ""


def create_release(index: int, item: ET.Element) -> Release:
    title = child_text(item, "title")
    description = child_text(item, "description")

    version = _extract_version(title, description)
    if not version:
        raise ReleaseError(index, "no version")

    try:
        release = Release(version, title=title, description=description)
    except MalformedVersionError as e:
        raise ReleaseError(index, str(e)) from None

    release.published_datetime = parse_published_datetime(child_text(item, "pubDate"), index)

    content = item.find("content")
    if content is not None:
        release.add_download(
            Download(
                url=content.get("url", ""),
                filetype=content.get("type", ""),
                length=int_attribute(content, "filesize"),
            )
        )

    return release


def unmarshal(content: bytes) -> Feed:
    """Unmarshal a SourceForge RSS Feed into releases and channel metadata."""
    root = parse_document(content)

    channel_element = find_channel(root)
    releases = create_releases(channel_element.findall("item"), create_release)

    return Feed(releases=releases, channel=read_channel(channel_element))
