"""Sparkle RSS Feed support.

Sparkle appcasts keep the version in the ``<enclosure>`` attributes
(``sparkle:shortVersionString`` and ``sparkle:version``) or, in newer feeds,
in sibling elements of the same names. ``shortVersionString`` is the
user-facing version and ``version`` is the build.
"""

import re
import xml.etree.ElementTree as ET

from appcast.core.errors import MalformedVersionError, NoSourceError, ReleaseError
from appcast.core.xmltree import child_text, int_attribute, parse_document
from appcast.models.feed import Feed
from appcast.models.release import Download, Release
from appcast.providers.base import (
    create_releases,
    find_channel,
    parse_published_datetime,
    read_channel,
)


COMMENT_MARKERS_RE = re.compile(rb"(<!--\s*)|(\s*-->)")


def uncomment(content: bytes) -> bytes:
    """Remove XML comment markers but keep what they wrap.

    Some feed generators comment out older items; this brings them back
    before parsing.
    """
    if not content:
        raise NoSourceError()
    return COMMENT_MARKERS_RE.sub(b"", content)


def _resolve(enclosure: ET.Element | None, item: ET.Element, name: str) -> str:
    """Prefer the enclosure attribute, fall back to the sibling element."""
    value = enclosure.get(name, "").strip() if enclosure is not None else ""
    if not value:
        value = child_text(item, name)
    return value


def create_release(index: int, item: ET.Element) -> Release:
    enclosure = item.find("enclosure")

    version = _resolve(enclosure, item, "shortVersionString")
    build = _resolve(enclosure, item, "version")

    if not version and not build:
        raise ReleaseError(index, "no version")
    if not version:
        version = build

    try:
        release = Release(version, build=build)
    except MalformedVersionError as e:
        raise ReleaseError(index, str(e)) from None

    release.title = child_text(item, "title")
    release.description = child_text(item, "description")
    release.release_notes_link = child_text(item, "releaseNotesLink")
    release.minimum_system_version = child_text(item, "minimumSystemVersion")
    release.published_datetime = parse_published_datetime(child_text(item, "pubDate"), index)

    if enclosure is not None:
        release.add_download(
            Download(
                url=enclosure.get("url", ""),
                filetype=enclosure.get("type", ""),
                length=int_attribute(enclosure, "length"),
                dsa_signature=enclosure.get("dsaSignature", ""),
                md5=enclosure.get("md5Sum", ""),
            )
        )

    return release


def unmarshal(content: bytes) -> Feed:
    """Unmarshal a Sparkle RSS Feed into releases and channel metadata."""
    root = parse_document(content)

    channel_element = find_channel(root)
    releases = create_releases(channel_element.findall("item"), create_release)

    return Feed(releases=releases, channel=read_channel(channel_element))
