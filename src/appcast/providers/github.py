"""GitHub Atom Feed support.

Entries look like::

    <entry>
      <id>tag:github.com,2008:Repository/12345/v2.0.0</id>
      <updated>2016-05-13T12:00:00+02:00</updated>
      <title>2.0.0</title>
      <content type="html">...</content>
    </entry>

The version is the last segment of the id. There are no downloads and no
channel metadata.
"""

import re
import xml.etree.ElementTree as ET

from appcast.core.errors import MalformedVersionError, ReleaseError
from appcast.core.xmltree import child_text, parse_document
from appcast.models.feed import Feed
from appcast.models.release import Release
from appcast.providers.base import create_releases, parse_published_datetime


ID_VERSION_RE = re.compile(r"/.*/(.*)$")


def version_from_id(entry_id: str) -> str:
    """Get the version from an entry id, without a leading "v".

    Returns "" when the id doesn't end with a /.../<version> segment.
    """
    match = ID_VERSION_RE.search(entry_id)
    if match is None:
        return ""
    version = match.group(1)
    if version.startswith("v"):
        version = version[1:]
    return version


def create_release(index: int, entry: ET.Element) -> Release:
    version = version_from_id(child_text(entry, "id"))
    if not version:
        raise ReleaseError(index, "no version in id")

    try:
        release = Release(version)
    except MalformedVersionError as e:
        raise ReleaseError(index, str(e)) from None

    release.title = child_text(entry, "title")
    release.description = child_text(entry, "content")
    release.published_datetime = parse_published_datetime(child_text(entry, "updated"), index)

    return release


def unmarshal(content: bytes) -> Feed:
    """Unmarshal a GitHub Atom Feed into releases."""
    root = parse_document(content)
    releases = create_releases(root.findall("entry"), create_release)
    return Feed(releases=releases)
