"""Permissive XML reading shared by the feed unmarshallers.

Feeds in the wild declare namespaces inconsistently: prefixes are used
without a matching ``xmlns:`` declaration, or bound to the wrong URI. The
document is therefore parsed without namespace processing and every element
and attribute is stored under its local name. Malformed markup is still
rejected.
"""

import xml.etree.ElementTree as ET
from xml.parsers import expat

from appcast.core.errors import FeedSyntaxError, NoSourceError


def local_name(name: str) -> str:
    """Drop the namespace prefix from a qualified name."""
    return name.rpartition(":")[2]


def _local_attributes(attributes: dict[str, str]) -> dict[str, str]:
    result = {}
    for name, value in attributes.items():
        if name == "xmlns" or name.startswith("xmlns:"):
            continue
        # Unprefixed attributes win over prefixed ones with the same local name.
        key = local_name(name)
        if key in result and ":" in name:
            continue
        result[key] = value
    return result


def parse_document(content: bytes) -> ET.Element:
    """Parse content into an element tree keyed by local names.

    Raises NoSourceError for empty content and FeedSyntaxError when the
    markup isn't well-formed.
    """
    if not content:
        raise NoSourceError()

    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = lambda tag, attrs: builder.start(
        local_name(tag), _local_attributes(attrs)
    )
    parser.EndElementHandler = lambda tag: builder.end(local_name(tag))
    parser.CharacterDataHandler = builder.data

    try:
        parser.Parse(content, True)
    except expat.ExpatError as e:
        raise FeedSyntaxError(
            f"XML syntax error on line {e.lineno}: {expat.ErrorString(e.code)}",
            line=e.lineno,
            column=e.offset,
        ) from e

    return builder.close()


def element_text(element: ET.Element | None) -> str:
    """Get all text inside element, stripped. Missing elements give ""."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def child_text(element: ET.Element, name: str) -> str:
    """Get the text of the first non-empty child called name.

    Local names can collide (``<atom:link/>`` next to ``<link>``), so empty
    matches are skipped.
    """
    for child in element.findall(name):
        text = element_text(child)
        if text:
            return text
    return ""


def int_attribute(element: ET.Element | None, name: str) -> int:
    """Read a numeric attribute, treating missing or junk values as 0."""
    if element is None:
        return 0
    try:
        return int(element.get(name, "0").strip())
    except ValueError:
        return 0
