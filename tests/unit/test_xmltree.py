"""Tests for permissive XML reading."""

import pytest

from appcast.core.errors import FeedSyntaxError, NoSourceError
from appcast.core.xmltree import (
    child_text,
    element_text,
    int_attribute,
    local_name,
    parse_document,
)


class TestParseDocument:
    """Tests for parse_document."""

    def test_local_names(self):
        """Should store prefixed elements and attributes by local name."""
        root = parse_document(
            b'<rss xmlns:sparkle="http://example.com/ns"><item>'
            b'<enclosure sparkle:version="200"/><sparkle:releaseNotesLink>x</sparkle:releaseNotesLink>'
            b"</item></rss>"
        )
        item = root.find("item")
        assert item.find("enclosure").get("version") == "200"
        assert child_text(item, "releaseNotesLink") == "x"

    def test_undeclared_prefix(self):
        """Should accept prefixes without a namespace declaration."""
        root = parse_document(b'<rss><enclosure sparkle:version="1"/></rss>')
        assert root.find("enclosure").get("version") == "1"

    def test_namespace_declarations_dropped(self):
        """Should not keep xmlns attributes."""
        root = parse_document(b'<feed xmlns="http://www.w3.org/2005/Atom" xmlns:media="m"/>')
        assert root.tag == "feed"
        assert root.attrib == {}

    def test_unprefixed_attribute_wins(self):
        """Should prefer an unprefixed attribute over a prefixed one."""
        root = parse_document(b'<e sparkle:type="prefixed" type="plain"/>')
        assert root.get("type") == "plain"
        root = parse_document(b'<e type="plain" sparkle:type="prefixed"/>')
        assert root.get("type") == "plain"

    def test_empty_content(self):
        """Should raise NoSourceError for empty content."""
        with pytest.raises(NoSourceError):
            parse_document(b"")

    def test_syntax_error(self):
        """Should report the line of malformed markup."""
        with pytest.raises(FeedSyntaxError) as exc_info:
            parse_document(b"<rss>\n<channel>\n<item>\n</channel>\n</rss>")
        assert exc_info.value.line == 4
        assert str(exc_info.value) == "XML syntax error on line 4: mismatched tag"

    def test_cdata(self):
        """Should read CDATA sections as text."""
        root = parse_document(b"<item><title><![CDATA[/Example/2.0.0/Example.dmg]]></title></item>")
        assert child_text(root, "title") == "/Example/2.0.0/Example.dmg"


class TestHelpers:
    """Tests for the element helpers."""

    def test_local_name(self):
        """Should drop the prefix."""
        assert local_name("sparkle:version") == "version"
        assert local_name("title") == "title"

    def test_element_text(self):
        """Should join nested text and strip it."""
        root = parse_document(b"<a>  one <b>two</b> three  </a>")
        assert element_text(root) == "one two three"
        assert element_text(None) == ""

    def test_child_text_skips_empty(self):
        """Should skip empty children sharing a local name."""
        root = parse_document(
            b'<channel><atom:link href="x" rel="self"/><link>https://example.com</link></channel>'
        )
        assert child_text(root, "link") == "https://example.com"
        assert child_text(root, "missing") == ""

    @pytest.mark.parametrize(
        "markup,expected",
        [
            (b'<e length="100000"/>', 100000),
            (b'<e length=" 42 "/>', 42),
            (b'<e length="junk"/>', 0),
            (b"<e/>", 0),
        ],
    )
    def test_int_attribute(self, markup, expected):
        """Should read numbers and treat anything else as 0."""
        assert int_attribute(parse_document(markup), "length") == expected

    def test_int_attribute_missing_element(self):
        """Should return 0 for a missing element."""
        assert int_attribute(None, "length") == 0
