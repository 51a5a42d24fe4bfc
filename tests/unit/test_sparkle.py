"""Tests for the Sparkle RSS Feed unmarshaller."""

from datetime import datetime, timezone

import pytest
from structlog.testing import capture_logs

from appcast.core.errors import FeedSyntaxError, NoSourceError, UnmarshalError
from appcast.models.releases import Sort
from appcast.providers import sparkle


def versions(releases):
    return [r.version_string for r in releases]


class TestUnmarshal:
    """Tests for sparkle.unmarshal."""

    def test_default(self, load_fixture):
        """Should read every item with its metadata and download."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "default.xml"))

        assert versions(feed.releases) == ["2.0.0", "1.1.0", "1.0.1", "1.0.0"]
        assert [r.build for r in feed.releases] == ["200", "110", "101", "100"]

        release = feed.releases.first()
        assert release.title == "Release 2.0.0"
        assert release.description == "Release 2.0.0 Description"
        assert release.release_notes_link == "https://example.com/changelogs/2.0.0.html"
        assert release.minimum_system_version == "10.10"
        assert release.published_datetime.time == datetime(2016, 5, 13, 10, 0, tzinfo=timezone.utc)
        assert str(release.published_datetime) == "Fri, 13 May 2016 12:00:00 +0200"

        assert len(release.downloads) == 1
        download = release.downloads[0]
        assert download.url == "https://example.com/app_2.0.0.dmg"
        assert download.filetype == "application/octet-stream"
        assert download.length == 100000
        assert download.dsa_signature == "MC0CFBfeCa1JyW30nbkBwainOzrN6EQuAh="

    def test_channel(self, load_fixture):
        """Should read the channel metadata."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "default.xml"))
        assert feed.channel.title == "App"
        assert feed.channel.link == "https://example.com/app/"
        assert feed.channel.description == "App Description"
        assert feed.channel.language == "en"

    def test_latest_release(self, load_fixture):
        """Should find the newest release after sorting."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "default_asc.xml"))
        feed.releases.sort_by_versions(Sort.DESC)

        latest = feed.releases.first()
        assert latest.version_string == "2.0.0"
        assert latest.downloads[0].filetype == "application/octet-stream"
        assert latest.downloads[0].length == 100000

    def test_prerelease(self, load_fixture):
        """Should flag prerelease versions."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "prerelease.xml"))
        first = feed.releases.first()
        assert first.version_string == "2.0.0-beta"
        assert first.is_prerelease
        assert first.downloads[0].url == "https://example.com/app_2.0.0_beta.dmg"

    def test_single(self, load_fixture):
        """Should read a feed with one item."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "single.xml"))
        assert versions(feed.releases) == ["2.0.0"]

    def test_no_releases(self, load_fixture):
        """Should return an empty collection for a feed without items."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "no_releases.xml"))
        assert len(feed.releases) == 0
        assert feed.channel.title == "App"

    def test_only_version(self, load_fixture):
        """Should use the build as the version when there is no short version."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "only_version.xml"))
        assert versions(feed.releases) == ["2.0.0", "1.1.0", "1.0.1", "1.0.0"]
        assert feed.releases.first().build == "2.0.0"

    def test_attributes_as_elements(self, load_fixture):
        """Should read versions written as elements instead of attributes."""
        feed = sparkle.unmarshal(load_fixture("sparkle", "attributes_as_elements.xml"))
        assert versions(feed.releases) == ["2.0.0", "1.1.0"]
        assert [r.build for r in feed.releases] == ["200", "110"]
        assert feed.releases.first().minimum_system_version == "10.10"

    @pytest.mark.parametrize("name", ["without_namespaces.xml", "incorrect_namespace.xml"])
    def test_sloppy_namespaces(self, load_fixture, name):
        """Should read feeds with missing or wrong namespace declarations."""
        feed = sparkle.unmarshal(load_fixture("sparkle", name))
        assert versions(feed.releases) == ["2.0.0", "1.1.0", "1.0.1", "1.0.0"]
        assert [r.build for r in feed.releases] == ["200", "110", "101", "100"]

    def test_invalid_pubdate(self, load_fixture):
        """Should keep the release with an empty date and log a warning."""
        with capture_logs() as logs:
            feed = sparkle.unmarshal(load_fixture("sparkle", "invalid_pubdate.xml"))

        release = feed.releases.filtered[1]
        assert release.version_string == "1.1.0"
        assert not release.published_datetime
        assert str(release.published_datetime) == ""
        assert feed.releases.filtered[0].published_datetime

        assert logs == [
            {
                "event": "published_datetime_unparsed",
                "log_level": "warning",
                "release": 2,
                "value": "invalid",
            }
        ]

    def test_invalid_version(self, load_fixture):
        """Should reject the whole feed naming the bad item."""
        with pytest.raises(UnmarshalError) as exc_info:
            sparkle.unmarshal(load_fixture("sparkle", "invalid_version.xml"))

        errors = exc_info.value.errors
        assert [str(e) for e in errors] == ["release #2 (malformed version: invalid)"]
        assert errors[0].index == 2

    def test_commented_out_items(self, load_fixture):
        """Should report items whose enclosure is commented out."""
        with pytest.raises(UnmarshalError) as exc_info:
            sparkle.unmarshal(load_fixture("sparkle", "with_comments.xml"))

        assert str(exc_info.value) == "release #1 (no version)\nrelease #2 (no version)"

    def test_invalid_tag(self, load_fixture):
        """Should raise FeedSyntaxError for malformed markup."""
        with pytest.raises(FeedSyntaxError) as exc_info:
            sparkle.unmarshal(load_fixture("sparkle", "invalid_tag.xml"))

        assert str(exc_info.value) == "XML syntax error on line 14: mismatched tag"
        assert exc_info.value.line == 14

    def test_custom_prerelease_tags(self):
        """Should read prerelease tags that aren't alpha, beta or rc."""
        items = "".join(
            f'<item><title>Release {v}</title><enclosure url="https://example.com/app_{v}.dmg" '
            f'sparkle:version="{b}" sparkle:shortVersionString="{v}"/></item>'
            for v, b in [("1.0.0-SNAPSHOT", "101"), ("1.0.0-alpha.beta", "100"), ("1.0.0", "102")]
        )
        content = (
            '<rss xmlns:sparkle="http://www.andymatuschak.org/xml-namespaces/sparkle" version="2.0">'
            f"<channel><title>App</title>{items}</channel></rss>"
        ).encode("utf-8")

        feed = sparkle.unmarshal(content)
        assert [r.is_prerelease for r in feed.releases] == [True, True, False]

        feed.releases.sort_by_versions(Sort.ASC)
        assert versions(feed.releases) == ["1.0.0-SNAPSHOT", "1.0.0-alpha.beta", "1.0.0"]

    def test_empty_content(self):
        """Should raise NoSourceError for empty content."""
        with pytest.raises(NoSourceError):
            sparkle.unmarshal(b"")


class TestUncomment:
    """Tests for sparkle.uncomment."""

    def test_restores_commented_items(self, load_fixture):
        """Should bring back commented out enclosures."""
        content = sparkle.uncomment(load_fixture("sparkle", "with_comments.xml"))

        assert b"<!--" not in content
        assert b"-->" not in content

        feed = sparkle.unmarshal(content)
        assert versions(feed.releases) == ["2.0.0", "1.1.0"]
        assert feed.releases.first().downloads[0].url == "https://example.com/app_2.0.0.dmg"

    def test_without_comments(self, load_fixture):
        """Should leave feeds without comments unchanged."""
        content = load_fixture("sparkle", "default.xml")
        assert sparkle.uncomment(content) == content

    def test_empty_content(self):
        """Should raise NoSourceError for empty content."""
        with pytest.raises(NoSourceError):
            sparkle.uncomment(b"")
