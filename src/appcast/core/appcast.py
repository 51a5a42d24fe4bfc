"""The appcast: a source and the releases unmarshalled from it."""

import structlog

from appcast import providers
from appcast.core.checksum import Checksum, ChecksumAlgorithm
from appcast.core.errors import AppcastError, NoSourceError, UnsupportedProviderError
from appcast.core.provider import Provider
from appcast.core.source import Source, source_for
from appcast.models.feed import Channel
from appcast.models.release import Release
from appcast.models.releases import Releases
from appcast.providers import sparkle

logger = structlog.get_logger()


class Appcast:
    """Ties a Source to the releases and channel unmarshalled from it.

    Typical use::

        a = Appcast(RemoteSource("https://example.com/appcast.xml"))
        a.load_source()
        a.unmarshal()
        a.releases.sort_by_versions(Sort.DESC)
        latest = a.first_release()
    """

    def __init__(self, source: Source | None = None):
        self.source = source
        self.releases: Releases | None = None
        self.channel: Channel | None = None

    @classmethod
    def from_location(cls, location: str) -> "Appcast":
        """Create an appcast for a URL or file path and load its source."""
        appcast = cls(source_for(location))
        appcast.load_source()
        return appcast

    @property
    def provider(self) -> Provider:
        if self.source is None:
            return Provider.UNKNOWN
        return self.source.provider

    def load_source(self) -> None:
        """Load the source content."""
        if self.source is None:
            raise NoSourceError()
        self.source.load()

    def generate_source_checksum(self, algorithm: ChecksumAlgorithm) -> Checksum:
        if self.source is None:
            raise NoSourceError()
        return self.source.generate_checksum(algorithm)

    def uncomment(self) -> None:
        """Uncomment commented out items in the source content.

        Only Sparkle feeds are known to comment out releases.
        """
        if self.source is None or not self.source.content:
            raise NoSourceError()
        if self.source.provider is not Provider.SPARKLE:
            raise UnsupportedProviderError(
                f"Uncommenting is not supported for: {self.source.provider}"
            )
        self.source.content = sparkle.uncomment(self.source.content)

    def unmarshal(self) -> "Appcast":
        """Unmarshal the source content into releases (and channel).

        On failure the releases and channel stay None and the error is
        re-raised; an UnmarshalError lists every rejected item.
        """
        if self.source is None or not self.source.content:
            raise NoSourceError()

        if self.source.appcast is None:
            self.source.appcast = self

        self.releases = None
        self.channel = None

        try:
            feed = providers.unmarshal(self.source.provider, self.source.content)
        except AppcastError as e:
            logger.warning("unmarshal_failed", provider=str(self.source.provider), error=str(e))
            raise

        self.releases = feed.releases
        self.channel = feed.channel
        return self

    def first_release(self) -> Release:
        """Get the first release of the filtered view."""
        if self.releases is None:
            raise NoSourceError("appcast is not unmarshalled")
        return self.releases.first()
