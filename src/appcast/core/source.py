"""Appcast sources: where the feed content comes from."""

from pathlib import Path
from typing import TYPE_CHECKING, Callable

import structlog

from appcast.core.checksum import Checksum, ChecksumAlgorithm
from appcast.core.config import get_config
from appcast.core.downloader import fetch_bytes
from appcast.core.provider import (
    Provider,
    guess_provider_from_content,
    guess_provider_from_url,
)

if TYPE_CHECKING:
    from appcast.core.appcast import Appcast

logger = structlog.get_logger()


class Source:
    """Raw appcast content together with its provider and checksum.

    Subclasses implement load(). ``appcast`` points back to the Appcast that
    unmarshalled this content, once unmarshalling has been attempted.
    """

    def __init__(self, content: bytes = b"", provider: Provider = Provider.UNKNOWN):
        self.content = content
        self.provider = provider
        self.checksum: Checksum | None = None
        self.appcast: "Appcast | None" = None

    def load(self) -> None:
        """Load content, guess the provider and generate the checksum."""
        raise NotImplementedError(f"{type(self).__name__} doesn't know how to load content")

    def generate_checksum(self, algorithm: ChecksumAlgorithm) -> Checksum:
        """Create a checksum of the content and keep it as self.checksum."""
        self.checksum = Checksum(algorithm, self.content)
        return self.checksum

    def guess_provider(self) -> Provider:
        self.provider = guess_provider_from_content(self.content)
        return self.provider

    def _loaded(self, content: bytes) -> None:
        self.content = content
        self.guess_provider()
        self.generate_checksum(get_config().checksum_algorithm)
        logger.debug(
            "source_loaded",
            source=repr(self),
            provider=str(self.provider),
            checksum=str(self.checksum),
        )


class LocalSource(Source):
    """An appcast stored in a local file."""

    def __init__(self, path: Path | str, reader: Callable[[Path], bytes] = Path.read_bytes):
        super().__init__()
        self.path = Path(path)
        self.reader = reader

    def __repr__(self) -> str:
        return f"LocalSource({str(self.path)!r})"

    def load(self) -> None:
        self._loaded(self.reader(self.path))


class RemoteSource(Source):
    """An appcast served from a URL.

    The provider is guessed from the URL first since well-known services can
    be recognized without looking at the content.
    """

    def __init__(self, url: str, fetcher: Callable[[str], bytes] = fetch_bytes):
        super().__init__()
        self.url = url
        self.fetcher = fetcher

    def __repr__(self) -> str:
        return f"RemoteSource({self.url!r})"

    def load(self) -> None:
        self._loaded(self.fetcher(self.url))

    def guess_provider(self) -> Provider:
        self.provider = guess_provider_from_url(self.url)
        if self.provider is Provider.UNKNOWN:
            self.provider = guess_provider_from_content(self.content)
        return self.provider


def source_for(location: str) -> Source:
    """Create a RemoteSource for http(s) URLs and a LocalSource otherwise."""
    if location.startswith(("http://", "https://")):
        return RemoteSource(location)
    return LocalSource(location)
