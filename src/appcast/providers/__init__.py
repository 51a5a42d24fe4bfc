"""Provider-specific unmarshallers and the table dispatching to them."""

from typing import Callable

import structlog

from appcast.core.errors import UnsupportedProviderError
from appcast.core.provider import Provider
from appcast.models.feed import Feed
from appcast.providers import github, sourceforge, sparkle

logger = structlog.get_logger()


UNMARSHALLERS: dict[Provider, Callable[[bytes], Feed]] = {
    Provider.SPARKLE: sparkle.unmarshal,
    Provider.SOURCEFORGE: sourceforge.unmarshal,
    Provider.GITHUB: github.unmarshal,
}


def unmarshal(provider: Provider, content: bytes) -> Feed:
    """Unmarshal content with the unmarshaller registered for provider.

    Raises UnsupportedProviderError for Provider.UNKNOWN.
    """
    unmarshaller = UNMARSHALLERS.get(provider)
    if unmarshaller is None:
        raise UnsupportedProviderError(f"Unsupported provider: {provider}")

    feed = unmarshaller(content)
    logger.debug("appcast_unmarshalled", provider=str(provider), releases=len(feed.releases))
    return feed
