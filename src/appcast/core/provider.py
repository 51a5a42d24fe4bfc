"""Guessing which appcast provider generated a feed."""

import re
from enum import Enum


class Provider(Enum):
    """Supported appcast providers."""

    UNKNOWN = "-"
    SPARKLE = "Sparkle RSS Feed"
    SOURCEFORGE = "SourceForge RSS Feed"
    GITHUB = "GitHub Atom Feed"

    def __str__(self) -> str:
        return self.value


# Sparkle must be checked first: the bare <enclosure> fallback is broad.
CONTENT_PATTERNS = [
    (Provider.SPARKLE, re.compile(r"(<rss.*xmlns:sparkle)|(<rss.*<enclosure)", re.DOTALL)),
    (Provider.SOURCEFORGE, re.compile(r"(<rss.*xmlns:sf)|(<channel.*xmlns:sf)", re.DOTALL)),
    (Provider.GITHUB, re.compile(r"<feed.*<id>tag:github\.com", re.DOTALL)),
]

URL_PATTERNS = [
    (Provider.SOURCEFORGE, re.compile(r".*sourceforge\.net/projects/.*/rss")),
    (Provider.GITHUB, re.compile(r".*github\.com/(?P<user>.*?)/(?P<repo>.*?)/releases\.atom")),
]


def guess_provider_from_content(content: bytes | str) -> Provider:
    """Guess the provider by sniffing the feed markup.

    Returns Provider.UNKNOWN when nothing matches.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    for provider, pattern in CONTENT_PATTERNS:
        if pattern.search(content):
            return provider

    return Provider.UNKNOWN


def guess_provider_from_url(url: str) -> Provider:
    """Guess the provider from well-known feed URL shapes.

    Only web-service specific appcasts can be recognized this way.
    """
    for provider, pattern in URL_PATTERNS:
        if pattern.match(url):
            return provider

    return Provider.UNKNOWN


def guess_provider(content: bytes | str, url: str | None = None) -> Provider:
    """Try the URL first and fall back to the content."""
    provider = Provider.UNKNOWN
    if url:
        provider = guess_provider_from_url(url)
    if provider is Provider.UNKNOWN:
        provider = guess_provider_from_content(content)
    return provider
