"""Unmarshalled feed data models."""

from dataclasses import dataclass

from appcast.models.releases import Releases


@dataclass
class Channel:
    """RSS channel metadata."""

    title: str = ""
    link: str = ""
    description: str = ""
    language: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "language": self.language,
        }


@dataclass
class Feed:
    """Result of unmarshalling one appcast document.

    ``channel`` is None for providers without channel metadata.
    """

    releases: Releases
    channel: Channel | None = None
