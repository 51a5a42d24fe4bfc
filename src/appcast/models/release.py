"""Release data models shared by every appcast provider."""

from dataclasses import dataclass, field
from datetime import datetime

from semver import Version

from appcast.core.errors import MalformedVersionError
from appcast.core.extract import DateTimeFormat, parse_datetime


@dataclass
class Download:
    """Represents a single release download."""

    url: str
    filetype: str = ""
    length: int = 0
    dsa_signature: str = ""
    md5: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML/JSON serialization."""
        data = {"url": self.url, "filetype": self.filetype, "length": self.length}
        if self.dsa_signature:
            data["dsa_signature"] = self.dsa_signature
        if self.md5:
            data["md5"] = self.md5
        return data


@dataclass
class PublishedDateTime:
    """A release published date alongside the format it was written in.

    Both fields stay None when the feed date could not be parsed.
    """

    time: datetime | None = None
    format: DateTimeFormat | None = None

    @classmethod
    def parse(cls, text: str) -> "PublishedDateTime":
        """Parse a feed date. Raises DateTimeParseError if nothing matches."""
        time, fmt = parse_datetime(text)
        return cls(time=time, format=fmt)

    def __bool__(self) -> bool:
        return self.time is not None

    def __str__(self) -> str:
        if self.time is None:
            return ""
        if self.format is not None:
            return self.format.render(self.time)
        return self.time.isoformat()


def parse_version(value: str) -> Version:
    """Parse a release version string as a semantic version.

    Loose ``MAJOR`` and ``MAJOR.MINOR`` strings are read as full triples
    (``1.2`` is ``1.2.0``). Raises MalformedVersionError for anything that
    isn't a version.
    """
    try:
        return Version.parse(value, optional_minor_and_patch=True)
    except ValueError:
        raise MalformedVersionError(value) from None


@dataclass(eq=False)
class Release:
    """Represents a single application release.

    ``version_string`` is kept as written in the feed (``2.0.0-beta``), while
    ``version`` holds the parsed value used for ordering. Releases compare by
    identity so a filtered view is always a subset of the original one.
    """

    version_string: str
    build: str = ""
    title: str = ""
    description: str = ""
    published_datetime: PublishedDateTime = field(default_factory=PublishedDateTime)
    release_notes_link: str = ""
    minimum_system_version: str = ""
    downloads: list[Download] = field(default_factory=list)
    version: Version = field(init=False, repr=False)

    def __post_init__(self):
        self.set_version_string(self.version_string)

    def set_version_string(self, value: str) -> None:
        """Replace the version. Raises MalformedVersionError if invalid."""
        value = value.strip()
        self.version = parse_version(value)
        self.version_string = value

    def version_or_build_string(self) -> str:
        """Get the version string, or the build when there is no version."""
        return self.version_string or self.build

    @property
    def is_prerelease(self) -> bool:
        """Whether the version carries a prerelease component."""
        return self.version.prerelease is not None

    def add_download(self, download: Download) -> None:
        self.downloads.append(download)

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML/JSON serialization."""
        return {
            "version": self.version_string,
            "build": self.build,
            "title": self.title,
            "description": self.description,
            "published": str(self.published_datetime),
            "release_notes_link": self.release_notes_link,
            "minimum_system_version": self.minimum_system_version,
            "prerelease": self.is_prerelease,
            "downloads": [d.to_dict() for d in self.downloads],
        }
