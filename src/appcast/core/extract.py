"""Version and date extraction from loosely formatted feed text."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from appcast.core.errors import DateTimeParseError, NoVersionFoundError


SEMANTIC_VERSION_RE = re.compile(
    r"([0-9]+\.[0-9]+\.[0-9]+(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?)"
    r"(?:\+[0-9A-Za-z.-]+)?"
)

ORDINAL_SUFFIX_RE = re.compile(r"(\d+)(st|nd|rd|th)")
TRAILING_UT_RE = re.compile(r"UT$")
ZONE_NAME_RE = re.compile(r"^[A-Z]{3,5}$")


@dataclass(frozen=True)
class DateTimeFormat:
    """A supported published date layout.

    ``pattern`` is the strptime/strftime pattern without the zone. Formats
    with ``named_zone`` end with a zone abbreviation such as ``UTC`` or
    ``PST``; the rest carry a numeric offset.
    """

    name: str
    pattern: str
    named_zone: bool = False

    def parse(self, text: str) -> datetime:
        if self.name == "RFC3339":
            return _parse_rfc3339(text)

        if not self.named_zone:
            return datetime.strptime(text, self.pattern)

        rest, _, zone = text.rpartition(" ")
        if not ZONE_NAME_RE.match(zone):
            raise ValueError(f"unknown time zone: {zone!r}")
        parsed = datetime.strptime(rest, self.pattern)
        if zone in ("UTC", "GMT"):
            tz = timezone.utc if zone == "UTC" else timezone(timedelta(0), "GMT")
        else:
            # Abbreviations carry no offset information; keep the name at UTC.
            tz = timezone(timedelta(0), zone)
        return parsed.replace(tzinfo=tz)

    def render(self, value: datetime) -> str:
        if self.name == "RFC3339":
            text = value.isoformat()
            if value.utcoffset() == timedelta(0):
                text = text.replace("+00:00", "Z")
            return text

        text = value.strftime(self.pattern)
        if self.named_zone:
            text = f"{text} {value.tzname() or 'UTC'}"
        return text


RFC1123Z = DateTimeFormat("RFC1123Z", "%a, %d %b %Y %H:%M:%S %z")
RFC1123 = DateTimeFormat("RFC1123", "%a, %d %b %Y %H:%M:%S", named_zone=True)
RFC3339 = DateTimeFormat("RFC3339", "%Y-%m-%dT%H:%M:%S%z")
LONG_FORM = DateTimeFormat("LongForm", "%A, %B %d, %Y %H:%M:%S", named_zone=True)

# Order matters: the first format that parses wins.
DATETIME_FORMATS = (RFC1123Z, RFC1123, RFC3339, LONG_FORM)


def _parse_rfc3339(text: str) -> datetime:
    if "T" not in text:
        raise ValueError("missing time separator")
    value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if value.tzinfo is None:
        raise ValueError("missing time zone offset")
    return value


def extract_semantic_versions(text: str) -> list[str]:
    """Extract every MAJOR.MINOR.PATCH[-PRERELEASE] version from text.

    Build metadata (``+...``) is matched but not included in the result.

    Raises NoVersionFoundError if the text contains no version.
    """
    versions = [match.group(1) for match in SEMANTIC_VERSION_RE.finditer(text)]
    if not versions:
        raise NoVersionFoundError()
    return versions


def normalize_datetime(text: str) -> str:
    """Fix up the irregularities real feeds put into their dates."""
    text = ORDINAL_SUFFIX_RE.sub(r"\1", text.strip())
    return TRAILING_UT_RE.sub("UTC", text)


def parse_datetime(text: str) -> tuple[datetime, DateTimeFormat]:
    """Parse a published date against DATETIME_FORMATS.

    Returns the parsed datetime and the format it matched.
    """
    text = normalize_datetime(text)
    for fmt in DATETIME_FORMATS:
        try:
            return fmt.parse(text), fmt
        except ValueError:
            continue

    raise DateTimeParseError()
