"""Checksums of appcast content."""

import hashlib
import re
from enum import Enum


PUBDATE_RE = re.compile(rb"<pubDate>[^<]*</pubDate>")


class ChecksumAlgorithm(Enum):
    """Supported checksum algorithms."""

    SHA256 = "SHA256"
    MD5 = "MD5"
    # Homebrew-Cask hashes Sparkle feeds without their <pubDate> elements.
    SHA256_HOMEBREW_CASK = "SHA256 (Homebrew-Cask)"

    def __str__(self) -> str:
        return self.value


def strip_pubdates(content: bytes) -> bytes:
    """Remove every <pubDate>...</pubDate> element."""
    return PUBDATE_RE.sub(b"", content)


def calculate_digest(algorithm: ChecksumAlgorithm, content: bytes) -> bytes:
    """Calculate the raw digest of content."""
    if algorithm is ChecksumAlgorithm.SHA256:
        return hashlib.sha256(content).digest()
    if algorithm is ChecksumAlgorithm.SHA256_HOMEBREW_CASK:
        return hashlib.sha256(strip_pubdates(content)).digest()
    if algorithm is ChecksumAlgorithm.MD5:
        return hashlib.md5(content).digest()
    raise ValueError(f"Unsupported checksum algorithm: {algorithm}")


class Checksum:
    """A checksum generated from some source bytes."""

    def __init__(self, algorithm: ChecksumAlgorithm, source: bytes):
        self.algorithm = algorithm
        self.source = source
        self.result = calculate_digest(algorithm, source)

    def __str__(self) -> str:
        return self.result.hex()

    def __repr__(self) -> str:
        return f"Checksum({self.algorithm.name}, {self})"

    def matches(self, expected: str) -> bool:
        """Compare against a hex digest, ignoring case."""
        return str(self) == expected.strip().lower()
