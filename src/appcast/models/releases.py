"""Filterable and sortable collection of releases."""

import re
from enum import Enum
from typing import Callable, Iterator

from appcast.models.release import Download, Release


class Sort(Enum):
    """Sorting direction for Releases.sort_by_versions."""

    ASC = "asc"
    DESC = "desc"


class Releases:
    """Holds both the original releases and the currently filtered view.

    Filters narrow the current view, so consecutive filters compose. Use
    reset_filters() to get back to every release the feed contained.
    """

    def __init__(self, releases: list[Release] | None = None):
        self._original: list[Release] = list(releases or [])
        self._filtered: list[Release] = self._original

    def __len__(self) -> int:
        return len(self._filtered)

    def __iter__(self) -> Iterator[Release]:
        return iter(self._filtered)

    def __repr__(self) -> str:
        return f"Releases(filtered={len(self._filtered)}, original={len(self._original)})"

    @property
    def filtered(self) -> list[Release]:
        return self._filtered

    @filtered.setter
    def filtered(self, releases: list[Release]) -> None:
        self._filtered = releases

    @property
    def original(self) -> list[Release]:
        return self._original

    def len(self) -> int:
        return len(self._filtered)

    def first(self) -> Release:
        """Get the first release of the filtered view.

        Raises IndexError when the view is empty.
        """
        if not self._filtered:
            raise IndexError("no releases left after filtering")
        return self._filtered[0]

    def sort_by_versions(self, direction: Sort = Sort.ASC) -> None:
        """Sort the filtered view by semantic version precedence.

        ASC is a stable sort and DESC is its exact reverse. Releases sharing a
        version (Sparkle items that differ only in build) therefore keep feed
        order in ASC and come out in reversed feed order in DESC.
        """
        ordered = sorted(self._filtered, key=lambda r: r.version)
        if direction is Sort.DESC:
            ordered.reverse()
        self._filtered = ordered

    def filter_by_title(self, pattern: str, inverse: bool = False) -> None:
        """Keep releases whose title matches the regular expression."""
        regex = re.compile(pattern)
        self._filter_by(lambda r: regex.search(r.title) is not None, inverse)

    def filter_by_media_type(self, pattern: str, inverse: bool = False) -> None:
        """Keep releases having a download whose filetype matches."""
        regex = re.compile(pattern)
        self._filter_downloads_by(lambda d: regex.search(d.filetype) is not None, inverse)

    def filter_by_url(self, pattern: str, inverse: bool = False) -> None:
        """Keep releases having a download whose URL matches."""
        regex = re.compile(pattern)
        self._filter_downloads_by(lambda d: regex.search(d.url) is not None, inverse)

    def filter_by_prerelease(self, inverse: bool = False) -> None:
        """Keep only prereleases, or only stable releases when inverse."""
        self._filter_by(lambda r: r.is_prerelease, inverse)

    def reset_filters(self) -> None:
        """Restore the filtered view to the original releases."""
        self._filtered = self._original

    def _filter_by(self, predicate: Callable[[Release], bool], inverse: bool) -> None:
        self._filtered = [r for r in self._filtered if predicate(r) != inverse]

    def _filter_downloads_by(
        self, predicate: Callable[[Download], bool], inverse: bool
    ) -> None:
        # A release stays if any of its downloads passes, so with several
        # downloads it can survive both a filter and its inverse.
        self._filter_by(
            lambda r: any(predicate(d) != inverse for d in r.downloads),
            inverse=False,
        )
