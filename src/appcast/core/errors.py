"""Exceptions raised while loading and unmarshalling appcasts."""


class AppcastError(Exception):
    """Base class for all appcast errors."""

    pass


class NoSourceError(AppcastError):
    """There is no source content to work with."""

    def __init__(self, message: str = "no source"):
        super().__init__(message)


class FeedSyntaxError(AppcastError):
    """The feed is not well-formed XML."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


class MalformedVersionError(AppcastError):
    """A version string could not be parsed."""

    def __init__(self, value: str):
        super().__init__(f"malformed version: {value}")
        self.value = value


class NoVersionFoundError(AppcastError):
    """No semantic version was found in a piece of text."""

    def __init__(self, message: str = "no semantic versions found"):
        super().__init__(message)


class DateTimeParseError(AppcastError):
    """A published date did not match any supported format."""

    def __init__(self, message: str = "parsing of the published datetime failed"):
        super().__init__(message)


class ReleaseError(AppcastError):
    """A single feed item could not be turned into a release.

    The index is 1-based, matching the item position in the feed.
    """

    def __init__(self, index: int, reason: str):
        super().__init__(f"release #{index} ({reason})")
        self.index = index
        self.reason = reason


class UnmarshalError(AppcastError):
    """One or more feed items failed, so no releases are returned."""

    def __init__(self, errors: list[AppcastError]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


class UnsupportedProviderError(AppcastError):
    """The operation is not available for the given provider."""

    pass


class FetchError(AppcastError):
    """Error while fetching remote appcast content."""

    pass


class ConfigError(AppcastError):
    """An APPCAST_* environment variable holds an unusable value."""

    pass
