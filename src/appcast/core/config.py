"""Configuration for appcast loading."""

import os
from dataclasses import dataclass

from appcast.core.checksum import ChecksumAlgorithm
from appcast.core.errors import ConfigError


DEFAULT_USER_AGENT = "appcast/0.1 (+https://pypi.org/project/appcast/)"


@dataclass
class AppcastConfig:
    """Configuration for fetching and fingerprinting appcasts."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    checksum_algorithm: ChecksumAlgorithm = ChecksumAlgorithm.SHA256

    @classmethod
    def default(cls) -> "AppcastConfig":
        """Create config from APPCAST_* environment variables.

        APPCAST_CHECKSUM takes an algorithm name in either spelling
        (``SHA256_HOMEBREW_CASK`` or ``sha256-homebrew-cask``).

        Raises ConfigError for values that can't be used.
        """
        algorithm = os.environ.get("APPCAST_CHECKSUM", ChecksumAlgorithm.SHA256.name)
        try:
            checksum_algorithm = ChecksumAlgorithm[algorithm.strip().upper().replace("-", "_")]
        except KeyError:
            names = ", ".join(a.name for a in ChecksumAlgorithm)
            raise ConfigError(
                f"Invalid APPCAST_CHECKSUM: {algorithm!r} (expected one of {names})"
            ) from None

        timeout = os.environ.get("APPCAST_TIMEOUT", "30")
        try:
            timeout = float(timeout)
        except ValueError:
            raise ConfigError(f"Invalid APPCAST_TIMEOUT: {timeout!r}") from None

        return cls(
            timeout=timeout,
            user_agent=os.environ.get("APPCAST_USER_AGENT", DEFAULT_USER_AGENT),
            checksum_algorithm=checksum_algorithm,
        )


# Global config instance
_config: AppcastConfig | None = None


def get_config() -> AppcastConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppcastConfig.default()
    return _config


def set_config(config: AppcastConfig | None) -> None:
    """Set a custom configuration (useful for testing)."""
    global _config
    _config = config
