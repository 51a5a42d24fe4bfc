"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import structlog

from appcast.core.config import set_config
from appcast.models.release import Download, PublishedDateTime, Release
from appcast.models.releases import Releases

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_state():
    """Start every test from the default configuration and logging."""
    set_config(None)
    yield
    set_config(None)
    structlog.reset_defaults()


@pytest.fixture
def fixture_path():
    """Provide a helper resolving feed fixture paths."""
    def resolve(*parts: str) -> Path:
        return FIXTURES_DIR.joinpath(*parts)
    return resolve


@pytest.fixture
def load_fixture(fixture_path):
    """Provide a helper reading feed fixtures as bytes."""
    def load(*parts: str) -> bytes:
        return fixture_path(*parts).read_bytes()
    return load


@pytest.fixture
def sample_releases():
    """Provide releases 2.0.0-beta, 1.1.0, 1.0.1 and 1.0.0, newest first."""
    tz = timezone(timedelta(hours=2))

    def make(version: str, build: str, day: int) -> Release:
        return Release(
            version,
            build=build,
            title=f"Release {version}",
            description=f"Release {version} Description",
            published_datetime=PublishedDateTime(time=datetime(2016, 5, day, 12, 0, tzinfo=tz)),
            release_notes_link=f"https://example.com/changelogs/{version}.html",
            minimum_system_version="10.9",
            downloads=[
                Download(
                    f"https://example.com/app_{version}.dmg",
                    "application/octet-stream",
                    100000,
                )
            ],
        )

    return Releases([
        make("2.0.0-beta", "200", 13),
        make("1.1.0", "110", 12),
        make("1.0.1", "101", 11),
        make("1.0.0", "100", 10),
    ])
