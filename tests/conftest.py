"""Pytest fixtures for test suite."""

import pytest
from datetime import date, datetime, timedelta, timezone

from temporal_engine.core.config import get_settings
from temporal_engine.bitemporal import BitemporalDatabase, BitemporalRecord, BitemporalTime
from temporal_engine.core.ontology import TimeInterval
from temporal_engine.timeline import Timeline, TimelineEntry


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def t0() -> datetime:
    """Reference transaction instant."""
    return datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def t1(t0: datetime) -> datetime:
    """A later transaction instant (one day after t0)."""
    return t0 + timedelta(days=1)


@pytest.fixture
def settings_env(monkeypatch):
    """Clear cached settings around tests that change the environment."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


# =============================================================================
# Timeline Fixtures
# =============================================================================


@pytest.fixture
def tax_law_timeline() -> Timeline:
    """Two contiguous versions of the tax law."""
    timeline = Timeline()
    timeline.add_entry(
        TimelineEntry(
            subject_id="tax-law",
            interval=TimeInterval(start=date(2020, 1, 1), end=date(2022, 12, 31)),
            version=1,
        )
    )
    timeline.add_entry(
        TimelineEntry(
            subject_id="tax-law",
            interval=TimeInterval(start=date(2023, 1, 1), end=date(2023, 12, 31)),
            version=2,
        )
    )
    return timeline


# =============================================================================
# Bitemporal Fixtures
# =============================================================================


@pytest.fixture
def tax_law_record(t0: datetime) -> BitemporalRecord:
    """Tax law v1, valid for 2025, recorded at t0."""
    return BitemporalRecord(
        subject_id="tax-law",
        version=1,
        time=BitemporalTime(
            valid_from=date(2025, 1, 1),
            valid_to=date(2025, 12, 31),
            transaction_time=t0,
        ),
    ).with_data("rate", "20%")


@pytest.fixture
def db(tax_law_record: BitemporalRecord) -> BitemporalDatabase:
    """Database holding the tax law record."""
    database = BitemporalDatabase()
    database.insert(tax_law_record)
    return database
