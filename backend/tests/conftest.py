"""
Shared pytest fixtures for the ArbZeit backend tests.

The services are pure, so only the HTTP client needs setup; settings are
overridden per test via FastAPI's dependency_overrides.
"""
from datetime import date, datetime, time, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from arbzeit.core.config import Settings, get_settings
from arbzeit.main import app
from arbzeit.models.time_entry import ClockEvent, TimeEntryType

DAY = date(2025, 9, 1)  # Montag


# ── Settings + HTTP client ────────────────────────────────────────────────────

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        APP_ENV="testing",
        DEBUG=False,
        TIMEZONE="Europe/Berlin",
        DEFAULT_DAILY_TARGET_MINUTES=480,
        LOG_LEVEL="DEBUG",
    )


@pytest_asyncio.fixture
async def client(test_settings) -> AsyncClient:
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


# ── Helper ────────────────────────────────────────────────────────────────────

def at(hhmm: str, day: date = DAY) -> datetime:
    """'08:30' → UTC datetime on ``day``."""
    h, m = map(int, hhmm.split(":"))
    return datetime.combine(day, time(h, m), tzinfo=timezone.utc)


def make_events(*stamps: tuple[str, str], day: date = DAY) -> list[ClockEvent]:
    """make_events(("in", "08:00"), ("bs", "12:00"), ("be", "12:30"), ("out", "16:30"))"""
    kinds = {
        "in": TimeEntryType.CLOCK_IN,
        "out": TimeEntryType.CLOCK_OUT,
        "bs": TimeEntryType.BREAK_START,
        "be": TimeEntryType.BREAK_END,
    }
    return [ClockEvent(type=kinds[k], timestamp=at(t, day)) for k, t in stamps]


def events_payload(events: list[ClockEvent]) -> list[dict]:
    return [{"type": e.type.value, "timestamp": e.timestamp.isoformat()} for e in events]
