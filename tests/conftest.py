import time

import pytest
import structlog

# Eastern European Time with its DST rules, spelled out so no tz database is needed.
KYIV_TZ = "EET-2EEST,M3.5.0/3,M10.5.0/4"


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any logging configuration a CLI invocation installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def kyiv_local_time(monkeypatch):
    """Run the test with the process local time zone set to Kyiv."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", KYIV_TZ)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
