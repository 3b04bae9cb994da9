import time

import pytest


@pytest.fixture
def system_tz(monkeypatch):
    """Switch the process's local zone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set

    monkeypatch.undo()
    time.tzset()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep option defaults independent of the developer's environment."""
    for name in ("TIMEPARSE_INPUT_TZ", "TIMEPARSE_OUTPUT_TZ", "TIMEPARSE_TS_UNIT"):
        monkeypatch.delenv(name, raising=False)
