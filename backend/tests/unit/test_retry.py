"""Unit tests for retry_request."""

import pytest

from cms.application.services import retry_request
from cms.config import Settings


@pytest.mark.asyncio
async def test_returns_first_success():
    attempts = []

    async def flaky():
        attempts.append(1)
        if len(attempts) < 3:
            raise ConnectionError("not yet")
        return "ok"

    assert await retry_request(flaky, max_attempts=3, delay=0) == "ok"
    assert len(attempts) == 3


@pytest.mark.asyncio
async def test_reraises_last_error():
    attempts = []

    async def always_fails():
        attempts.append(1)
        raise ValueError(f"failure {len(attempts)}")

    with pytest.raises(ValueError, match="failure 2"):
        await retry_request(always_fails, max_attempts=2, delay=0)


@pytest.mark.asyncio
async def test_sleeps_linearly_between_attempts(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("cms.application.services.retry.asyncio.sleep", fake_sleep)

    async def always_fails():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await retry_request(always_fails, max_attempts=3, delay=1.5)
    assert delays == [1.5, 3.0]


@pytest.mark.asyncio
async def test_defaults_come_from_settings(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("cms.application.services.retry.asyncio.sleep", fake_sleep)
    monkeypatch.setattr(
        "cms.application.services.retry.get_settings",
        lambda: Settings(_env_file=None, retry_attempts=4, retry_delay=0.5),
    )
    attempts = []

    async def always_fails():
        attempts.append(1)
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await retry_request(always_fails)
    assert len(attempts) == 4
    assert delays == [0.5, 1.0, 1.5]
