"""Tests for countdown formatting and the countdown ticker."""

import asyncio

import pytest

from launchwatch.core.clock import DAY_MS, HOUR_MS, MINUTE_MS, SECOND_MS
from launchwatch.services.countdown import CountdownTicker, format_countdown, format_date, time_ago


@pytest.mark.parametrize(
    "remaining, expected",
    [
        (0, "T+00:00:00"),
        (-5 * MINUTE_MS, "T+00:00:00"),
        (SECOND_MS, "T-00:00:01"),
        (HOUR_MS + MINUTE_MS + SECOND_MS, "T-01:01:01"),
        (2 * DAY_MS + 4 * HOUR_MS, "T-2d 04:00:00"),
        (14 * DAY_MS + 999, "T-14d 00:00:00"),
    ],
)
def test_format_countdown(remaining, expected):
    assert format_countdown(remaining) == expected


def test_time_ago_buckets():
    now = 10 * DAY_MS
    assert time_ago(now - 30 * SECOND_MS, now) == "Just now"
    assert time_ago(now - 5 * MINUTE_MS, now) == "5m ago"
    assert time_ago(now - 3 * HOUR_MS, now) == "3h ago"
    assert time_ago(now - 2 * DAY_MS, now) == "2d ago"


def test_format_date_is_utc():
    assert format_date(0) == "Jan 1, 1970, 00:00 UTC"
    assert format_date(1_760_000_000_000) == "Oct 9, 2025, 08:53 UTC"


@pytest.mark.asyncio
async def test_ticker_sends_until_cancelled():
    sent = []

    async def send(message):
        sent.append(message)

    launch_date = 100 * SECOND_MS
    ticker = CountdownTicker(7, launch_date, send, interval=0.01, clock=lambda: 0)

    ticker.start()
    assert ticker.running
    for _ in range(100):
        if len(sent) >= 2:
            break
        await asyncio.sleep(0.01)
    await ticker.cancel()

    assert not ticker.running
    assert len(sent) >= 2
    assert sent[0] == {
        "type": "countdown",
        "launch_id": 7,
        "active": True,
        "countdown": "T-00:01:40",
        "remaining_ms": 100 * SECOND_MS,
    }

    count = len(sent)
    await asyncio.sleep(0.05)
    assert len(sent) == count


@pytest.mark.asyncio
async def test_ticker_cancel_survives_failed_send():
    async def send(message):
        raise RuntimeError("socket closed")

    ticker = CountdownTicker(1, 0, send, interval=0.01)
    ticker.start()
    await asyncio.sleep(0.02)

    await ticker.cancel()
    assert not ticker.running


@pytest.mark.asyncio
async def test_cancel_without_start_is_noop():
    ticker = CountdownTicker(1, 0, None)
    await ticker.cancel()
    assert not ticker.running
