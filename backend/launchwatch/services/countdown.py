"""
Countdown and time-display helpers, plus the per-connection countdown ticker.

The ticker recomputes ``T-`` strings locally from the fixed launch date and the
wall clock; it never touches the database.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from launchwatch.core.clock import DAY_MS, HOUR_MS, MINUTE_MS, SECOND_MS, now_ms
from launchwatch.models.launch import LaunchStatus

logger = logging.getLogger(__name__)

COUNTING_STATUSES = (LaunchStatus.UPCOMING, LaunchStatus.LIVE)


def format_countdown(remaining_ms: int) -> str:
    if remaining_ms <= 0:
        return "T+00:00:00"
    seconds = (remaining_ms // SECOND_MS) % 60
    minutes = (remaining_ms // MINUTE_MS) % 60
    hours = (remaining_ms // HOUR_MS) % 24
    days = remaining_ms // DAY_MS

    clock = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if days > 0:
        return f"T-{days}d {clock}"
    return f"T-{clock}"


def format_date(timestamp_ms: int) -> str:
    """e.g. 'Oct 17, 2026, 14:05 UTC'"""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return f"{dt:%b} {dt.day}, {dt.year}, {dt:%H:%M} UTC"


def time_ago(timestamp_ms: int, now: Optional[int] = None) -> str:
    now = now if now is not None else now_ms()
    minutes = (now - timestamp_ms) // MINUTE_MS
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def is_counting(status: LaunchStatus) -> bool:
    return LaunchStatus(status) in COUNTING_STATUSES


class CountdownTicker:
    """
    Periodically pushes the countdown for one launch to ``send``.

    The task is owned by whoever started it (a WebSocket connection) and must
    be cancelled when that owner goes away.
    """

    def __init__(
        self,
        launch_id: int,
        launch_date: int,
        send: Callable[[dict], Awaitable[None]],
        interval: float = 1.0,
        clock: Callable[[], int] = now_ms,
    ):
        self.launch_id = launch_id
        self.launch_date = launch_date
        self.interval = interval
        self._send = send
        self._clock = clock
        self._task: Optional[asyncio.Task] = None

    def snapshot(self) -> dict:
        remaining = self.launch_date - self._clock()
        return {
            "type": "countdown",
            "launch_id": self.launch_id,
            "active": True,
            "countdown": format_countdown(remaining),
            "remaining_ms": remaining,
        }

    async def _run(self):
        while True:
            await self._send(self.snapshot())
            await asyncio.sleep(self.interval)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.debug(f"Countdown ticker started for launch {self.launch_id}")

    async def cancel(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.warning(f"Countdown ticker for launch {self.launch_id} ended with error: {e}")
        finally:
            self._task = None
            logger.debug(f"Countdown ticker stopped for launch {self.launch_id}")
