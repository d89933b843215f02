"""
Wait capability used by the machine to simulate hardware time.

The machine never calls ``asyncio.sleep`` directly. It awaits
``clock.sleep(seconds)`` on whatever clock it was built with, so tests can
swap in :class:`InstantClock` and run without real delays.
"""
from __future__ import annotations

import asyncio
from typing import Protocol


class Clock(Protocol):
    async def sleep(self, seconds: float) -> None:
        ...


class AsyncioClock:
    """Waits in real time on the running event loop."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class InstantClock:
    """
    Records requested delays instead of waiting for them.

    Each call still yields once to the event loop, so overlapping coroutines
    interleave at the same points they would with a real clock.
    """

    def __init__(self) -> None:
        self.waits: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.waits.append(seconds)
        await asyncio.sleep(0)

    @property
    def elapsed(self) -> float:
        return sum(self.waits)
