"""Cancelable scheduled callbacks, so debounce timing can be driven by tests."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable


class ScheduledCall(ABC):
    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""


class Scheduler(ABC):
    """Owner-agnostic timer source: schedule a callback after a delay."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        pass


class _TimerCall(ScheduledCall):
    __slots__ = ("_handle",)

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class LoopScheduler(Scheduler):
    """Schedules on an asyncio event loop (the running loop unless one is given)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        loop = self._loop or asyncio.get_running_loop()
        return _TimerCall(loop.call_later(max(0.0, delay), callback))
