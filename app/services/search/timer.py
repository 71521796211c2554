"""Cancellable timers on the asyncio event loop."""
import asyncio
from typing import Callable, Optional


class TimerHandle:
    """Handle to a scheduled callback."""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    def cancelled(self) -> bool:
        return self._handle.cancelled()


class TimerScheduler:
    """Schedules callbacks after a delay, on the running loop unless one is given."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def schedule(self, delay: float, fn: Callable[[], None]) -> TimerHandle:
        """Run fn once after delay seconds."""
        return TimerHandle(self._get_loop().call_later(delay, fn))

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        """Cancel a pending callback; None and fired handles are ignored."""
        if handle is not None:
            handle.cancel()
