"""Millisecond clock shared by every philosopher of a dinner."""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class Clock:
    """Counts milliseconds from the first reading taken.

    The first call to :meth:`now` fixes the origin, so every later reading,
    from any thread, is relative to it.
    """

    def __init__(
        self,
        source: Callable[[], int] = time.monotonic_ns,
        pause: float = 0.0005,
    ) -> None:
        self._source = source
        self._pause = pause
        self._start: Optional[int] = None
        self._lock = threading.Lock()

    def now(self) -> int:
        """Milliseconds elapsed since the first reading."""
        with self._lock:
            if self._start is None:
                self._start = self._source()
        return (self._source() - self._start) // 1_000_000

    def sleep(self, duration: int, stopped: Callable[[], bool]) -> bool:
        """Wait ``duration`` milliseconds or until ``stopped()`` turns true.

        Returns False without waiting if ``stopped()`` already holds,
        True otherwise.
        """
        if stopped():
            return False
        begin = self.now()
        while not stopped() and self.now() - begin < duration:
            time.sleep(self._pause)
        return True