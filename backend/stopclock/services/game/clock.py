import threading
import time
from typing import Callable


class MonotonicClock:
    """Elapsed-time source backed by time.monotonic()."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)


class Sampler:
    """Periodic sampling loop for the live stopwatch display.

    Each start() tags its loop with a new generation; cancel() bumps the
    generation so a loop that wakes up after a stop exits without sampling.
    """

    def __init__(self, interval_ms: int, spawn: Callable, sleep: Callable[[float], None]):
        self.interval_ms = interval_ms
        self._spawn = spawn
        self._sleep = sleep
        self._generation = 0
        self._active = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._active

    def start(self, on_sample: Callable[[], None]) -> int:
        with self._lock:
            self._generation += 1
            self._active = True
            generation = self._generation
        self._spawn(self._loop, generation, on_sample)
        return generation

    def cancel(self) -> bool:
        """Invalidate the live loop. Returns False when nothing was running."""
        with self._lock:
            if not self._active:
                return False
            self._active = False
            self._generation += 1
            return True

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return self._active and generation == self._generation

    def _loop(self, generation: int, on_sample: Callable[[], None]) -> None:
        while True:
            self._sleep(self.interval_ms / 1000.0)
            if not self.is_current(generation):
                return
            on_sample()
