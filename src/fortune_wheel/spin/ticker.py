"""
Clock & Ticker
Minimal timing capabilities SpinController runs on.

- Clock: now() in seconds.
- Ticker: start(callback) calls callback once per frame until stop().

AsyncioTicker drives real frames from an asyncio task.
ManualClock/ManualTicker advance time explicitly (headless runs, tests).
"""

import asyncio
import logging
import time

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 16  # ~60Hz


class MonotonicClock:
    def now(self):
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start=0.0):
        self._now = float(start)

    def now(self):
        return self._now

    def advance(self, seconds):
        self._now += seconds
        return self._now


class AsyncioTicker:
    """
    Frame loop on the running asyncio event loop.
    Same pattern as a sender loop: call, sleep interval, repeat.
    """

    def __init__(self, interval_ms=DEFAULT_TICK_INTERVAL_MS):
        self.interval = interval_ms / 1000.0
        self._callback = None
        self._task = None

    @property
    def running(self):
        return self._task is not None and not self._task.done()

    def start(self, callback):
        """Begin ticking. Needs a running event loop. Restarting only swaps the callback."""
        self._callback = callback
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())

    def stop(self):
        if self._task is not None:
            # Stopping from inside the callback must not cancel the current step
            if self._task is not asyncio.current_task():
                self._task.cancel()
            self._task = None

    async def _run(self):
        task = asyncio.current_task()
        while self._task is task:
            await asyncio.sleep(self.interval)
            if self._task is not task:
                break
            try:
                self._callback()
            except Exception as e:
                # Nobody awaits this task; the loop ends here instead of dying silently
                logger.error(f"[Ticker] Tick callback failed, ticker stopped: {e!r}")
                if self._task is task:
                    self._task = None
                break


class ManualTicker:
    """
    Deterministic ticker: each advance() moves the clock and fires one tick.
    """

    def __init__(self, clock=None):
        self.clock = clock or ManualClock()
        self._callback = None
        self.tick_count = 0

    @property
    def running(self):
        return self._callback is not None

    def start(self, callback):
        self._callback = callback

    def stop(self):
        self._callback = None

    def advance(self, seconds):
        """Move the clock forward and fire one tick if running."""
        self.clock.advance(seconds)
        if self._callback is not None:
            self.tick_count += 1
            self._callback()

    def run_frames(self, count, frame=DEFAULT_TICK_INTERVAL_MS / 1000.0):
        for _ in range(count):
            if not self.running:
                break
            self.advance(frame)

    def run_until_idle(self, frame=DEFAULT_TICK_INTERVAL_MS / 1000.0, max_frames=1_000_000):
        """Tick until the callback stops the ticker. Returns frames run."""
        frames = 0
        while self.running:
            if frames >= max_frames:
                raise RuntimeError(f"Ticker still running after {max_frames} frames")
            self.advance(frame)
            frames += 1
        return frames
