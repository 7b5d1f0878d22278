"""Clock and ticker tests"""
import sys
import os
import asyncio

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fortune_wheel.spin.ticker import AsyncioTicker, ManualClock, ManualTicker, MonotonicClock


def test_manual_clock():
    clock = ManualClock(2.0)
    assert clock.now() == 2.0
    assert clock.advance(0.5) == 2.5
    assert clock.now() == 2.5


def test_monotonic_clock_moves_forward():
    clock = MonotonicClock()
    assert clock.now() <= clock.now()


def test_manual_ticker_counts_ticks():
    ticker = ManualTicker()
    calls = []
    ticker.start(lambda: calls.append(ticker.clock.now()))
    ticker.run_frames(3, frame=0.5)
    assert calls == [0.5, 1.0, 1.5]
    assert ticker.tick_count == 3


def test_manual_ticker_idle_advance_moves_clock_only():
    ticker = ManualTicker()
    ticker.advance(1.0)
    assert ticker.clock.now() == 1.0
    assert ticker.tick_count == 0


def test_run_until_idle_stops_when_callback_stops():
    ticker = ManualTicker()
    calls = []

    def callback():
        calls.append(1)
        if len(calls) == 4:
            ticker.stop()

    ticker.start(callback)
    assert ticker.run_until_idle() == 4
    assert not ticker.running


def test_run_until_idle_frame_limit():
    ticker = ManualTicker()
    ticker.start(lambda: None)
    with pytest.raises(RuntimeError):
        ticker.run_until_idle(max_frames=10)


def test_asyncio_ticker_stops_from_callback():
    calls = []

    async def scenario():
        ticker = AsyncioTicker(interval_ms=1)

        def callback():
            calls.append(1)
            if len(calls) == 3:
                ticker.stop()

        ticker.start(callback)
        assert ticker.running
        for _ in range(200):
            if not ticker.running:
                break
            await asyncio.sleep(0.005)
        return ticker.running

    assert asyncio.run(scenario()) is False
    assert len(calls) == 3


def test_asyncio_ticker_stops_when_callback_raises(caplog):
    calls = []

    def callback():
        calls.append(1)
        raise ValueError("bad frame")

    async def scenario():
        ticker = AsyncioTicker(interval_ms=1)
        ticker.start(callback)
        task = ticker._task
        await asyncio.wait_for(task, 1.0)
        return ticker.running, task

    running, task = asyncio.run(scenario())
    assert running is False
    assert task.exception() is None
    assert calls == [1]
    assert "Tick callback failed" in caplog.text


def test_asyncio_ticker_needs_running_loop():
    with pytest.raises(RuntimeError):
        AsyncioTicker().start(lambda: None)
