"""RepeatingTask — bounded, cancellable fixed-period schedule."""

from __future__ import annotations

import logging
import time

import pytest

from ghost_pacer.session.scheduler import RepeatingTask


def test_runs_exactly_count_times():
    calls = []
    task = RepeatingTask(lambda: calls.append(1), period_s=0.01, count=5)
    task.start()
    task.join(timeout=2.0)
    assert len(calls) == 5
    assert task.calls == 5
    assert task.is_running() is False


def test_finishes_without_waiting_after_last_call():
    task = RepeatingTask(lambda: None, period_s=1.0, count=2)
    t0 = time.monotonic()
    task.start()
    task.join(timeout=3.0)
    assert task.calls == 2
    assert task.is_running() is False
    assert time.monotonic() - t0 < 1.5


def test_cancel_stops_schedule():
    calls = []
    task = RepeatingTask(lambda: calls.append(1), period_s=0.05, count=1000)
    task.start()
    time.sleep(0.12)
    task.cancel()
    n = len(calls)
    time.sleep(0.1)
    assert len(calls) == n
    assert 1 <= n < 1000
    assert task.is_running() is False


def test_exception_is_logged_and_schedule_continues(caplog):
    calls = []

    def _flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")

    task = RepeatingTask(_flaky, period_s=0.01, count=3)
    with caplog.at_level(logging.ERROR, logger="ghost_pacer.session.scheduler"):
        task.start()
        task.join(timeout=2.0)
    assert len(calls) == 3
    assert any("failed" in r.message for r in caplog.records)


def test_rejects_non_positive_period():
    with pytest.raises(ValueError):
        RepeatingTask(lambda: None, period_s=0.0, count=1)
