"""RepeatingTask — call a function a fixed number of times at a fixed period."""

from __future__ import annotations

import logging
import threading
import time

_logger = logging.getLogger(__name__)


class RepeatingTask:
    """Invokes *func* *count* times, every *period_s* seconds, on a daemon thread.

    The first call happens immediately on :meth:`start`.  :meth:`cancel`
    stops further calls; a call already in progress finishes normally.
    Exceptions raised by *func* are logged and the schedule continues.

    Parameters
    ----------
    func:
        Zero-argument callable.
    period_s:
        Seconds between the starts of consecutive calls.
    count:
        Total number of calls (the reference cadence is 2 s x 300 = 10 min).
    """

    def __init__(self, func, period_s: float = 2.0, count: int = 300) -> None:
        if period_s <= 0:
            raise ValueError(f"period_s must be positive, got {period_s}")
        self._func = func
        self._period_s = period_s
        self._count = count
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.calls = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the background thread."""
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="RepeatingTask")
        self._thread.start()

    def cancel(self) -> None:
        """Stop scheduling further calls and join the thread."""
        self._stop_event.set()
        self.join(timeout=2.0)

    def join(self, timeout: float | None = None) -> None:
        """Wait for the schedule to finish (or be cancelled)."""
        if self._thread is not None:
            self._thread.join(timeout=timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(self) -> None:
        for i in range(self._count):
            if self._stop_event.is_set():
                break
            t0 = time.monotonic()
            try:
                self._func()
            except Exception:
                _logger.exception("Scheduled call %d failed", self.calls + 1)
            self.calls += 1
            if i == self._count - 1:
                break
            wait = self._period_s - (time.monotonic() - t0)
            if wait > 0 and self._stop_event.wait(wait):
                break
