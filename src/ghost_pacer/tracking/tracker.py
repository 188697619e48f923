"""GPSTracker — sliding-window pace and cumulative distance from GPS fixes."""

from __future__ import annotations

import math
import time
from collections import deque

from ghost_pacer.tracking.geo import haversine_m
from ghost_pacer.tracking.models import Fix, PaceQuality, TrackerStatus


class TrackerNotReadyError(RuntimeError):
    """Raised when the tracker is used before it has enough fixes."""


class GPSTracker:
    """Estimates split pace over the most recent *capacity* fixes.

    The split pace is computed over the current window only, which keeps it
    responsive to recent effort at the cost of noise when fixes are sparse.
    Distance and elapsed time are cumulative since :meth:`start`.

    Fixes must be supplied in non-decreasing time order; out-of-order input
    breaks the window distance bookkeeping and is not detected.

    Parameters
    ----------
    capacity:
        Number of fixes kept in the sliding window (>= 2, 5 recommended).
    good_interval_s:
        Mean sampling interval below which quality is ``good``.
    ok_interval_s:
        Mean sampling interval below which quality is ``ok``; anything at or
        above it is ``poor``.
    _time_fn:
        Callable returning monotonic time — injectable for testing.
    """

    def __init__(
        self,
        capacity: int = 5,
        good_interval_s: float = 3.0,
        ok_interval_s: float = 5.0,
        _time_fn=time.monotonic,
    ) -> None:
        if capacity < 2:
            raise ValueError(f"capacity must be >= 2, got {capacity}")
        self._capacity = capacity
        self._good_interval_s = good_interval_s
        self._ok_interval_s = ok_interval_s
        self._time_fn = _time_fn

        self._positions: deque[Fix] = deque(maxlen=capacity)
        # _distances[i] is the distance between _positions[i] and _positions[i + 1]
        self._distances: deque[float] = deque(maxlen=capacity - 1)
        self._total_distance_m = 0.0
        self._creation_time: float | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def total_distance_m(self) -> float:
        return self._total_distance_m

    @property
    def positions(self) -> tuple[Fix, ...]:
        """Fixes currently in the window, oldest first."""
        return tuple(self._positions)

    def start(self, lat: float, lon: float) -> None:
        """Record the first fix and the run's creation time.

        Calling this again re-seeds the tracker from the new position.
        """
        now = self._time_fn()
        self._positions.clear()
        self._distances.clear()
        self._total_distance_m = 0.0
        self._creation_time = now
        self._positions.append(Fix(lat, lon, now))

    def has_started(self) -> bool:
        """Return True once at least one fix has been recorded."""
        return bool(self._positions)

    def add_pos(self, lat: float, lon: float) -> None:
        """Append a fix, evicting the oldest, and accumulate the marginal distance.

        Raises:
            TrackerNotReadyError: If :meth:`start` has not been called.
        """
        if not self.has_started():
            raise TrackerNotReadyError("add_pos() called before start()")
        prev = self._positions[-1]
        fix = Fix(lat, lon, self._time_fn())
        self._positions.append(fix)

        extra = haversine_m(prev.latitude, prev.longitude, fix.latitude, fix.longitude)
        self._total_distance_m += extra
        self._distances.append(extra)

    def is_status_ready(self) -> bool:
        """Return True once the window has no empty slots."""
        return len(self._positions) == self._capacity

    def get_status(self) -> TrackerStatus:
        """Return split pace, quality and cumulative totals.

        Raises:
            TrackerNotReadyError: If the window is not yet full.
        """
        if not self.is_status_ready():
            raise TrackerNotReadyError(
                f"status needs {self._capacity} fixes, have {len(self._positions)}"
            )
        span_s = self._positions[-1].timestamp - self._positions[0].timestamp
        window_m = sum(self._distances)

        return TrackerStatus(
            split_pace=_split_pace(span_s, window_m),
            total_distance_m=self._total_distance_m,
            total_time_s=self._time_fn() - self._creation_time,
            quality=self._classify(span_s / (self._capacity - 1)),
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _classify(self, mean_interval_s: float) -> PaceQuality:
        # Strict comparisons: exactly 3 s is OK, exactly 5 s is POOR.
        if mean_interval_s < self._good_interval_s:
            return PaceQuality.GOOD
        if mean_interval_s < self._ok_interval_s:
            return PaceQuality.OK
        return PaceQuality.POOR


def _split_pace(span_s: float, distance_m: float) -> float:
    """Minutes per kilometre; ``math.inf`` when stationary."""
    if distance_m <= 0.0:
        return math.inf
    return (span_s / 60.0) / (distance_m / 1000.0)
