"""GhostRunner — a virtual runner following a piecewise-constant pace plan."""

from __future__ import annotations

import math
import time
from collections.abc import Sequence

from ghost_pacer.ghost.models import DEFAULT_SEGMENT_M, Pace, PlanEntry, Segment
from ghost_pacer.tracking.models import TrackerStatus


class GhostNotStartedError(RuntimeError):
    """Raised when the ghost is queried before :meth:`GhostRunner.start`."""


def build_segments(plan: Sequence[PlanEntry]) -> tuple[Segment, ...]:
    """Normalize *plan* into segments with cumulative start time and distance.

    Raises:
        ValueError: If *plan* is empty or an entry has a non-positive or non-finite pace or
            distance.
    """
    if not plan:
        raise ValueError("Ghost plan must contain at least one segment")

    segments: list[Segment] = []
    start_time = 0.0
    start_distance = 0.0
    for i, entry in enumerate(plan):
        distance = DEFAULT_SEGMENT_M if isinstance(entry, Pace) else entry.distance_m
        if not math.isfinite(entry.minutes_per_km) or entry.minutes_per_km <= 0:
            raise ValueError(f"Segment {i}: pace must be positive and finite, got {entry.minutes_per_km}")
        if not math.isfinite(distance) or distance <= 0:
            raise ValueError(f"Segment {i}: distance must be positive and finite, got {distance}")
        seg = Segment(
            pace=float(entry.minutes_per_km),
            distance_m=float(distance),
            start_time_s=start_time,
            start_distance_m=start_distance,
        )
        segments.append(seg)
        start_time = seg.end_time_s
        start_distance = seg.end_distance_m
    return tuple(segments)


class GhostRunner:
    """Simulates the ghost's position and pace from wall-clock time since :meth:`start`.

    Segment lookup walks forward from a cached index, which is valid because
    elapsed time only grows within one run.  :meth:`start` redefines the run's
    zero point and resets the cache.

    Past the end of the plan the ghost keeps running at the final segment's
    pace, so distance extrapolates beyond the plan total.

    Parameters
    ----------
    plan:
        Ordered, non-empty sequence of :class:`Pace` / :class:`PaceAndDistance`.
    _time_fn:
        Callable returning monotonic time — injectable for testing.
    """

    def __init__(self, plan: Sequence[PlanEntry], _time_fn=time.monotonic) -> None:
        self._segments = build_segments(plan)
        self._time_fn = _time_fn
        self._start_time: float | None = None
        self._total_running_time_s = self._segments[-1].end_time_s
        self._cached_index = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def total_distance_m(self) -> float:
        """Planned distance in metres."""
        return self._segments[-1].end_distance_m

    @property
    def total_running_time_s(self) -> float:
        """Planned running time in seconds."""
        return self._total_running_time_s

    def start(self) -> None:
        """Start (or restart) the ghost's run at the current instant."""
        self._start_time = self._time_fn()
        last = self._segments[-1]
        self._total_running_time_s = last.start_time_s + last.duration_s
        self._cached_index = 0

    def has_started(self) -> bool:
        return self._start_time is not None

    def has_ended(self) -> bool:
        """Return True once elapsed time exceeds the planned running time."""
        return self._elapsed() > self._total_running_time_s

    def get_status(self) -> TrackerStatus:
        """Return the ghost's pace, distance and elapsed time right now."""
        elapsed = self._elapsed()
        seg = self._segments[self._segment_index(elapsed)]
        in_segment_m = (elapsed - seg.start_time_s) * 1000.0 / (seg.pace * 60.0)
        return TrackerStatus(
            split_pace=seg.pace,
            total_distance_m=seg.start_distance_m + in_segment_m,
            total_time_s=elapsed,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _elapsed(self) -> float:
        if self._start_time is None:
            raise GhostNotStartedError("ghost has not been started")
        return self._time_fn() - self._start_time

    def _segment_index(self, elapsed: float) -> int:
        """Index of the active segment; the last one once the plan has ended."""
        i = self._cached_index
        # Invariant: segments[0..i].start_time_s < elapsed (or i == 0)
        while i + 1 < len(self._segments) and self._segments[i + 1].start_time_s < elapsed:
            i += 1
        self._cached_index = i
        return i
