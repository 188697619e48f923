"""Ghost plan data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_SEGMENT_M = 1000.0


@dataclass(frozen=True)
class Pace:
    """A plan entry giving only a pace; covers :data:`DEFAULT_SEGMENT_M` metres."""

    minutes_per_km: float


@dataclass(frozen=True)
class PaceAndDistance:
    """A plan entry holding *minutes_per_km* for *distance_m* metres."""

    minutes_per_km: float
    distance_m: float


PlanEntry = Union[Pace, PaceAndDistance]


@dataclass(frozen=True)
class Segment:
    """A normalized plan segment with precomputed offsets from the ghost start."""

    pace: float
    """Pace in min/km."""

    distance_m: float
    """Segment length in metres."""

    start_time_s: float
    """Seconds from ghost start at which this segment begins."""

    start_distance_m: float
    """Distance covered when this segment begins."""

    @property
    def duration_s(self) -> float:
        """Seconds needed to run this segment at its pace."""
        return self.pace * 60.0 * self.distance_m / 1000.0

    @property
    def end_time_s(self) -> float:
        return self.start_time_s + self.duration_s

    @property
    def end_distance_m(self) -> float:
        return self.start_distance_m + self.distance_m
