"""Tracking data models."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum


class PaceQuality(str, Enum):
    """GPS sampling density over the tracker window."""

    GOOD = "good"
    OK = "ok"
    POOR = "poor"


@dataclass(frozen=True)
class Fix:
    """A single timestamped GPS sample."""

    latitude: float
    """Latitude in degrees."""

    longitude: float
    """Longitude in degrees."""

    timestamp: float
    """Monotonic instant in seconds."""


@dataclass
class TrackerStatus:
    """Snapshot of a runner's progress (real or ghost).

    ``split_pace`` is ``math.inf`` when no distance was covered over the
    window.  ``quality`` is ``None`` for simulated runners.
    """

    split_pace: float
    """Pace in min/km."""

    total_distance_m: float
    """Cumulative distance in metres."""

    total_time_s: float
    """Seconds since the run started."""

    quality: PaceQuality | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict (infinite pace becomes ``None``)."""
        data = dataclasses.asdict(self)
        if not math.isfinite(self.split_pace):
            data["split_pace"] = None
        if self.quality is not None:
            data["quality"] = self.quality.value
        return data
