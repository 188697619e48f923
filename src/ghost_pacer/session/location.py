"""Location providers — replay of recorded tracks and synthetic runs."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from ghost_pacer.tracking.geo import destination_point


class LocationError(Exception):
    """Raised by a provider when no fix is available."""


class ReplayLocationProvider:
    """Serves recorded ``(lat, lon)`` points one per :meth:`read` call.

    Raises :class:`LocationError` once the track is exhausted.
    """

    def __init__(self, points: Iterable[tuple[float, float]]) -> None:
        self._points = list(points)
        self._index = 0

    @classmethod
    def from_csv(cls, path: str | Path) -> ReplayLocationProvider:
        """Load a CSV with ``latitude`` and ``longitude`` header columns.

        Raises:
            ValueError: If the header lacks either column.
        """
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            fields = reader.fieldnames or []
            if "latitude" not in fields or "longitude" not in fields:
                raise ValueError(f"{path}: CSV needs 'latitude' and 'longitude' columns")
            points = [(float(row["latitude"]), float(row["longitude"])) for row in reader]
        return cls(points)

    @property
    def remaining(self) -> int:
        return len(self._points) - self._index

    def read(self) -> tuple[float, float]:
        """Return the next point."""
        if self._index >= len(self._points):
            raise LocationError("replay track exhausted")
        point = self._points[self._index]
        self._index += 1
        return point


def straight_line_track(
    lat: float,
    lon: float,
    pace: float,
    period_s: float,
    count: int,
    bearing_deg: float = 0.0,
) -> list[tuple[float, float]]:
    """Points sampled every *period_s* for a runner holding *pace* (min/km)."""
    step_m = period_s * 1000.0 / (pace * 60.0)
    points = [(lat, lon)]
    for _ in range(count - 1):
        lat, lon = destination_point(lat, lon, bearing_deg, step_m)
        points.append((lat, lon))
    return points
