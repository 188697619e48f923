"""Great-circle distance between latitude/longitude points."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the Haversine distance in metres between two points given in degrees.

    NaN coordinates propagate to a NaN result.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * 1000.0


def destination_point(
    lat: float, lon: float, bearing_deg: float, distance_m: float
) -> tuple[float, float]:
    """Return ``(lat, lon)`` reached after *distance_m* metres on *bearing_deg* (0 = north)."""
    delta = distance_m / (EARTH_RADIUS_KM * 1000.0)
    theta = math.radians(bearing_deg)
    phi1 = math.radians(lat)
    lam1 = math.radians(lon)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lam2 = lam1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return math.degrees(phi2), math.degrees(lam2)
