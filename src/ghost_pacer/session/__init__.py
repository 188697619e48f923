"""Run orchestration — location input, tick loop and status display."""

from ghost_pacer.session.engine import RunSession, SessionSnapshot
from ghost_pacer.session.formatter import StatusFormatter
from ghost_pacer.session.location import LocationError, ReplayLocationProvider, straight_line_track
from ghost_pacer.session.scheduler import RepeatingTask

__all__ = [
    "LocationError",
    "RepeatingTask",
    "ReplayLocationProvider",
    "RunSession",
    "SessionSnapshot",
    "StatusFormatter",
    "straight_line_track",
]
