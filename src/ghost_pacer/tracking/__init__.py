"""GPS position and pace tracking.

Public API
----------
Fix                 - single timestamped GPS sample
TrackerStatus       - pace / distance / time snapshot
PaceQuality         - sampling-density classification
GPSTracker          - sliding-window pace estimator
TrackerNotReadyError - raised on premature use of the tracker
haversine_m         - great-circle distance in metres
"""

from ghost_pacer.tracking.geo import haversine_m
from ghost_pacer.tracking.models import Fix, PaceQuality, TrackerStatus
from ghost_pacer.tracking.tracker import GPSTracker, TrackerNotReadyError

__all__ = [
    "Fix",
    "GPSTracker",
    "PaceQuality",
    "TrackerNotReadyError",
    "TrackerStatus",
    "haversine_m",
]
