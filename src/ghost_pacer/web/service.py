"""SessionService — the single live run behind the Web API."""

from __future__ import annotations

import logging
import threading
import time

from ghost_pacer.cues.audio import NullAudioPlayer
from ghost_pacer.cues.rules import DistanceCue, PaceCue
from ghost_pacer.ghost.dna import parse_dna
from ghost_pacer.ghost.simulator import GhostRunner
from ghost_pacer.session.engine import RunSession, SessionSnapshot
from ghost_pacer.session.formatter import StatusFormatter
from ghost_pacer.tracking.tracker import GPSTracker
from ghost_pacer.web.schemas import FixRecord, SessionRequest, StatusRecord, StatusResponse

_logger = logging.getLogger(__name__)


class NoActiveSessionError(RuntimeError):
    """Raised when a fix or status request arrives with no session running."""


class SessionService:
    """Owns one :class:`RunSession` fed by fixes pushed from the client.

    The server has no speakers: cues run against a :class:`NullAudioPlayer`
    and their decisions (cue kind, ambient volume) are returned to the client
    to play.  Access is serialised with a lock because FastAPI runs sync
    endpoints in a thread pool.

    Parameters
    ----------
    _time_fn:
        Monotonic clock for the tracker and ghost — injectable for
        testing.
    """

    def __init__(self, _time_fn=time.monotonic) -> None:
        self._time_fn = _time_fn
        self._lock = threading.Lock()
        self._session: RunSession | None = None
        self._formatter = StatusFormatter()

    def start(self, req: SessionRequest) -> GhostRunner:
        """Replace any running session with a new one and start its ghost.

        Raises
        ------
        ValueError
            If the ghost plan cannot be parsed or the settings are invalid.
        """
        ghost = GhostRunner(parse_dna(req.dna), _time_fn=self._time_fn)
        tracker = GPSTracker(capacity=req.capacity, _time_fn=self._time_fn)
        player = NullAudioPlayer()
        session = RunSession(
            tracker,
            ghost,
            pace_cue=PaceCue(player, req.tolerance_m),
            distance_cue=DistanceCue(player, req.audible_range_m),
        )
        with self._lock:
            session.start()
            self._session = session
        _logger.info(
            "Session started: %d segment(s), %.0f m in %.0f s",
            len(ghost.segments),
            ghost.total_distance_m,
            ghost.total_running_time_s,
        )
        return ghost

    def stop(self) -> None:
        with self._lock:
            self._session = None

    def add_fix(self, latitude: float, longitude: float) -> StatusResponse:
        """Feed a fix into the live session and return the resulting status."""
        with self._lock:
            session = self._require_session()
            snapshot = session.ingest(latitude, longitude)
            return self._to_response(session, snapshot)

    def status(self) -> StatusResponse:
        """Return the latest status without feeding a fix."""
        with self._lock:
            session = self._require_session()
            return self._to_response(session, session.last_snapshot)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require_session(self) -> RunSession:
        if self._session is None:
            raise NoActiveSessionError("No session running; POST /api/session first")
        return self._session

    def _to_response(
        self, session: RunSession, snapshot: SessionSnapshot | None
    ) -> StatusResponse:
        if snapshot is None:
            return StatusResponse(ready=False, fixes=session.fixes, text="Status not yet ready")
        return StatusResponse(
            ready=True,
            fixes=session.fixes,
            user=StatusRecord(**snapshot.user.to_dict()),
            ghost=StatusRecord(**snapshot.ghost.to_dict()),
            distance_diff_m=snapshot.distance_diff_m,
            cue=snapshot.cue.value if snapshot.cue is not None else None,
            volume=snapshot.volume,
            ghost_finished=snapshot.ghost_finished,
            last_fix=(
                FixRecord(latitude=snapshot.last_fix.latitude, longitude=snapshot.last_fix.longitude)
                if snapshot.last_fix is not None
                else None
            ),
            text=self._formatter.format_line(snapshot),
        )
