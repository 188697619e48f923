"""RunSession — connects a location provider to the tracker, ghost and cues."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ghost_pacer.cues.rules import CueKind, distance_diff
from ghost_pacer.session.location import LocationError
from ghost_pacer.tracking.models import Fix, TrackerStatus

_logger = logging.getLogger(__name__)


@dataclass
class SessionSnapshot:
    """Runner and ghost status after one tick, plus the cue decisions."""

    tick: int
    user: TrackerStatus
    ghost: TrackerStatus
    distance_diff_m: float
    """Metres ahead of the ghost (negative = behind)."""
    cue: CueKind | None = None
    volume: float | None = None
    ghost_finished: bool = False
    last_fix: Fix | None = None
    """Most recent runner position fed to the tracker."""


class RunSession:
    """Drives one run: fix → tracker → statuses → cues, once per tick.

    The tracker holds no references to its listeners; after each fix the
    session publishes both statuses to the cues itself.

    Parameters
    ----------
    tracker:
        A :class:`~ghost_pacer.tracking.tracker.GPSTracker`.
    ghost:
        A :class:`~ghost_pacer.ghost.simulator.GhostRunner`.
    provider:
        Object with ``read() -> (lat, lon)`` raising
        :class:`~ghost_pacer.session.location.LocationError`.  Optional when
        fixes are pushed through :meth:`ingest`.
    pace_cue:
        Optional :class:`~ghost_pacer.cues.rules.PaceCue`.
    distance_cue:
        Optional :class:`~ghost_pacer.cues.rules.DistanceCue`.
    """

    def __init__(
        self,
        tracker,
        ghost,
        provider=None,
        pace_cue=None,
        distance_cue=None,
    ) -> None:
        self._tracker = tracker
        self._ghost = ghost
        self._provider = provider
        self._pace_cue = pace_cue
        self._distance_cue = distance_cue

        self.ticks = 0
        self.fixes = 0
        self.failures = 0
        self.last_snapshot: SessionSnapshot | None = None

    @property
    def tracker(self):
        return self._tracker

    @property
    def ghost(self):
        return self._ghost

    def start(self) -> None:
        """Start the ambient loop and the ghost, then take the first fix."""
        if self._distance_cue is not None:
            self._distance_cue.play()
        self._ghost.start()
        if self._provider is not None:
            self.tick()

    def tick(self) -> SessionSnapshot | None:
        """Poll the provider once and process the fix.

        Returns ``None`` when no fix was available or the tracker window is
        not yet full.
        """
        if self._provider is None:
            raise RuntimeError("tick() needs a location provider; use ingest() instead")
        self.ticks += 1
        try:
            lat, lon = self._provider.read()
        except LocationError as exc:
            self.failures += 1
            _logger.warning("No location fix on tick %d: %s", self.ticks, exc)
            return None
        return self.ingest(lat, lon)

    def ingest(self, lat: float, lon: float) -> SessionSnapshot | None:
        """Feed one fix and publish statuses to the cues once ready."""
        if self._tracker.has_started():
            self._tracker.add_pos(lat, lon)
        else:
            self._tracker.start(lat, lon)
        self.fixes += 1

        if not self._tracker.is_status_ready():
            _logger.debug("Status not yet ready (%d fixes)", self.fixes)
            return None

        user = self._tracker.get_status()
        ghost = self._ghost.get_status()
        snapshot = SessionSnapshot(
            tick=self.ticks,
            user=user,
            ghost=ghost,
            distance_diff_m=distance_diff(user, ghost),
            ghost_finished=self._ghost.has_ended(),
            last_fix=self._tracker.positions[-1],
        )
        if self._distance_cue is not None:
            snapshot.volume = self._distance_cue.update(user, ghost)
        if self._pace_cue is not None:
            snapshot.cue = self._pace_cue.update(user, ghost)

        self.last_snapshot = snapshot
        return snapshot
