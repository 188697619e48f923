"""Cue rules — PaceCue (hysteresis) and DistanceCue (ambient volume)."""

from __future__ import annotations

import logging
from enum import Enum

from ghost_pacer.cues.audio import AudioConfig
from ghost_pacer.tracking.models import TrackerStatus

_logger = logging.getLogger(__name__)


class CueKind(str, Enum):
    """Directional pace cue."""

    SLOW = "slow"
    KEEP = "keep"
    FAST = "fast"


def distance_diff(user: TrackerStatus, ghost: TrackerStatus) -> float:
    """Metres the runner is ahead of the ghost (negative = behind)."""
    return user.total_distance_m - ghost.total_distance_m


class PaceCue:
    """Fires directional cues when the runner drifts away from the ghost.

    Once a ``fast`` or ``slow`` cue fires, no further cue fires until the
    runner returns within ``tolerance_m * reset_ratio`` of the ghost, at which
    point a ``keep`` cue fires and the rule is armed again.

    Parameters
    ----------
    player:
        Audio player with ``load(ref)`` and ``play(sound)``.
    tolerance_m:
        Separation in metres that triggers a ``fast``/``slow`` cue.
    config:
        Sound references for the three cues.
    reset_ratio:
        Fraction of *tolerance_m* the runner must come back within to re-arm.
    """

    def __init__(
        self,
        player,
        tolerance_m: float,
        config: AudioConfig | None = None,
        reset_ratio: float = 0.5,
    ) -> None:
        if tolerance_m <= 0:
            raise ValueError(f"tolerance_m must be positive, got {tolerance_m}")
        cfg = config or AudioConfig()
        self._player = player
        self._tolerance_m = tolerance_m
        self._reset_ratio = reset_ratio
        self._cue_ready = True
        self._sounds = {
            CueKind.SLOW: player.load(cfg.slow_ref),
            CueKind.KEEP: player.load(cfg.keep_ref),
            CueKind.FAST: player.load(cfg.fast_ref),
        }

    @property
    def cue_ready(self) -> bool:
        return self._cue_ready

    def update(self, user: TrackerStatus, ghost: TrackerStatus) -> CueKind | None:
        """Play and return the cue triggered by this update, if any."""
        diff = distance_diff(user, ghost)

        if not self._cue_ready and abs(diff) < self._tolerance_m * self._reset_ratio:
            kind = CueKind.KEEP
            self._cue_ready = True
        elif self._cue_ready and diff > self._tolerance_m:
            kind = CueKind.FAST
            self._cue_ready = False
        elif self._cue_ready and diff < -self._tolerance_m:
            kind = CueKind.SLOW
            self._cue_ready = False
        else:
            return None

        _logger.info("Pace cue %s (%+.1f m from ghost)", kind.value, diff)
        self._player.play(self._sounds[kind])
        return kind


class DistanceCue:
    """Looping ambient sound whose volume tracks the runner-ghost separation.

    Full volume at zero separation, fading linearly to silence at
    *audible_range_m*.

    Parameters
    ----------
    player:
        Audio player with ``load``, ``play``, ``set_loop`` and ``set_volume``.
    audible_range_m:
        Separation in metres at which the ambient sound becomes silent.
    config:
        Sound reference for the ambient loop.
    """

    def __init__(
        self,
        player,
        audible_range_m: float,
        config: AudioConfig | None = None,
    ) -> None:
        if audible_range_m <= 0:
            raise ValueError(f"audible_range_m must be positive, got {audible_range_m}")
        cfg = config or AudioConfig()
        self._player = player
        self._range_m = audible_range_m
        self._sound = player.load(cfg.ambient_ref)
        player.set_loop(self._sound, True)
        self._playing = False
        self._volume = 1.0

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def volume(self) -> float:
        return self._volume

    def volume_for(self, diff_m: float) -> float:
        """Volume in [0.0, 1.0] for a separation of *diff_m* metres."""
        return max(0.0, 1.0 - abs(diff_m) / self._range_m)

    def play(self) -> None:
        """Start the ambient loop; later calls are no-ops."""
        if self._playing:
            return
        self._player.play(self._sound)
        self._playing = True

    def update(self, user: TrackerStatus, ghost: TrackerStatus) -> float:
        """Set and return the ambient volume for the current separation."""
        self._volume = self.volume_for(distance_diff(user, ghost))
        self._player.set_volume(self._sound, self._volume)
        return self._volume
