"""PaceCue hysteresis and DistanceCue volume."""

from __future__ import annotations

import logging

import pytest

from ghost_pacer.cues.audio import AudioConfig, NullAudioPlayer
from ghost_pacer.cues.rules import CueKind, DistanceCue, PaceCue, distance_diff
from ghost_pacer.tracking.models import TrackerStatus


def _status(distance_m: float) -> TrackerStatus:
    return TrackerStatus(split_pace=6.0, total_distance_m=distance_m, total_time_s=60.0)


def _pair(diff_m: float, ghost_m: float = 500.0) -> tuple[TrackerStatus, TrackerStatus]:
    """(user, ghost) statuses separated by *diff_m* metres."""
    return _status(ghost_m + diff_m), _status(ghost_m)


def test_distance_diff_sign():
    assert distance_diff(_status(120.0), _status(100.0)) == pytest.approx(20.0)
    assert distance_diff(_status(80.0), _status(100.0)) == pytest.approx(-20.0)


# ---------------------------------------------------------------------------
# PaceCue
# ---------------------------------------------------------------------------


def test_pace_cue_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        PaceCue(NullAudioPlayer(), tolerance_m=0.0)


def test_pace_cue_loads_three_sounds():
    player = NullAudioPlayer()
    cfg = AudioConfig(slow_ref="s.wav", keep_ref="k.wav", fast_ref="f.wav")
    PaceCue(player, 10.0, cfg)
    assert player.loads == ["s.wav", "k.wav", "f.wav"]


def test_pace_cue_hysteresis_sequence():
    """diffs [0, 12, 11, 4, -3] with tolerance 10 → fast at 12, keep at 4."""
    player = NullAudioPlayer()
    cfg = AudioConfig(slow_ref="slow", keep_ref="keep", fast_ref="fast")
    cue = PaceCue(player, tolerance_m=10.0, config=cfg)

    fired = [cue.update(*_pair(d)) for d in (0.0, 12.0, 11.0, 4.0, -3.0)]

    assert fired == [None, CueKind.FAST, None, CueKind.KEEP, None]
    assert player.plays == ["fast", "keep"]
    assert cue.cue_ready is True


def test_pace_cue_slow():
    player = NullAudioPlayer()
    cue = PaceCue(player, tolerance_m=10.0)
    assert cue.update(*_pair(-10.5)) is CueKind.SLOW
    assert cue.cue_ready is False


def test_pace_cue_exact_tolerance_does_not_fire():
    cue = PaceCue(NullAudioPlayer(), tolerance_m=10.0)
    assert cue.update(*_pair(10.0)) is None
    assert cue.update(*_pair(-10.0)) is None


def test_pace_cue_no_repeat_while_not_ready():
    cue = PaceCue(NullAudioPlayer(), tolerance_m=10.0)
    assert cue.update(*_pair(-15.0)) is CueKind.SLOW
    assert cue.update(*_pair(-30.0)) is None
    # swinging straight to the other side does not re-arm
    assert cue.update(*_pair(25.0)) is None
    # exactly half tolerance is not inside the reset band
    assert cue.update(*_pair(5.0)) is None
    assert cue.update(*_pair(4.9)) is CueKind.KEEP
    assert cue.update(*_pair(20.0)) is CueKind.FAST


def test_pace_cue_custom_reset_ratio():
    cue = PaceCue(NullAudioPlayer(), tolerance_m=10.0, reset_ratio=0.2)
    cue.update(*_pair(12.0))
    assert cue.update(*_pair(3.0)) is None
    assert cue.update(*_pair(1.5)) is CueKind.KEEP


def test_pace_cue_logs_fired_cue(caplog):
    cue = PaceCue(NullAudioPlayer(), tolerance_m=10.0)
    with caplog.at_level(logging.INFO, logger="ghost_pacer.cues.rules"):
        cue.update(*_pair(12.0))
    assert any("fast" in r.message for r in caplog.records)


# ---------------------------------------------------------------------------
# DistanceCue
# ---------------------------------------------------------------------------


def test_distance_cue_rejects_non_positive_range():
    with pytest.raises(ValueError):
        DistanceCue(NullAudioPlayer(), audible_range_m=0.0)


def test_distance_cue_loads_looping_sound():
    player = NullAudioPlayer()
    cue = DistanceCue(player, 50.0, AudioConfig(ambient_ref="steps.wav"))
    assert player.loads == ["steps.wav"]
    assert cue._sound.loop is True
    cue.play()
    assert cue._sound.playing is True


@pytest.mark.parametrize(
    ("diff_m", "expected"),
    [(0.0, 1.0), (25.0, 0.5), (-25.0, 0.5), (50.0, 0.0), (60.0, 0.0), (-60.0, 0.0)],
)
def test_distance_cue_volume(diff_m, expected):
    player = NullAudioPlayer()
    cue = DistanceCue(player, audible_range_m=50.0)
    assert cue.update(*_pair(diff_m)) == pytest.approx(expected)
    assert player.volumes[-1][1] == pytest.approx(expected)
    assert cue.volume == pytest.approx(expected)


def test_distance_cue_play_once():
    player = NullAudioPlayer()
    cue = DistanceCue(player, 50.0, AudioConfig(ambient_ref="steps.wav"))
    assert cue.playing is False
    cue.play()
    cue.play()
    assert player.plays == ["steps.wav"]
    assert cue.playing is True


def test_distance_cue_update_does_not_play():
    player = NullAudioPlayer()
    cue = DistanceCue(player, 50.0)
    cue.update(*_pair(10.0))
    assert player.plays == []


def test_cues_share_statuses_independently():
    """Two cue instances fed the same statuses keep separate state."""
    player = NullAudioPlayer()
    first = PaceCue(player, tolerance_m=5.0)
    second = PaceCue(player, tolerance_m=20.0)
    user, ghost = _pair(8.0)
    assert first.update(user, ghost) is CueKind.FAST
    assert second.update(user, ghost) is None
    assert first.cue_ready is False
    assert second.cue_ready is True
