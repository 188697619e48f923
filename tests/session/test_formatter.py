"""StatusFormatter."""

from __future__ import annotations

import math

from ghost_pacer.cues.rules import CueKind
from ghost_pacer.session.engine import SessionSnapshot
from ghost_pacer.session.formatter import StatusFormatter
from ghost_pacer.tracking.models import PaceQuality, TrackerStatus


def _snapshot(**kwargs) -> SessionSnapshot:
    defaults = dict(
        tick=10,
        user=TrackerStatus(5.67, 1234.0, 425.0, PaceQuality.GOOD),
        ghost=TrackerStatus(6.0, 1180.0, 425.0),
        distance_diff_m=54.0,
    )
    defaults.update(kwargs)
    return SessionSnapshot(**defaults)


def test_format_diff_signs():
    fmt = StatusFormatter()
    assert fmt.format_diff(12.34) == "+12.3 m"
    assert fmt.format_diff(-4.0) == "-4.0 m"
    assert fmt.format_diff(0.0) == "+0.0 m"


def test_format_time():
    fmt = StatusFormatter()
    assert fmt.format_time(425.0) == "7:05"
    assert fmt.format_time(3725.0) == "1:02:05"


def test_render_fields():
    d = StatusFormatter().render(_snapshot())
    assert d == {
        "pace": "5:40",
        "quality": "good",
        "distance": "1.23 km",
        "time": "7:05",
        "ghost_pace": "6:00",
        "ghost_distance": "1.18 km",
        "diff": "+54.0 m",
    }


def test_render_stationary_pace():
    snap = _snapshot(user=TrackerStatus(math.inf, 0.0, 10.0, PaceQuality.POOR))
    assert StatusFormatter().render(snap)["pace"] == "--:--"


def test_format_line_includes_cue_and_finish():
    line = StatusFormatter().format_line(_snapshot(cue=CueKind.FAST, ghost_finished=True))
    assert "5:40" in line
    assert "[fast]" in line
    assert "ghost finished" in line
