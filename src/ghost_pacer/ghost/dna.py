"""Ghost plan ("DNA") notation.

A plan is written as segments separated by ``;``.  Each segment is
``pace, distance`` or a bare ``pace``::

    "5:40, 1000; 6:00, 1000"
    "5:30; 5:15; 4:50, 400"

Pace is ``M:SS`` per kilometre (converted to minutes, rounded to two
decimals) or decimal minutes.  Distance is in metres; a bare pace covers the
default 1000 m segment.
"""

from __future__ import annotations

import math
import re

from ghost_pacer.ghost.models import Pace, PaceAndDistance, PlanEntry

_PACE_RE = re.compile(r"^(\d+):([0-5]\d)$")


class DNAParseError(ValueError):
    """Raised when a ghost plan string is malformed."""


def parse_pace(text: str) -> float:
    """Parse ``M:SS`` or decimal minutes into minutes per kilometre.

    Raises:
        DNAParseError: If *text* is not a valid, positive pace.
    """
    text = text.strip()
    m = _PACE_RE.match(text)
    if m:
        minutes = int(m.group(1)) + int(m.group(2)) / 60.0
        pace = round(minutes, 2)
    else:
        try:
            pace = float(text)
        except ValueError:
            raise DNAParseError(f"Invalid pace {text!r}; expected M:SS or minutes") from None
    if not math.isfinite(pace) or pace <= 0:
        raise DNAParseError(f"Pace must be positive, got {text!r}")
    return pace


def _parse_distance(text: str) -> float:
    try:
        distance = float(text)
    except ValueError:
        raise DNAParseError(f"Invalid distance {text!r}; expected metres") from None
    if not math.isfinite(distance) or distance <= 0:
        raise DNAParseError(f"Distance must be positive, got {text!r}")
    return distance


def parse_dna(text: str) -> list[PlanEntry]:
    """Parse a ghost plan string into plan entries.

    Blank segments (e.g. a trailing ``;``) are skipped.

    Raises:
        DNAParseError: If any segment is malformed or the plan is empty.
    """
    entries: list[PlanEntry] = []
    for raw in text.split(";"):
        segment = raw.strip()
        if not segment:
            continue
        parts = [p.strip() for p in segment.split(",")]
        if len(parts) == 1:
            entries.append(Pace(parse_pace(parts[0])))
        elif len(parts) == 2:
            entries.append(PaceAndDistance(parse_pace(parts[0]), _parse_distance(parts[1])))
        else:
            raise DNAParseError(f"Invalid segment {segment!r}; expected 'pace, distance'")

    if not entries:
        raise DNAParseError("Ghost plan is empty")
    return entries


def format_pace(minutes_per_km: float) -> str:
    """Format a pace as ``M:SS``; ``'--:--'`` when not finite.

    Examples
    --------
    >>> format_pace(5.67)
    '5:40'
    >>> format_pace(float("inf"))
    '--:--'
    """
    if not math.isfinite(minutes_per_km) or minutes_per_km < 0:
        return "--:--"
    total_s = round(minutes_per_km * 60)
    return f"{total_s // 60}:{total_s % 60:02d}"
