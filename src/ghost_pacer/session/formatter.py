"""Status formatting — display strings for runner/ghost snapshots."""

from __future__ import annotations

from ghost_pacer.ghost.dna import format_pace
from ghost_pacer.session.engine import SessionSnapshot


class StatusFormatter:
    """Formats :class:`SessionSnapshot` for display.

    Pure data transformations with no side effects.
    """

    def format_diff(self, diff_m: float) -> str:
        """Format a separation as a signed string in metres.

        Examples
        --------
        >>> StatusFormatter().format_diff(12.34)
        '+12.3 m'
        >>> StatusFormatter().format_diff(-4.0)
        '-4.0 m'
        """
        sign = "+" if diff_m >= 0 else ""
        return f"{sign}{diff_m:.1f} m"

    def format_time(self, seconds: float) -> str:
        """Format elapsed seconds as ``M:SS`` (or ``H:MM:SS`` past an hour)."""
        total = int(seconds)
        hours, rem = divmod(total, 3600)
        minutes, secs = divmod(rem, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{secs:02d}"
        return f"{minutes}:{secs:02d}"

    def render(self, snapshot: SessionSnapshot) -> dict:
        """Return a display-ready dict.

        Returns
        -------
        dict with keys:
            ``pace``          – runner split pace ``M:SS`` (``--:--`` when stationary)
            ``quality``       – ``good`` / ``ok`` / ``poor``
            ``distance``      – runner distance in km, two decimals
            ``time``          – runner elapsed time
            ``ghost_pace``    – ghost pace ``M:SS``
            ``ghost_distance`` – ghost distance in km, two decimals
            ``diff``          – signed separation in metres
        """
        user, ghost = snapshot.user, snapshot.ghost
        return {
            "pace": format_pace(user.split_pace),
            "quality": user.quality.value if user.quality is not None else "",
            "distance": f"{user.total_distance_m / 1000:.2f} km",
            "time": self.format_time(user.total_time_s),
            "ghost_pace": format_pace(ghost.split_pace),
            "ghost_distance": f"{ghost.total_distance_m / 1000:.2f} km",
            "diff": self.format_diff(snapshot.distance_diff_m),
        }

    def format_line(self, snapshot: SessionSnapshot) -> str:
        """One-line summary for a console or status label."""
        d = self.render(snapshot)
        line = (
            f"Pace {d['pace']} ({d['quality']})  {d['distance']}  {d['time']}  "
            f"ghost {d['ghost_distance']}  diff {d['diff']}"
        )
        if snapshot.cue is not None:
            line += f"  [{snapshot.cue.value}]"
        if snapshot.ghost_finished:
            line += "  ghost finished"
        return line
