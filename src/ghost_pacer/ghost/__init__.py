"""Ghost pace-plan simulation."""

from ghost_pacer.ghost.dna import DNAParseError, format_pace, parse_dna, parse_pace
from ghost_pacer.ghost.models import DEFAULT_SEGMENT_M, Pace, PaceAndDistance, PlanEntry, Segment
from ghost_pacer.ghost.simulator import GhostNotStartedError, GhostRunner, build_segments

__all__ = [
    "DEFAULT_SEGMENT_M",
    "DNAParseError",
    "GhostNotStartedError",
    "GhostRunner",
    "Pace",
    "PaceAndDistance",
    "PlanEntry",
    "Segment",
    "build_segments",
    "format_pace",
    "parse_dna",
    "parse_pace",
]
