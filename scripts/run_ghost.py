"""Run against a ghost — replays a recorded track or simulates a steady runner.

Usage:
    uv run python scripts/run_ghost.py --track run.csv --dna "5:40, 1000; 6:00, 1000"
    uv run python scripts/run_ghost.py --simulate-pace 5:30 --ticks 150
    uv run python scripts/run_ghost.py --simulate-pace 6:10 --no-audio
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from ghost_pacer.cues.audio import AudioConfig, NullAudioPlayer, WinsoundPlayer  # noqa: E402
from ghost_pacer.cues.rules import DistanceCue, PaceCue  # noqa: E402
from ghost_pacer.ghost.dna import DNAParseError, format_pace, parse_dna, parse_pace  # noqa: E402
from ghost_pacer.ghost.simulator import GhostRunner  # noqa: E402
from ghost_pacer.session.engine import RunSession  # noqa: E402
from ghost_pacer.session.formatter import StatusFormatter  # noqa: E402
from ghost_pacer.session.location import (  # noqa: E402
    ReplayLocationProvider,
    straight_line_track,
)
from ghost_pacer.session.scheduler import RepeatingTask  # noqa: E402
from ghost_pacer.tracking.tracker import GPSTracker  # noqa: E402

# Start point for simulated runs (Hyde Park, London).
_SIM_LAT = 51.5073
_SIM_LON = -0.1657


def main() -> None:
    ap = argparse.ArgumentParser(description="Ghost Pacer — run against a virtual pacer")
    ap.add_argument("--dna", default=os.environ.get("GHOST_PACER_DNA", "6:00, 1000"),
                    help='Ghost plan, e.g. "5:40, 1000; 6:00, 1000"')
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--track", help="CSV file with latitude,longitude columns")
    src.add_argument("--simulate-pace", help="Simulate a runner holding this pace (M:SS)")
    ap.add_argument("--period", type=float, default=2.0, help="Seconds between fixes")
    ap.add_argument("--ticks", type=int, default=300, help="Number of ticks to run")
    ap.add_argument("--window", type=int,
                    default=int(os.environ.get("GHOST_PACER_WINDOW", "5")),
                    help="Tracker window size (fixes)")
    ap.add_argument("--tolerance", type=float,
                    default=float(os.environ.get("GHOST_PACER_TOLERANCE_M", "10")),
                    help="Pace cue tolerance in metres")
    ap.add_argument("--range", type=float, dest="audible_range",
                    default=float(os.environ.get("GHOST_PACER_AUDIBLE_RANGE_M", "50")),
                    help="Ghost footsteps audible range in metres")
    ap.add_argument("--no-audio", action="store_true", help="Disable audio feedback")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    try:
        plan = parse_dna(args.dna)
        pace = parse_pace(args.simulate_pace) if args.simulate_pace else None
    except DNAParseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.track:
        provider = ReplayLocationProvider.from_csv(args.track)
    else:
        provider = ReplayLocationProvider(
            straight_line_track(_SIM_LAT, _SIM_LON, pace, args.period, args.ticks + 1)
        )

    cfg = AudioConfig()
    audio = NullAudioPlayer() if args.no_audio or sys.platform != "win32" else WinsoundPlayer()

    ghost = GhostRunner(plan)
    session = RunSession(
        GPSTracker(capacity=args.window),
        ghost,
        provider=provider,
        pace_cue=PaceCue(audio, args.tolerance, cfg),
        distance_cue=DistanceCue(audio, args.audible_range, cfg),
    )
    fmt = StatusFormatter()

    print(f"Ghost: {len(ghost.segments)} segment(s), "
          f"{ghost.total_distance_m / 1000:.2f} km, "
          f"{fmt.format_time(ghost.total_running_time_s)}")
    for seg in ghost.segments:
        print(f"  {format_pace(seg.pace)}/km for {seg.distance_m:.0f} m")
    print()

    def _tick() -> None:
        snapshot = session.tick()
        if snapshot is None:
            print("Status not yet ready", flush=True)
        else:
            print(fmt.format_line(snapshot), flush=True)

    session.start()
    task = RepeatingTask(_tick, period_s=args.period, count=args.ticks)
    task.start()
    print("Running. Press Ctrl+C to stop.", flush=True)

    try:
        task.join()
    except KeyboardInterrupt:
        pass
    finally:
        task.cancel()
        print(f"\nStopped after {session.ticks} tick(s), "
              f"{session.failures} missed fix(es).")


if __name__ == "__main__":
    main()
