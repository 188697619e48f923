"""Audio cue decisions and players."""

from ghost_pacer.cues.audio import AudioConfig, NullAudioPlayer, Sound, WinsoundPlayer
from ghost_pacer.cues.rules import CueKind, DistanceCue, PaceCue, distance_diff

__all__ = [
    "AudioConfig",
    "CueKind",
    "DistanceCue",
    "NullAudioPlayer",
    "PaceCue",
    "Sound",
    "WinsoundPlayer",
    "distance_diff",
]
