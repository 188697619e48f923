"""Audio players — winsound wrapper with NullAudioPlayer for tests."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

_logger = logging.getLogger(__name__)


@dataclass
class AudioConfig:
    """Sound references for each cue."""

    slow_ref: str = "audio/slow.wav"    # runner behind the ghost
    keep_ref: str = "audio/keep.wav"    # back within range
    fast_ref: str = "audio/fast.wav"    # runner ahead of the ghost
    ambient_ref: str = "audio/gravel.wav"  # looping ghost footsteps


@dataclass
class Sound:
    """Handle returned by a player's ``load``."""

    ref: str
    loop: bool = False
    volume: float = 1.0
    playing: bool = False


class NullAudioPlayer:
    """No-op player; records calls for test assertions."""

    def __init__(self) -> None:
        self.loads: list[str] = []
        self.plays: list[str] = []
        self.volumes: list[tuple[str, float]] = []

    def load(self, ref: str) -> Sound:
        self.loads.append(ref)
        return Sound(ref)

    def play(self, sound: Sound) -> None:
        sound.playing = True
        self.plays.append(sound.ref)

    def set_loop(self, sound: Sound, loop: bool) -> None:
        sound.loop = loop

    def set_volume(self, sound: Sound, volume: float) -> None:
        sound.volume = volume
        self.volumes.append((sound.ref, volume))


class WinsoundPlayer:
    """Plays WAV files asynchronously via ``winsound.PlaySound``.

    ``winsound`` has no per-sound volume and plays one sound at a time, so a
    looping sound is silenced when its volume drops to zero and resumed when
    it rises again.  A one-shot cue interrupts the loop until the next volume
    change restarts it.

    A no-op on non-Windows platforms.  Playback failures (e.g. a missing
    file) are logged and never raised.
    """

    def __init__(self) -> None:
        self._loop_interrupted = False

    def load(self, ref: str) -> Sound:
        return Sound(ref)

    def play(self, sound: Sound) -> None:
        sound.playing = True
        if not sound.loop:
            self._loop_interrupted = True
        self._play_file(sound)

    def set_loop(self, sound: Sound, loop: bool) -> None:
        sound.loop = loop

    def set_volume(self, sound: Sound, volume: float) -> None:
        was_audible = sound.volume > 0.0
        sound.volume = volume
        if not (sound.loop and sound.playing):
            return
        if volume <= 0.0 and was_audible:
            self._purge()
        elif volume > 0.0 and (not was_audible or self._loop_interrupted):
            self._loop_interrupted = False
            self._play_file(sound)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _play_file(self, sound: Sound) -> None:
        if sys.platform != "win32":
            return
        import winsound

        flags = winsound.SND_FILENAME | winsound.SND_ASYNC
        if sound.loop:
            flags |= winsound.SND_LOOP
        try:
            winsound.PlaySound(sound.ref, flags)
        except RuntimeError as exc:
            _logger.warning("Could not play %s: %s", sound.ref, exc)

    def _purge(self) -> None:
        if sys.platform != "win32":
            return
        import winsound

        winsound.PlaySound(None, winsound.SND_PURGE)
