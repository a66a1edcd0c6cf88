# audio.py
import logging
from typing import Dict, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import SAMPLE_RATE

logger = logging.getLogger(__name__)

EAT = "eat"
GAME_OVER = "game_over"


def tone(
    start_hz: float,
    duration_ms: int,
    end_hz: Optional[float] = None,
    volume: float = 0.3,
    rate: int = SAMPLE_RATE,
    channels: int = 1,
) -> np.ndarray:
    """16-bit sine chirp from start_hz to end_hz with a short linear fade out."""
    n = max(int(rate * duration_ms / 1000), 1)
    end_hz = start_hz if end_hz is None else end_hz
    freq = np.linspace(start_hz, end_hz, n)
    phase = 2 * np.pi * np.cumsum(freq) / rate

    fade = min(n, int(rate * 0.03))
    envelope = np.ones(n)
    if fade > 0:
        envelope[-fade:] = np.linspace(1.0, 0.0, fade)

    amplitude = 32767 * max(0.0, min(volume, 1.0))
    samples = (amplitude * envelope * np.sin(phase)).astype(np.int16)
    if channels > 1:
        samples = np.repeat(samples[:, None], channels, axis=1)
    return samples


class SoundBoard:
    """Fire-and-forget cues. Missing cues and playback errors are ignored."""

    def __init__(self, sounds: Optional[Dict[str, "pygame.mixer.Sound"]] = None):
        self.sounds = sounds or {}

    @classmethod
    def load(cls, enabled: bool = True) -> "SoundBoard":
        if not enabled:
            return cls()
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            rate, _, channels = pygame.mixer.get_init()
            sounds = {
                EAT: pygame.sndarray.make_sound(
                    tone(720, 90, end_hz=520, rate=rate, channels=channels)),
                GAME_OVER: pygame.sndarray.make_sound(
                    tone(420, 450, end_hz=110, volume=0.25, rate=rate, channels=channels)),
            }
        except pygame.error as exc:
            logger.warning("sound disabled: %s", exc)
            return cls()
        return cls(sounds)

    def play(self, cue: str) -> None:
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning("could not play %r: %s", cue, exc)
