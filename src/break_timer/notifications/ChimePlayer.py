import logging
from typing import Optional, Sequence

import numpy as np
import pygame


def synthesize_chime(
    sample_rate: int,
    channels: int,
    frequencies: Sequence[float],
    duration: float,
    volume: float
) -> np.ndarray:
    """
    Render a decaying chord as signed 16 bit samples.

    Returns an array shaped (samples,) for mono or (samples, channels).
    """
    t = np.arange(int(sample_rate * duration)) / sample_rate

    wave = np.zeros_like(t)
    for frequency in frequencies:
        wave += np.sin(2 * np.pi * frequency * t)

    # Exponential decay, 5 time constants over the full duration
    wave *= np.exp(-5 * t / duration)

    peak = np.max(np.abs(wave))
    if peak > 0:
        wave /= peak

    samples = (wave * volume * 32767).astype(np.int16)

    if channels > 1:
        samples = np.repeat(samples[:, np.newaxis], channels, axis=1)

    return np.ascontiguousarray(samples)


class ChimePlayer:
    def __init__(
        self,
        frequencies: Sequence[float] = (880.0, 1318.5),
        duration: float = 0.8,
        volume: float = 0.4
    ) -> None:
        self.frequencies = frequencies
        self.duration = duration
        self.volume = volume

        self._sound: Optional[pygame.mixer.Sound] = None

    def play(self) -> None:
        if not self._ensure_mixer():
            return

        if self._sound is None:
            sample_rate, _, channels = pygame.mixer.get_init()
            samples = synthesize_chime(
                sample_rate,
                channels,
                self.frequencies,
                self.duration,
                self.volume
            )
            self._sound = pygame.sndarray.make_sound(samples)

        self._sound.play()

    def _ensure_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True

        try:
            pygame.mixer.init(size=-16)
            return True
        except pygame.error as e:
            logging.warning(f"Audio unavailable, reminder is silent: {e}")
            return False
