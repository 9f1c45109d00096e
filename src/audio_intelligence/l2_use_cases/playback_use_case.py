"""Use case: simulated transport controls over PlaybackState."""

from __future__ import annotations

import logging

from audio_intelligence.l1_entities.config import PlaybackConfig
from audio_intelligence.l1_entities.playback import PLAYBACK_SPEEDS, PlaybackState

log = logging.getLogger('audint.playback')


def initial_playback_state(config: PlaybackConfig) -> PlaybackState:
    return PlaybackState(
        total_time=config.total_time,
        position=min(config.initial_position, config.total_time),
        volume=config.initial_volume,
    )


class PlaybackUseCase:
    """Mutates a PlaybackState in response to transport actions. No audio is involved."""

    def __init__(self, state: PlaybackState, skip_seconds: float = 10.0, speeds: list[float] | None = None) -> None:
        self.state = state
        self._skip = skip_seconds
        self._speeds = speeds or list(PLAYBACK_SPEEDS)

    def toggle_play_pause(self) -> bool:
        self.state.is_playing = not self.state.is_playing
        log.debug('Playback %s at %.1fs', 'started' if self.state.is_playing else 'paused', self.state.position)
        return self.state.is_playing

    def stop(self) -> None:
        self.state.is_playing = False
        self.state.position = 0.0

    def seek_time(self, seconds: float) -> None:
        self.state.position = min(max(seconds, 0.0), self.state.total_time)

    def seek_percent(self, percent: float) -> None:
        percent = min(max(percent, 0.0), 100.0)
        self.state.position = percent / 100 * self.state.total_time

    def skip_backward(self) -> None:
        self.seek_time(self.state.position - self._skip)

    def skip_forward(self) -> None:
        self.seek_time(self.state.position + self._skip)

    def toggle_mute(self) -> bool:
        self.state.is_muted = not self.state.is_muted
        return self.state.is_muted

    def set_volume(self, volume: int) -> None:
        volume = min(max(volume, 0), 100)
        self.state.volume = volume
        if volume > 0:
            self.state.is_muted = False

    def cycle_speed(self) -> float:
        """Advance to the next speed; an unknown current speed wraps to the first."""
        try:
            idx = self._speeds.index(self.state.speed)
        except ValueError:
            idx = -1
        self.state.speed = self._speeds[(idx + 1) % len(self._speeds)]
        return self.state.speed

    def tick(self, elapsed: float) -> None:
        """Advance the simulated clock while playing; stop at the end of the file."""
        if not self.state.is_playing:
            return
        position = self.state.position + elapsed * self.state.speed
        if position >= self.state.total_time:
            self.state.position = self.state.total_time
            self.state.is_playing = False
            log.debug('Playback reached end (%.1fs)', self.state.total_time)
            return
        self.state.position = position
