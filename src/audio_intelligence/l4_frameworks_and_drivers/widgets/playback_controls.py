"""Playback controls -- simulated transport, progress, speed, and volume."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from audio_intelligence.l1_entities.segment import format_clock
from audio_intelligence.l2_use_cases.playback_use_case import PlaybackUseCase
from audio_intelligence.l2_use_cases.timeline_use_case import time_markers
from audio_intelligence.l4_frameworks_and_drivers.messages import PlaybackChanged
from audio_intelligence.l4_frameworks_and_drivers.widgets.level_slider import LevelSlider


def format_speed(speed: float) -> str:
    """Speed badge text: 1.0x, 0.75x, 2.0x."""
    text = f'{speed:g}'
    if '.' not in text:
        text += '.0'
    return f'{text}x'


def _marker_line(total: float) -> str:
    return '    '.join(format_clock(t) for t in time_markers(total))


class PlaybackControls(Vertical):
    """Transport card. No audio plays; the App's interval ticks the clock."""

    DEFAULT_CSS = """
    PlaybackControls {
        height: auto;
        border: round $panel-lighten-1;
        padding: 0 1;
    }
    PlaybackControls #playback-header {
        height: 1;
    }
    PlaybackControls #playback-file {
        width: 1fr;
        text-style: bold;
    }
    PlaybackControls #playback-time {
        width: auto;
        color: $text-muted;
    }
    PlaybackControls #playback-speed {
        width: auto;
        margin-left: 1;
        padding: 0 1;
        background: $panel;
    }
    PlaybackControls #playback-position {
        width: 100%;
    }
    PlaybackControls #playback-markers {
        color: $text-muted;
    }
    PlaybackControls #transport {
        height: auto;
        align-horizontal: center;
    }
    PlaybackControls #transport Button {
        min-width: 10;
        margin: 0 1;
    }
    PlaybackControls #volume-row {
        height: 1;
    }
    PlaybackControls #volume-label {
        width: auto;
        margin-right: 1;
    }
    PlaybackControls #volume-readout {
        width: 6;
        text-align: right;
    }
    PlaybackControls #playing-indicator {
        color: $success;
    }
    """

    def __init__(self, playback: PlaybackUseCase, file_name: str = '', **kwargs) -> None:
        super().__init__(**kwargs)
        self.playback = playback
        self.file_name = file_name

    def compose(self) -> ComposeResult:
        state = self.playback.state
        with Horizontal(id='playback-header'):
            yield Static('', id='playback-file', markup=False)
            yield Static('', id='playback-time')
            yield Static('', id='playback-speed')
        yield LevelSlider(
            state.progress_percent,
            minimum=0,
            maximum=100,
            step=1,
            show_value=False,
            id='playback-position',
        )
        yield Static(_marker_line(state.total_time), id='playback-markers')
        with Horizontal(id='transport'):
            yield Button('⏪ -10s', id='skip-back')
            yield Button('Play', id='play-pause', variant='primary')
            yield Button('+10s ⏩', id='skip-forward')
            yield Button('Stop', id='stop')
            yield Button('Speed', id='cycle-speed')
            yield Button('Mute', id='mute')
        with Horizontal(id='volume-row'):
            yield Static('Volume', id='volume-label')
            yield LevelSlider(state.volume, minimum=0, maximum=100, step=5, id='volume-slider')
            yield Static('', id='volume-readout')
        yield Static('♪ Playing audio...', id='playing-indicator')

    def on_mount(self) -> None:
        self.refresh_view()

    def set_file_name(self, name: str) -> None:
        self.file_name = name
        self.refresh_view()

    def refresh_view(self) -> None:
        state = self.playback.state
        self.query_one('#playback-file', Static).update(self.file_name or 'No file')
        self.query_one('#playback-time', Static).update(
            f'{format_clock(state.position)} / {format_clock(state.total_time)}'
        )
        self.query_one('#playback-speed', Static).update(format_speed(state.speed))
        self.query_one('#playback-position', LevelSlider).sync(state.progress_percent)
        self.query_one('#play-pause', Button).label = 'Pause' if state.is_playing else 'Play'
        self.query_one('#mute', Button).label = 'Unmute' if state.is_muted else 'Mute'
        self.query_one('#volume-readout', Static).update(f'{state.effective_volume}%')
        self.query_one('#playing-indicator', Static).display = state.is_playing

    def _changed(self) -> None:
        self.refresh_view()
        self.post_message(PlaybackChanged())

    def toggle_play_pause(self) -> None:
        self.playback.toggle_play_pause()
        self._changed()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            'skip-back': self.playback.skip_backward,
            'play-pause': self.playback.toggle_play_pause,
            'skip-forward': self.playback.skip_forward,
            'stop': self.playback.stop,
            'cycle-speed': self.playback.cycle_speed,
            'mute': self.playback.toggle_mute,
        }
        action = actions.get(event.button.id or '')
        if action is None:
            return
        event.stop()
        action()
        self._changed()

    def on_level_slider_changed(self, event: LevelSlider.Changed) -> None:
        if event.slider.id == 'volume-slider':
            self.playback.set_volume(int(event.value))
        elif event.slider.id == 'playback-position':
            self.playback.seek_percent(event.value)
        else:
            return
        event.stop()
        self._changed()
