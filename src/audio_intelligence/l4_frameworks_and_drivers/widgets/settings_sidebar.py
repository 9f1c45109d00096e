"""Settings sidebar -- audio, processing, speaker, language, and output options."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Label, Select, Static, Switch

from audio_intelligence.l1_entities.language import LANGUAGES
from audio_intelligence.l1_entities.settings import (
    BIT_DEPTHS,
    EXPORT_FORMATS,
    MIN_SPEAKER_DURATIONS,
    SAMPLE_RATES,
    AudioSettings,
)
from audio_intelligence.l4_frameworks_and_drivers.messages import SettingChanged
from audio_intelligence.l4_frameworks_and_drivers.widgets.level_slider import LevelSlider

_PREFIX = 'setting-'

# Sliders that hold integer settings
_INT_SLIDERS = {'noise_gate_db', 'similarity_threshold'}


def _setting_name(widget_id: str | None) -> str | None:
    if widget_id and widget_id.startswith(_PREFIX):
        return widget_id[len(_PREFIX) :]
    return None


class SettingsSidebar(VerticalScroll):
    """Collapsible options column. Every change is posted as SettingChanged."""

    DEFAULT_CSS = """
    SettingsSidebar {
        width: 38;
        height: 1fr;
        border-right: solid $panel-lighten-1;
        padding: 0 1;
        scrollbar-size: 1 1;
    }
    SettingsSidebar #settings-title {
        text-style: bold;
        margin-bottom: 1;
    }
    SettingsSidebar .section-title {
        text-style: bold;
        color: $accent;
        margin-top: 1;
    }
    SettingsSidebar .setting-label {
        color: $text-muted;
    }
    SettingsSidebar .switch-row {
        height: auto;
    }
    SettingsSidebar .switch-row > Label {
        width: 1fr;
        padding-top: 1;
    }
    SettingsSidebar Select {
        width: 100%;
    }
    """

    def __init__(self, settings: AudioSettings, **kwargs) -> None:
        super().__init__(**kwargs)
        self._settings = settings

    def _switch(self, label: str, name: str) -> ComposeResult:
        with Horizontal(classes='switch-row'):
            yield Label(label)
            yield Switch(value=getattr(self._settings, name), id=f'{_PREFIX}{name}')

    def compose(self) -> ComposeResult:
        s = self._settings
        yield Static('Audio Settings', id='settings-title')

        yield Static('Audio Input', classes='section-title')
        yield Label('Sample Rate', classes='setting-label')
        yield Select(
            [(f'{rate} Hz', rate) for rate in SAMPLE_RATES],
            value=s.sample_rate,
            allow_blank=False,
            id=f'{_PREFIX}sample_rate',
        )
        yield Label('Bit Depth', classes='setting-label')
        yield Select(
            [(f'{depth}-bit', depth) for depth in BIT_DEPTHS],
            value=s.bit_depth,
            allow_blank=False,
            id=f'{_PREFIX}bit_depth',
        )

        yield Static('Processing', classes='section-title')
        yield from self._switch('Noise Reduction', 'noise_reduction')
        yield from self._switch('Echo Cancellation', 'echo_cancellation')
        yield Label('Noise Gate Threshold', classes='setting-label')
        yield LevelSlider(s.noise_gate_db, minimum=-80, maximum=0, step=1, suffix=' dB', id=f'{_PREFIX}noise_gate_db')

        yield Static('Speaker ID', classes='section-title')
        yield from self._switch('Speaker Verification', 'speaker_verification')
        yield Label('Minimum Speaker Duration', classes='setting-label')
        yield Select(
            [(f'{d:g} seconds', d) for d in MIN_SPEAKER_DURATIONS],
            value=s.min_speaker_duration,
            allow_blank=False,
            id=f'{_PREFIX}min_speaker_duration',
        )
        yield Label('Speaker Similarity Threshold', classes='setting-label')
        yield LevelSlider(
            s.similarity_threshold,
            minimum=50,
            maximum=100,
            step=5,
            suffix='%',
            id=f'{_PREFIX}similarity_threshold',
        )

        yield Static('Language', classes='section-title')
        yield Label('Target Languages', classes='setting-label')
        yield Select(
            [('Auto-detect', 'auto')] + [(f'{info.flag} {info.name}', code) for code, info in LANGUAGES.items()],
            value=s.target_language,
            allow_blank=False,
            id=f'{_PREFIX}target_language',
        )
        yield from self._switch('Auto-translate to English', 'auto_translate')

        yield Static('Output', classes='section-title')
        yield from self._switch('Include Timestamps', 'include_timestamps')
        yield from self._switch('Confidence Scores', 'confidence_scores')
        yield Label('Export Format', classes='setting-label')
        yield Select(
            [(label, code) for code, label in EXPORT_FORMATS.items()],
            value=s.export_format,
            allow_blank=False,
            id=f'{_PREFIX}export_format',
        )

    def on_select_changed(self, event: Select.Changed) -> None:
        name = _setting_name(event.select.id)
        if name is None or event.value is Select.BLANK:
            return
        event.stop()
        if getattr(self._settings, name) != event.value:
            self.post_message(SettingChanged(name, event.value))

    def on_switch_changed(self, event: Switch.Changed) -> None:
        name = _setting_name(event.switch.id)
        if name is None:
            return
        event.stop()
        self.post_message(SettingChanged(name, event.value))

    def on_level_slider_changed(self, event: LevelSlider.Changed) -> None:
        name = _setting_name(event.slider.id)
        if name is None:
            return
        event.stop()
        value = int(event.value) if name in _INT_SLIDERS else event.value
        self.post_message(SettingChanged(name, value))
