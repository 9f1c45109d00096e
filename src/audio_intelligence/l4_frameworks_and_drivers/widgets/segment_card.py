"""Segment cards -- selectable transcript and translation entries."""

from __future__ import annotations

from rich.text import Text
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static

from audio_intelligence.l1_entities.language import language_info
from audio_intelligence.l1_entities.segment import (
    TranscriptSegment,
    TranslationSegment,
    confidence_level,
    format_clock,
    format_confidence,
    format_duration,
)
from audio_intelligence.l1_entities.speaker import speaker_color, speaker_initial
from audio_intelligence.l4_frameworks_and_drivers.messages import JumpToTime

CONFIDENCE_STYLES = {'high': 'green', 'medium': 'yellow', 'low': 'red'}


def _confidence(confidence: float) -> Text:
    return Text(format_confidence(confidence), style=CONFIDENCE_STYLES[confidence_level(confidence)])


class SegmentCard(Static, can_focus=True):
    """Base card: Enter or click toggles selection, p jumps playback to the segment start."""

    DEFAULT_CSS = """
    SegmentCard {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border-left: thick $panel-lighten-2;
    }
    SegmentCard:focus {
        background: $boost;
    }
    SegmentCard.selected {
        border-left: thick $accent;
        background: $accent 15%;
    }
    """

    BINDINGS = [
        Binding('enter', 'toggle_select', 'Select', show=False),
        Binding('p', 'play', 'Play', show=False),
    ]

    selected: reactive[bool] = reactive(False)

    class Selected(Message):
        """Posted when a card asks to toggle its selection."""

        def __init__(self, card: SegmentCard) -> None:
            super().__init__()
            self.card = card

    def __init__(self, segment_id: str, start_time: float, **kwargs) -> None:
        super().__init__(**kwargs)
        self.segment_id = segment_id
        self.start_time = start_time

    def watch_selected(self, value: bool) -> None:
        self.set_class(value, 'selected')

    def action_toggle_select(self) -> None:
        self.post_message(self.Selected(self))

    def action_play(self) -> None:
        self.post_message(JumpToTime(self.start_time))

    def on_click(self) -> None:
        self.action_toggle_select()

    def _speaker_line(self, speaker: str, language: str, start: float) -> Text:
        lang = language_info(language)
        line = Text()
        line.append(f' {speaker_initial(speaker)} ', style=f'bold reverse {speaker_color(speaker)}')
        line.append(' ')
        line.append(speaker, style='bold')
        line.append(f'  {lang.flag} {lang.name}  ', style='dim')
        line.append(format_clock(start), style='dim')
        return line


class TranscriptCard(SegmentCard):
    def __init__(self, segment: TranscriptSegment, **kwargs) -> None:
        super().__init__(segment.id, segment.start_time, **kwargs)
        self.segment = segment

    def render(self) -> Text:
        seg = self.segment
        text = self._speaker_line(seg.speaker, seg.language, seg.start_time)
        text.append('  ')
        text.append_text(_confidence(seg.confidence))
        text.append(f'\n{seg.text}\n')
        text.append(
            f'{format_clock(seg.start_time)} - {format_clock(seg.end_time)} ({format_duration(seg.duration)})',
            style='dim',
        )
        return text


class TranslationCard(SegmentCard):
    def __init__(self, segment: TranslationSegment, **kwargs) -> None:
        super().__init__(segment.id, segment.start_time, **kwargs)
        self.segment = segment

    def render(self) -> Text:
        seg = self.segment
        text = self._speaker_line(seg.speaker, seg.original_language, seg.start_time)
        if not seg.needs_translation:
            text.append('  [Original]', style='bold cyan')
            text.append(f'\n{seg.translated_text}')
            return text

        source = language_info(seg.original_language)
        target = language_info(seg.target_language)
        text.append(f'\n{source.flag} {source.name} → {target.flag} {target.name}\n', style='italic')
        text.append(f'Original: {seg.original_text}\n', style='dim')
        text.append(seg.translated_text)
        text.append('\n')
        if seg.is_translating:
            text.append('Translating...', style='yellow')
        else:
            text.append('Translation: ', style='dim')
            text.append_text(_confidence(seg.translation_confidence))
        return text
