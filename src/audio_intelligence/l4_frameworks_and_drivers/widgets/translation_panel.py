"""Translation panel -- searchable translations with a target-language selector."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widgets import Select

from audio_intelligence.l1_entities.language import LANGUAGES, language_info
from audio_intelligence.l2_use_cases.export_use_case import copy_translation_text
from audio_intelligence.l2_use_cases.search_use_case import filter_translations, translation_stats
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l4_frameworks_and_drivers.messages import TargetLanguageChanged
from audio_intelligence.l4_frameworks_and_drivers.widgets.results_panel import ResultsPanel
from audio_intelligence.l4_frameworks_and_drivers.widgets.segment_card import SegmentCard, TranslationCard


def translation_title(code: str) -> str:
    info = language_info(code)
    return f'Translation → {info.flag} {info.name}'


class TranslationPanel(ResultsPanel):
    """Translation results. The target selector is display state only; fixtures are not re-translated."""

    DEFAULT_CSS = """
    TranslationPanel #target-language {
        width: 100%;
    }
    """

    panel_title = 'Translation'
    noun = 'Translation'

    def __init__(self, controller: SessionController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self.segments = controller.session.translations
        self.panel_title = translation_title(controller.target_language)

    def compose_extra(self) -> ComposeResult:
        yield Select(
            [(f'{info.flag} {info.name}', code) for code, info in LANGUAGES.items()],
            value=self._controller.target_language,
            allow_blank=False,
            id='target-language',
        )

    def build_cards(self) -> list[SegmentCard]:
        return [TranslationCard(seg) for seg in self.segments]

    def matching_ids(self, query: str) -> set[str]:
        return {s.id for s in filter_translations(self.segments, query)}

    def stats_text(self) -> str:
        stats = translation_stats(self.segments)
        return f'{stats.segments} segments · {stats.translated} translated · {stats.source_languages} source languages'

    def copy_text(self) -> str:
        return copy_translation_text(self.segments)

    def export_text(self) -> tuple[str, str]:
        return self._controller.settings.export_format, self._controller.export_translations()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != 'target-language' or event.value is Select.BLANK:
            return
        event.stop()
        code = str(event.value)
        self.set_title(translation_title(code))
        if code != self._controller.target_language:
            self.post_message(TargetLanguageChanged(code))
