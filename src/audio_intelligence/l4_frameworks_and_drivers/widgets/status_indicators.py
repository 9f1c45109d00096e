"""Status indicators -- overall progress, badge, and one chip per processing stage."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import ProgressBar, Static

from audio_intelligence.l1_entities.stage import ProcessingStage, StageStatus
from audio_intelligence.l2_use_cases.stage_use_case import StageSummary, stage_progress, summarize_stages

_STATUS_ICONS = {
    StageStatus.COMPLETED: '✔',
    StageStatus.PROCESSING: '⟳',
    StageStatus.ERROR: '✗',
}


def stage_chip_text(stage: ProcessingStage) -> str:
    icon = _STATUS_ICONS.get(stage.status, stage.icon)
    text = f'{icon} {stage.name}'
    if stage.status == StageStatus.PROCESSING:
        text += f' {stage_progress(stage)}%'
    return text


class StatusIndicators(Vertical):
    """Pipeline progress card shown above the main content."""

    DEFAULT_CSS = """
    StatusIndicators {
        height: auto;
        border: round $panel-lighten-1;
        padding: 0 1;
    }
    StatusIndicators #status-header {
        height: 1;
    }
    StatusIndicators #status-title {
        width: 1fr;
        text-style: bold;
    }
    StatusIndicators #status-badge {
        width: auto;
        padding: 0 1;
        background: $panel;
    }
    StatusIndicators #status-badge.processing {
        background: $primary;
    }
    StatusIndicators #status-badge.complete {
        background: $success;
    }
    StatusIndicators #status-badge.error {
        background: $error;
    }
    StatusIndicators #status-progress-text {
        color: $text-muted;
    }
    StatusIndicators #overall-progress {
        width: 100%;
    }
    StatusIndicators #stage-chips {
        height: auto;
    }
    StatusIndicators .stage-chip {
        width: auto;
        margin-right: 2;
        color: $text-muted;
    }
    StatusIndicators .stage-chip.completed {
        color: $success;
    }
    StatusIndicators .stage-chip.error {
        color: $error;
    }
    StatusIndicators .stage-chip.active {
        color: $accent;
        text-style: bold;
    }
    StatusIndicators #stage-detail {
        color: $accent;
    }
    StatusIndicators #stage-detail.error {
        color: $error;
    }
    """

    def __init__(self, stages: list[ProcessingStage], current_stage: str = 'upload', **kwargs) -> None:
        super().__init__(**kwargs)
        self._stages = stages
        self._current_stage = current_stage

    @property
    def summary(self) -> StageSummary:
        return summarize_stages(self._stages)

    def compose(self) -> ComposeResult:
        with Horizontal(id='status-header'):
            yield Static('Processing Progress', id='status-title')
            yield Static('', id='status-badge')
        yield Static('', id='status-progress-text')
        yield ProgressBar(total=100, show_eta=False, id='overall-progress')
        with Horizontal(id='stage-chips'):
            for stage in self._stages:
                yield Static('', id=f'stage-{stage.id}', classes='stage-chip')
        yield Static('', id='stage-detail')

    def on_mount(self) -> None:
        self._refresh_view()

    def update_stages(self, stages: list[ProcessingStage], current_stage: str) -> None:
        self._stages = stages
        self._current_stage = current_stage
        self._refresh_view()

    def _refresh_view(self) -> None:
        summary = self.summary

        badge = self.query_one('#status-badge', Static)
        badge.update(summary.badge)
        for name in ('processing', 'complete', 'error', 'pending'):
            badge.set_class(summary.badge.lower() == name, name)

        self.query_one('#status-progress-text', Static).update(summary.progress_text)
        self.query_one('#overall-progress', ProgressBar).update(progress=summary.overall_progress)

        for stage in self._stages:
            chip = self.query_one(f'#stage-{stage.id}', Static)
            chip.update(stage_chip_text(stage))
            for status in StageStatus:
                chip.set_class(stage.status == status, status.value)
            chip.set_class(
                stage.id == self._current_stage or stage.status == StageStatus.PROCESSING,
                'active',
            )

        detail = self.query_one('#stage-detail', Static)
        if summary.error_stage is not None:
            detail.update(
                f'✗ Error in {summary.error_stage.name}\n'
                'Processing failed. Please try again or check your file.'
            )
        elif summary.processing_stage is not None:
            stage = summary.processing_stage
            detail.update(f'⟳ {stage.name} in progress · {stage_progress(stage)}%')
        else:
            detail.update('')
        detail.display = summary.error_stage is not None or summary.processing_stage is not None
        detail.set_class(summary.error_stage is not None, 'error')
