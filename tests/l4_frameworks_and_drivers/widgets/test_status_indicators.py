"""Tests for the pipeline status card."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import ProgressBar, Static

from audio_intelligence.l1_entities.stage import ProcessingStage, StageStatus
from audio_intelligence.l2_use_cases.stage_use_case import build_stages
from audio_intelligence.l4_frameworks_and_drivers.widgets.status_indicators import (
    StatusIndicators,
    stage_chip_text,
)


def _text(widget: StatusIndicators, selector: str) -> str:
    return str(widget.query_one(selector, Static).content)


class StatusHost(App[None]):
    def __init__(self, stages: list[ProcessingStage], current: str = 'upload') -> None:
        super().__init__()
        self._stages = stages
        self._current = current

    def compose(self) -> ComposeResult:
        yield StatusIndicators(self._stages, self._current, id='status')


class TestStageChipText:
    def test_pending_uses_stage_icon(self):
        stage = ProcessingStage(id='asr', name='Speech Recognition', icon='♪')
        assert stage_chip_text(stage) == '♪ Speech Recognition'

    def test_completed(self):
        stage = ProcessingStage(id='upload', name='File Upload', status=StageStatus.COMPLETED, icon='⇪')
        assert stage_chip_text(stage) == '✔ File Upload'

    def test_processing_shows_percent(self):
        stage = ProcessingStage(id='x', name='Speaker Identification', status=StageStatus.PROCESSING, progress=65)
        assert stage_chip_text(stage) == '⟳ Speaker Identification 65%'

    def test_error(self):
        stage = ProcessingStage(id='x', name='Translation', status=StageStatus.ERROR)
        assert stage_chip_text(stage) == '✗ Translation'


class TestStatusIndicators:
    @pytest.mark.asyncio
    async def test_initial_pending(self):
        app = StatusHost(build_stages(uploaded=False, is_processing=False, current_stage='upload'))
        async with app.run_test():
            status = app.query_one(StatusIndicators)
            assert _text(status, '#status-title') == 'Processing Progress'
            assert _text(status, '#status-badge') == 'Pending'
            assert _text(status, '#status-progress-text') == '0 of 6 stages complete'
            assert status.query_one('#overall-progress', ProgressBar).progress == 0
            assert len(status.query('.stage-chip')) == 6
            assert status.query_one('#stage-upload').has_class('active')
            assert not status.query_one('#stage-detail').display

    @pytest.mark.asyncio
    async def test_upload_completed_and_processing(self):
        app = StatusHost(build_stages(uploaded=False, is_processing=False, current_stage='upload'))
        async with app.run_test() as pilot:
            status = app.query_one(StatusIndicators)
            status.update_stages(
                build_stages(uploaded=True, is_processing=True, current_stage='speaker-id'),
                'speaker-id',
            )
            await pilot.pause()
            assert _text(status, '#status-progress-text') == '1 of 6 stages complete'
            assert _text(status, '#status-badge') == 'Processing'
            assert status.query_one('#status-badge').has_class('processing')
            assert status.query_one('#overall-progress', ProgressBar).progress == pytest.approx(100 / 6)

            upload = status.query_one('#stage-upload')
            assert upload.has_class('completed')
            assert not upload.has_class('active')
            speaker = status.query_one('#stage-speaker-id')
            assert speaker.has_class('processing')
            assert speaker.has_class('active')
            assert _text(status, '#stage-speaker-id') == '⟳ Speaker Identification 65%'

            detail = status.query_one('#stage-detail', Static)
            assert detail.display
            assert str(detail.content) == '⟳ Speaker Identification in progress · 65%'

    @pytest.mark.asyncio
    async def test_error_stage(self):
        stages = build_stages(uploaded=True, is_processing=False, current_stage='upload')
        stages[3] = stages[3].model_copy(update={'status': StageStatus.ERROR})
        app = StatusHost(stages)
        async with app.run_test():
            status = app.query_one(StatusIndicators)
            assert _text(status, '#status-badge') == 'Error'
            detail = status.query_one('#stage-detail', Static)
            assert detail.display
            assert detail.has_class('error')
            assert str(detail.content).startswith('✗ Error in Language Identification')
            assert 'Processing failed' in str(detail.content)

    @pytest.mark.asyncio
    async def test_all_complete(self):
        stages = [
            s.model_copy(update={'status': StageStatus.COMPLETED})
            for s in build_stages(uploaded=True, is_processing=False, current_stage='upload')
        ]
        app = StatusHost(stages)
        async with app.run_test():
            status = app.query_one(StatusIndicators)
            assert _text(status, '#status-badge') == 'Complete'
            assert status.summary.progress_text == '6 of 6 stages complete'
            assert status.query_one('#overall-progress', ProgressBar).progress == 100
