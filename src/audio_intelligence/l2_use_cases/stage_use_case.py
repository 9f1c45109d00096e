"""Use case: derive the simulated stage list and its overall summary."""

from __future__ import annotations

from dataclasses import dataclass

from audio_intelligence.l1_entities.stage import STAGE_DEFINITIONS, ProcessingStage, StageStatus

ACTIVE_STAGE_ID = 'speaker-id'


def build_stages(
    *,
    uploaded: bool,
    is_processing: bool,
    current_stage: str,
    active_progress: int = 65,
) -> list[ProcessingStage]:
    """Build the faked pipeline state.

    Only the upload and speaker-id stages ever move; the rest stay pending.
    """
    stages: list[ProcessingStage] = []
    for stage_id, name, icon in STAGE_DEFINITIONS:
        status = StageStatus.PENDING
        progress = 0
        if stage_id == 'upload' and uploaded:
            status = StageStatus.COMPLETED
            progress = 100
        elif stage_id == ACTIVE_STAGE_ID:
            if is_processing and current_stage == ACTIVE_STAGE_ID:
                status = StageStatus.PROCESSING
            if current_stage == ACTIVE_STAGE_ID:
                progress = active_progress
        stages.append(ProcessingStage(id=stage_id, name=name, status=status, progress=progress, icon=icon))
    return stages


def stage_progress(stage: ProcessingStage) -> int:
    if stage.status == StageStatus.COMPLETED:
        return 100
    if stage.status == StageStatus.PROCESSING:
        return stage.progress
    return 0


@dataclass(frozen=True)
class StageSummary:
    """Aggregate view over a stage list for the overall progress badge."""

    completed: int
    total: int
    processing_stage: ProcessingStage | None = None
    error_stage: ProcessingStage | None = None

    @property
    def overall_progress(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total * 100

    @property
    def badge(self) -> str:
        if self.error_stage is not None:
            return 'Error'
        if self.processing_stage is not None:
            return 'Processing'
        if self.total and self.completed == self.total:
            return 'Complete'
        return 'Pending'

    @property
    def progress_text(self) -> str:
        return f'{self.completed} of {self.total} stages complete'


def summarize_stages(stages: list[ProcessingStage]) -> StageSummary:
    return StageSummary(
        completed=sum(1 for s in stages if s.status == StageStatus.COMPLETED),
        total=len(stages),
        processing_stage=next((s for s in stages if s.status == StageStatus.PROCESSING), None),
        error_stage=next((s for s in stages if s.status == StageStatus.ERROR), None),
    )
