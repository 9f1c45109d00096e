"""Use case: case-insensitive search and list statistics for result panels."""

from __future__ import annotations

from dataclasses import dataclass

from audio_intelligence.l1_entities.segment import TranscriptSegment, TranslationSegment


def filter_transcript(segments: list[TranscriptSegment], query: str) -> list[TranscriptSegment]:
    """Keep segments whose text or speaker contains *query*, ignoring case."""
    needle = query.lower()
    return [s for s in segments if needle in s.text.lower() or needle in s.speaker.lower()]


def filter_translations(segments: list[TranslationSegment], query: str) -> list[TranslationSegment]:
    """Keep segments whose translated text, original text, or speaker contains *query*."""
    needle = query.lower()
    return [
        s
        for s in segments
        if needle in s.translated_text.lower() or needle in s.original_text.lower() or needle in s.speaker.lower()
    ]


@dataclass(frozen=True)
class TranscriptStats:
    segments: int
    speakers: int
    languages: int


@dataclass(frozen=True)
class TranslationStats:
    segments: int
    translated: int
    source_languages: int


def transcript_stats(segments: list[TranscriptSegment]) -> TranscriptStats:
    return TranscriptStats(
        segments=len(segments),
        speakers=len({s.speaker for s in segments}),
        languages=len({s.language for s in segments}),
    )


def translation_stats(segments: list[TranslationSegment]) -> TranslationStats:
    return TranslationStats(
        segments=len(segments),
        translated=sum(1 for s in segments if s.needs_translation),
        source_languages=len({s.original_language for s in segments}),
    )
