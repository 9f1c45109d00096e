"""Use case: render transcript and translation lists for the clipboard or export.

Rendering returns strings only; nothing is written to disk.
"""

from __future__ import annotations

import csv
import io
import json

from audio_intelligence.l1_entities.segment import TranscriptSegment, TranslationSegment, format_clock


def _subtitle_time(seconds: float, sep: str) -> str:
    millis = int(round(seconds * 1000))
    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    secs, millis = divmod(millis, 1000)
    return f'{hours:02d}:{minutes:02d}:{secs:02d}{sep}{millis:03d}'


def _lines(rows: list[tuple[float, str, str]], *, include_timestamps: bool) -> str:
    if include_timestamps:
        return '\n\n'.join(f'[{format_clock(start)}] {speaker}: {text}' for start, speaker, text in rows)
    return '\n\n'.join(f'{speaker}: {text}' for _, speaker, text in rows)


def _srt(cues: list[tuple[float, float, str, str]]) -> str:
    blocks = []
    for n, (start, end, speaker, text) in enumerate(cues, start=1):
        blocks.append(f'{n}\n{_subtitle_time(start, ",")} --> {_subtitle_time(end, ",")}\n{speaker}: {text}\n')
    return '\n'.join(blocks)


def _vtt(cues: list[tuple[float, float, str, str]]) -> str:
    blocks = ['WEBVTT\n']
    for start, end, speaker, text in cues:
        blocks.append(f'{_subtitle_time(start, ".")} --> {_subtitle_time(end, ".")}\n{speaker}: {text}\n')
    return '\n'.join(blocks)


def _csv(rows: list[dict]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(
        buf,
        fieldnames=['id', 'speaker', 'start', 'end', 'language', 'confidence', 'text'],
        lineterminator='\n',
    )
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue()


def copy_transcript_text(segments: list[TranscriptSegment]) -> str:
    """Clipboard text: '[m:ss] Speaker: text' blocks separated by a blank line."""
    return _lines([(s.start_time, s.speaker, s.text) for s in segments], include_timestamps=True)


def copy_translation_text(segments: list[TranslationSegment]) -> str:
    return _lines([(s.start_time, s.speaker, s.translated_text) for s in segments], include_timestamps=True)


def export_transcript(segments: list[TranscriptSegment], fmt: str, *, include_timestamps: bool = True) -> str:
    """Render the transcript in *fmt* (json, txt, srt, vtt, csv). Raises ValueError for unknown formats."""
    if fmt == 'json':
        return json.dumps([s.model_dump() for s in segments], indent=2, ensure_ascii=False)
    if fmt == 'txt':
        return _lines([(s.start_time, s.speaker, s.text) for s in segments], include_timestamps=include_timestamps)
    cues = [(s.start_time, s.end_time, s.speaker, s.text) for s in segments]
    if fmt == 'srt':
        return _srt(cues)
    if fmt == 'vtt':
        return _vtt(cues)
    if fmt == 'csv':
        return _csv(
            [
                {
                    'id': s.id,
                    'speaker': s.speaker,
                    'start': s.start_time,
                    'end': s.end_time,
                    'language': s.language,
                    'confidence': s.confidence,
                    'text': s.text,
                }
                for s in segments
            ]
        )
    raise ValueError(f'Unknown export format: {fmt!r}')


def export_translations(segments: list[TranslationSegment], fmt: str, *, include_timestamps: bool = True) -> str:
    """Render translated text in *fmt*; json keeps both original and translation."""
    if fmt == 'json':
        return json.dumps([s.model_dump() for s in segments], indent=2, ensure_ascii=False)
    if fmt == 'txt':
        return _lines(
            [(s.start_time, s.speaker, s.translated_text) for s in segments],
            include_timestamps=include_timestamps,
        )
    cues = [(s.start_time, s.end_time, s.speaker, s.translated_text) for s in segments]
    if fmt == 'srt':
        return _srt(cues)
    if fmt == 'vtt':
        return _vtt(cues)
    if fmt == 'csv':
        return _csv(
            [
                {
                    'id': s.id,
                    'speaker': s.speaker,
                    'start': s.start_time,
                    'end': s.end_time,
                    'language': s.target_language,
                    'confidence': s.translation_confidence,
                    'text': s.translated_text,
                }
                for s in segments
            ]
        )
    raise ValueError(f'Unknown export format: {fmt!r}')
