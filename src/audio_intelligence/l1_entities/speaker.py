"""Speaker colour palette for avatars, timeline blocks, and the legend."""

from __future__ import annotations

SPEAKER_COLORS: list[str] = [
    '#0ba5f5',  # hsl(200, 95%, 50%)
    '#a653d1',  # hsl(280, 65%, 55%)
    '#22c45e',  # hsl(140, 70%, 45%)
    '#f4a43b',  # hsl(35, 90%, 55%)
    '#e04ba9',  # hsl(320, 75%, 55%)
]


def speaker_color(speaker: str) -> str:
    """Map 'Speaker N' to palette entry N-1; anything unparseable gets the first colour."""
    try:
        index = int(speaker.replace('Speaker ', '')) - 1
    except ValueError:
        return SPEAKER_COLORS[0]
    if 0 <= index < len(SPEAKER_COLORS):
        return SPEAKER_COLORS[index]
    return SPEAKER_COLORS[0]


def speaker_initial(speaker: str) -> str:
    return speaker[-1:] if speaker else '?'
