"""Language display table -- code to human name and flag."""

from __future__ import annotations

from typing import NamedTuple


class LanguageInfo(NamedTuple):
    name: str
    flag: str


LANGUAGES: dict[str, LanguageInfo] = {
    'en': LanguageInfo('English', '🇺🇸'),
    'es': LanguageInfo('Spanish', '🇪🇸'),
    'fr': LanguageInfo('French', '🇫🇷'),
    'de': LanguageInfo('German', '🇩🇪'),
    'it': LanguageInfo('Italian', '🇮🇹'),
    'pt': LanguageInfo('Portuguese', '🇵🇹'),
    'ru': LanguageInfo('Russian', '🇷🇺'),
    'zh': LanguageInfo('Chinese', '🇨🇳'),
    'ja': LanguageInfo('Japanese', '🇯🇵'),
    'ko': LanguageInfo('Korean', '🇰🇷'),
}

UNKNOWN_LANGUAGE = LanguageInfo('Unknown', '🌐')


def language_info(code: str) -> LanguageInfo:
    return LANGUAGES.get(code, UNKNOWN_LANGUAGE)
