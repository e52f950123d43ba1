from __future__ import annotations

from typing import Dict, List, Tuple

from behave.i18n import languages

from pickles_core.constants import DEFAULT_LANGUAGE, MARKER_LANGUAGE
from pickles_core.errors import KeywordResolutionError, UnknownLanguageError
from pickles_core.model import Keyword


# first spelling wins, so the generic step marker `*` resolves to AND
_LOCALIZATION_KEYS: List[Tuple[str, Keyword]] = [
    ('feature', Keyword.FEATURE),
    ('background', Keyword.BACKGROUND),
    ('scenario', Keyword.SCENARIO),
    ('scenario_outline', Keyword.SCENARIO_OUTLINE),
    ('examples', Keyword.EXAMPLES),
    ('and', Keyword.AND),
    ('given', Keyword.GIVEN),
    ('when', Keyword.WHEN),
    ('then', Keyword.THEN),
    ('but', Keyword.BUT),
]

KeywordTable = Dict[str, Keyword]


def normalize_keyword(text: str) -> str:
    return text.strip().rstrip(':').strip()


def get_keyword_table(language: str = DEFAULT_LANGUAGE) -> KeywordTable:
    localizations: Dict[str, List[str]] = languages.get(language, {})
    if localizations == {}:
        raise UnknownLanguageError(f'unknown language "{language}"')

    table: KeywordTable = {}

    for key, keyword in _LOCALIZATION_KEYS:
        for spelling in localizations.get(key, []):
            table.setdefault(normalize_keyword(spelling), keyword)

    return table


def resolve_keyword(table: KeywordTable, text: str, *, language: str = DEFAULT_LANGUAGE) -> Keyword:
    try:
        return table[normalize_keyword(text)]
    except KeyError:
        raise KeywordResolutionError(f'"{text.strip()}" is not a valid keyword for "{language}"')


def find_language(source: str, default: str = DEFAULT_LANGUAGE) -> str:
    language: str = default

    for line in source.splitlines():
        line = line.strip()
        if line.startswith(MARKER_LANGUAGE):
            lang = line[len(MARKER_LANGUAGE) :].strip()
            if len(lang) >= 2:
                language = lang
            break

    return language
