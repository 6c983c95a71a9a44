"""Text cleanup applied to markup extracted from upstream providers.

Every regex used by the extraction schemas lives here, behind a named
:class:`NormalizationMode`, so the cleanup rules can be tested without any HTML.
Letter matching uses the Unicode ``\\p{L}`` category from the ``regex`` library
because looked-up words are rarely plain ASCII (``å``, ``ä``, ``ö``...).
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

import regex

COMPOUND_BOUNDARY = '|'

_WHITESPACE_RUN = regex.compile(r'\s+')
_NOT_HEADWORD_CHAR = regex.compile(r'[^\p{L}| ]')
_NOT_DEFINITION_CHAR = regex.compile(r'[^\p{L}| ()<>]')
_NUMERIC_SUFFIX = regex.compile(r'[ 0-9]*$')


class NormalizationMode(str, Enum):
    COLLAPSE_WHITESPACE = 'collapse_whitespace'
    # letters, spaces and the compound boundary marker survive
    HEADWORD = 'headword'
    # letters, spaces, the boundary marker and the bracket clues survive
    DEFINITION = 'definition'
    STRIP_NUMERIC_SUFFIX = 'strip_numeric_suffix'


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub(' ', text).strip()


def clean_headword(text: str) -> str:
    """Reduce a headword such as ``"and|en 1"`` to ``"and|en"``."""
    return _NOT_HEADWORD_CHAR.sub('', text).strip()


def clean_definition(text: str) -> str:
    """Keep letters and the ``|``, ``()`` and ``<>`` markers of a definition."""
    stripped = _NOT_DEFINITION_CHAR.sub('', collapse_whitespace(text))
    return collapse_whitespace(stripped)


def strip_numeric_suffix(text: str) -> str:
    """``"word 2"`` -> ``"word"``"""
    return _NUMERIC_SUFFIX.sub('', text)


_MODES = {
    NormalizationMode.COLLAPSE_WHITESPACE: collapse_whitespace,
    NormalizationMode.HEADWORD: clean_headword,
    NormalizationMode.DEFINITION: clean_definition,
    NormalizationMode.STRIP_NUMERIC_SUFFIX: strip_numeric_suffix,
}


def normalize(text: str, mode: NormalizationMode) -> str:
    return _MODES[mode](text)


def split_compounds(headword: str) -> List[str]:
    """Split a cleaned headword on the compound boundary marker."""
    return headword.split(COMPOUND_BOUNDARY)


def unique_non_blank(items: Iterable[str]) -> List[str]:
    """Trim entries, drop blank ones and keep the first of each duplicate."""
    seen = set()
    unique: List[str] = []
    for item in items:
        trimmed = item.strip()
        if not trimmed or trimmed in seen:
            continue
        seen.add(trimmed)
        unique.append(trimmed)
    return unique
