#!/usr/bin/env python3
"""
Upstream provider descriptors
Search endpoints, disambiguation markers and the translation language table
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from urllib.parse import quote

from .models import Upstream


@dataclass(frozen=True)
class DictionarySearch:
    """Search endpoint of a dictionary that may answer with a disambiguation list"""

    upstream: Upstream
    search_url: str
    search_param: str
    # disambiguation link hrefs are resolved against this
    base_url: str
    not_found_template: str
    disambiguation_selector: str

    def search_params(self, word: str) -> Dict[str, str]:
        return {self.search_param: word}

    def not_found_phrase(self, word: str) -> str:
        return self.not_found_template.format(word=word)


@dataclass(frozen=True)
class TranslationLanguage:
    code: str
    name: str


@dataclass(frozen=True)
class TranslationProvider:
    """Translation endpoint addressed by source/target language and word in the path"""

    upstream: Upstream
    url_template: str
    translation_selector: str

    def build_url(self, source: TranslationLanguage, target: TranslationLanguage, word: str) -> str:
        return self.url_template.format(
            source_code=source.code,
            source_name=source.name,
            target_code=target.code,
            target_name=target.name,
            word=quote(word, safe=''),
        )


SVENSKA_BASE_URL = 'https://svenska.se/tri/'

SAOL_SEARCH = DictionarySearch(
    upstream=Upstream.SAOL,
    search_url=SVENSKA_BASE_URL + 'f_saol.php',
    search_param='sok',
    base_url=SVENSKA_BASE_URL,
    not_found_template='Sökningen på {word} i SAOL gav inga svar',
    disambiguation_selector='a.slank',
)

SO_SEARCH = DictionarySearch(
    upstream=Upstream.SO,
    search_url=SVENSKA_BASE_URL + 'f_so.php',
    search_param='sok',
    base_url=SVENSKA_BASE_URL,
    not_found_template='Sökningen på {word} i SO gav inga svar',
    disambiguation_selector='a.slank',
)

GLOSBE = TranslationProvider(
    upstream=Upstream.GLOSBE,
    url_template='https://glosbe.com/{source_code}/{target_code}/{word}',
    translation_selector='.translation__item__pharse',
)

REVERSO = TranslationProvider(
    upstream=Upstream.REVERSO,
    url_template='https://context.reverso.net/translation/{source_name}-{target_name}/{word}',
    translation_selector='#translations-content .translation .display-term',
)

NATIVE_LANGUAGE = TranslationLanguage(code='sv', name='swedish')

# Source languages answered by the translation pipeline (ISO 639-1 -> provider name)
TRANSLATION_LANGUAGES: Dict[str, TranslationLanguage] = {
    code: TranslationLanguage(code=code, name=name)
    for code, name in {
        'ar': 'arabic',
        'de': 'german',
        'en': 'english',
        'es': 'spanish',
        'fr': 'french',
        'he': 'hebrew',
        'it': 'italian',
        'ja': 'japanese',
        'nl': 'dutch',
        'pl': 'polish',
        'pt': 'portuguese',
        'ro': 'romanian',
        'ru': 'russian',
        'tr': 'turkish',
        'uk': 'ukrainian',
        'zh': 'chinese',
    }.items()
}
