#!/usr/bin/env python3
"""
Aggregation pipeline
Native words: SAOL search, then SO chained on every baseform SAOL resolved.
Foreign words: Glosbe and Reverso translations queried side by side.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import List, Sequence

from .disambiguation import search_and_resolve
from .document import parse_html
from .extraction import extract_primary, extract_secondary, extract_translation
from .models import LookupResult, finalize_results
from .provider_client import Fetcher, attempt
from .providers import (
    GLOSBE,
    NATIVE_LANGUAGE,
    REVERSO,
    SAOL_SEARCH,
    SO_SEARCH,
    DictionarySearch,
    TranslationLanguage,
    TranslationProvider,
)

logger = logging.getLogger(__name__)


class AggregationPipeline:
    """Runs the provider queries for one request and merges their results"""

    def __init__(
        self,
        client: Fetcher,
        primary: DictionarySearch = SAOL_SEARCH,
        secondary: DictionarySearch = SO_SEARCH,
        translators: Sequence[TranslationProvider] = (GLOSBE, REVERSO),
        target_language: TranslationLanguage = NATIVE_LANGUAGE,
    ):
        self.client = client
        self.primary = primary
        self.secondary = secondary
        self.translators = tuple(translators)
        self.target_language = target_language

    async def lookup_native(self, word: str, user_agent: str = '') -> List[LookupResult]:
        primary_results = await attempt(
            search_and_resolve(self.client, self.primary, word, extract_primary, user_agent),
            fallback=[],
            description=f"{self.primary.upstream.value} search for '{word}'",
        )

        baseforms = list(dict.fromkeys(
            result.baseform for result in primary_results if not result.is_dead
        ))
        secondary_batches = await asyncio.gather(*(
            attempt(
                search_and_resolve(self.client, self.secondary, baseform,
                                   partial(extract_secondary, baseform), user_agent),
                fallback=[],
                description=f"{self.secondary.upstream.value} search for '{baseform}'",
            )
            for baseform in baseforms
        ))
        secondary_results = [result for batch in secondary_batches for result in batch]

        results = finalize_results(primary_results + secondary_results)
        logger.info(f"Native lookup for '{word}': {len(primary_results)} primary, "
                    f"{len(secondary_results)} secondary, {len(results)} kept")
        return results

    async def _translate(self, translator: TranslationProvider, word: str,
                         language: TranslationLanguage, user_agent: str) -> LookupResult:
        url = translator.build_url(language, self.target_language, word)
        body = await self.client.query(url, user_agent=user_agent)
        return extract_translation(translator, word, parse_html(body))

    async def lookup_foreign(self, word: str, language: TranslationLanguage,
                             user_agent: str = '') -> List[LookupResult]:
        translations = await asyncio.gather(*(
            attempt(
                self._translate(translator, word, language, user_agent),
                fallback=LookupResult.dead(),
                description=f"{translator.upstream.value} translation of '{word}' ({language.code})",
            )
            for translator in self.translators
        ))

        # distinct upstream tags, so this only drops dead results
        results = finalize_results(translations)
        logger.info(f"Foreign lookup for '{word}' ({language.code}): {len(results)} kept")
        return results
