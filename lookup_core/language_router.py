#!/usr/bin/env python3
"""
Language router
Picks the native dictionary pipeline or the translation pipeline for a
source language and serves repeat lookups from the per-language cache.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .aggregation import AggregationPipeline
from .cache import CacheRegistry
from .errors import InvalidLanguageError
from .models import LookupResult
from .providers import NATIVE_LANGUAGE, TRANSLATION_LANGUAGES, TranslationLanguage

logger = logging.getLogger(__name__)


class LanguageRouter:
    def __init__(
        self,
        pipeline: AggregationPipeline,
        cache: CacheRegistry,
        native_language: str = NATIVE_LANGUAGE.code,
        translation_languages: Optional[Dict[str, TranslationLanguage]] = None,
    ):
        self.pipeline = pipeline
        self.cache = cache
        self.native_language = native_language
        self.translation_languages = (
            TRANSLATION_LANGUAGES if translation_languages is None else translation_languages
        )

    def supported_languages(self) -> List[str]:
        return [self.native_language] + sorted(self.translation_languages)

    def resolve_language(self, source_language: str) -> Optional[TranslationLanguage]:
        """None for the native language, the translation language otherwise.

        Raises InvalidLanguageError for codes outside the translation table.
        """
        if source_language == self.native_language:
            return None
        language = self.translation_languages.get(source_language)
        if language is None:
            raise InvalidLanguageError(source_language)
        return language

    async def route(self, source_language: Optional[str], word: str,
                    user_agent: str = '') -> List[LookupResult]:
        source_language = source_language or self.native_language
        # validated before the cache so unknown codes never get a partition
        language = self.resolve_language(source_language)

        cached = self.cache.get(source_language, word)
        if cached is not None:
            logger.info(f"GET (from LRU cache) sourceLanguage={source_language} word={word}")
            return cached

        logger.info(f"GET sourceLanguage={source_language} word={word}")
        if language is None:
            results = await self.pipeline.lookup_native(word, user_agent)
        else:
            results = await self.pipeline.lookup_foreign(word, language, user_agent)

        if results:
            self.cache.put(source_language, word, results)
        return results
