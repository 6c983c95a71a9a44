"""Request handling in front of the language router.

Turns a raw ``(method, url, user_agent)`` triple into a :class:`LookupResponse`
(status, JSON body, headers) that any HTTP listener can write out verbatim.
Only parameter errors (400) and unexpected failures (500) produce non-200
answers; upstream trouble has already been absorbed by the pipeline.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

from .aggregation import AggregationPipeline
from .cache import CacheRegistry
from .config import LookupConfig
from .errors import BadRequestError
from .language_router import LanguageRouter
from .models import LookupResult, results_to_payload
from .provider_client import ProviderClient

logger = logging.getLogger(__name__)


@dataclass
class LookupResponse:
    status: int
    body: str = ''
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def payload(self):
        return json.loads(self.body) if self.body else None


def build_common_headers(config: LookupConfig) -> Dict[str, str]:
    headers = {'Content-Type': 'application/json'}
    if config.cors_allow_origin:
        headers.update({
            'Access-Control-Allow-Origin': config.cors_allow_origin,
            'Access-Control-Allow-Methods': 'OPTIONS, POST, GET',
            'Access-Control-Max-Age': '604800',
        })
    return headers


def build_cache_headers(config: LookupConfig) -> Dict[str, str]:
    return {'Cache-Control': f'public, max-age={config.cache_max_age}, immutable'}


def _single_param(query: Dict[str, List[str]], name: str) -> Optional[str]:
    values = query.get(name)
    return values[0] if values else None


class LookupService:
    """Validates lookup requests and serializes router results"""

    def __init__(self, router: LanguageRouter, config: Optional[LookupConfig] = None):
        self.router = router
        self.config = config or LookupConfig()
        self.common_headers = build_common_headers(self.config)
        self.cached_headers = {**self.common_headers, **build_cache_headers(self.config)}
        if self.config.cors_allow_origin:
            logger.info(f"Enabling CORS for {self.config.cors_allow_origin}")

    def _bad_request(self, url: str, reason: str) -> LookupResponse:
        logger.info(f"Bad request: url={url} reason={reason}")
        return LookupResponse(
            status=400,
            body=json.dumps({'error': f'Bad request: {reason}'}, ensure_ascii=False),
            headers=dict(self.cached_headers),
        )

    def _ok(self, results: List[LookupResult]) -> LookupResponse:
        return LookupResponse(
            status=200,
            body=json.dumps(results_to_payload(results), ensure_ascii=False),
            headers=dict(self.cached_headers),
        )

    async def handle(self, method: str, url: str, user_agent: str = '') -> LookupResponse:
        try:
            method = method.upper()
            if method == 'OPTIONS':
                return LookupResponse(status=204, headers=dict(self.common_headers))
            if method != 'GET':
                return self._bad_request(url, f'method {method} not allowed')

            query = parse_qs(urlsplit(url).query)
            word = (_single_param(query, 'word') or '').strip()
            if not word:
                return self._bad_request(url, "missing 'word' parameter")
            source_language = (_single_param(query, 'sourceLanguage') or '').strip() or None

            try:
                results = await self.router.route(source_language, word, user_agent)
            except BadRequestError as e:
                return self._bad_request(url, e.reason)
            return self._ok(results)
        except Exception:
            logger.exception(f"Internal error handling {method} {url}")
            return LookupResponse(
                status=500,
                body=json.dumps({'error': 'Internal server error'}),
                headers=dict(self.common_headers),
            )

    async def close(self) -> None:
        client = getattr(self.router.pipeline, 'client', None)
        if isinstance(client, ProviderClient):
            await client.close()


def build_lookup_service(config: LookupConfig) -> LookupService:
    """Wire client, pipeline, cache and router for one process."""
    client = ProviderClient(timeout=config.upstream_timeout)
    pipeline = AggregationPipeline(client)
    cache = CacheRegistry(max_entries_per_language=config.cache_size)
    return LookupService(LanguageRouter(pipeline, cache), config)
