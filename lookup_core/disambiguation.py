"""Disambiguation resolver.

A dictionary search answers in one of three ways:

* a "no results" page, which resolves to an empty list;
* the entry itself (direct hit), which resolves to one extracted result;
* a list of links to candidate entries, each of which is fetched concurrently
  and extracted. A link that cannot be fetched or parsed becomes a dead
  placeholder so the rest of the batch still resolves.

The same resolver serves every dictionary; only the :class:`DictionarySearch`
descriptor and the extraction function differ.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional
from urllib.parse import urljoin

from .document import Document, parse_html
from .models import LookupResult
from .provider_client import Fetcher, attempt
from .providers import DictionarySearch
from .text_normalization import collapse_whitespace

logger = logging.getLogger(__name__)

Extractor = Callable[[Document], LookupResult]


class SearchOutcome(str, Enum):
    NOT_FOUND = 'not_found'
    DIRECT_HIT = 'direct_hit'
    DISAMBIGUATION = 'disambiguation'


def classify_search_response(document: Document, word: str, search: DictionarySearch) -> SearchOutcome:
    body_text = collapse_whitespace(document.text_content)
    if body_text.startswith(search.not_found_phrase(word)):
        return SearchOutcome.NOT_FOUND
    if document.select(search.disambiguation_selector):
        return SearchOutcome.DISAMBIGUATION
    return SearchOutcome.DIRECT_HIT


async def _resolve_link(
    client: Fetcher,
    search: DictionarySearch,
    href: Optional[str],
    extract: Extractor,
    user_agent: str,
) -> LookupResult:
    if not href:
        raise ValueError(f"{search.upstream.value} disambiguation link without href")
    body = await client.query(urljoin(search.base_url, href), user_agent=user_agent)
    return extract(parse_html(body))


async def resolve_search_response(
    document: Document,
    word: str,
    search: DictionarySearch,
    extract: Extractor,
    client: Fetcher,
    user_agent: str = '',
) -> List[LookupResult]:
    outcome = classify_search_response(document, word, search)

    if outcome is SearchOutcome.NOT_FOUND:
        logger.info(f"{search.upstream.value}: no results for '{word}'")
        return []

    if outcome is SearchOutcome.DIRECT_HIT:
        return [extract(document)]

    hrefs = [link.attribute('href') for link in document.select(search.disambiguation_selector)]
    logger.info(f"{search.upstream.value}: '{word}' is ambiguous, resolving {len(hrefs)} candidates")

    results = await asyncio.gather(*(
        attempt(
            _resolve_link(client, search, href, extract, user_agent),
            fallback=LookupResult.dead(),
            description=f"{search.upstream.value} candidate {href}",
            # any failure on one candidate page only costs that candidate
            absorb=(Exception,),
        )
        for href in hrefs
    ))
    return list(results)


async def search_and_resolve(
    client: Fetcher,
    search: DictionarySearch,
    word: str,
    extract: Extractor,
    user_agent: str = '',
) -> List[LookupResult]:
    """Query a dictionary search endpoint for `word` and resolve the response."""
    body = await client.query(search.search_url, params=search.search_params(word),
                              user_agent=user_agent)
    return await resolve_search_response(parse_html(body), word, search, extract, client,
                                         user_agent)
