"""Tests for language routing and cache use."""

import asyncio

import pytest

from lookup_core.aggregation import AggregationPipeline
from lookup_core.cache import CacheRegistry
from lookup_core.errors import BadRequestError, InvalidLanguageError
from lookup_core.language_router import LanguageRouter
from lookup_core.models import Upstream

from upstream_fakes import (
    FakeFetcher,
    glosbe_page,
    glosbe_url,
    not_found_page,
    reverso_page,
    reverso_url,
    saol_entry_page,
    saol_search_url,
    so_entry_page,
    so_search_url,
)


def _router(fetcher, cache=None):
    return LanguageRouter(AggregationPipeline(fetcher), cache or CacheRegistry())


def test_default_language_is_native():
    fetcher = FakeFetcher({
        saol_search_url("and"): saol_entry_page("and"),
        so_search_url("and"): so_entry_page("and", ["simfågel"]),
    })

    results = asyncio.run(_router(fetcher).route(None, "and"))

    assert [r.upstream for r in results] == [Upstream.SAOL, Upstream.SO]


def test_foreign_language_uses_translation_pipeline():
    fetcher = FakeFetcher({
        glosbe_url("it", "di"): glosbe_page("av"),
        reverso_url("it", "di"): reverso_page("från"),
    })

    results = asyncio.run(_router(fetcher).route("it", "di"))

    assert [r.upstream for r in results] == [Upstream.GLOSBE, Upstream.REVERSO]


def test_unknown_language_fails_before_any_upstream_call():
    fetcher = FakeFetcher()
    cache = CacheRegistry()

    with pytest.raises(InvalidLanguageError) as excinfo:
        asyncio.run(_router(fetcher, cache).route("xx", "di"))

    assert isinstance(excinfo.value, BadRequestError)
    assert "xx" in excinfo.value.reason
    assert fetcher.calls == []
    assert cache.languages() == []


def test_second_lookup_is_served_from_cache():
    fetcher = FakeFetcher({
        saol_search_url("and"): saol_entry_page("and"),
        so_search_url("and"): so_entry_page("and", ["simfågel"]),
    })
    router = _router(fetcher)

    first = asyncio.run(router.route("sv", "and"))
    calls_after_first = len(fetcher.calls)
    second = asyncio.run(router.route("sv", "and"))

    assert second == first
    assert len(fetcher.calls) == calls_after_first


def test_cache_is_partitioned_by_language():
    fetcher = FakeFetcher({
        saol_search_url("di"): saol_entry_page("di"),
        glosbe_url("it", "di"): glosbe_page("av"),
        reverso_url("it", "di"): reverso_page("från"),
    })
    router = _router(fetcher)

    native = asyncio.run(router.route("sv", "di"))
    foreign = asyncio.run(router.route("it", "di"))

    assert [r.upstream for r in native] == [Upstream.SAOL]
    assert [r.upstream for r in foreign] == [Upstream.GLOSBE, Upstream.REVERSO]


def test_empty_results_are_not_cached():
    fetcher = FakeFetcher({saol_search_url("xyzzy"): not_found_page("SAOL", "xyzzy")})
    router = _router(fetcher)

    asyncio.run(router.route("sv", "xyzzy"))
    asyncio.run(router.route("sv", "xyzzy"))

    assert fetcher.urls == [saol_search_url("xyzzy")] * 2


def test_supported_languages_lists_native_first():
    languages = _router(FakeFetcher()).supported_languages()
    assert languages[0] == "sv"
    assert "it" in languages
    assert "xx" not in languages
