"""Tests for the FastAPI listener."""

from fastapi.testclient import TestClient

from lookup_core.aggregation import AggregationPipeline
from lookup_core.cache import CacheRegistry
from lookup_core.config import LookupConfig
from lookup_core.language_router import LanguageRouter
from lookup_core.lookup_service import LookupService
from web_apps.lookup_web_app import create_app

from upstream_fakes import FakeFetcher, glosbe_page, glosbe_url, reverso_page, reverso_url


def _client(fetcher, config=None):
    router = LanguageRouter(AggregationPipeline(fetcher), CacheRegistry())
    return TestClient(create_app(service=LookupService(router, config or LookupConfig())))


def test_lookup_round_trip_forwards_user_agent():
    fetcher = FakeFetcher({
        glosbe_url("it", "di"): glosbe_page("av"),
        reverso_url("it", "di"): reverso_page("från"),
    })
    client = _client(fetcher)

    response = client.get("/compounds", params={"sourceLanguage": "it", "word": "di"},
                          headers={"User-Agent": "reader/2.1"})

    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=604800, immutable"
    assert [item["upstream"] for item in response.json()] == ["glosbe", "reverso"]
    assert {user_agent for _, _, user_agent in fetcher.calls} == {"reader/2.1"}


def test_missing_word_returns_400():
    fetcher = FakeFetcher()
    response = _client(fetcher).get("/compounds")

    assert response.status_code == 400
    assert "error" in response.json()
    assert fetcher.calls == []


def test_options_preflight_with_cors():
    client = _client(FakeFetcher(), LookupConfig(cors_allow_origin="https://reader.example"))

    response = client.options("/compounds")

    assert response.status_code == 204
    assert response.headers["access-control-allow-origin"] == "https://reader.example"


def test_post_is_rejected():
    response = _client(FakeFetcher()).post("/compounds?word=and")
    assert response.status_code == 400
