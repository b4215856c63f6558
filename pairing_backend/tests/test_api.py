from __future__ import annotations

import random
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from pairing_backend.analytics.store import clear_events
from pairing_backend.app import create_app
from pairing_backend.catalog.config import CatalogConfig
from pairing_backend.catalog.store import DrinkCatalog
from pairing_backend.llm.config import LLMConfig
from pairing_backend.pairing.service import PairingService

DISABLED_LLM = LLMConfig(api_key="", enabled=False)


def _client(tmp_path: Path) -> TestClient:
    catalog = DrinkCatalog(CatalogConfig(data_dir=tmp_path / "data"))
    service = PairingService(catalog, llm_config=DISABLED_LLM, rng=random.Random(0))
    return TestClient(create_app(service=service))


def _empty_client() -> TestClient:
    catalog = DrinkCatalog.from_records([])
    service = PairingService(catalog, llm_config=DISABLED_LLM)
    return TestClient(create_app(service=service))


def test_health(tmp_path: Path):
    resp = _client(tmp_path).get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_drinks(tmp_path: Path):
    resp = _client(tmp_path).get("/api/drinks")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 22
    assert body[0]["id"] == 1
    assert "flavourNotes" in body[0]
    assert "recommendedFoods" in body[0]


def test_get_drink(tmp_path: Path):
    client = _client(tmp_path)
    resp = client.get("/api/drinks/2")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Fuller's London Pride"


def test_get_drink_not_found(tmp_path: Path):
    resp = _client(tmp_path).get("/api/drinks/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Drink not found"


def test_get_drink_rejects_non_numeric_id(tmp_path: Path):
    resp = _client(tmp_path).get("/api/drinks/abc")
    assert resp.status_code == 422


def test_search_drinks(tmp_path: Path):
    resp = _client(tmp_path).get("/api/drinks/search", params={"q": "ginger"})
    assert resp.status_code == 200
    names = {d["name"] for d in resp.json()}
    assert "Fentimans Ginger Beer" in names


def test_drinks_by_type(tmp_path: Path):
    resp = _client(tmp_path).get("/api/drinks/type/tea")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 2
    assert all(d["abv"] == "0%" for d in body)


def test_trending(tmp_path: Path):
    resp = _client(tmp_path).get("/api/trending")
    assert resp.status_code == 200
    assert "Fish & Chips" in resp.json()["dishes"]


def test_pairing_returns_contract(tmp_path: Path):
    resp = _client(tmp_path).get("/api/pairing", params={"dish": "Fish and Chips"})
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"dish", "dishAnalysis", "pairings"}
    assert body["dish"] == "Fish and Chips"
    assert set(body["dishAnalysis"]) == {"flavourProfile", "keyCharacteristics"}
    assert 1 <= len(body["pairings"]) <= 3
    scores = [p["matchScore"] for p in body["pairings"]]
    assert scores == sorted(scores, reverse=True)
    assert sum(1 for p in body["pairings"] if p["drink"]["abv"] == "0%") == 1
    assert "recommendedFoods" not in body["pairings"][0]["drink"]


def test_pairing_requires_dish(tmp_path: Path):
    client = _client(tmp_path)
    missing = client.get("/api/pairing")
    blank = client.get("/api/pairing", params={"dish": "   "})
    assert missing.status_code == 400
    assert blank.status_code == 400
    assert missing.json()["detail"] == "Dish parameter is required"


def test_pairing_with_empty_catalog():
    resp = _empty_client().get("/api/pairing", params={"dish": "Fish and Chips"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "No drinks available in database"


def test_analytics_tracks_pairings(tmp_path: Path):
    clear_events()
    client = _client(tmp_path)
    client.get("/api/pairing", params={"dish": "Roast beef"})
    client.get("/api/pairing", params={"dish": "roast beef"})
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_pairings"] == 2
    assert body["top_dishes"][0] == {"name": "roast beef", "count": 2}
    assert body["source_usage"]["fallback_rate"] == 100.0


def test_cache_stats_endpoint(tmp_path: Path):
    resp = _client(tmp_path).get("/cache/stats")
    assert resp.status_code == 200
    assert {"size", "hits", "misses", "hit_rate"} <= set(resp.json())


@patch("pairing_backend.catalog.store.seed_catalog", side_effect=PermissionError("read-only file system"))
def test_unwritable_catalog_returns_clean_errors(mock_seed, tmp_path: Path):
    client = _client(tmp_path)

    drinks = client.get("/api/drinks")
    pairing = client.get("/api/pairing", params={"dish": "Fish and Chips"})

    assert drinks.status_code == 500
    assert drinks.json()["detail"] == "Failed to fetch drinks"
    assert pairing.status_code == 500
    assert pairing.json()["detail"] == "Failed to generate drink pairing"
