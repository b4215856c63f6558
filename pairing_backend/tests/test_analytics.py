from __future__ import annotations

from pairing_backend.analytics.aggregator import compute_analytics
from pairing_backend.analytics.store import clear_events, get_events, record_event


def _pairing_event(dish: str, source: str, drinks: list[str], ms: float, cache_hit: bool = False) -> dict:
    return {
        "type": "pairing",
        "dish": dish,
        "source": source,
        "drinks": drinks,
        "response_time_ms": ms,
        "cache_hit": cache_hit,
    }


def test_analytics_empty():
    body = compute_analytics([])
    assert body["total_pairings"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["source_usage"]["fallback_rate"] == 0.0
    assert body["cache_stats"]["hit_rate"] == 0.0


def test_analytics_aggregates_pairings():
    events = [
        _pairing_event("Fish and Chips", "llm", ["Fuller's London Pride", "Yorkshire Tea"], 10.0),
        _pairing_event("fish and chips", "llm", ["Fuller's London Pride"], 2.0, cache_hit=True),
        _pairing_event("Curry", "fallback", ["Pusser's British Navy Rum"], 3.0),
        {"type": "other", "response_time_ms": 1000.0},
    ]

    body = compute_analytics(events)

    assert body["total_pairings"] == 3
    assert body["avg_response_time_ms"] == 5.0
    assert body["top_dishes"][0] == {"name": "fish and chips", "count": 2}
    assert body["top_drinks"][0] == {"name": "Fuller's London Pride", "count": 2}
    assert body["source_usage"] == {"llm": 2, "fallback": 1, "fallback_rate": 33.3}
    assert body["cache_stats"] == {"hits": 1, "misses": 2, "hit_rate": 33.3}


def test_store_records_and_filters():
    clear_events()
    record_event("pairing", {"dish": "Pie"})
    record_event("other", {})

    assert len(get_events()) == 2
    assert [e["dish"] for e in get_events("pairing")] == ["Pie"]
    assert "timestamp" in get_events()[0]

    clear_events()
    assert get_events() == []
