from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    pairings = [e for e in events if e["type"] == "pairing"]
    total = len(pairings)

    # Average response time
    times = [p["response_time_ms"] for p in pairings if "response_time_ms" in p]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top dishes, case-insensitive
    dish_counter: Counter[str] = Counter()
    for p in pairings:
        dish_counter[(p.get("dish") or "unknown").lower()] += 1
    top_dishes = [{"name": n, "count": c} for n, c in dish_counter.most_common(10)]

    # Most recommended drinks
    drink_counter: Counter[str] = Counter()
    for p in pairings:
        for name in p.get("drinks", []) or []:
            drink_counter[name] += 1
    top_drinks = [{"name": n, "count": c} for n, c in drink_counter.most_common(10)]

    # Source split
    fallbacks = sum(1 for p in pairings if p.get("source") == "fallback")

    # Cache stats
    cache_hits = sum(1 for p in pairings if p.get("cache_hit"))
    cache_misses = total - cache_hits

    return {
        "total_pairings": total,
        "avg_response_time_ms": avg_time,
        "top_dishes": top_dishes,
        "top_drinks": top_drinks,
        "source_usage": {
            "llm": total - fallbacks,
            "fallback": fallbacks,
            "fallback_rate": round(fallbacks / total * 100, 1) if total else 0.0,
        },
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
    }
