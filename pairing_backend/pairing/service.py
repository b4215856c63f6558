from __future__ import annotations

import logging
import random
import time
from typing import Sequence

from ..analytics.store import record_event
from ..catalog.models import DrinkRecord, PublicDrink
from ..catalog.store import DrinkCatalog
from ..errors import EmptyCatalogError, InvalidDishError
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import recommend_pairings
from .cache import ResultCache
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .fallback import explain, get_fallback_pairings
from .models import MAX_PAIRINGS, Pairing, PairingResult, with_descending_scores
from .scoring import select_candidates

logger = logging.getLogger(__name__)


class PairingService:
    """Recommend drinks for a dish: generative recommender first, rules as fallback.

    Every request works on one frozen catalogue snapshot, so the ids the LLM
    sees are the ids the result is built from.
    """

    def __init__(
        self,
        catalog: DrinkCatalog,
        *,
        llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
        scoring_config: ScoringConfig = DEFAULT_SCORING_CONFIG,
        rng: random.Random | None = None,
        cache: ResultCache | None = None,
    ):
        self.catalog = catalog
        self.llm_config = llm_config
        self.scoring_config = scoring_config
        self.rng = rng if rng is not None else random.Random()
        self.cache = cache if cache is not None else ResultCache()

    def get_pairing(self, dish: str | None) -> PairingResult:
        start_time = time.time()

        if dish is None or not dish.strip():
            raise InvalidDishError("Dish parameter is required")

        drinks = tuple(self.catalog.get_all_drinks())
        if not drinks:
            raise EmptyCatalogError("No drinks available in database")

        cache_key = {
            "dish": dish.strip().lower(),
            "drink_ids": [d.id for d in drinks],
        }
        cached = self.cache.get(cache_key)
        if cached is not None:
            result = cached.model_copy(update={"dish": dish})
            self._record(dish, "llm", result, start_time, cache_hit=True)
            return result

        result = recommend_pairings(dish, drinks, config=self.llm_config)
        if result is not None:
            result = self._ensure_balance(result, dish, drinks)
            self.cache.set(cache_key, result)
            source = "llm"
        else:
            logger.info("Using rule-based pairing for %r", dish)
            result = get_fallback_pairings(
                dish, drinks, config=self.scoring_config, rng=self.rng,
            )
            source = "fallback"

        self._record(dish, source, result, start_time, cache_hit=False)
        return result

    def _ensure_balance(
        self,
        result: PairingResult,
        dish: str,
        drinks: Sequence[DrinkRecord],
    ) -> PairingResult:
        """Top up a generative result that lacks an alcoholic or alcohol-free drink."""
        by_id = {d.id: d for d in drinks}
        chosen = [by_id[p.drink.id] for p in result.pairings]

        has_alcoholic = any(d.is_alcoholic for d in chosen)
        has_free = any(not d.is_alcoholic for d in chosen)
        catalog_alcoholic = any(d.is_alcoholic for d in drinks)
        catalog_free = any(not d.is_alcoholic for d in drinks)

        if catalog_free and not has_free:
            pool = [d for d in drinks if not d.is_alcoholic]
        elif catalog_alcoholic and not has_alcoholic:
            pool = [d for d in drinks if d.is_alcoholic]
        else:
            return result

        best = select_candidates(pool, dish, config=self.scoring_config)[0].drink
        pairings = list(result.pairings)
        if len(pairings) >= MAX_PAIRINGS:
            pairings = pairings[: MAX_PAIRINGS - 1]
        lowest = min(p.match_score for p in pairings)
        pairings.append(Pairing(
            drink=PublicDrink.from_record(best),
            explanation=explain(best, dish),
            match_score=max(1, lowest - self.scoring_config.match_score_step),
        ))
        logger.info("Added %s to keep alcoholic and alcohol-free options", best.name)
        return result.model_copy(update={"pairings": with_descending_scores(pairings)})

    @staticmethod
    def _record(
        dish: str,
        source: str,
        result: PairingResult,
        start_time: float,
        *,
        cache_hit: bool,
    ) -> None:
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        record_event("pairing", {
            "dish": dish.strip(),
            "source": source,
            "results_returned": len(result.pairings),
            "drinks": [p.drink.name for p in result.pairings],
            "response_time_ms": elapsed_ms,
            "cache_hit": cache_hit,
        })
