from __future__ import annotations

import random
from typing import Sequence

from ..catalog.models import DrinkRecord, PublicDrink
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import MAX_PAIRINGS, DishAnalysis, Pairing, PairingResult, ScoredCandidate
from .scoring import select_candidates


def _lead_flavour(drink: DrinkRecord) -> str:
    notes = [n.strip() for n in drink.flavour_notes.split(",") if n.strip()]
    return notes[0].lower() if notes else "distinctive character"


def explain(drink: DrinkRecord, dish: str) -> str:
    """One-sentence rationale for pairing ``drink`` with ``dish``."""
    flavour = _lead_flavour(drink)
    if drink.is_alcoholic:
        return (
            f"{drink.name} complements {dish} with its {flavour}. "
            "A classic British pairing!"
        )
    return (
        f"{drink.name} refreshes the palate between bites of {dish} with its {flavour}. "
        "A great alcohol-free choice!"
    )


def match_score_for_rank(rank: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> int:
    return max(1, min(100, config.top_match_score - rank * config.match_score_step))


def fallback_dish_analysis(dish: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> DishAnalysis:
    return DishAnalysis(
        flavour_profile=(
            f"{dish} pairs wonderfully with British drinks - "
            "both alcoholic and non-alcoholic options available."
        ),
        key_characteristics=list(config.characteristics),
    )


def assemble_result(
    dish: str,
    candidates: Sequence[ScoredCandidate],
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> PairingResult:
    """Package ranked candidates into a ``PairingResult``.

    Match scores come from rank position alone; the raw scores only decide order.
    """
    pairings = [
        Pairing(
            drink=PublicDrink.from_record(c.drink),
            explanation=explain(c.drink, dish),
            match_score=match_score_for_rank(rank, config),
        )
        for rank, c in enumerate(candidates[:MAX_PAIRINGS])
    ]
    return PairingResult(
        dish=dish,
        dish_analysis=fallback_dish_analysis(dish, config),
        pairings=pairings,
    )


def get_fallback_pairings(
    dish: str,
    drinks: Sequence[DrinkRecord],
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: random.Random | None = None,
) -> PairingResult:
    """Rule-based pairing used whenever the generative recommender is unavailable.

    Expects a non-blank dish and a non-empty catalogue; callers check both.
    """
    candidates = select_candidates(drinks, dish, config=config, rng=rng)
    return assemble_result(dish, candidates, config=config)
