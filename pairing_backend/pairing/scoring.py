from __future__ import annotations

import random
from typing import Sequence

from ..catalog.models import DrinkRecord
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import ScoredCandidate


def relevant_flavours(dish: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> set[str]:
    """Union of flavour descriptors for every keyword found in the dish."""
    dish_lower = dish.lower()
    flavours: set[str] = set()
    for keyword, descriptors in config.flavour_keywords.items():
        if keyword in dish_lower:
            flavours |= descriptors
    return flavours


def _split_foods(recommended_foods: str) -> list[str]:
    return [f.strip().lower() for f in recommended_foods.split(",") if f.strip()]


def score_drink(
    dish: str,
    drink: DrinkRecord,
    relevant: set[str],
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: random.Random | None = None,
) -> float:
    """Compute a heuristic affinity score between a dish and one drink.

    Every rule adds to the total independently, so rule order never matters.
    ``rng`` supplies tie-breaking jitter; pass ``None`` for a deterministic score.
    """
    dish_lower = dish.lower()
    words = dish_lower.split()
    first_word = words[0] if words else ""
    score = 0.0

    # Recommended foods, matched in either direction
    for food in _split_foods(drink.recommended_foods):
        if food in dish_lower or (first_word and first_word in food):
            score += config.food_match_bonus

    # Flavour descriptors suggested by the dish keywords
    notes_lower = drink.flavour_notes.lower()
    for flavour in relevant:
        if flavour in notes_lower:
            score += config.flavour_match_bonus

    for rule in config.category_rules:
        if rule.applies(dish_lower, drink):
            score += rule.bonus

    description_lower = drink.description.lower()
    if any(word in description_lower for word in config.craft_words):
        score += config.craft_bonus

    if rng is not None and config.jitter_max > 0:
        score += rng.uniform(0.0, config.jitter_max)

    return score


def _rank(candidates: list[ScoredCandidate]) -> list[ScoredCandidate]:
    return sorted(candidates, key=lambda c: (-c.score, c.drink.id))


def select_candidates(
    drinks: Sequence[DrinkRecord],
    dish: str,
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: random.Random | None = None,
) -> list[ScoredCandidate]:
    """Pick the best alcoholic and non-alcoholic drinks for a dish.

    Takes up to ``config.alcoholic_slots`` alcoholic drinks and up to
    ``config.non_alcoholic_slots`` non-alcoholic ones, then ranks the merged
    set by score. A short partition simply contributes fewer drinks.
    """
    relevant = relevant_flavours(dish, config)

    alcoholic: list[ScoredCandidate] = []
    non_alcoholic: list[ScoredCandidate] = []
    for drink in drinks:
        candidate = ScoredCandidate(
            drink=drink,
            score=score_drink(dish, drink, relevant, config=config, rng=rng),
        )
        if drink.is_alcoholic:
            alcoholic.append(candidate)
        else:
            non_alcoholic.append(candidate)

    selected = (
        _rank(alcoholic)[: config.alcoholic_slots]
        + _rank(non_alcoholic)[: config.non_alcoholic_slots]
    )
    return _rank(selected)
