from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..catalog.models import DrinkRecord, PublicDrink

MAX_PAIRINGS = 3


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DishAnalysis(_CamelModel):
    flavour_profile: str = Field(..., min_length=1)
    key_characteristics: list[str] = Field(..., min_length=3, max_length=5)


class Pairing(_CamelModel):
    drink: PublicDrink
    explanation: str = Field(..., min_length=1)
    match_score: int = Field(..., ge=1, le=100)


class PairingResult(_CamelModel):
    dish: str
    dish_analysis: DishAnalysis
    pairings: list[Pairing] = Field(..., min_length=1, max_length=MAX_PAIRINGS)


@dataclass(frozen=True)
class ScoredCandidate:
    """A drink with its per-request affinity score. Never leaves the engine."""

    drink: DrinkRecord
    score: float


def with_descending_scores(pairings: list[Pairing]) -> list[Pairing]:
    """Return the pairings with match scores strictly descending by rank, within 1-100.

    Order is kept. Tied or out-of-order scores are pushed down one below their
    predecessor, then lifted where needed so the last pairing stays at 1 or above.
    """
    scores: list[int] = []
    for p in pairings:
        score = min(p.match_score, 100)
        if scores:
            score = min(score, scores[-1] - 1)
        scores.append(score)

    n = len(scores)
    scores = [max(score, n - rank) for rank, score in enumerate(scores)]

    return [
        p if p.match_score == score else p.model_copy(update={"match_score": score})
        for p, score in zip(pairings, scores)
    ]
