from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .flavours import (
    CATEGORY_RULES,
    CRAFT_WORDS,
    FLAVOUR_KEYWORDS,
    GENERIC_CHARACTERISTICS,
    CategoryRule,
)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Weights and tables for the fallback pairing engine.

    The jitter ceiling is kept at about a tenth of a categorical rule bonus
    so it only separates near ties.
    """

    food_match_bonus: float = 30.0
    flavour_match_bonus: float = 8.0
    craft_bonus: float = 5.0
    jitter_max: float = 2.0

    alcoholic_slots: int = 2
    non_alcoholic_slots: int = 1

    top_match_score: int = 95
    match_score_step: int = 5

    flavour_keywords: Mapping[str, frozenset[str]] = field(default_factory=lambda: FLAVOUR_KEYWORDS)
    category_rules: tuple[CategoryRule, ...] = CATEGORY_RULES
    craft_words: tuple[str, ...] = CRAFT_WORDS
    characteristics: tuple[str, ...] = GENERIC_CHARACTERISTICS

    def with_overrides(self, **changes: Any) -> ScoringConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_SCORING_CONFIG = ScoringConfig()


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: float = 300.0  # 5 minutes
    max_entries: int = 1_000
    enabled: bool = True


DEFAULT_CACHE_CONFIG = CacheConfig()
