from __future__ import annotations

import json
import logging
from typing import Sequence

from groq import Groq
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..catalog.models import DrinkRecord, PublicDrink
from ..pairing.flavours import GENERIC_CHARACTERISTICS
from ..pairing.models import MAX_PAIRINGS, DishAnalysis, Pairing, PairingResult, with_descending_scores
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "A great British pairing for your dish!"
DEFAULT_MATCH_SCORE = 80

SYSTEM_PROMPT = (
    "You are an expert sommelier and food pairing specialist focusing on British "
    "drinks - both alcoholic and non-alcoholic. Analyse a dish and recommend the "
    "best British drink pairings from the provided catalogue.\n\n"
    "Guidelines:\n"
    "- Base your pairing on flavour contrast/complement rules.\n"
    "- Consider the dish's key flavours, textures and cooking methods.\n"
    "- Match the intensity of flavours between food and drink.\n"
    "- Be fun, friendly and engaging; keep explanations to 2-3 sentences.\n"
    "- Use British English spelling.\n"
    "- ALWAYS include at least one non-alcoholic option (0% ABV, e.g. tea or soft drink).\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"dishAnalysis": {"flavourProfile": "<2-3 sentences>", '
    '"keyCharacteristics": ["<word>", "<word>", "<word>"]}, '
    '"selectedDrinkIds": [<id>, <id>, <id>], '
    '"pairingExplanations": {"<id>": {"explanation": "<why it works>", "matchScore": <1-100>}}}\n'
    "Select 2-3 drinks and use only the drink IDs shown in square brackets."
)


class _LLMModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _LLMDishAnalysis(_LLMModel):
    flavour_profile: str = Field(..., min_length=1)
    key_characteristics: list[str] = Field(default_factory=list)


class _LLMPairingInfo(_LLMModel):
    explanation: str | None = None
    match_score: float | None = None


class _LLMResponse(_LLMModel):
    dish_analysis: _LLMDishAnalysis
    selected_drink_ids: list[int] = Field(..., min_length=1)
    pairing_explanations: dict[str, _LLMPairingInfo] = Field(default_factory=dict)


def _build_user_message(dish: str, drinks: Sequence[DrinkRecord]) -> str:
    lines = [f'## Dish\n"{dish}"', "", "## British Drinks Catalogue"]
    for d in drinks:
        lines.append(f"[{d.id}] {d.name} ({d.type})")
        lines.append(f"   - Flavour: {d.flavour_notes}")
        lines.append(f"   - Region: {d.region}")
        lines.append(f"   - ABV: {d.abv}")
        lines.append(f"   - Recommended foods: {d.recommended_foods}")
    return "\n".join(lines)


def _clamp_score(value: float | None) -> int:
    if value is None:
        return DEFAULT_MATCH_SCORE
    return max(1, min(100, int(round(value))))


def _normalise_characteristics(raw: list[str]) -> list[str]:
    chars = [c.strip() for c in raw if c and c.strip()][:5]
    for generic in GENERIC_CHARACTERISTICS:
        if len(chars) >= 3:
            break
        if generic not in chars:
            chars.append(generic)
    return chars


def _to_result(dish: str, parsed: _LLMResponse, drinks: Sequence[DrinkRecord]) -> PairingResult | None:
    by_id = {d.id: d for d in drinks}

    pairings: list[Pairing] = []
    seen: set[int] = set()
    for drink_id in parsed.selected_drink_ids:
        drink = by_id.get(drink_id)
        if drink is None:
            logger.info("LLM referenced unknown drink id %s, dropping it", drink_id)
            continue
        if drink_id in seen:
            continue
        seen.add(drink_id)
        info = parsed.pairing_explanations.get(str(drink_id)) or _LLMPairingInfo()
        pairings.append(Pairing(
            drink=PublicDrink.from_record(drink),
            explanation=(info.explanation or "").strip() or DEFAULT_EXPLANATION,
            match_score=_clamp_score(info.match_score),
        ))

    if not pairings:
        return None

    pairings.sort(key=lambda p: p.match_score, reverse=True)

    return PairingResult(
        dish=dish,
        dish_analysis=DishAnalysis(
            flavour_profile=parsed.dish_analysis.flavour_profile.strip(),
            key_characteristics=_normalise_characteristics(parsed.dish_analysis.key_characteristics),
        ),
        pairings=with_descending_scores(pairings[:MAX_PAIRINGS]),
    )


def recommend_pairings(
    dish: str,
    drinks: Sequence[DrinkRecord],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> PairingResult | None:
    """
    Ask the Groq LLM to analyse the dish and choose drinks from the catalogue.

    Drinks are referenced by their catalogue id. Ids that do not resolve are
    dropped. Returns None on any failure (disabled, timeout, bad JSON,
    missing fields, nothing usable) so the caller can fall back.
    """
    if not config.enabled or not config.api_key:
        return None

    if not drinks:
        return None

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": _build_user_message(dish, drinks)},
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        if not content.strip():
            logger.warning("Groq LLM returned an empty response, falling back to rule-based pairing")
            return None

        parsed = _LLMResponse.model_validate(json.loads(content))
        result = _to_result(dish, parsed, drinks)
        if result is None:
            logger.warning("Groq LLM selected no known drinks, falling back to rule-based pairing")
        return result

    except Exception:
        logger.warning("Groq LLM call failed, falling back to rule-based pairing", exc_info=True)
        return None
