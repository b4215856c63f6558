import json
from unittest.mock import MagicMock, patch

from pairing_backend.catalog.models import DrinkRecord
from pairing_backend.catalog.seed import SEED_DRINKS
from pairing_backend.llm.config import LLMConfig
from pairing_backend.llm.groq_client import DEFAULT_MATCH_SCORE, _build_user_message, recommend_pairings

SAMPLE_DRINKS = [DrinkRecord(id=i, **row) for i, row in enumerate(SEED_DRINKS, start=1)]

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)

GOOD_ANALYSIS = {
    "flavourProfile": "Crisp batter, flaky white fish and salty, vinegary chips.",
    "keyCharacteristics": ["crispy", "salty", "rich", "tangy"],
}


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def _set_reply(mock_groq_cls, payload) -> None:
    content = payload if isinstance(payload, str) else json.dumps(payload)
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(content)


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_returns_result(mock_groq_cls):
    _set_reply(mock_groq_cls, {
        "dishAnalysis": GOOD_ANALYSIS,
        "selectedDrinkIds": [2, 18, 12],
        "pairingExplanations": {
            "2": {"explanation": "Marmalade notes cut through the batter.", "matchScore": 92},
            "18": {"explanation": "Tonic lifts the vinegar.", "matchScore": 95},
            "12": {"explanation": "Crisp acidity for flaky fish.", "matchScore": 85},
        },
    })

    result = recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG)

    assert result is not None
    assert result.dish == "Fish and Chips"
    assert [p.drink.id for p in result.pairings] == [18, 2, 12]
    assert [p.match_score for p in result.pairings] == [95, 92, 85]
    assert result.pairings[0].explanation == "Tonic lifts the vinegar."
    assert result.dish_analysis.key_characteristics == ["crispy", "salty", "rich", "tangy"]


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_drops_unknown_ids(mock_groq_cls):
    _set_reply(mock_groq_cls, {
        "dishAnalysis": GOOD_ANALYSIS,
        "selectedDrinkIds": [999, 2],
        "pairingExplanations": {"2": {"explanation": "Great.", "matchScore": 90}},
    })

    result = recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG)

    assert [p.drink.id for p in result.pairings] == [2]


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_none_when_no_ids_resolve(mock_groq_cls):
    _set_reply(mock_groq_cls, {
        "dishAnalysis": GOOD_ANALYSIS,
        "selectedDrinkIds": [0, 500],
        "pairingExplanations": {},
    })

    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG) is None


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_fills_defaults_and_clamps(mock_groq_cls):
    _set_reply(mock_groq_cls, {
        "dishAnalysis": {"flavourProfile": "Savoury.", "keyCharacteristics": ["meaty"]},
        "selectedDrinkIds": [1, 16, 3, 4],
        "pairingExplanations": {
            "1": {"matchScore": 140},
            "3": {"explanation": "  ", "matchScore": -5},
        },
    })

    result = recommend_pairings("Steak pie", SAMPLE_DRINKS, config=ENABLED_CONFIG)

    scores = {p.drink.id: p.match_score for p in result.pairings}
    assert len(result.pairings) == 3
    assert scores[1] == 100
    assert scores[16] == DEFAULT_MATCH_SCORE
    assert 3 not in scores  # lowest of four is cut
    assert [p.match_score for p in result.pairings] == [100, 80, 79]
    assert all(p.explanation for p in result.pairings)
    assert result.dish_analysis.key_characteristics == ["meaty", "savoury", "hearty"]


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_fallback_on_api_error(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")

    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG) is None


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_fallback_on_bad_json(mock_groq_cls):
    _set_reply(mock_groq_cls, "not valid json{{{")

    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG) is None


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_fallback_on_empty_content(mock_groq_cls):
    _set_reply(mock_groq_cls, "")

    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG) is None


@patch("pairing_backend.llm.groq_client.Groq")
def test_recommend_pairings_fallback_on_missing_fields(mock_groq_cls):
    _set_reply(mock_groq_cls, {"selectedDrinkIds": [1, 2]})

    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=ENABLED_CONFIG) is None


def test_recommend_pairings_disabled():
    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=DISABLED_CONFIG) is None


def test_recommend_pairings_without_api_key():
    assert recommend_pairings("Fish and Chips", SAMPLE_DRINKS, config=LLMConfig(api_key="")) is None


def test_recommend_pairings_empty_catalog():
    assert recommend_pairings("Fish and Chips", [], config=ENABLED_CONFIG) is None


def test_user_message_lists_drinks_by_id():
    message = _build_user_message("Fish and Chips", SAMPLE_DRINKS)
    assert '"Fish and Chips"' in message
    assert "[18] Fever-Tree Indian Tonic Water (soft drink)" in message
    assert "ABV: 0%" in message


def test_llm_config_from_env(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "env-key")
    monkeypatch.setenv("GROQ_MODEL", "llama-3.1-8b-instant")
    monkeypatch.setenv("GROQ_TIMEOUT", "4.5")
    monkeypatch.setenv("PAIRING_LLM_ENABLED", "false")

    config = LLMConfig.from_env()

    assert config.api_key == "env-key"
    assert config.model == "llama-3.1-8b-instant"
    assert config.timeout == 4.5
    assert config.enabled is False


def test_llm_config_plain_defaults():
    config = LLMConfig()
    assert config.api_key == ""
    assert config.enabled is True
    assert config.model == "llama-3.3-70b-versatile"
