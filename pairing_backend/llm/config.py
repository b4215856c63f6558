from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class LLMConfig:
    """Settings for the Groq pairing recommender.

    Plain construction gives fixed defaults; `from_env` reads GROQ_API_KEY,
    GROQ_MODEL, GROQ_TIMEOUT and PAIRING_LLM_ENABLED.
    """

    api_key: str = ""
    model: str = "llama-3.3-70b-versatile"
    timeout: float = 10.0
    max_tokens: int = 1024
    temperature: float = 0.4
    enabled: bool = True

    @classmethod
    def from_env(cls) -> LLMConfig:
        load_dotenv(ENV_FILE)
        return cls(
            api_key=os.getenv("GROQ_API_KEY", ""),
            model=os.getenv("GROQ_MODEL") or cls.model,
            timeout=float(os.getenv("GROQ_TIMEOUT") or cls.timeout),
            enabled=_env_flag("PAIRING_LLM_ENABLED", True),
        )


DEFAULT_LLM_CONFIG = LLMConfig.from_env()
