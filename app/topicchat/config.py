"""Application configuration settings.

This module provides centralized configuration management including:
- OpenAI credentials and model options
- Location of the persisted session file
- Log level
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .models import LLMSettings

DEFAULT_DATA_PATH = Path("~/.topicchat/session.json")


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    try:
        return float(env[key])
    except (KeyError, TypeError, ValueError):
        return default


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(env[key])
    except (KeyError, TypeError, ValueError):
        return default


def _get_str(env: Mapping[str, str], key: str, default: str) -> str:
    value = env.get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()


@dataclass
class AppConfig:
    """Central configuration for the chat application."""

    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 512
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "INFO"

    page_title: str = "Topic Chat"
    chat_input_placeholder: str = "Type your message..."

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if env is None else env
        return cls(
            api_key=_get_str(env, "OPENAI_API_KEY", "") or None,
            model=_get_str(env, "TOPICCHAT_MODEL", cls.model),
            temperature=_get_float(env, "TOPICCHAT_TEMPERATURE", cls.temperature),
            top_p=_get_float(env, "TOPICCHAT_TOP_P", cls.top_p),
            max_tokens=_get_int(env, "TOPICCHAT_MAX_TOKENS", cls.max_tokens),
            data_path=Path(_get_str(env, "TOPICCHAT_DATA_PATH", str(DEFAULT_DATA_PATH))),
            log_level=_get_str(env, "TOPICCHAT_LOG_LEVEL", cls.log_level).upper(),
        )

    def llm_settings(self) -> LLMSettings:
        return LLMSettings(
            model=self.model,
            temperature=self.temperature,
            top_p=self.top_p,
            max_tokens=self.max_tokens,
        )
