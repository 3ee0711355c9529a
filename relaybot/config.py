"""Configuration loaded once from the environment."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HF_MODEL = "google/flan-t5-large"
DEFAULT_HF_API_BASE = "https://api-inference.huggingface.co/models"
DEFAULT_NEWS_API_URL = "https://newsapi.org/v2/everything"
DEFAULT_PORT = 3000


class ConfigError(Exception):
    """Raised when the environment cannot produce a usable AppConfig."""


@dataclass(frozen=True)
class AppConfig:
    """Immutable process configuration, injected into every component."""

    discord_token: str = field(default="", repr=False)
    hf_token: str = field(default="", repr=False)
    hf_model: str = DEFAULT_HF_MODEL
    news_api_key: str = field(default="", repr=False)
    port: int = DEFAULT_PORT
    hf_api_base: str = DEFAULT_HF_API_BASE
    news_api_url: str = DEFAULT_NEWS_API_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables.

        Raises:
            ConfigError: DISCORD_TOKEN is missing or PORT is not an integer.
        """
        env = os.environ if environ is None else environ

        discord_token = env.get("DISCORD_TOKEN", "").strip()
        if not discord_token:
            raise ConfigError("DISCORD_TOKEN not set.")

        raw_port = env.get("PORT", "").strip() or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {raw_port!r}")

        return cls(
            discord_token=discord_token,
            hf_token=env.get("HF_TOKEN", "").strip(),
            hf_model=env.get("HF_MODEL", "").strip() or DEFAULT_HF_MODEL,
            news_api_key=env.get("NEWS_API", "").strip(),
            port=port,
            hf_api_base=(env.get("HF_API_BASE", "").strip() or DEFAULT_HF_API_BASE).rstrip("/"),
            news_api_url=env.get("NEWS_API_URL", "").strip() or DEFAULT_NEWS_API_URL,
        )
