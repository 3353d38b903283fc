"""Configuration settings for the application."""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class ServerSettings:
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 8000)))
    cors_allow_origins: List[str] = field(
        default_factory=lambda: _env_list("CORS_ALLOW_ORIGINS", "*")
    )


@dataclass
class ModelSettings:
    provider: str = field(default_factory=lambda: os.getenv("LLM_PROVIDER", "anthropic"))
    # None: use the provider default (see llm.generate.DEFAULT_MODELS)
    model: Optional[str] = field(default_factory=lambda: os.getenv("LLM_MODEL") or None)
    max_tokens: int = field(default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", 300)))
    temperature: float = field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", 0.3))
    )
    timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("LLM_TIMEOUT_SECONDS", 25))
    )
    ollama_url: str = field(
        default_factory=lambda: os.getenv("OLLAMA_URL", "http://localhost:11434/api/generate")
    )


@dataclass
class Settings:
    server: ServerSettings = field(default_factory=ServerSettings)
    models: ModelSettings = field(default_factory=ModelSettings)
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "production"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    prompt_version: str = field(default_factory=lambda: os.getenv("PROMPT_VERSION", "v1"))
    dataset_path: Optional[str] = field(
        default_factory=lambda: os.getenv("FOOTBALL_DATA_PATH") or None
    )

    # API Keys
    anthropic_api_key: str = field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""))
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def api_key_for(self, provider: str) -> Optional[str]:
        """Return the API key for a cloud provider (None for local ones)."""
        keys = {"anthropic": self.anthropic_api_key, "openai": self.openai_api_key}
        return keys.get(provider.lower().strip()) or None


settings = Settings()
