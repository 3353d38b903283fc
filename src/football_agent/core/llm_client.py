"""
LLM client bound to application settings.
One entrypoint so the agent never deals with provider keys or model names.
"""

from dataclasses import dataclass
from typing import Optional

from football_agent.config.settings import Settings
from football_agent.llm.generate import generate_with_llm


@dataclass(frozen=True)
class LLMClient:
    provider: str = "anthropic"
    api_key: Optional[str] = None
    model: Optional[str] = None
    max_tokens: int = 300
    temperature: float = 0.3
    timeout_seconds: float = 25.0
    ollama_url: str = "http://localhost:11434/api/generate"

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient":
        models = settings.models
        return cls(
            provider=models.provider,
            api_key=settings.api_key_for(models.provider),
            model=models.model,
            max_tokens=models.max_tokens,
            temperature=models.temperature,
            timeout_seconds=models.timeout_seconds,
            ollama_url=models.ollama_url,
        )

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        return generate_with_llm(
            prompt,
            provider=self.provider,
            api_key=self.api_key,
            system_prompt=system_prompt,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout=self.timeout_seconds,
            ollama_url=self.ollama_url,
        )
