"""LLM generation function supporting multiple providers.

Every provider failure surfaces as LLMUnavailableError so callers can
report "upstream unavailable" without knowing which SDK was used.
"""

from typing import Optional

import anthropic
import requests

from football_agent.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MODELS = {
    "anthropic": "claude-3-5-sonnet-20241022",
    "openai": "gpt-4o-mini",
    "ollama": "llama3.2:1b",
}


class LLMUnavailableError(RuntimeError):
    """The generation provider could not produce an answer."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


def generate_with_llm(
    prompt: str,
    provider: str = "anthropic",
    api_key: Optional[str] = None,
    system_prompt: Optional[str] = None,
    model: Optional[str] = None,
    temperature: float = 0.3,
    max_tokens: int = 300,
    timeout: float = 25.0,
    ollama_url: str = "http://localhost:11434/api/generate",
) -> str:
    """Generate text using specified LLM provider.

    Args:
        prompt: User message
        provider: 'anthropic', 'openai' or 'ollama'
        api_key: API key for cloud providers (required for non-Ollama)
        system_prompt: System instruction
        model: Model name; provider default when omitted
        temperature: Sampling temperature (0-1)
        max_tokens: Max response length
        timeout: Request timeout in seconds

    Returns:
        First generated text segment

    Raises:
        LLMUnavailableError: the provider failed or returned no text
        ValueError: unknown provider
    """
    provider = provider.lower().strip()
    model = model or DEFAULT_MODELS.get(provider)

    if provider == "anthropic":
        return _generate_anthropic(
            prompt, api_key, system_prompt, model, temperature, max_tokens, timeout
        )
    elif provider == "openai":
        return _generate_openai(
            prompt, api_key, system_prompt, model, temperature, max_tokens, timeout
        )
    elif provider == "ollama":
        return _generate_ollama(
            prompt, system_prompt, model, temperature, max_tokens, timeout, ollama_url
        )
    else:
        raise ValueError(f"Unknown provider: {provider}")


def _generate_anthropic(
    prompt: str,
    api_key: Optional[str],
    system_prompt: Optional[str],
    model: str,
    temperature: float,
    max_tokens: int,
    timeout: float,
) -> str:
    """Generate using Anthropic Claude."""
    if not api_key:
        raise LLMUnavailableError("anthropic", "ANTHROPIC_API_KEY required")

    client = anthropic.Anthropic(api_key=api_key, timeout=timeout)
    try:
        response = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system_prompt or "",
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        raise LLMUnavailableError("anthropic", str(e)) from e

    texts = [block.text for block in response.content if getattr(block, "type", "") == "text"]
    if not texts:
        raise LLMUnavailableError("anthropic", "empty response")
    return texts[0].strip()


def _generate_openai(
    prompt: str,
    api_key: Optional[str],
    system_prompt: Optional[str],
    model: str,
    temperature: float,
    max_tokens: int,
    timeout: float,
) -> str:
    """Generate using OpenAI GPT."""
    if not api_key:
        raise LLMUnavailableError("openai", "OPENAI_API_KEY required")

    try:
        import openai
    except ImportError:
        raise ImportError("Install openai: pip install 'football-intelligence-agent[openai]'")

    client = openai.OpenAI(api_key=api_key, timeout=timeout)
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    try:
        response = client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except openai.OpenAIError as e:
        raise LLMUnavailableError("openai", str(e)) from e

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise LLMUnavailableError("openai", "empty response")
    return content.strip()


def _generate_ollama(
    prompt: str,
    system_prompt: Optional[str],
    model: str,
    temperature: float,
    max_tokens: int,
    timeout: float,
    ollama_url: str,
) -> str:
    """Generate using local Ollama."""
    full_prompt = f"{system_prompt}\n\n{prompt}" if system_prompt else prompt

    try:
        response = requests.post(
            ollama_url,
            json={
                "model": model,
                "prompt": full_prompt,
                "stream": False,
                "options": {"temperature": temperature, "num_predict": max_tokens},
            },
            timeout=timeout,
        )
        response.raise_for_status()
        text = response.json().get("response", "")
    except requests.exceptions.ConnectionError as e:
        raise LLMUnavailableError("ollama", "Ollama not running. Start with: ollama serve") from e
    except (requests.exceptions.RequestException, ValueError) as e:
        raise LLMUnavailableError("ollama", str(e)) from e

    if not text:
        raise LLMUnavailableError("ollama", "empty response")
    return text.strip()
