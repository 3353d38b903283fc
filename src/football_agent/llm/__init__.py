from football_agent.llm.generate import LLMUnavailableError, generate_with_llm

__all__ = ["LLMUnavailableError", "generate_with_llm"]
