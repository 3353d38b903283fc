"""Football Intelligence Agent: intent-grounded football Q&A over an LLM."""

__version__ = "0.1.0"
