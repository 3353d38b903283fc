"""Shared fixtures: bundled dataset and a fake LLM."""

from typing import List, Optional, Tuple

import pytest

from football_agent.data.loader import load_dataset
from football_agent.orchestrator import FootballAgent


class FakeLLM:
    """Records calls; returns a canned answer or raises `error`."""

    def __init__(self, answer: str = "Here is your answer.", error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.calls: List[Tuple[str, Optional[str]]] = []

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        self.calls.append((prompt, system_prompt))
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def dataset():
    return load_dataset()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def agent(dataset, fake_llm):
    return FootballAgent(dataset=dataset, llm=fake_llm, system_prompt="You are a football assistant.")
