"""Orchestrator: single entry point for all user queries.

classify -> build grounding context -> assemble prompt -> one LLM call.
"""

import logging
from typing import Optional, Protocol

from football_agent.context import build_context
from football_agent.core.schemas import AskResponse, ResponseMetadata
from football_agent.data.schemas import FootballDataset
from football_agent.router import Classification, Intent, classify_intent

logger = logging.getLogger(__name__)

GENERAL_INTENT = "general"


class TextGenerator(Protocol):
    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str: ...


class FootballAgent:
    def __init__(
        self,
        dataset: FootballDataset,
        llm: TextGenerator,
        system_prompt: str,
        user_template: str = "User question: {query}\n\nCurrent football data: {context}",
    ) -> None:
        self.dataset = dataset
        self.llm = llm
        self.system_prompt = system_prompt
        self.user_template = user_template

    def build_prompt(self, query: str, context: str) -> str:
        """User message: the raw query, or the query plus the labelled data line."""
        if not context:
            return query
        return self.user_template.format(query=query, context=context)

    def ask(self, query: str) -> AskResponse:
        """Answer one question.

        Raises:
            LLMUnavailableError: the generation provider failed
        """
        classification = classify_intent(query)
        context = build_context(classification, self.dataset)

        logger.info(
            "Detected intent",
            extra={
                "intent": classification.intent.value,
                "team": classification.team,
                "has_context": bool(context),
            },
        )
        if context:
            logger.debug(f"Football context: {context}")

        prompt = self.build_prompt(query, context)
        answer = self.llm.generate(prompt, system_prompt=self.system_prompt)

        return AskResponse(
            response=answer,
            metadata=ResponseMetadata(
                intent=_intent_label(classification),
                has_context=bool(context),
                team=classification.team,
            ),
        )


def _intent_label(classification: Classification) -> str:
    if classification.intent is Intent.NONE:
        return GENERAL_INTENT
    return classification.intent.value
