"""
Enrichment Providers — Optional LLM augmentation of the rule-based verdict.

Two implementations of one interface, chosen once at construction time:
  NoopEnrichment  → no credential configured; every operation returns nothing
  GroqEnrichment  → text operations are one Groq call each, independently
                    fault-isolated; categorization runs the local priority rules

No operation ever raises. A failed call is logged and reported as "no result",
and the caller substitutes its deterministic fallback for that one field.
Enrichment never sees or changes the risk score's outcome.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from gatekeeper.config import Settings
from gatekeeper.core.suggestion_codes import classify_suggestion_code
from gatekeeper.llm.gateway import LLMGateway
from gatekeeper.llm.prompt_builder import (
    build_explanation_prompt,
    build_spelling_prompt,
    build_suggestion_description_prompt,
    build_test_recommendation_prompt,
)
from gatekeeper.llm.response_parser import (
    parse_spelling_suggestions,
    parse_test_recommendations,
)
from gatekeeper.models.decision_models import Decision, SuggestionCode

logger = logging.getLogger("gatekeeper.llm.enrichment")


@runtime_checkable
class EnrichmentProvider(Protocol):
    """Capability interface consumed by the decision engine."""

    @property
    def available(self) -> bool: ...

    async def explain(
        self, decision: Decision, risk: float, diff: str, files: list[str]
    ) -> str | None: ...

    async def describe_suggestion(
        self, code: SuggestionCode, explanation: str
    ) -> str | None: ...

    async def classify_suggestion_code(
        self, decision: Decision, risk: float, diff: str, files: list[str]
    ) -> SuggestionCode | None: ...

    async def recommend_tests(self, files: list[str], diff: str) -> list[str]: ...

    async def find_spelling_errors(self, diff: str) -> list[str]: ...


class NoopEnrichment:
    """Used when no Groq credential is configured. Never touches the network."""

    @property
    def available(self) -> bool:
        return False

    async def explain(self, decision, risk, diff, files):
        return None

    async def describe_suggestion(self, code, explanation):
        return None

    async def classify_suggestion_code(self, decision, risk, diff, files):
        return None

    async def recommend_tests(self, files, diff):
        return []

    async def find_spelling_errors(self, diff):
        return []


class GroqEnrichment:
    """Groq-backed enrichment. Sequential calls, one attempt each."""

    def __init__(self, gateway: LLMGateway, settings: Settings) -> None:
        self.gateway = gateway
        self.explanation_chars = settings.explanation_diff_chars
        self.tests_chars = settings.tests_diff_chars
        self.spelling_chars = settings.spelling_diff_chars

    @property
    def available(self) -> bool:
        return True

    async def _ask(self, operation: str, prompt: str) -> str | None:
        try:
            return await self.gateway.complete(prompt)
        except Exception:
            logger.warning(
                "Groq %s failed — using rule-based fallback", operation, exc_info=True
            )
            return None

    async def explain(
        self, decision: Decision, risk: float, diff: str, files: list[str]
    ) -> str | None:
        prompt = build_explanation_prompt(
            decision, risk, diff, files, limit=self.explanation_chars
        )
        return await self._ask("explanation", prompt)

    async def describe_suggestion(
        self, code: SuggestionCode, explanation: str
    ) -> str | None:
        prompt = build_suggestion_description_prompt(code, explanation)
        return await self._ask("suggestion description", prompt)

    async def classify_suggestion_code(
        self, decision: Decision, risk: float, diff: str, files: list[str]
    ) -> SuggestionCode | None:
        # Categorization stays local: same priority rules, no model call.
        return classify_suggestion_code(decision, risk, files, diff)

    async def recommend_tests(self, files: list[str], diff: str) -> list[str]:
        prompt = build_test_recommendation_prompt(files, diff, limit=self.tests_chars)
        return parse_test_recommendations(await self._ask("test recommendations", prompt))

    async def find_spelling_errors(self, diff: str) -> list[str]:
        if not diff or not diff.strip():
            return []
        prompt = build_spelling_prompt(diff, limit=self.spelling_chars)
        return parse_spelling_suggestions(await self._ask("spelling check", prompt))


def get_enrichment_provider(settings: Settings) -> EnrichmentProvider:
    """Pick the enrichment implementation from configuration."""
    if not settings.enrichment_enabled:
        logger.info("GROQ_API_KEY not set — enrichment disabled, rule-based output only")
        return NoopEnrichment()
    logger.info("Groq enrichment enabled (model=%s)", settings.gatekeeper_model)
    return GroqEnrichment(LLMGateway(settings), settings)
