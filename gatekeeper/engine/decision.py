"""
Decision Engine — Composes rule evaluation, advisories and enrichment
into the final merge verdict.

Pipeline:
1. Score and classify the change (deterministic)
2. Find missing tests, build the summary
3. Explanation: enrichment if non-empty, else rule-based
4. Suggested tests: enrichment when available, else canned suggestions
5. Suggestion code: priority rules (an enrichment provider may return one
   from the same decision bucket)
6. Spelling: enrichment when available, else none
7. Spelling findings turn any non-BLOCK code into WARN_SPELLING_ERRORS
8. Short enrichment suggestion only when there are no spelling findings

Stateless: one instance serves concurrent requests.
"""

from __future__ import annotations

import logging
import time

from gatekeeper.core.advisories import explain, find_missing_tests, suggest_tests, summarize
from gatekeeper.core.risk_rules import assess, pr_status
from gatekeeper.core.suggestion_codes import classify_suggestion_code
from gatekeeper.llm.enrichment import EnrichmentProvider, NoopEnrichment
from gatekeeper.models.analysis_models import AnalyzeRequest, AnalyzeResponse
from gatekeeper.models.decision_models import Decision, SuggestionCode

logger = logging.getLogger("gatekeeper.engine")


def apply_spelling_override(
    code: SuggestionCode, decision: Decision, spelling_suggestions: list[str]
) -> SuggestionCode:
    """Spelling findings are surfaced but never soften or replace a BLOCK."""
    if spelling_suggestions and decision != Decision.BLOCK:
        return SuggestionCode.WARN_SPELLING_ERRORS
    return code


class DecisionEngine:
    """Builds one AnalyzeResponse per request."""

    def __init__(self, enrichment: EnrichmentProvider | None = None) -> None:
        self.enrichment = enrichment or NoopEnrichment()

    async def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        diff = request.diff
        files = list(request.changed_files)

        assessment = assess(diff, files)
        risk, decision = assessment.score, assessment.decision

        missing = find_missing_tests(diff, files)
        summary = summarize(request.pr_number, request.author, files)
        rule_code = classify_suggestion_code(decision, risk, files, diff)

        if self.enrichment.available:
            suggested = await self.enrichment.recommend_tests(files, diff)
            explanation = await self.enrichment.explain(decision, risk, diff, files)
            spelling = await self.enrichment.find_spelling_errors(diff)
            enriched_code = await self.enrichment.classify_suggestion_code(
                decision, risk, diff, files
            )
        else:
            suggested = suggest_tests(missing)
            explanation = None
            spelling = []
            enriched_code = None

        if not explanation:
            explanation = explain(risk, files)
        code = rule_code
        if enriched_code is not None:
            if enriched_code in SuggestionCode.for_decision(decision):
                code = enriched_code
            else:
                logger.warning(
                    "Ignoring enrichment code %s for decision %s",
                    enriched_code.value,
                    decision.value,
                )

        groq_suggestion = None
        if self.enrichment.available and not spelling:
            groq_suggestion = await self.enrichment.describe_suggestion(code, explanation)

        code = apply_spelling_override(code, decision, spelling)

        logger.info(
            "PR #%s (%s) by %s: risk=%.2f decision=%s code=%s enriched=%s",
            request.pr_number,
            request.repository or "-",
            request.author,
            risk,
            decision.value,
            code.value,
            self.enrichment.available,
        )

        return AnalyzeResponse(
            pr_number=request.pr_number,
            risk_score=risk,
            risk_level=assessment.level,
            decision=decision,
            pr_status=pr_status(decision, risk),
            missing_tests=missing,
            suggested_tests=suggested,
            summary=summary,
            explanation=explanation,
            suggestion_code=code,
            spelling_suggestions=spelling[:5],
            groq_suggestion=groq_suggestion or None,
            error_message=None,
            analysis_timestamp=int(time.time() * 1000),
        )
