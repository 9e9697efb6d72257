"""
Suggestion Code Classifier — Maps a verdict to its UI category.

Priority-ordered, first match wins:

    BLOCK  risk>=0.9 → CRITICAL_SECURITY
           risk>=0.8 + credential tokens → CREDENTIAL_EXPOSURE
           risk>=0.8 + exec/exit tokens → DANGEROUS_EXEC
           risk>=0.8 → HIGH_SECURITY_RISK
           otherwise → DANGEROUS_OPERATIONS
    WARN   risk>=0.5 + config file → CONFIG_CHANGES_REVIEW
           risk>=0.5 → MODERATE_RISK_REVIEW
           risk>=0.4 + build/infra file → BUILD_CONFIG_CHANGES
           risk>=0.4 → CONFIG_CHANGES_REVIEW
           otherwise → ENHANCED_TESTING_NEEDED
    ALLOW  risk>=0.1 → WITH_TESTING_REQUIRED
           otherwise → LOW_RISK_SAFE
"""

from __future__ import annotations

import re

from gatekeeper.models.decision_models import Decision, SuggestionCode

CREDENTIAL_TOKENS: tuple[str, ...] = ("password", "secret", "apikey")
EXEC_TOKENS: tuple[str, ...] = ("runtime.exec", "system.exit")

CONFIG_FILE = re.compile(r".*(properties|yml|yaml|xml|config)$")
BUILD_OR_INFRA_FILE = re.compile(r".*(pom|gradle|build|docker|kubernetes).*")


def has_config_files(files: list[str]) -> bool:
    return any(CONFIG_FILE.match(f.lower()) for f in files)


def has_build_files(files: list[str]) -> bool:
    return any(BUILD_OR_INFRA_FILE.match(f.lower()) for f in files)


def _block_code(risk: float, diff: str) -> SuggestionCode:
    if risk >= 0.9:
        return SuggestionCode.BLOCK_CRITICAL_SECURITY
    if risk >= 0.8:
        lower = diff.lower()
        if any(token in lower for token in CREDENTIAL_TOKENS):
            return SuggestionCode.BLOCK_CREDENTIAL_EXPOSURE
        if any(token in lower for token in EXEC_TOKENS):
            return SuggestionCode.BLOCK_DANGEROUS_EXEC
        return SuggestionCode.BLOCK_HIGH_SECURITY_RISK
    return SuggestionCode.BLOCK_DANGEROUS_OPERATIONS


def _warn_code(risk: float, files: list[str]) -> SuggestionCode:
    if risk >= 0.5:
        if has_config_files(files):
            return SuggestionCode.WARN_CONFIG_CHANGES_REVIEW
        return SuggestionCode.WARN_MODERATE_RISK_REVIEW
    if risk >= 0.4:
        if has_build_files(files):
            return SuggestionCode.WARN_BUILD_CONFIG_CHANGES
        return SuggestionCode.WARN_CONFIG_CHANGES_REVIEW
    return SuggestionCode.WARN_ENHANCED_TESTING_NEEDED


def classify_suggestion_code(
    decision: Decision,
    risk: float,
    files: list[str] | None = None,
    diff: str = "",
) -> SuggestionCode:
    """Rule-based suggestion code. Always returns a code from the decision's bucket."""
    files = files or []
    diff = diff or ""

    if decision == Decision.BLOCK:
        return _block_code(risk, diff)
    if decision == Decision.WARN:
        return _warn_code(risk, files)
    if risk >= 0.1:
        return SuggestionCode.ALLOW_WITH_TESTING_REQUIRED
    return SuggestionCode.ALLOW_LOW_RISK_SAFE
