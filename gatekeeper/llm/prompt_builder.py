"""
Prompt Builder — Builds the short prompts sent for each enrichment operation.

Diffs are truncated to a per-operation excerpt; the model only ever sees the
head of the change.
"""

from __future__ import annotations

from gatekeeper.models.decision_models import Decision, SuggestionCode


def excerpt(diff: str, limit: int) -> str:
    return (diff or "")[: max(0, limit)]


def build_explanation_prompt(
    decision: Decision,
    risk: float,
    diff: str,
    files: list[str],
    limit: int = 800,
) -> str:
    return (
        "Analyze this PR:\n\n"
        f"Files: {', '.join(files)}\n"
        f"Decision: {decision.value}\n"
        f"Risk Score: {risk:.2f}\n\n"
        f"Diff:\n{excerpt(diff, limit)}\n\n"
        "Provide a concise technical analysis (2-3 sentences) highlighting the main "
        "risks or positive aspects. Be specific."
    )


def build_suggestion_description_prompt(code: SuggestionCode, explanation: str) -> str:
    return (
        f"Given the PR analysis suggestion code '{code.value}' and explanation "
        f"'{explanation}', provide a concise, actionable recommendation (max 100 chars) "
        "for developers. Be direct and specific."
    )


def build_test_recommendation_prompt(files: list[str], diff: str, limit: int = 500) -> str:
    return (
        f"Analyze these changed files: {', '.join(files)}\n\n"
        f"Diff:\n{excerpt(diff, limit)}\n\n"
        "Generate 3 specific test recommendations (one per line, starting with '-'). "
        "Be concise."
    )


def build_spelling_prompt(diff: str, limit: int = 1200) -> str:
    return (
        "Find up to 5 likely spelling mistakes or obvious typos in the following code "
        "or text diff and provide suggested corrections.\n\n"
        f"Diff:\n{excerpt(diff, limit)}\n\n"
        "Respond with one item per line in the format 'original -> suggestion'. "
        "If none, reply 'NONE'."
    )
