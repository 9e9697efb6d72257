"""
Risk Rules — Deterministic risk scoring and merge classification.

Risk = min(1.0, lines_changed / 200)
     + 0.10 per structured-config file
     + 0.15 per build-manifest file
     + 0.20 per security-related path
capped at 1.0. A dangerous token anywhere in the diff short-circuits to
max(0.75, line_risk + 0.5) and skips the file adjustments.

Pure functions only: no I/O, no external services.
"""

from __future__ import annotations

import re

from gatekeeper.models.decision_models import (
    Decision,
    RiskAssessment,
    RiskContribution,
    RiskLevel,
)

LINES_AT_FULL_RISK = 200.0

DANGEROUS_TOKENS: tuple[str, ...] = (
    "system.exit",
    "runtime.getruntime",
    "exec(",
    "password",
)
DANGEROUS_FLOOR = 0.75
DANGEROUS_BOOST = 0.5

CONFIG_EXTENSIONS: tuple[str, ...] = (".properties", ".yml", ".yaml", ".xml")
BUILD_MANIFESTS: tuple[str, ...] = ("pom.xml", "build.gradle", "dockerfile")
SECURITY_KEYWORDS: tuple[str, ...] = ("security", "auth", "password", "secret")

FILE_RULE_WEIGHTS: dict[str, float] = {
    "config_file": 0.10,
    "build_manifest": 0.15,
    "security_path": 0.20,
}

BLOCK_THRESHOLD = 0.75
WARN_THRESHOLD = 0.35

# (threshold, level), checked top-down
RISK_LEVEL_THRESHOLDS: tuple[tuple[float, RiskLevel], ...] = (
    (0.90, RiskLevel.CRITICAL),
    (0.75, RiskLevel.HIGH),
    (0.35, RiskLevel.MEDIUM),
    (0.10, RiskLevel.LOW),
)

TESTS_AND_DOCS_ONLY = re.compile(
    r".*\.(test\.js|spec\.js|test\.java|spec\.java|md|txt|doc)$"
)

TESTING_RECOMMENDED_FROM = 0.10


def count_lines(diff: str) -> int:
    """Number of lines in the diff, ignoring trailing blank lines."""
    lines = diff.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return len(lines)


def find_dangerous_tokens(diff: str) -> list[str]:
    lower = diff.lower()
    return [token for token in DANGEROUS_TOKENS if token in lower]


def _file_contributions(files: list[str]) -> list[RiskContribution]:
    contributions: list[RiskContribution] = []
    for path in files:
        lower = path.lower()
        if lower.endswith(CONFIG_EXTENSIONS):
            contributions.append(
                RiskContribution(
                    rule="config_file", target=path, amount=FILE_RULE_WEIGHTS["config_file"]
                )
            )
        if any(name in lower for name in BUILD_MANIFESTS):
            contributions.append(
                RiskContribution(
                    rule="build_manifest", target=path, amount=FILE_RULE_WEIGHTS["build_manifest"]
                )
            )
        if any(word in lower for word in SECURITY_KEYWORDS):
            contributions.append(
                RiskContribution(
                    rule="security_path", target=path, amount=FILE_RULE_WEIGHTS["security_path"]
                )
            )
    return contributions


def _score(diff: str, files: list[str]) -> tuple[float, list[RiskContribution], list[str]]:
    if not diff or not diff.strip():
        return 0.0, [], []

    line_count = count_lines(diff)
    base = min(1.0, line_count / LINES_AT_FULL_RISK)
    contributions = [RiskContribution(rule="lines_changed", target=str(line_count), amount=base)]

    tokens = find_dangerous_tokens(diff)
    if tokens:
        score = max(DANGEROUS_FLOOR, base + DANGEROUS_BOOST)
        contributions.append(
            RiskContribution(rule="dangerous_token", target=tokens[0], amount=score - base)
        )
        # the short-circuit value can exceed 1.0 for very large diffs
        return min(1.0, score), contributions, tokens

    file_contributions = _file_contributions(files)
    contributions.extend(file_contributions)
    score = base + sum(c.amount for c in file_contributions)
    return min(1.0, score), contributions, tokens


def compute_risk(diff: str, files: list[str] | None = None) -> float:
    """
    Compute a 0.0-1.0 risk score from diff text and changed file paths.

    Blank diffs are zero risk regardless of which files changed.
    """
    score, _, _ = _score(diff or "", files or [])
    return score


def classify(risk: float, files: list[str] | None = None) -> Decision:
    """Map a risk score to ALLOW / WARN / BLOCK. Ties go to the stricter bucket."""
    if risk >= BLOCK_THRESHOLD:
        return Decision.BLOCK
    if risk >= WARN_THRESHOLD:
        return Decision.WARN

    # Test/doc-only changes are allowed; same outcome as the default branch.
    if files:
        only_tests_and_docs = all(TESTS_AND_DOCS_ONLY.match(f.lower()) for f in files)
        if only_tests_and_docs and risk < 0.1:
            return Decision.ALLOW

    return Decision.ALLOW


def risk_level(risk: float) -> RiskLevel:
    for threshold, level in RISK_LEVEL_THRESHOLDS:
        if risk >= threshold:
            return level
    return RiskLevel.MINIMAL


def pr_status(decision: Decision, risk: float) -> str:
    """Short status line shown next to the verdict."""
    if decision == Decision.BLOCK:
        return "❌ BLOCKED - Manual review required before merge"
    if decision == Decision.WARN:
        return "⚠️ NEEDS REVIEW - Proceed with caution"
    if risk >= TESTING_RECOMMENDED_FROM:
        return "✅ APPROVED - Additional testing recommended"
    return "✅ APPROVED - Safe to merge"


def assess(diff: str, files: list[str] | None = None) -> RiskAssessment:
    """Score and classify a change, keeping the per-rule trace."""
    diff = diff or ""
    files = files or []
    score, contributions, tokens = _score(diff, files)
    return RiskAssessment(
        score=score,
        level=risk_level(score),
        decision=classify(score, files),
        line_count=count_lines(diff) if diff.strip() else 0,
        dangerous_tokens=tokens,
        contributions=contributions,
    )
