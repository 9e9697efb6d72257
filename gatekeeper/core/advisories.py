"""
Advisory Generator — Missing-test findings, canned test suggestions,
explanations, and the one-line PR summary.

Template-based: every string here is fixed text selected by simple
pattern checks over the diff and the changed file paths.
"""

from __future__ import annotations

import re

from gatekeeper.core.risk_rules import BLOCK_THRESHOLD, WARN_THRESHOLD

# Java: "public [static ]Type name(" / Python: "def name(" for non-underscore names
PUBLIC_METHOD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"public (static )?[\w<>\[\]]+\s+\w+\s*\("),
    re.compile(r"^[+ \t]*(?:async\s+)?def\s+[A-Za-z]\w*\s*\(", re.MULTILINE),
)
TODO_MARKERS: tuple[str, ...] = ("TODO", "FIXME")
ENDPOINT_MARKERS: tuple[str, ...] = (
    "new endpoint",
    "@GetMapping",
    "@PostMapping",
    "@app.route",
    "@app.get",
    "@app.post",
    "@router.",
)

MAIN_SOURCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r".*src/main/.*\.java$"),
    re.compile(r"^(?!.*(?:^|/)tests?/)(?!.*(?:^|/)test_[^/]*$).*\.py$"),
)
TEST_SOURCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r".*src/test/.*\.java$"),
    re.compile(r".*(?:^|/)tests?/.*\.py$"),
    re.compile(r".*(?:^|/)test_[^/]*\.py$"),
)

FINDING_PUBLIC_METHODS = "Unit tests for new/changed public methods ({count} found)"
FINDING_TODO = "Address TODO/FIXME and add tests"
FINDING_NEW_ENDPOINTS = "Integration tests for new endpoints"
FINDING_TESTS_MISSING = "Test files are missing for modified source code"
FINDING_CONTROLLERS = "Integration tests for API endpoints"
FINDING_SERVICES = "Unit tests for service layer changes"

# finding substring -> recommendation, checked in order for every finding
SUGGESTION_TEMPLATES: dict[str, str] = {
    "Unit tests": "Create unit tests covering edge cases and null inputs",
    "Integration tests": (
        "Add integration tests that call the endpoint and verify response code and payload"
    ),
    "TODO": "Add unit tests for the functionality marked TODO",
}
DEFAULT_SUGGESTION = "Add/verify unit tests for changed functionality"

EXPLANATION_HIGH = (
    "High risk: Large changes or dangerous operations detected. "
    "Requires manual security review."
)
EXPLANATION_MEDIUM = (
    "Medium risk: Moderate changes detected. "
    "Additional testing and code review recommended."
)
EXPLANATION_DOCS_ONLY = "Low risk: Only documentation and test files modified."
EXPLANATION_SECURITY = (
    "Low risk: Small changes in security-related files. Verify implementation details."
)
EXPLANATION_LOW = "Low risk: Small changes or documentation-only updates."

DOCS_OR_TESTS_PATH = re.compile(r".*(test|spec|\.md|\.txt|readme).*")
SECURITY_PATH = re.compile(r".*(security|auth|password|secret|crypto|ssl).*")

SUMMARY_CONFIG_PATH = re.compile(r".*(properties|yml|yaml|xml)$")
SUMMARY_DOCS_PATH = re.compile(r".*\.(md|txt)$")
SOURCE_EXTENSIONS: tuple[str, ...] = (".java", ".py", ".js", ".ts", ".go", ".kt")


def _matches_any(path: str, patterns: tuple[re.Pattern[str], ...]) -> bool:
    return any(p.match(path) for p in patterns)


def count_public_methods(diff: str) -> int:
    return sum(len(p.findall(diff)) for p in PUBLIC_METHOD_PATTERNS)


def find_missing_tests(diff: str, files: list[str] | None = None) -> list[str]:
    """
    Detect test gaps from the diff text and the changed file list.

    Findings are additive and ordered: diff-based checks first (public
    methods, TODO/FIXME, endpoints), then file-based checks (source without
    tests, controllers, services).
    """
    diff = diff or ""
    files = files or []
    findings: list[str] = []

    if diff.strip():
        count = count_public_methods(diff)
        if count > 0:
            findings.append(FINDING_PUBLIC_METHODS.format(count=count))
        if any(marker in diff for marker in TODO_MARKERS):
            findings.append(FINDING_TODO)
        if any(marker in diff for marker in ENDPOINT_MARKERS):
            findings.append(FINDING_NEW_ENDPOINTS)

    if files:
        lowered = [f.lower() for f in files]
        has_main_code = any(_matches_any(f, MAIN_SOURCE_PATTERNS) for f in lowered)
        has_tests = any(_matches_any(f, TEST_SOURCE_PATTERNS) for f in lowered)

        if has_main_code and not has_tests:
            findings.append(FINDING_TESTS_MISSING)
        if any("controller" in f for f in lowered):
            findings.append(FINDING_CONTROLLERS)
        if any("service" in f for f in lowered):
            findings.append(FINDING_SERVICES)

    return findings


def suggest_tests(findings: list[str]) -> list[str]:
    """Canned test recommendations, used only when no enrichment is configured."""
    suggestions: list[str] = []
    for finding in findings:
        for category, suggestion in SUGGESTION_TEMPLATES.items():
            if category in finding:
                suggestions.append(suggestion)
    if not suggestions:
        suggestions.append(DEFAULT_SUGGESTION)
    return suggestions


def explain(risk: float, files: list[str] | None = None) -> str:
    """Rule-based explanation; also the fallback when enrichment returns nothing."""
    if risk >= BLOCK_THRESHOLD:
        return EXPLANATION_HIGH
    if risk >= WARN_THRESHOLD:
        return EXPLANATION_MEDIUM

    if files:
        lowered = [f.lower() for f in files]
        if all(DOCS_OR_TESTS_PATH.match(f) for f in lowered):
            return EXPLANATION_DOCS_ONLY
        if any(SECURITY_PATH.match(f) for f in lowered):
            return EXPLANATION_SECURITY

    return EXPLANATION_LOW


def detect_categories(files: list[str]) -> list[str]:
    """Change categories present in the file list, in fixed display order."""
    lowered = [f.lower() for f in files]
    categories: list[str] = []
    if any("test" in f for f in lowered):
        categories.append("tests")
    if any(SUMMARY_CONFIG_PATH.match(f) for f in lowered):
        categories.append("config")
    if any(SUMMARY_DOCS_PATH.match(f) for f in lowered):
        categories.append("docs")
    if any(f.endswith(SOURCE_EXTENSIONS) for f in lowered):
        categories.append("source code")
    return categories


def summarize(pr_number: str, author: str, files: list[str] | None = None) -> str:
    files = files or []
    parts = [f"PR #{pr_number} by {author}. ", f"Changed files: {len(files)}. "]
    categories = detect_categories(files)
    if categories:
        parts.append(f"Contains: {', '.join(categories)}. ")
    parts.append("Analysis completed by Gatekeeper.")
    return "".join(parts)
