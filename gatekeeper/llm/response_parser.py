"""
Response Parser — Turns free-text completions into structured enrichment.

Caps spelling lists at 5 items and test lists at 3.
"""

from __future__ import annotations

import re

MAX_TEST_RECOMMENDATIONS = 3
MAX_SPELLING_SUGGESTIONS = 5

_ENUMERATION_PREFIX = re.compile(r"^[\d.)\s-]+")
_ENUMERATION_ONLY = re.compile(r".*[0-9]\.$")


def parse_test_recommendations(response: str | None) -> list[str]:
    """
    Extract up to 3 recommendations from a line-oriented completion.

    "- foo" lines are unbulleted; headings ("# ...") and bare enumeration
    markers ("1.") are skipped.
    """
    if not response:
        return []

    recommendations: list[str] = []
    for line in response.split("\n"):
        line = line.strip()
        if line.startswith("-"):
            item = line[1:].strip()
        elif line and not line.startswith("#") and not _ENUMERATION_ONLY.match(line):
            item = line
        else:
            continue
        if item:
            recommendations.append(item)
        if len(recommendations) >= MAX_TEST_RECOMMENDATIONS:
            break
    return recommendations


def parse_spelling_suggestions(response: str | None) -> list[str]:
    """
    Extract up to 5 "original -> suggestion" items.

    A completion of just "none" (any case) means no findings.
    """
    if not response:
        return []
    response = response.strip()
    if response.lower() == "none":
        return []

    suggestions: list[str] = []
    for line in response.split("\n"):
        item = _ENUMERATION_PREFIX.sub("", line.strip()).strip()
        if not item:
            continue
        suggestions.append(item)
        if len(suggestions) >= MAX_SPELLING_SUGGESTIONS:
            break
    return suggestions
