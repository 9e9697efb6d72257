"""
Tests for Risk Rules — verify score formula, clamping and classification.
"""

import pytest

from gatekeeper.core.risk_rules import (
    assess,
    classify,
    compute_risk,
    count_lines,
    pr_status,
    risk_level,
)
from gatekeeper.models.decision_models import Decision, RiskLevel


def _lines(n: int) -> str:
    return "".join(f"+ int value{i} = {i};\n" for i in range(n))


def test_blank_diff_is_zero_risk():
    assert compute_risk("", []) == 0.0
    assert compute_risk("   \n\t\n", ["pom.xml", "src/auth/Secret.java"]) == 0.0
    assert compute_risk(None, None) == 0.0


def test_line_risk_is_linear_and_capped():
    assert compute_risk(_lines(20), []) == pytest.approx(0.1)
    assert compute_risk(_lines(100), []) == pytest.approx(0.5)
    assert compute_risk(_lines(400), []) == 1.0


def test_trailing_blank_lines_not_counted():
    assert count_lines("a\nb\n\n\n") == 2
    assert count_lines("a\n\n\nb") == 4
    assert count_lines("single") == 1


def test_password_in_diff_blocks_any_case():
    risk = compute_risk('+ String PassWord = "x";\n', [])
    assert risk >= 0.75
    assert classify(risk, []) == Decision.BLOCK


@pytest.mark.parametrize("token", ["System.exit(1)", "Runtime.getRuntime()", "os.exec(cmd)"])
def test_dangerous_tokens_short_circuit(token):
    assert compute_risk(f"+ {token}\n", ["pom.xml", "src/auth/Login.java"]) == pytest.approx(0.75)


def test_dangerous_token_on_large_diff_stays_bounded():
    diff = _lines(150) + "+ System.exit(0);\n"
    assert compute_risk(diff, []) == 1.0


def test_config_file_adds_risk():
    assert compute_risk(_lines(20), ["src/main/resources/application.yml"]) == pytest.approx(0.2)


def test_build_manifest_stacks_with_config_extension():
    # pom.xml is both an .xml config file and a build manifest
    assert compute_risk(_lines(20), ["pom.xml"]) == pytest.approx(0.35)
    assert compute_risk(_lines(20), ["Dockerfile"]) == pytest.approx(0.25)


def test_security_path_adds_risk_once_per_file():
    assert compute_risk(_lines(20), ["src/auth/SecurityConfig.java"]) == pytest.approx(0.3)


def test_file_adjustments_accumulate_and_clamp():
    files = [f"src/security/Handler{i}.java" for i in range(10)]
    assert compute_risk(_lines(20), files) == 1.0


def test_risk_always_bounded():
    cases = [
        ("", []),
        (_lines(5), ["a.yml", "b.yaml", "c.xml"]),
        (_lines(1000), ["pom.xml"] * 20),
        ("+ password\n" * 500, ["secret.properties"]),
    ]
    for diff, files in cases:
        assert 0.0 <= compute_risk(diff, files) <= 1.0


@pytest.mark.parametrize(
    "risk,expected",
    [
        (1.0, Decision.BLOCK),
        (0.75, Decision.BLOCK),
        (0.7499, Decision.WARN),
        (0.35, Decision.WARN),
        (0.3499, Decision.ALLOW),
        (0.0, Decision.ALLOW),
    ],
)
def test_classify_thresholds(risk, expected):
    assert classify(risk, ["src/Main.java"]) == expected


def test_tests_and_docs_only_allowed():
    assert classify(0.05, ["README.md", "notes.txt", "app.test.js"]) == Decision.ALLOW


@pytest.mark.parametrize(
    "risk,expected",
    [
        (0.95, RiskLevel.CRITICAL),
        (0.90, RiskLevel.CRITICAL),
        (0.80, RiskLevel.HIGH),
        (0.35, RiskLevel.MEDIUM),
        (0.10, RiskLevel.LOW),
        (0.09, RiskLevel.MINIMAL),
    ],
)
def test_risk_level(risk, expected):
    assert risk_level(risk) == expected


def test_pr_status_phrases():
    assert "BLOCKED" in pr_status(Decision.BLOCK, 0.9)
    assert "NEEDS REVIEW" in pr_status(Decision.WARN, 0.4)
    assert pr_status(Decision.ALLOW, 0.15).endswith("Additional testing recommended")
    assert pr_status(Decision.ALLOW, 0.0).endswith("Safe to merge")


def test_assess_traces_contributions():
    result = assess(_lines(40), ["pom.xml"])
    rules = [c.rule for c in result.contributions]
    assert rules == ["lines_changed", "config_file", "build_manifest"]
    assert result.line_count == 40
    assert result.decision == Decision.WARN
    assert result.level == RiskLevel.MEDIUM


def test_assess_records_dangerous_tokens():
    result = assess("+ String password;\n+ System.exit(1);\n", ["pom.xml"])
    assert result.dangerous_tokens == ["system.exit", "password"]
    assert [c.rule for c in result.contributions] == ["lines_changed", "dangerous_token"]
    assert result.decision == Decision.BLOCK
