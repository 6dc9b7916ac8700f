"""Risk scoring, recommendations, grades and display summaries.

Scores start at 100 and lose a fixed penalty per finding according to its
severity. The result only depends on the multiset of severities found, not
on finding order, category or position.
"""

from collections.abc import Iterable
from typing import Any

from ..constants import (
    BASE_SCORE,
    DEFAULT_PENALTY,
    FAILING_GRADE,
    GRADE_CUTOFFS,
    HIGH_RISK_MIN_SCORE,
    LOW_RISK_MIN_SCORE,
    MEDIUM_RISK_MIN_SCORE,
    MIN_SCORE,
    PREVIEW_ELLIPSIS,
    PREVIEW_LENGTH,
    SEVERITY_PENALTIES,
)
from .models import Finding, Recommendation, ScanResult, Severity

SAFE = Recommendation(
    level="safe",
    message="✅ No security issues detected. Safe to send.",
    color="green",
    action="proceed",
)
LOW_RISK = Recommendation(
    level="low-risk",
    message="⚠️ Minor security concerns detected. Review before sending.",
    color="yellow",
    action="review",
)
MEDIUM_RISK = Recommendation(
    level="medium-risk",
    message="⚠️ Security issues detected. Consider redacting sensitive data.",
    color="orange",
    action="redact",
)
HIGH_RISK = Recommendation(
    level="high-risk",
    message="🚨 Serious security issues detected. Redaction strongly recommended.",
    color="red",
    action="block",
)
CRITICAL = Recommendation(
    level="critical",
    message="🛑 CRITICAL security issues detected. DO NOT send without redaction.",
    color="darkred",
    action="block",
)

CRITICAL_FINDING_NOTE = "Critical findings must be redacted before sending."


def severity_penalty(severity: Severity | str) -> int:
    """Points deducted for one finding of ``severity``."""
    key = severity.value if isinstance(severity, Severity) else str(severity)
    return SEVERITY_PENALTIES.get(key, DEFAULT_PENALTY)


def calculate_score(findings: Iterable[Finding]) -> int:
    """Reduce findings to a 0-100 score."""
    score = BASE_SCORE
    for finding in findings:
        score -= severity_penalty(finding.severity)
    return max(MIN_SCORE, score)


def get_recommendation(
    score: int, findings: Iterable[Finding] | None = None
) -> Recommendation:
    """
    Map a score to a recommendation.

    The verdict is a pure function of ``score``. When ``findings`` are given
    and include a critical one, the action is raised to "block" while the
    level stays the one the score selects.

    Args:
        score: Scan score between 0 and 100
        findings: Findings the score was computed from (optional)

    Returns:
        The matching Recommendation
    """
    if score == BASE_SCORE:
        recommendation = SAFE
    elif score >= LOW_RISK_MIN_SCORE:
        recommendation = LOW_RISK
    elif score >= MEDIUM_RISK_MIN_SCORE:
        recommendation = MEDIUM_RISK
    elif score >= HIGH_RISK_MIN_SCORE:
        recommendation = HIGH_RISK
    else:
        recommendation = CRITICAL

    if findings is not None and recommendation.action != "block":
        if any(f.severity == Severity.CRITICAL for f in findings):
            recommendation = recommendation.model_copy(
                update={
                    "action": "block",
                    "message": f"{recommendation.message} {CRITICAL_FINDING_NOTE}",
                }
            )

    return recommendation


def get_grade(score: int) -> str:
    """Letter grade for a score: A (90+), B (80+), C (70+), D (60+), else F."""
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return FAILING_GRADE


def count_severities(findings: Iterable[Finding]) -> dict[str, int]:
    counts = {severity.value: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity.value] += 1
    return counts


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """First ``length`` characters of ``text``, with an ellipsis when cut."""
    if len(text) > length:
        return text[:length] + PREVIEW_ELLIPSIS
    return text


def build_summary(result: ScanResult) -> dict[str, Any]:
    """
    Build the display summary of a scan result.

    Args:
        result: Result returned by a scan

    Returns:
        Dictionary with score, grade, issue counts, recommendation and a
        truncated preview of every finding
    """
    return {
        "score": result.score,
        "grade": get_grade(result.score),
        "totalIssues": result.total_issues,
        "severityCounts": count_severities(result.findings),
        "recommendation": result.recommendation.to_dict(),
        "findings": [
            {
                "type": finding.type,
                "severity": finding.severity.value,
                "preview": preview(finding.matched_text),
                "suggestion": finding.suggestion,
            }
            for finding in result.findings
        ],
    }
