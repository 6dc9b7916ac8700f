"""Pydantic models for scan findings and results.

This module defines the severity, category and sensitivity enums shared by
the pattern catalog and the scanner, and the value objects a scan returns.
All models are frozen: a result describes one scan of one text and is never
updated afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import InvalidSensitivityError


class Severity(str, Enum):
    """Risk classification attached to every pattern."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Position in the total order; higher is more severe."""
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}


class Category(str, Enum):
    """Groups of related detectors in the pattern catalog."""

    CREDENTIALS = "credentials"
    PASSWORDS = "passwords"
    PII = "pii"
    FINANCIAL = "financial"
    DATABASE = "database"
    PRIVATE_KEYS = "privateKeys"


class SensitivityLevel(str, Enum):
    """Threshold controlling which severities a scan reports."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PARANOID = "paranoid"

    @property
    def admitted_severities(self) -> frozenset[Severity]:
        return ADMITTED_SEVERITIES[self]

    def admits(self, severity: Severity) -> bool:
        return severity in ADMITTED_SEVERITIES[self]

    @classmethod
    def parse(cls, value: SensitivityLevel | str) -> SensitivityLevel:
        """Return the level named by ``value``.

        Raises:
            InvalidSensitivityError: if ``value`` names no level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidSensitivityError(value) from None


# Each level admits a superset of the level below it
ADMITTED_SEVERITIES: dict[SensitivityLevel, frozenset[Severity]] = {
    SensitivityLevel.LOW: frozenset({Severity.CRITICAL}),
    SensitivityLevel.MEDIUM: frozenset({Severity.CRITICAL, Severity.HIGH}),
    SensitivityLevel.HIGH: frozenset(
        {Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM}
    ),
    SensitivityLevel.PARANOID: frozenset(
        {Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW}
    ),
}


RecommendationLevel = Literal["safe", "low-risk", "medium-risk", "high-risk", "critical"]
RecommendationAction = Literal["proceed", "review", "redact", "block"]


class Finding(BaseModel):
    """One detected occurrence of a sensitive-data pattern.

    Attributes:
        type: Name of the pattern that matched (e.g. "Email Address").
        category: Catalog category of that pattern.
        severity: Severity of that pattern.
        matched_text: The exact substring that matched.
        position: Character offset of the match in the scanned text.
        length: Length of the match; ``text[position:position + length]``
            is always ``matched_text``.
        suggestion: Placeholder the redactor writes in place of the match.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    category: Category
    severity: Severity
    matched_text: str
    position: int = Field(ge=0)
    length: int = Field(ge=0)
    suggestion: str

    @property
    def end(self) -> int:
        return self.position + self.length

    def overlaps(self, other: Finding) -> bool:
        return self.position < other.end and other.position < self.end

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape hosts consume."""
        return {
            "type": self.type,
            "category": self.category.value,
            "severity": self.severity.value,
            "match": self.matched_text,
            "position": self.position,
            "length": self.length,
            "suggestion": self.suggestion,
        }


class Recommendation(BaseModel):
    """Risk verdict derived from a scan score."""

    model_config = ConfigDict(frozen=True)

    level: RecommendationLevel
    message: str
    action: RecommendationAction
    color: str = ""

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class ScanResult(BaseModel):
    """Aggregated result of scanning one text.

    Findings keep discovery order: catalog order first, then the order of
    occurrences within each pattern. They are not sorted by position.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    findings: list[Finding] = Field(default_factory=list)
    has_critical_issues: bool = False
    has_high_issues: bool = False
    has_medium_issues: bool = False
    has_low_issues: bool = False
    total_issues: int = 0
    recommendation: Recommendation
    sensitivity: SensitivityLevel = SensitivityLevel.HIGH

    @classmethod
    def from_findings(
        cls,
        findings: list[Finding],
        score: int,
        recommendation: Recommendation,
        sensitivity: SensitivityLevel,
    ) -> ScanResult:
        """Build a result whose flags and counts are derived from ``findings``."""
        present = {finding.severity for finding in findings}
        return cls(
            score=score,
            findings=list(findings),
            has_critical_issues=Severity.CRITICAL in present,
            has_high_issues=Severity.HIGH in present,
            has_medium_issues=Severity.MEDIUM in present,
            has_low_issues=Severity.LOW in present,
            total_issues=len(findings),
            recommendation=recommendation,
            sensitivity=sensitivity,
        )

    @property
    def is_safe(self) -> bool:
        return not self.findings

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape hosts consume."""
        return {
            "score": self.score,
            "findings": [finding.to_dict() for finding in self.findings],
            "hasCriticalIssues": self.has_critical_issues,
            "hasHighIssues": self.has_high_issues,
            "hasMediumIssues": self.has_medium_issues,
            "hasLowIssues": self.has_low_issues,
            "totalIssues": self.total_issues,
            "recommendation": self.recommendation.to_dict(),
            "sensitivity": self.sensitivity.value,
        }
