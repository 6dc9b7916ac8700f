"""Scanner that checks outbound text for secrets and personal data."""

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..constants import DEFAULT_SENSITIVITY
from ..core.exceptions import InvalidSensitivityError
from ..core.logging_config import get_scan_logger
from . import redactor, scoring
from .models import Finding, Recommendation, ScanResult, SensitivityLevel
from .patterns import PatternCatalog, get_default_catalog

if TYPE_CHECKING:
    from ..config import ScannerConfig

logger = logging.getLogger("promptguard.scanner")
event_logger = get_scan_logger()


class SecurityScanner:
    """Detects and redacts sensitive data in text before it is sent to a model.

    The scanner holds an immutable pattern catalog and one piece of mutable
    state, the current sensitivity level. ``scan`` and ``redact`` are pure
    computations over their inputs and may be called from several threads;
    the level is read once at the start of each scan.
    """

    def __init__(
        self,
        catalog: PatternCatalog | None = None,
        sensitivity: SensitivityLevel | str = DEFAULT_SENSITIVITY,
    ) -> None:
        """Initialize the scanner.

        Args:
            catalog: Detectors to apply. Defaults to the built-in catalog.
            sensitivity: Initial sensitivity level

        Raises:
            InvalidSensitivityError: if ``sensitivity`` names no level
        """
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self._sensitivity = SensitivityLevel.parse(sensitivity)
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls, config: "ScannerConfig", catalog: PatternCatalog | None = None
    ) -> "SecurityScanner":
        return cls(catalog=catalog, sensitivity=config.sensitivity)

    @property
    def sensitivity(self) -> SensitivityLevel:
        with self._lock:
            return self._sensitivity

    def set_sensitivity(self, level: SensitivityLevel | str) -> bool:
        """Change the sensitivity level.

        Returns:
            True if the level was changed, False if ``level`` is not a valid
            level (the current level is kept)
        """
        try:
            parsed = SensitivityLevel.parse(level)
        except InvalidSensitivityError:
            logger.warning(f"Ignoring invalid sensitivity level: {level!r}")
            return False

        with self._lock:
            self._sensitivity = parsed
        logger.info(f"Sensitivity set to {parsed.value}")
        return True

    def find(self, text: str, sensitivity: SensitivityLevel) -> list[Finding]:
        """Apply every admitted pattern to ``text``.

        Returns:
            Findings in catalog order, then occurrence order
        """
        findings: list[Finding] = []
        for pattern in self.catalog:
            if not sensitivity.admits(pattern.severity):
                continue

            for start, end, matched in pattern.find_spans(text):
                findings.append(
                    Finding(
                        type=pattern.name,
                        category=pattern.category,
                        severity=pattern.severity,
                        matched_text=matched,
                        position=start,
                        length=end - start,
                        suggestion=pattern.suggestion_for(matched),
                    )
                )
                logger.debug(
                    f"{pattern.name} ({pattern.severity.value}) at {start}, length {end - start}"
                )

        return findings

    def scan(
        self, text: str, sensitivity: SensitivityLevel | str | None = None
    ) -> ScanResult:
        """
        Scan text for sensitive data.

        Args:
            text: Text to inspect
            sensitivity: Level to scan at. Defaults to the scanner's current level.

        Returns:
            ScanResult with findings, score, severity flags and recommendation

        Raises:
            InvalidSensitivityError: if ``sensitivity`` is given and names no level
        """
        level = self.sensitivity if sensitivity is None else SensitivityLevel.parse(sensitivity)

        findings = self.find(text, level)
        score = scoring.calculate_score(findings)
        result = ScanResult.from_findings(
            findings,
            score=score,
            recommendation=scoring.get_recommendation(score, findings),
            sensitivity=level,
        )

        event_logger.info(
            f"Scanned {len(text)} characters: {result.total_issues} issue(s), score {score}",
            extra={
                "event": "scan",
                "sensitivity": level.value,
                "score": score,
                "total_issues": result.total_issues,
                "action": result.recommendation.action,
            },
        )
        return result

    def redact(self, text: str, findings: Sequence[Finding], strict: bool = False) -> str:
        """Replace each finding in ``text`` with its placeholder.

        See :func:`promptguard.scanners.redactor.redact`.
        """
        return redactor.redact(text, findings, strict=strict)

    def scan_and_redact(
        self, text: str, sensitivity: SensitivityLevel | str | None = None
    ) -> tuple[ScanResult, str]:
        """Scan ``text`` and redact everything the scan found."""
        result = self.scan(text, sensitivity)
        return result, self.redact(text, result.findings)

    def get_summary(self, result: ScanResult) -> dict[str, Any]:
        return scoring.build_summary(result)

    @staticmethod
    def get_grade(score: int) -> str:
        return scoring.get_grade(score)

    @staticmethod
    def get_recommendation(score: int) -> Recommendation:
        return scoring.get_recommendation(score)
