"""Pattern catalog, scanner, scorer and redactor."""

from .models import (
    Category,
    Finding,
    Recommendation,
    ScanResult,
    SensitivityLevel,
    Severity,
)
from .patterns import (
    Pattern,
    PatternCatalog,
    build_default_catalog,
    get_default_catalog,
    validate_credit_card,
)
from .redactor import redact
from .scoring import calculate_score, get_grade, get_recommendation
from .security_scanner import SecurityScanner

__all__ = [
    "SecurityScanner",
    # Models
    "Category",
    "Finding",
    "Recommendation",
    "ScanResult",
    "SensitivityLevel",
    "Severity",
    # Catalog
    "Pattern",
    "PatternCatalog",
    "build_default_catalog",
    "get_default_catalog",
    "validate_credit_card",
    # Scoring and redaction
    "calculate_score",
    "get_grade",
    "get_recommendation",
    "redact",
]
