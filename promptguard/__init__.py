"""promptguard - detect and redact secrets and personal data in outbound prompts."""

from .config import ScannerConfig
from .core.exceptions import (
    ConfigurationError,
    InvalidConfigError,
    InvalidSensitivityError,
    InvalidSpanError,
    PromptGuardError,
    ScannerError,
)
from .scanners import (
    Category,
    Finding,
    PatternCatalog,
    Recommendation,
    ScanResult,
    SecurityScanner,
    SensitivityLevel,
    Severity,
    build_default_catalog,
    get_grade,
    get_recommendation,
    redact,
)

__version__ = "0.1.0"

__all__ = [
    "SecurityScanner",
    "ScannerConfig",
    "Category",
    "Finding",
    "PatternCatalog",
    "Recommendation",
    "ScanResult",
    "SensitivityLevel",
    "Severity",
    "build_default_catalog",
    "get_grade",
    "get_recommendation",
    "redact",
    "PromptGuardError",
    "ScannerError",
    "InvalidSpanError",
    "ConfigurationError",
    "InvalidSensitivityError",
    "InvalidConfigError",
]
