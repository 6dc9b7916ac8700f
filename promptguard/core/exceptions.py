"""Custom exception hierarchy for promptguard.

Scanning itself never fails on ordinary input: an empty result is a normal
outcome. These exceptions cover the contracts around it, namely bad
configuration values and finding sets that do not describe the text handed
to the redactor.
"""


class PromptGuardError(Exception):
    """Base exception for all promptguard errors.

    Callers can catch every promptguard-specific error with a single
    except clause when appropriate.
    """
    pass


# =============================================================================
# Scanner Errors
# =============================================================================

class ScannerError(PromptGuardError):
    """Base exception for scanner and redactor errors."""
    pass


class InvalidSpanError(ScannerError):
    """A finding's span does not fit the text being redacted.

    Raised when a span is out of range, when the characters at the span are
    not the finding's matched text, or (in strict mode) when two spans overlap.
    """

    def __init__(self, message: str, position: int | None = None, length: int | None = None):
        super().__init__(message)
        self.position = position
        self.length = length


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(PromptGuardError):
    """Base exception for configuration errors."""
    pass


class InvalidSensitivityError(ConfigurationError):
    """Sensitivity level is not one of low, medium, high, paranoid."""

    def __init__(self, level: object):
        super().__init__(
            f"Invalid sensitivity level: {level!r}. "
            "Valid levels are: low, medium, high, paranoid"
        )
        self.level = level


class InvalidConfigError(ConfigurationError):
    """Configuration values are invalid or malformed."""
    pass
