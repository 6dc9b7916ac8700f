"""Constants and configuration values for promptguard.

This module centralizes the scoring weights, thresholds and environment
variable names used across the codebase.
"""

# =============================================================================
# Environment
# =============================================================================

SENSITIVITY_ENV_VAR = "PROMPTGUARD_SENSITIVITY"
LOG_LEVEL_ENV_VAR = "PROMPTGUARD_LOG_LEVEL"
LOG_FILE_ENV_VAR = "PROMPTGUARD_LOG_FILE"

DEFAULT_SENSITIVITY = "high"
DEFAULT_LOG_LEVEL = "WARNING"


# =============================================================================
# Scoring
# =============================================================================

# Every scan starts from a perfect score and loses points per finding
BASE_SCORE = 100
MIN_SCORE = 0

SEVERITY_PENALTIES = {
    "critical": 30,
    "high": 20,
    "medium": 10,
    "low": 5,
}

# Used for any severity without an explicit penalty
DEFAULT_PENALTY = 10


# =============================================================================
# Recommendation Thresholds
# =============================================================================

# Minimum score for each band; a score of exactly 100 is "safe"
LOW_RISK_MIN_SCORE = 80
MEDIUM_RISK_MIN_SCORE = 60
HIGH_RISK_MIN_SCORE = 40


# =============================================================================
# Grades
# =============================================================================

GRADE_CUTOFFS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"


# =============================================================================
# Summary
# =============================================================================

# Characters of a match shown in a summary preview
PREVIEW_LENGTH = 20
PREVIEW_ELLIPSIS = "..."

# Card placeholders keep this many trailing characters of the match
CARD_VISIBLE_DIGITS = 4

# Luhn-valid card numbers are 13 to 19 digits long
CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19
