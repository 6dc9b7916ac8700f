"""Tests for the pattern catalog."""

import re

import pytest

from promptguard.scanners.models import Category, SensitivityLevel, Severity
from promptguard.scanners.patterns import (
    DEFAULT_PLACEHOLDER,
    Pattern,
    PatternCatalog,
    build_default_catalog,
    card_placeholder,
    get_default_catalog,
    validate_credit_card,
)


class TestValidateCreditCard:
    """Test the Luhn checksum validator."""

    @pytest.mark.parametrize(
        "number",
        [
            "4111111111111111",
            "4111-1111-1111-1111",
            "4111 1111 1111 1111",
            "5555555555554444",
            "378282246310005",
        ],
    )
    def test_valid_numbers(self, number) -> None:
        """Test known test card numbers pass."""
        assert validate_credit_card(number) is True

    @pytest.mark.parametrize(
        "number",
        [
            "4111111111111112",
            "1234567812345678",
            "411111111111",  # 12 digits
            "41111111111111111111",  # 20 digits
            "",
        ],
    )
    def test_invalid_numbers(self, number) -> None:
        """Test bad checksums and out-of-range lengths fail."""
        assert validate_credit_card(number) is False


class TestPattern:
    """Test the Pattern record."""

    def test_find_spans_reports_all_occurrences(self) -> None:
        """Test every non-overlapping occurrence is yielded."""
        pattern = Pattern("Digits", Category.PII, re.compile(r"\d{3}"), Severity.LOW)
        assert list(pattern.find_spans("123 456 78")) == [(0, 3, "123"), (4, 7, "456")]

    def test_find_spans_applies_validator(self) -> None:
        """Test validator rejections are skipped."""
        pattern = Pattern(
            "Even",
            Category.PII,
            re.compile(r"\d"),
            Severity.LOW,
            validator=lambda s: int(s) % 2 == 0,
        )
        assert [m for _, _, m in pattern.find_spans("1234")] == ["2", "4"]

    def test_default_placeholder(self) -> None:
        """Test patterns fall back to the generic placeholder."""
        pattern = Pattern("X", Category.PII, re.compile("x"), Severity.LOW)
        assert pattern.suggestion_for("x") == DEFAULT_PLACEHOLDER == "[REDACTED]"

    def test_callable_placeholder(self) -> None:
        """Test card placeholders keep the last four characters."""
        assert card_placeholder("4111-1111-1111-1234") == "[CARD_****1234]"

    def test_pattern_is_immutable(self) -> None:
        """Test patterns cannot be modified after construction."""
        pattern = Pattern("X", Category.PII, re.compile("x"), Severity.LOW)
        with pytest.raises(AttributeError):
            pattern.severity = Severity.CRITICAL


class TestDefaultCatalog:
    """Test the built-in catalog."""

    def test_size_and_categories(self) -> None:
        """Test every category is present in scan order."""
        catalog = build_default_catalog()

        assert len(catalog) == 31
        assert catalog.categories() == [
            Category.CREDENTIALS,
            Category.PASSWORDS,
            Category.PII,
            Category.FINANCIAL,
            Category.DATABASE,
            Category.PRIVATE_KEYS,
        ]
        assert len(catalog.by_category("credentials")) == 11
        assert len(catalog.by_category(Category.PRIVATE_KEYS)) == 4

    @pytest.mark.parametrize(
        "name,severity",
        [
            ("OpenAI API Key", Severity.CRITICAL),
            ("Stripe Publishable Key", Severity.HIGH),
            ("Generic API Key", Severity.HIGH),
            ("Bearer Token", Severity.CRITICAL),
            ("JWT Token", Severity.HIGH),
            ("Pass Field", Severity.HIGH),
            ("Email Address", Severity.MEDIUM),
            ("US Phone Number", Severity.MEDIUM),
            ("US Social Security", Severity.CRITICAL),
            ("US SSN (no dashes)", Severity.HIGH),
            ("IP Address (IPv4)", Severity.LOW),
            ("IPv6 Address", Severity.LOW),
            ("Credit Card Number", Severity.CRITICAL),
            ("Bank Account", Severity.HIGH),
            ("Database Connection", Severity.HIGH),
            ("SSH Private Key", Severity.CRITICAL),
        ],
    )
    def test_severities(self, name, severity) -> None:
        """Test severity assignments that drive sensitivity filtering."""
        pattern = build_default_catalog().get(name)
        assert pattern is not None
        assert pattern.severity == severity

    def test_only_credit_card_has_validator(self) -> None:
        """Test the Luhn validator is attached to card numbers only."""
        with_validator = [p.name for p in build_default_catalog() if p.validator is not None]
        assert with_validator == ["Credit Card Number"]

    def test_every_pattern_has_specific_placeholder(self) -> None:
        """Test no built-in pattern uses the generic fallback."""
        for pattern in build_default_catalog():
            assert pattern.placeholder != DEFAULT_PLACEHOLDER, pattern.name

    def test_shared_default_catalog(self) -> None:
        """Test the default catalog is built once."""
        assert get_default_catalog() is get_default_catalog()

    def test_lookup(self) -> None:
        """Test name lookup and membership."""
        catalog = get_default_catalog()
        assert "Email Address" in catalog
        assert "Fax Number" not in catalog
        assert catalog.get("Fax Number") is None

    def test_by_severity(self) -> None:
        """Test filtering by severity."""
        low = get_default_catalog().by_severity("low")
        assert [p.name for p in low] == ["IP Address (IPv4)", "IPv6 Address"]

    def test_duplicate_names_rejected(self) -> None:
        """Test a catalog cannot hold two patterns with one name."""
        pattern = Pattern("X", Category.PII, re.compile("x"), Severity.LOW)
        with pytest.raises(ValueError, match="Duplicate pattern name"):
            PatternCatalog([pattern, pattern])


class TestSensitivityLevels:
    """Test the admitted-severity sets."""

    def test_admitted_sets(self) -> None:
        """Test each level admits the documented severities."""
        assert SensitivityLevel.LOW.admitted_severities == {Severity.CRITICAL}
        assert SensitivityLevel.MEDIUM.admitted_severities == {Severity.CRITICAL, Severity.HIGH}
        assert SensitivityLevel.HIGH.admitted_severities == {
            Severity.CRITICAL,
            Severity.HIGH,
            Severity.MEDIUM,
        }
        assert SensitivityLevel.PARANOID.admitted_severities == set(Severity)

    def test_levels_are_nested(self) -> None:
        """Test each level admits a superset of the one below."""
        levels = list(SensitivityLevel)
        for lower, higher in zip(levels, levels[1:]):
            assert lower.admitted_severities <= higher.admitted_severities

    def test_severity_rank_order(self) -> None:
        """Test critical > high > medium > low."""
        ranks = [s.rank for s in (Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW)]
        assert ranks == sorted(ranks, reverse=True)
