"""Unit tests for profile field validators."""

import re

import pytest

from domain.services.validators import (
    is_address_valid,
    is_email_valid,
    is_phone_valid,
    is_positive_number,
    validate_field,
)

REFERENCE_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        [
            "jane@example.com",
            "a@b.c",
            "first.last+tag@sub.domain.org",
            "not-an-email",
            "no-at-sign.com",
            "two@@example.com",
            "spaces in@example.com",
            "jane@example",
            "@example.com",
            "",
        ],
    )
    def test_matches_reference_pattern(self, value: str) -> None:
        assert is_email_valid(value) == bool(REFERENCE_EMAIL.match(value))

    def test_rejects_trailing_newline(self) -> None:
        assert not is_email_valid("jane@example.com\n")


class TestPhone:
    @pytest.mark.parametrize(
        "value",
        ["(555) 123-4567", "555-123-4567", "555.123.4567", "5551234567", "555 123 4567"],
    )
    def test_accepts_ten_digit_formats(self, value: str) -> None:
        assert is_phone_valid(value)

    @pytest.mark.parametrize(
        "value",
        ["12345", "555-1234", "+1 555 123 4567", "555-123-4567 x12", "555-abc-4567", ""],
    )
    def test_rejects_other_input(self, value: str) -> None:
        assert not is_phone_valid(value)


class TestPositiveNumber:
    @pytest.mark.parametrize("value", ["12.5", "70", "0.01", " 175 "])
    def test_positive_values(self, value: str) -> None:
        assert is_positive_number(value)

    @pytest.mark.parametrize("value", ["0", "-5", "abc", "", "nan", "inf", "12kg"])
    def test_rejects_non_positive_or_non_numeric(self, value: str) -> None:
        assert not is_positive_number(value)


class TestAddress:
    def test_requires_five_characters(self) -> None:
        assert not is_address_valid("1 Rd")
        assert is_address_valid("1 Elm")

    def test_length_counts_trimmed_text(self) -> None:
        assert not is_address_valid("   ab   ")

    def test_requires_alphanumeric(self) -> None:
        assert not is_address_valid("-----,,,")


class TestValidateField:
    def test_returns_message_for_invalid_email(self) -> None:
        assert validate_field("email", "nope") == "Please enter a valid email address."

    def test_returns_none_for_valid_value(self) -> None:
        assert validate_field("phone_number", "(555) 123-4567") is None

    def test_empty_optional_fields_are_absent(self) -> None:
        assert validate_field("weight", "") is None
        assert validate_field("height", "") is None
        assert validate_field("address", "") is None

    def test_blank_address_is_invalid(self) -> None:
        assert validate_field("address", "    ") == "Please enter a valid address."

    def test_email_is_required(self) -> None:
        assert validate_field("email", "") is not None

    def test_field_without_rule_passes(self) -> None:
        assert validate_field("name", "") is None
