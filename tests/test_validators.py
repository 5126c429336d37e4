import pytest

from jobboard.core.validators import (
    format_phone,
    is_valid_email,
    is_valid_password,
    is_valid_phone,
    is_valid_salary_display,
)


@pytest.mark.parametrize("value", ["user@example.com", "a.b+c@sub.domain.org"])
def test_valid_emails(value):
    assert is_valid_email(value) is True


@pytest.mark.parametrize("value", ["not-an-email", "user@host", "two words@example.com", "@example.com", "", None])
def test_invalid_emails(value):
    assert is_valid_email(value) is False


def test_password_needs_all_character_classes_and_length():
    assert is_valid_password("Abcdefg1") is True
    assert is_valid_password("abcdefg1") is False  # no uppercase
    assert is_valid_password("ABCDEFG1") is False  # no lowercase
    assert is_valid_password("Abcdefgh") is False  # no digit
    assert is_valid_password("Abcde1") is False  # too short
    assert is_valid_password(None) is False


@pytest.mark.parametrize("value", ["(555) 123-4567", "555-123-4567", "555.123.4567", "5551234567", "555 123 4567"])
def test_valid_phones(value):
    assert is_valid_phone(value) is True


@pytest.mark.parametrize("value", ["555-1234", "+1 555 123 4567", "55512345678", "phone", ""])
def test_invalid_phones(value):
    assert is_valid_phone(value) is False


def test_format_phone_normalizes_to_parenthesized_form():
    assert format_phone("555.123.4567") == "(555) 123-4567"
    assert format_phone("5551234567") == "(555) 123-4567"
    assert format_phone("bad") == "bad"


def test_salary_display_format():
    assert is_valid_salary_display("$45,000 - $50,000") is True
    assert is_valid_salary_display("$150,000") is True
    assert is_valid_salary_display("45,000") is False
    assert is_valid_salary_display(" - $50,000") is False
    assert is_valid_salary_display("") is False
