"""Format checks for user-supplied fields. These never raise; callers turn False into a 400."""

import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})$")
SALARY_DISPLAY_RE = re.compile(r"^\$\d{1,3}(,\d{3})*(\s-\s\$\d{1,3}(,\d{3})*)?$")

PASSWORD_RULES = (
    "Password must be at least 8 characters long and contain at least one uppercase letter, "
    "one lowercase letter, and one number"
)
SALARY_RULES = "Salary must be in format '$XX,XXX' or '$XX,XXX - $XX,XXX'"


def is_valid_email(value) -> bool:
    return isinstance(value, str) and EMAIL_RE.match(value) is not None


def is_valid_password(value) -> bool:
    if not isinstance(value, str) or len(value) < 8:
        return False
    has_lower = any("a" <= c <= "z" for c in value)
    has_upper = any("A" <= c <= "Z" for c in value)
    has_digit = any("0" <= c <= "9" for c in value)
    return has_lower and has_upper and has_digit


def is_valid_phone(value) -> bool:
    return isinstance(value, str) and PHONE_RE.match(value) is not None


def format_phone(value: str) -> str:
    """Normalize a valid phone number to (NNN) NNN-NNNN; anything else is returned as-is."""
    if not isinstance(value, str):
        return value
    return PHONE_RE.sub(r"(\1) \2-\3", value)


def is_valid_salary_display(value) -> bool:
    return isinstance(value, str) and SALARY_DISPLAY_RE.match(value) is not None
