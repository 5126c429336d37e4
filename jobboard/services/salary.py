"""
Salary text handling.

parse_salary turns free-form text ("$45,000", "45k", "45k-50k") into a number
used for proximity search. format_salary_display turns user input into the
"$45,000 - $50,000" form stored on a job.
"""

import re

_LEADING_FLOAT_RE = re.compile(r"^(\d+\.?\d*|\.\d+)")
_NOT_NUMERIC_OR_K_RE = re.compile(r"[^0-9.k]")
_NON_DIGIT_RE = re.compile(r"\D")


def _leading_float(text: str) -> float | None:
    match = _LEADING_FLOAT_RE.match(text)
    return float(match.group(1)) if match else None


def _drop_extra_decimal_points(text: str) -> str:
    # Keep only the last "." ("1.2.3" -> "12.3").
    last = text.rfind(".")
    if last == -1:
        return text
    return text[:last].replace(".", "") + text[last:]


def parse_salary(text: str | None) -> float:
    """Return the numeric value of a salary string, the mean for a range, 0 when unparseable."""
    if not text:
        return 0
    if "-" in text:
        # Only the first two segments count; "1-2-3" averages 1 and 2.
        segments = text.split("-")
        return (parse_salary(segments[0]) + parse_salary(segments[1])) / 2

    cleaned = _drop_extra_decimal_points(_NOT_NUMERIC_OR_K_RE.sub("", text.lower()))
    if cleaned.endswith("k"):
        value = _leading_float(cleaned[:-1])
        return value * 1000 if value is not None else 0
    value = _leading_float(cleaned)
    return value if value is not None else 0


def _format_amount(part: str) -> str:
    digits = _NON_DIGIT_RE.sub("", part)
    if not digits:
        return ""
    return f"${int(digits):,}"


def format_salary_display(text: str | None) -> str:
    """Render "45000-50000" as "$45,000 - $50,000" and "45000" as "$45,000"."""
    if not text:
        return ""
    parts = [p.strip() for p in text.split("-")]
    if len(parts) == 2:
        return f"{_format_amount(parts[0])} - {_format_amount(parts[1])}"
    return _format_amount(text)
