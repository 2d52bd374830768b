"""Field validators for the application form.

Each factory returns a pure callable ``(value) -> ErrorKind | None``. Validators
hold no state and never raise on bad input: a value that cannot be parsed
simply fails the check it was handed to. Apart from ``required`` and
``no_whitespace``, every validator treats an empty value as valid so that
emptiness is reported once, by ``required``.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorKind",
    "Validator",
    "required",
    "length",
    "pattern",
    "alpha_space",
    "no_whitespace",
    "email",
    "age_range",
    "numeric_range",
    "year_range",
    "one_of",
    "collect_errors",
    "calculate_age",
]


class ErrorKind(str, Enum):
    """Kinds of input error a field can carry."""

    MISSING = "Missing"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"
    PATTERN_MISMATCH = "PatternMismatch"
    ALPHA_SPACE = "AlphaSpace"
    BLANK_VALUE = "BlankValue"
    INVALID_EMAIL = "InvalidEmail"
    AGE_OUT_OF_RANGE = "AgeOutOfRange"
    OUT_OF_RANGE = "OutOfRange"
    YEAR_OUT_OF_RANGE = "YearOutOfRange"
    INVALID_CHOICE = "InvalidChoice"


Validator = Callable[[Any], Optional[ErrorKind]]

ALPHA_SPACE_PATTERN = re.compile(r"^[a-zA-Z\s]*$")
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False


def _text(value: Any) -> str:
    """Trimmed string form of a value ("" for None)."""
    if value is None:
        return ""
    return str(value).strip()


def required() -> Validator:
    """Fail with ``Missing`` when the value is None or empty.

    A whitespace-only string is not missing; ``no_whitespace`` covers that.
    """

    def validate_required(value: Any) -> Optional[ErrorKind]:
        return ErrorKind.MISSING if _is_empty(value) else None

    return validate_required


def length(min_length: int = 0, max_length: Optional[int] = None) -> Validator:
    """Check the trimmed length of a value against ``[min_length, max_length]``."""

    def validate_length(value: Any) -> Optional[ErrorKind]:
        text = _text(value)
        if not text:
            return None
        if len(text) < min_length:
            return ErrorKind.TOO_SHORT
        if max_length is not None and len(text) > max_length:
            return ErrorKind.TOO_LONG
        return None

    return validate_length


def pattern(regex: str | re.Pattern[str]) -> Validator:
    """Fail with ``PatternMismatch`` unless the whole value matches ``regex``."""
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def validate_pattern(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        if compiled.fullmatch(str(value)) is None:
            return ErrorKind.PATTERN_MISMATCH
        return None

    return validate_pattern


def alpha_space() -> Validator:
    """Allow only letters and spaces; an empty value passes."""

    def validate_alpha_space(value: Any) -> Optional[ErrorKind]:
        text = _text(value)
        if text and not ALPHA_SPACE_PATTERN.match(text):
            return ErrorKind.ALPHA_SPACE
        return None

    return validate_alpha_space


def no_whitespace() -> Validator:
    """Fail with ``BlankValue`` when nothing is left after trimming."""

    def validate_no_whitespace(value: Any) -> Optional[ErrorKind]:
        return ErrorKind.BLANK_VALUE if not _text(value) else None

    return validate_no_whitespace


def email() -> Validator:
    """Light RFC 5322 address check."""

    def validate_email(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        if not EMAIL_PATTERN.match(str(value)):
            return ErrorKind.INVALID_EMAIL
        return None

    return validate_email


def _parse_date(value: Any) -> Optional[date]:
    """Date from a date, a datetime, or a complete ISO 8601 string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _text(value)
    if not text.isascii():
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _parse_number(value: Any) -> Optional[float]:
    """Float from a number or plain ASCII decimal text, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not DECIMAL_PATTERN.fullmatch(text):
            return None
        return float(text)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _parse_year(value: Any) -> Optional[int]:
    """Integer from an int or plain ASCII digit text, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        return int(text) if INTEGER_PATTERN.fullmatch(text) else None
    return None


def calculate_age(birth_date: date, today: date) -> int:
    """Whole years between ``birth_date`` and ``today``.

    The year difference drops by one while this year's birthday is still ahead.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_range(
    min_age: int,
    max_age: int,
    today: Callable[[], date] = date.today,
) -> Validator:
    """Fail with ``AgeOutOfRange`` unless the birth date gives an age in range.

    Args:
        min_age: Youngest accepted age, inclusive
        max_age: Oldest accepted age, inclusive
        today: Clock used for the reference date

    An unparsable date fails the check.
    """

    def validate_age_range(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        birth_date = _parse_date(value)
        if birth_date is None:
            return ErrorKind.AGE_OUT_OF_RANGE
        age = calculate_age(birth_date, today())
        if age < min_age or age > max_age:
            return ErrorKind.AGE_OUT_OF_RANGE
        return None

    return validate_age_range


def numeric_range(minimum: float, maximum: float) -> Validator:
    """Fail with ``OutOfRange`` when the number is outside ``[minimum, maximum]``."""

    def validate_numeric_range(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        number = _parse_number(value)
        if number is None or number < minimum or number > maximum:
            return ErrorKind.OUT_OF_RANGE
        return None

    return validate_numeric_range


def year_range(min_year: int, max_year: int) -> Validator:
    """Fail with ``YearOutOfRange`` when the value is not a year in range."""

    def validate_year_range(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        year = _parse_year(value)
        if year is None or year < min_year or year > max_year:
            return ErrorKind.YEAR_OUT_OF_RANGE
        return None

    return validate_year_range


def one_of(options: Iterable[str]) -> Validator:
    """Fail with ``InvalidChoice`` when a non-empty value is not an option."""
    allowed = frozenset(options)

    def validate_one_of(value: Any) -> Optional[ErrorKind]:
        if _is_empty(value):
            return None
        if isinstance(value, str) and value in allowed:
            return None
        return ErrorKind.INVALID_CHOICE

    return validate_one_of


def collect_errors(value: Any, validators: Sequence[Validator]) -> list[ErrorKind]:
    """Run ``validators`` over ``value`` and return their errors in order.

    A kind reported by more than one validator appears once.
    """
    errors: list[ErrorKind] = []
    for validator in validators:
        error = validator(value)
        if error is not None and error not in errors:
            errors.append(error)
    return errors
