"""Tests for the field validators.

Every validator is a pure callable, so these tests call them directly
without building a form.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from jobform import validators as v
from jobform.constants import MOBILE_PATTERN, ZIP_PATTERN
from jobform.validators import ErrorKind, calculate_age, collect_errors


def _fixed_today(day: date):
    return lambda: day


class TestRequired:
    """Tests for required()."""

    @pytest.mark.parametrize("value", ["", None, [], {}])
    def test_empty_values_are_missing(self, value) -> None:
        assert v.required()(value) is ErrorKind.MISSING

    def test_whitespace_is_not_missing(self) -> None:
        """Whitespace-only input is left to no_whitespace."""
        assert v.required()("   ") is None

    def test_zero_is_present(self) -> None:
        assert v.required()(0) is None


class TestLength:
    """Tests for length()."""

    def test_within_bounds(self) -> None:
        assert v.length(2, 40)("Asha") is None

    def test_too_short(self) -> None:
        assert v.length(2, 40)("A") is ErrorKind.TOO_SHORT

    def test_too_long(self) -> None:
        assert v.length(2, 5)("abcdef") is ErrorKind.TOO_LONG

    def test_uses_trimmed_length(self) -> None:
        """Padding does not count towards the length."""
        assert v.length(2, 5)("  a  ") is ErrorKind.TOO_SHORT
        assert v.length(2, 5)("  abcde  ") is None

    def test_empty_is_not_its_concern(self) -> None:
        assert v.length(2, 5)("") is None
        assert v.length(2, 5)("   ") is None

    def test_max_only(self) -> None:
        validator = v.length(max_length=3)
        assert validator("a") is None
        assert validator("abcd") is ErrorKind.TOO_LONG


class TestPattern:
    """Tests for pattern() with the mobile and postal code formats."""

    def test_mobile_accepts_ten_digits(self) -> None:
        assert v.pattern(MOBILE_PATTERN)("1234567890") is None

    @pytest.mark.parametrize("value", ["12345", "12345678901", "12345abcde"])
    def test_mobile_rejects_other_lengths(self, value: str) -> None:
        assert v.pattern(MOBILE_PATTERN)(value) is ErrorKind.PATTERN_MISMATCH

    def test_zip_requires_six_digits(self) -> None:
        assert v.pattern(ZIP_PATTERN)("411001") is None
        assert v.pattern(ZIP_PATTERN)("41100") is ErrorKind.PATTERN_MISMATCH

    def test_requires_full_match(self) -> None:
        assert v.pattern(r"[0-9]{3}")("1234") is ErrorKind.PATTERN_MISMATCH

    def test_empty_passes(self) -> None:
        assert v.pattern(MOBILE_PATTERN)("") is None

    def test_numeric_value_is_matched_as_text(self) -> None:
        assert v.pattern(MOBILE_PATTERN)(1234567890) is None


class TestAlphaSpace:
    """Tests for alpha_space()."""

    def test_letters_and_spaces(self) -> None:
        assert v.alpha_space()("Mary Ann") is None

    @pytest.mark.parametrize("value", ["R2D2", "O'Brien", "Anne-Marie"])
    def test_rejects_other_characters(self, value: str) -> None:
        assert v.alpha_space()(value) is ErrorKind.ALPHA_SPACE

    def test_empty_and_blank_pass(self) -> None:
        """Blank input is reported by no_whitespace, not alpha_space."""
        assert v.alpha_space()("") is None
        assert v.alpha_space()("    ") is None


class TestNoWhitespace:
    """Tests for no_whitespace()."""

    def test_all_spaces_is_blank(self) -> None:
        assert v.no_whitespace()("   ") is ErrorKind.BLANK_VALUE

    def test_empty_is_blank(self) -> None:
        assert v.no_whitespace()("") is ErrorKind.BLANK_VALUE

    def test_text_passes(self) -> None:
        assert v.no_whitespace()("  Pune ") is None

    def test_distinct_from_alpha_space(self) -> None:
        """The two validators report different kinds."""
        assert v.no_whitespace()(" ") != v.alpha_space()("1")


class TestEmail:
    """Tests for email()."""

    @pytest.mark.parametrize(
        "value", ["a@b.co", "first.last+tag@example.co.in", "x_y@sub.domain.org"]
    )
    def test_valid_addresses(self, value: str) -> None:
        assert v.email()(value) is None

    @pytest.mark.parametrize(
        "value", ["plainaddress", "@example.com", "user@", "user@domain", "a b@c.com"]
    )
    def test_invalid_addresses(self, value: str) -> None:
        assert v.email()(value) is ErrorKind.INVALID_EMAIL

    def test_empty_passes(self) -> None:
        assert v.email()("") is None


class TestAgeRange:
    """Tests for age_range() and calculate_age()."""

    TODAY = date(2024, 6, 15)

    def test_exactly_eighteen_is_valid(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator("2006-06-15") is None

    def test_one_day_short_of_eighteen(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator("2006-06-16") is ErrorKind.AGE_OUT_OF_RANGE

    def test_fifty_is_valid_fifty_one_is_not(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator("1974-06-15") is None
        assert validator("1973-06-15") is ErrorKind.AGE_OUT_OF_RANGE

    def test_accepts_date_objects(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator(date(1990, 1, 1)) is None
        assert validator(datetime(1990, 1, 1, 12, 0)) is None

    def test_accepts_iso_timestamp(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator("1990-01-01T00:00:00") is None

    def test_unparsable_date_fails(self) -> None:
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator("not a date") is ErrorKind.AGE_OUT_OF_RANGE

    @pytest.mark.parametrize(
        "value", ["2000-01-01garbage", "1990-01-01 trailing", "\u0661\u0669\u0669\u0660-01-01"]
    )
    def test_partial_or_non_ascii_date_fails(self, value: str) -> None:
        """Only a complete ISO date or datetime is read as a birth date."""
        validator = v.age_range(18, 50, today=_fixed_today(self.TODAY))
        assert validator(value) is ErrorKind.AGE_OUT_OF_RANGE

    def test_empty_passes(self) -> None:
        assert v.age_range(18, 50)("") is None

    def test_uses_current_date_by_default(self) -> None:
        """A birth date about seventeen years back is rejected."""
        today = date.today()
        too_young = date(today.year - 18, 1, 1) + timedelta(days=400)
        assert v.age_range(18, 50)(too_young.isoformat()) is ErrorKind.AGE_OUT_OF_RANGE

    def test_calculate_age_before_and_after_birthday(self) -> None:
        assert calculate_age(date(2000, 6, 16), self.TODAY) == 23
        assert calculate_age(date(2000, 6, 15), self.TODAY) == 24

    def test_calculate_age_leap_day(self) -> None:
        assert calculate_age(date(2000, 2, 29), date(2018, 2, 28)) == 17
        assert calculate_age(date(2000, 2, 29), date(2018, 3, 1)) == 18


class TestNumericRange:
    """Tests for numeric_range()."""

    def test_in_range(self) -> None:
        validator = v.numeric_range(60, 100)
        assert validator("60") is None
        assert validator("100") is None
        assert validator(75.5) is None

    def test_out_of_range(self) -> None:
        validator = v.numeric_range(60, 100)
        assert validator("59.9") is ErrorKind.OUT_OF_RANGE
        assert validator(101) is ErrorKind.OUT_OF_RANGE

    def test_non_numeric_fails(self) -> None:
        validator = v.numeric_range(1, 90)
        assert validator("ninety") is ErrorKind.OUT_OF_RANGE
        assert validator("nan") is ErrorKind.OUT_OF_RANGE

    @pytest.mark.parametrize("value", ["7_5", "\u0667\u0665", "1e2", "inf", "75 %"])
    def test_malformed_text_fails(self, value: str) -> None:
        """Only plain ASCII decimal text is read as a number."""
        assert v.numeric_range(60, 100)(value) is ErrorKind.OUT_OF_RANGE

    def test_padded_decimal_passes(self) -> None:
        assert v.numeric_range(60, 100)(" 75.5 ") is None
        assert v.numeric_range(60, 100)("+80") is None

    def test_empty_passes(self) -> None:
        assert v.numeric_range(3, 6)("") is None
        assert v.numeric_range(3, 6)(None) is None


class TestYearRange:
    """Tests for year_range()."""

    def test_accepts_year_in_range(self) -> None:
        assert v.year_range(2022, 2024)("2023") is None
        assert v.year_range(2022, 2024)(2024) is None

    def test_rejects_out_of_range(self) -> None:
        assert v.year_range(2022, 2024)("2021") is ErrorKind.YEAR_OUT_OF_RANGE

    def test_rejects_non_numeric(self) -> None:
        assert v.year_range(2022, 2024)("abcd") is ErrorKind.YEAR_OUT_OF_RANGE
        assert v.year_range(2022, 2024)("2023.5") is ErrorKind.YEAR_OUT_OF_RANGE

    @pytest.mark.parametrize("value", ["2_023", "\u0662\u0660\u0662\u0663", "+2_023", "2023 AD"])
    def test_malformed_text_fails(self, value: str) -> None:
        """Only plain ASCII digits are read as a year."""
        assert v.year_range(2022, 2024)(value) is ErrorKind.YEAR_OUT_OF_RANGE

    def test_whole_float_is_a_year(self) -> None:
        assert v.year_range(2022, 2024)(2023.0) is None
        assert v.year_range(2022, 2024)(2023.5) is ErrorKind.YEAR_OUT_OF_RANGE

    def test_empty_passes(self) -> None:
        assert v.year_range(2022, 2024)("") is None


class TestOneOf:
    """Tests for one_of()."""

    def test_known_option(self) -> None:
        assert v.one_of(["Fresher", "Internship"])("Fresher") is None

    def test_unknown_option(self) -> None:
        assert v.one_of(["Fresher"])("Manager") is ErrorKind.INVALID_CHOICE

    def test_empty_passes(self) -> None:
        assert v.one_of(["Fresher"])("") is None


class TestCollectErrors:
    """Tests for collect_errors()."""

    def test_keeps_validator_order(self) -> None:
        validators = [v.required(), v.no_whitespace()]
        assert collect_errors("", validators) == [ErrorKind.MISSING, ErrorKind.BLANK_VALUE]

    def test_no_validators_means_valid(self) -> None:
        assert collect_errors("anything", []) == []

    def test_duplicate_kinds_reported_once(self) -> None:
        validators = [v.required(), v.required()]
        assert collect_errors(None, validators) == [ErrorKind.MISSING]

    def test_repeated_runs_are_identical(self) -> None:
        validators = [v.required(), v.length(2, 4), v.alpha_space()]
        assert collect_errors("a1b2c3", validators) == collect_errors("a1b2c3", validators)
