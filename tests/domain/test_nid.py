"""Tests for NID normalization, classification, checksum, and derivation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import FrozenInstanceError
from datetime import date, timedelta

import pytest

from nidctl.domain.errors import InvalidDateError, NIDError, NIDParseError
from nidctl.domain.nid import (
    NID,
    age,
    age_at_date,
    category,
    checksum_digit,
    date_of_birth,
    day_of_birth,
    format_nid,
    is_company,
    is_digits,
    is_individual,
    is_safe_delimiter,
    month_of_birth,
    next_birthday,
    normalize,
    validate,
    year_of_birth,
)
from nidctl.domain.types import Category

HUGI = "0911794829"
COMPANY = "5703003340"


class TestNormalize:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("091179 4829", "0911794829"),
            ("091179-4829", "0911794829"),
            ("0911794829", "0911794829"),
            ("09", "09"),
            (" 09-11 79 48-29 ", "0911794829"),
            ("", ""),
        ],
    )
    def test_strips_dashes_and_spaces(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    def test_period_is_preserved(self) -> None:
        assert normalize("091179.4829") == "091179.4829"
        assert normalize("091179.4829") != "0911794829"

    def test_none(self) -> None:
        assert normalize(None) is None

    @pytest.mark.parametrize("raw", ["1-2 3", "--", "  0 9 1-1", "12345-67 890"])
    def test_keeps_digit_order_and_count(self, raw: str) -> None:
        digits = "".join(ch for ch in raw if ch.isdigit())
        assert normalize(raw) == digits


class TestIsDigits:
    @pytest.mark.parametrize("value", ["0", "0911794829"])
    def test_ascii_digits(self, value: str) -> None:
        assert is_digits(value)

    @pytest.mark.parametrize("value", ["", "09\n", "\n", "0911794829\n", "09 11", "\u0660\u0669"])
    def test_rejects_everything_else(self, value: str) -> None:
        assert not is_digits(value)


class TestClassifier:
    def test_individual(self) -> None:
        assert is_individual(HUGI)
        assert not is_company(HUGI)

    def test_company(self) -> None:
        assert is_company(COMPANY)
        assert not is_individual(COMPANY)

    def test_none_is_neither(self) -> None:
        assert not is_individual(None)
        assert not is_company(None)

    @pytest.mark.parametrize("marker", "0123")
    def test_individual_markers(self, marker: str) -> None:
        assert is_individual(marker + "911794829")
        assert not is_company(marker + "911794829")

    @pytest.mark.parametrize("marker", "4567")
    def test_company_markers(self, marker: str) -> None:
        assert is_company(marker + "703003340")
        assert not is_individual(marker + "703003340")

    @pytest.mark.parametrize("marker", "89")
    def test_eight_and_nine_are_neither(self, marker: str) -> None:
        raw = marker + "911794829"
        assert not is_individual(raw)
        assert not is_company(raw)
        assert category(raw) is Category.UNKNOWN

    def test_ignores_length_and_checksum(self) -> None:
        """Only the first digit is inspected."""
        assert is_individual("09")
        assert is_company("5")
        assert is_individual("1401833029")  # bad check digit

    def test_leading_separators_are_stripped(self) -> None:
        assert is_company("- 5703003340")

    @pytest.mark.parametrize("raw", ["A911794829", ".0911794829", "", "  "])
    def test_non_digit_first_character_raises(self, raw: str) -> None:
        with pytest.raises(NIDParseError):
            is_individual(raw)
        with pytest.raises(NIDParseError):
            is_company(raw)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            category("X")

    def test_category(self) -> None:
        assert category(HUGI) is Category.INDIVIDUAL
        assert category(COMPANY) is Category.COMPANY
        assert category(None) is Category.UNKNOWN


class TestChecksum:
    @pytest.mark.parametrize(
        "raw",
        ["1301102230", "0911794829", "6005111490", COMPANY, "091179-4829", "130110 2230"],
    )
    def test_valid(self, raw: str) -> None:
        assert validate(raw)

    @pytest.mark.parametrize(
        "raw",
        [None, "AAA", "BBBBBBBBBB", "", "091179.4829", "09117948291", "1401833029", "0911794839"],
    )
    def test_invalid(self, raw: str | None) -> None:
        assert not validate(raw)

    def test_checksum_digit(self) -> None:
        assert checksum_digit("0911794829") == 2
        assert checksum_digit("1301102230") == 3

    def test_sum_divisible_by_eleven_gives_zero(self) -> None:
        assert checksum_digit("0000000000") == 0
        assert validate("0000000000")

    def test_remainder_ten_gives_one(self) -> None:
        """Weighted sum 32 leaves remainder 10; the expected digit is 1."""
        assert checksum_digit("1111111111") == 1
        assert validate("1111111111")

    def test_remainder_one_never_validates(self) -> None:
        assert checksum_digit("1401833029") == 10
        assert not any(validate(f"14018330{d}9") for d in range(10))

    def test_company_with_check_digit_nine(self) -> None:
        """Weighted sum 90 leaves remainder 2; the expected digit is 9."""
        assert checksum_digit("4612911399") == 9
        assert validate("4612911399")

    def test_century_marker_is_not_checked(self) -> None:
        assert validate("0911794828")

    @pytest.mark.parametrize("raw", ["091179482\n", "0911794829\n", "\n0911794829"])
    def test_newline_rejected(self, raw: str) -> None:
        assert not validate(raw)

    def test_unicode_digits_rejected(self) -> None:
        assert not validate("٠٩١١٧٩٤٨٢٩")


class TestBirthFields:
    def test_year(self) -> None:
        assert year_of_birth("091179 4829") == 1979
        assert year_of_birth("110375-3219") == 1975
        assert year_of_birth(HUGI) != 1999

    def test_year_company_is_none(self) -> None:
        assert year_of_birth(COMPANY) is None

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("0101011230", 2001),
            ("0101991239", 1999),
            ("0101011238", 1801),
            ("3112991231", 1199),
        ],
    )
    def test_century_marker(self, raw: str, expected: int) -> None:
        assert year_of_birth(raw) == expected

    def test_month(self) -> None:
        assert month_of_birth("091179 4829") == 11
        assert month_of_birth("130110-2230") == 1
        assert month_of_birth(COMPANY) is None
        assert month_of_birth(HUGI) != 10

    def test_day(self) -> None:
        assert day_of_birth("091179 4829") == 9
        assert day_of_birth("110266-3229") == 11
        assert day_of_birth(COMPANY) is None
        assert day_of_birth(HUGI) != 8

    @pytest.mark.parametrize("fn", [day_of_birth, month_of_birth, year_of_birth])
    def test_none(self, fn: Callable[[str | None], int | None]) -> None:
        assert fn(None) is None

    @pytest.mark.parametrize("fn", [day_of_birth, month_of_birth, year_of_birth])
    def test_short_input_is_none(self, fn: Callable[[str | None], int | None]) -> None:
        assert fn("09") is None
        assert fn("091179482") is None

    def test_unknown_category_is_none(self) -> None:
        assert day_of_birth("9911794829") is None

    def test_non_digit_fragment_raises(self) -> None:
        with pytest.raises(NIDParseError):
            day_of_birth("0A11794829")
        with pytest.raises(NIDParseError):
            month_of_birth("09X1794829")
        with pytest.raises(NIDParseError):
            year_of_birth("091179482X")

    @pytest.mark.parametrize(
        "fn,raw",
        [
            (day_of_birth, "0\n11794829"),
            (month_of_birth, "091\n794829"),
            (year_of_birth, "09117\n4829"),
            (year_of_birth, "091179482\n"),
        ],
    )
    def test_newline_in_fragment(self, fn: Callable[[str | None], int | None], raw: str) -> None:
        with pytest.raises(NIDParseError):
            fn(raw)


class TestDateOfBirth:
    def test_individual(self) -> None:
        assert date_of_birth(HUGI) == date(1979, 11, 9)

    def test_formatted_input(self) -> None:
        assert date_of_birth("091179-4829") == date(1979, 11, 9)

    def test_none(self) -> None:
        assert date_of_birth(None) is None

    def test_company_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            date_of_birth(COMPANY)

    @pytest.mark.parametrize("raw", ["3102794829", "3104794829", "0913794829", "0000794829"])
    def test_impossible_date_raises(self, raw: str) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            date_of_birth(raw)
        assert exc_info.value.nid == raw
        assert isinstance(exc_info.value, NIDError)

    def test_leap_day(self) -> None:
        assert date_of_birth("2902001230") == date(2000, 2, 29)
        with pytest.raises(InvalidDateError):
            date_of_birth("2902011230")


class TestAgeAtDate:
    BIRTH = date(1979, 11, 9)

    @pytest.mark.parametrize(
        "on,expected",
        [
            (date(1999, 11, 8), 19),
            (date(1999, 11, 9), 20),
            (date(1999, 11, 10), 20),
            (date(2000, 11, 10), 21),
        ],
    )
    def test_reference_cases(self, on: date, expected: int) -> None:
        assert age_at_date(self.BIRTH, on) == expected

    def test_later_month_earlier_day(self) -> None:
        """A passed birth month counts regardless of the day."""
        assert age_at_date(self.BIRTH, date(1999, 12, 1)) == 20

    def test_earlier_month(self) -> None:
        assert age_at_date(self.BIRTH, date(2000, 10, 30)) == 20

    def test_birth_day_itself(self) -> None:
        assert age_at_date(self.BIRTH, self.BIRTH) == 0

    def test_monotonic_day_by_day(self) -> None:
        on = date(1999, 1, 1)
        previous = age_at_date(self.BIRTH, on)
        while on < date(2001, 12, 31):
            on += timedelta(days=1)
            current = age_at_date(self.BIRTH, on)
            assert current >= previous
            previous = current


class TestAge:
    def test_age(self) -> None:
        assert age(HUGI, date(2011, 1, 1)) == 31

    def test_absent_arguments(self) -> None:
        assert age(None, date(2011, 1, 1)) is None
        assert age(HUGI, None) is None

    def test_company_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            age(COMPANY, date(2011, 1, 1))


class TestNextBirthday:
    def test_later_this_year(self) -> None:
        assert next_birthday(date(2012, 1, 1), HUGI) == date(2012, 11, 9)

    def test_next_year(self) -> None:
        assert next_birthday(date(2012, 5, 1), "1401833029") == date(2013, 1, 14)

    def test_on_birthday_returns_same_day(self) -> None:
        assert next_birthday(date(2012, 11, 9), HUGI) == date(2012, 11, 9)

    def test_day_after_birthday(self) -> None:
        assert next_birthday(date(2012, 11, 10), HUGI) == date(2013, 11, 9)

    def test_absent(self) -> None:
        assert next_birthday(date(2012, 1, 1), None) is None
        assert next_birthday(None, HUGI) is None

    def test_company_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            next_birthday(date(2012, 1, 1), COMPANY)

    def test_leap_day_in_common_year_raises(self) -> None:
        assert next_birthday(date(2003, 6, 1), "2902001230") == date(2004, 2, 29)
        with pytest.raises(InvalidDateError):
            next_birthday(date(2001, 3, 1), "2902001230")


class TestFormat:
    def test_default_delimiter(self) -> None:
        assert format_nid("091179 4829") == "091179-4829"
        assert format_nid(HUGI) == "091179-4829"
        assert format_nid("570300-3340") == "570300-3340"

    def test_custom_delimiter(self) -> None:
        assert format_nid(HUGI, " ") == "091179 4829"
        assert format_nid(HUGI, "") == HUGI

    @pytest.mark.parametrize("raw", [None, "", "09", "09117948291", "091179.4829"])
    def test_unformattable_is_empty(self, raw: str | None) -> None:
        assert format_nid(raw) == ""

    @pytest.mark.parametrize("delimiter", ["-", " ", "", "/", " - "])
    def test_safe_delimiters(self, delimiter: str) -> None:
        assert is_safe_delimiter(delimiter)

    @pytest.mark.parametrize("delimiter", ["1", "-0-", "\u0663"])
    def test_digit_delimiters_are_unsafe(self, delimiter: str) -> None:
        assert not is_safe_delimiter(delimiter)

    @pytest.mark.parametrize("raw", [HUGI, "570300 3340", "13-01-10-22-30"])
    def test_round_trip(self, raw: str) -> None:
        assert normalize(format_nid(normalize(raw))) == normalize(raw)


class TestNIDValueObject:
    def test_of(self) -> None:
        nid = NID.of("091179-4829")
        assert nid.value == "091179-4829"
        assert nid.normalized == HUGI
        assert str(nid) == "091179-4829"

    def test_individual(self) -> None:
        nid = NID.of(HUGI)
        assert nid.is_individual
        assert not nid.is_company
        assert nid.category is Category.INDIVIDUAL
        assert nid.is_valid
        assert nid.formatted() == "091179-4829"
        assert nid.date_of_birth() == date(1979, 11, 9)
        assert nid.age(date(2011, 1, 1)) == 31
        assert nid.next_birthday(date(2012, 1, 1)) == date(2012, 11, 9)

    def test_company(self) -> None:
        nid = NID.of(COMPANY)
        assert nid.is_company
        assert nid.category is Category.COMPANY
        assert nid.formatted(" ") == "570300 3340"

    def test_frozen(self) -> None:
        nid = NID.of(HUGI)
        with pytest.raises(FrozenInstanceError):
            nid.value = COMPANY  # type: ignore[misc]

    def test_equality_follows_value(self) -> None:
        assert NID.of(HUGI) == NID.of(HUGI)
        assert NID.of(HUGI).normalized == NID.of("091179 4829").normalized
