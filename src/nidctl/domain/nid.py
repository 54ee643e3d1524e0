"""NID parsing, validation, and birthdate derivation.

A normalized NID is ten ASCII digits:

- ``[0:2]`` day of birth, ``[2:4]`` month, ``[4:6]`` two-digit year
- ``[6:8]`` serial digits
- ``[8]`` check digit
- ``[9]`` century marker (``0`` → 2000s, ``d`` → ``1d00``s)

The first digit doubles as the category marker: ``0-3`` individual,
``4-7`` company, ``8-9`` neither.

Every function is pure.  ``None`` in means ``None`` out, except the
classifiers and :func:`validate`, which map ``None`` to ``False``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from nidctl.domain.errors import InvalidDateError, NIDParseError
from nidctl.domain.types import COMPANY_MARKERS, INDIVIDUAL_MARKERS, Category

NID_LENGTH = 10
DEFAULT_DELIMITER = "-"
CHECKSUM_WEIGHTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2)
CHECK_DIGIT_INDEX = 8
CENTURY_MARKER_INDEX = 9

_STRIPPED_CHARS = ("-", " ")
_DIGITS = re.compile(r"[0-9]+")


# --- Normalizer ---


def normalize(raw: str | None) -> str | None:
    """Strip dashes and spaces from *raw*.

    Any other character, including ``.``, is kept verbatim so that a
    malformed input still fails the later length/digit checks.

    Examples:
        >>> normalize("091179 4829")
        '0911794829'
        >>> normalize("091179.4829")
        '091179.4829'
    """
    if raw is None:
        return None
    for char in _STRIPPED_CHARS:
        raw = raw.replace(char, "")
    return raw


def is_digits(value: str) -> bool:
    """Return True when *value* is non-empty and holds only ASCII digits."""
    return _DIGITS.fullmatch(value) is not None


# --- Classifier ---


def _marker(raw: str) -> int:
    """Parse the first character of the normalized *raw* as a digit."""
    normalized = normalize(raw) or ""
    head = normalized[:1]
    if not is_digits(head):
        msg = f"NID must start with a digit, got {head!r}"
        raise NIDParseError(msg, nid=raw)
    return int(head)


def is_individual(raw: str | None) -> bool:
    """True if the first digit marks an individual (``0-3``).

    Only the first digit is inspected; length and checksum are not.

    Raises:
        NIDParseError: The first character is not a digit.
    """
    if raw is None:
        return False
    return _marker(raw) in INDIVIDUAL_MARKERS


def is_company(raw: str | None) -> bool:
    """True if the first digit marks a company (``4-7``).

    Raises:
        NIDParseError: The first character is not a digit.
    """
    if raw is None:
        return False
    return _marker(raw) in COMPANY_MARKERS


def category(raw: str | None) -> Category:
    """Return the :class:`Category` for *raw* (``UNKNOWN`` for ``None``, 8, 9)."""
    if is_individual(raw):
        return Category.INDIVIDUAL
    if is_company(raw):
        return Category.COMPANY
    return Category.UNKNOWN


# --- Checksum validator ---


def checksum_digit(normalized: str) -> int:
    """Compute the expected check digit for a 10-digit *normalized* NID.

    ``11 - (weighted sum mod 11)``, with 11 folded to 0.  A remainder of
    1 yields 10, which never matches a single digit.
    """
    total = sum(
        int(digit) * weight
        for digit, weight in zip(normalized[: len(CHECKSUM_WEIGHTS)], CHECKSUM_WEIGHTS)
    )
    expected = 11 - (total % 11)
    if expected == 11:
        expected = 0
    return expected


def validate(raw: str | None) -> bool:
    """Check structure and check digit of *raw*.

    Structural failures (wrong length, non-digit content) are reported
    as ``False``, never raised.
    """
    normalized = normalize(raw)
    if normalized is None:
        return False
    if len(normalized) != NID_LENGTH:
        return False
    if not is_digits(normalized):
        return False
    return checksum_digit(normalized) == int(normalized[CHECK_DIGIT_INDEX])


# --- Date/age deriver ---


def _fragment(normalized: str, start: int, end: int) -> int:
    value = normalized[start:end]
    if not is_digits(value):
        msg = f"Expected digits at positions {start}-{end - 1}, got {value!r}"
        raise NIDParseError(msg, nid=normalized)
    return int(value)


def _individual_digits(raw: str | None) -> str | None:
    """Normalized *raw* if it is a full-length individual NID, else None."""
    if raw is None:
        return None
    normalized = normalize(raw)
    if normalized is None or not is_individual(raw):
        return None
    if len(normalized) != NID_LENGTH:
        return None
    return normalized


def day_of_birth(raw: str | None) -> int | None:
    """Day of month encoded in positions 0-1, or None for non-individuals."""
    normalized = _individual_digits(raw)
    if normalized is None:
        return None
    return _fragment(normalized, 0, 2)


def month_of_birth(raw: str | None) -> int | None:
    """Month encoded in positions 2-3, or None for non-individuals."""
    normalized = _individual_digits(raw)
    if normalized is None:
        return None
    return _fragment(normalized, 2, 4)


def year_of_birth(raw: str | None) -> int | None:
    """Four-digit birth year, disambiguated by the century marker.

    Examples:
        >>> year_of_birth("091179 4829")
        1979
        >>> year_of_birth("5703003340") is None
        True
    """
    normalized = _individual_digits(raw)
    if normalized is None:
        return None
    marker = _fragment(normalized, CENTURY_MARKER_INDEX, CENTURY_MARKER_INDEX + 1)
    century = 2000 if marker == 0 else 1000 + marker * 100
    return century + _fragment(normalized, 4, 6)


def date_of_birth(raw: str | None) -> date | None:
    """Birthdate of the individual identified by *raw*.

    Raises:
        InvalidDateError: *raw* does not encode an individual, or the
            encoded day/month/year is not a real calendar date.
    """
    if raw is None:
        return None
    day = day_of_birth(raw)
    month = month_of_birth(raw)
    year = year_of_birth(raw)
    if day is None or month is None or year is None:
        msg = f"{raw!r} does not encode a birthdate"
        raise InvalidDateError(msg, nid=raw)
    try:
        return date(year, month, day)
    except ValueError as exc:
        msg = f"{raw!r} encodes an invalid date {year:04d}-{month:02d}-{day:02d}"
        raise InvalidDateError(msg, nid=raw) from exc


def age_at_date(birth_date: date, on: date) -> int:
    """Whole years between *birth_date* and *on*.

    The birthday counts as passed on the day itself.
    """
    years = on.year - birth_date.year
    if birth_date.month < on.month:
        return years
    if birth_date.month == on.month and birth_date.day <= on.day:
        return years
    return years - 1


def age(raw: str | None, on: date | None) -> int | None:
    """Age of the individual identified by *raw* at date *on*."""
    if raw is None or on is None:
        return None
    birth_date = date_of_birth(raw)
    if birth_date is None:
        return None
    return age_at_date(birth_date, on)


def next_birthday(on: date | None, raw: str | None) -> date | None:
    """First birthday falling on or after *on*.

    Invoked on the birthday itself, returns *on*.

    Raises:
        InvalidDateError: *raw* does not encode an individual, or the
            birthday does not exist in the target year (29 February).
    """
    if raw is None or on is None:
        return None
    day = day_of_birth(raw)
    month = month_of_birth(raw)
    if day is None or month is None:
        msg = f"{raw!r} does not encode a birthdate"
        raise InvalidDateError(msg, nid=raw)

    year = on.year
    if on.month > month or (on.month == month and on.day > day):
        year += 1
    try:
        return date(year, month, day)
    except ValueError as exc:
        msg = f"No birthday {month:02d}-{day:02d} in {year}"
        raise InvalidDateError(msg, nid=raw) from exc


# --- Formatter ---


def is_safe_delimiter(delimiter: str) -> bool:
    """True if *delimiter* holds no digits, so formatted output keeps ten of them."""
    return not any(ch.isdigit() for ch in delimiter)


def format_nid(raw: str | None, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Insert *delimiter* between the birthdate and serial halves.

    Returns an empty string when *raw* cannot be formatted.

    Examples:
        >>> format_nid("0911794829")
        '091179-4829'
    """
    normalized = normalize(raw)
    if normalized is None or len(normalized) != NID_LENGTH:
        return ""
    return f"{normalized[:6]}{delimiter}{normalized[6:]}"


# --- Value object ---


@dataclass(frozen=True)
class NID:
    """Immutable wrapper around a raw NID string.

    Holds no state beyond *value*; every property delegates to the
    module-level functions.
    """

    value: str

    @classmethod
    def of(cls, value: str) -> NID:
        return cls(value)

    @property
    def normalized(self) -> str:
        return normalize(self.value) or ""

    @property
    def is_individual(self) -> bool:
        return is_individual(self.value)

    @property
    def is_company(self) -> bool:
        return is_company(self.value)

    @property
    def category(self) -> Category:
        return category(self.value)

    @property
    def is_valid(self) -> bool:
        return validate(self.value)

    def formatted(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        return format_nid(self.value, delimiter)

    def date_of_birth(self) -> date | None:
        return date_of_birth(self.value)

    def age(self, on: date) -> int | None:
        return age(self.value, on)

    def next_birthday(self, on: date) -> date | None:
        return next_birthday(on, self.value)

    def __str__(self) -> str:
        return self.value
