"""NidService — normalize, validate, format, and derive birth data.

Wraps the pure functions of :mod:`nidctl.domain.nid` so that every
outcome, including malformed input, comes back as a ServiceResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from nidctl.domain import nid as rules
from nidctl.domain.errors import InvalidDateError, NIDParseError
from nidctl.domain.types import Category
from nidctl.services.base import BaseService
from nidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class NidService(BaseService):
    """Service-layer entry point for single and batch NID operations."""

    # ── Normalize / validate / format ─────────────────────────────────

    def normalize(self, raw: str | None) -> ServiceResult:
        """Strip formatting characters from *raw*."""
        op = "normalize"
        if raw is None:
            return self._missing(op)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": raw, "normalized": rules.normalize(raw)},
        )

    def validate(self, raws: Iterable[str]) -> ServiceResult:
        """Check structure and check digit of every NID in *raws*.

        Invalid entries are reported in ``items`` and as warnings; the
        result itself is still ``ok``.
        """
        op = "validate"
        items: list[dict[str, Any]] = []
        warnings: list[str] = []

        for raw in raws:
            valid = rules.validate(raw)
            items.append({"id": raw, "normalized": rules.normalize(raw), "valid": valid})
            if not valid:
                warnings.append(f"{raw}: not a valid NID")

        if not items:
            return self._missing(op)

        valid_count = sum(1 for item in items if item["valid"])
        logger.debug("validated %d NIDs, %d valid", len(items), valid_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": items,
                "count": len(items),
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
            },
            warnings=warnings,
        )

    def format(self, raw: str | None, *, delimiter: str | None = None) -> ServiceResult:
        """Format *raw* with *delimiter* (default: ``[format] delimiter``)."""
        op = "format"
        if raw is None:
            return self._missing(op)
        if delimiter is None:
            delimiter = self._settings.format.delimiter
        if not rules.is_safe_delimiter(delimiter):
            return self._failure(
                op,
                "INVALID_DELIMITER",
                f"Delimiter {delimiter!r} must not contain digits",
                detail={"id": raw, "delimiter": delimiter},
            )

        formatted = rules.format_nid(raw, delimiter)
        if not formatted:
            return self._failure(
                op,
                "INVALID_NID",
                f"Cannot format {raw!r}: expected {rules.NID_LENGTH} characters",
                detail={"id": raw, "normalized": rules.normalize(raw)},
            )
        return ServiceResult(ok=True, op=op, data={"id": raw, "formatted": formatted})

    # ── Derivations ───────────────────────────────────────────────────

    def inspect(self, raw: str | None, *, on: date | None = None) -> ServiceResult:
        """Collect everything derivable from *raw* into one record.

        An individual NID whose digits do not form a calendar date is
        still inspected; the date fields are left empty and a warning
        is attached.
        """
        op = "inspect"
        on = on or date.today()
        guard = self._guard(op, raw)
        if guard is not None:
            return guard
        assert raw is not None

        warnings: list[str] = []
        normalized = rules.normalize(raw) or ""
        try:
            kind = rules.category(raw)
        except NIDParseError as exc:
            return self._parse_failure(op, raw, exc)

        structural = len(normalized) == rules.NID_LENGTH and rules.is_digits(normalized)
        data: dict[str, Any] = {
            "id": raw,
            "normalized": normalized,
            "formatted": rules.format_nid(raw, self._settings.format.delimiter) or None,
            "category": str(kind),
            "valid": rules.validate(raw),
            "check_digit": int(normalized[rules.CHECK_DIGIT_INDEX]) if structural else None,
            "expected_check_digit": rules.checksum_digit(normalized) if structural else None,
        }
        if not data["valid"]:
            warnings.append(f"{raw}: check digit does not validate")

        if kind is Category.INDIVIDUAL:
            try:
                data.update(self._birth_fields(raw, on, warnings))
            except NIDParseError as exc:
                return self._parse_failure(op, raw, exc)
            except InvalidDateError as exc:
                warnings.append(str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta={"on": on.isoformat()},
        )

    def age(self, raw: str | None, *, on: date | None = None) -> ServiceResult:
        """Age of the individual identified by *raw* at *on* (default: today)."""
        op = "age"
        on = on or date.today()
        guard = self._guard(op, raw, individual=True)
        if guard is not None:
            return guard

        try:
            years = rules.age(raw, on)
        except NIDParseError as exc:
            return self._parse_failure(op, raw, exc)
        except InvalidDateError as exc:
            return self._date_failure(op, raw, exc)
        return ServiceResult(ok=True, op=op, data={"id": raw, "age": years, "on": on.isoformat()})

    def next_birthday(self, raw: str | None, *, on: date | None = None) -> ServiceResult:
        """Next birthday on or after *on* (default: today)."""
        op = "birthday"
        on = on or date.today()
        guard = self._guard(op, raw, individual=True)
        if guard is not None:
            return guard

        try:
            birthday = rules.next_birthday(on, raw)
        except NIDParseError as exc:
            return self._parse_failure(op, raw, exc)
        except InvalidDateError as exc:
            return self._date_failure(op, raw, exc)
        assert birthday is not None
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": raw,
                "next_birthday": birthday.isoformat(),
                "days_until": (birthday - on).days,
                "on": on.isoformat(),
            },
        )

    # ── Helpers ───────────────────────────────────────────────────────

    @staticmethod
    def _birth_fields(raw: str, on: date, warnings: list[str]) -> dict[str, Any]:
        birth_date = rules.date_of_birth(raw)
        assert birth_date is not None
        try:
            birthday = rules.next_birthday(on, raw)
        except InvalidDateError as exc:
            warnings.append(str(exc))
            birthday = None
        return {
            "day": birth_date.day,
            "month": birth_date.month,
            "year": birth_date.year,
            "date_of_birth": birth_date.isoformat(),
            "age": rules.age_at_date(birth_date, on),
            "next_birthday": birthday.isoformat() if birthday else None,
        }

    def _guard(self, op: str, raw: str | None, *, individual: bool = False) -> ServiceResult | None:
        """Shared preconditions: presence, strict checksum, category."""
        if raw is None or not raw.strip():
            return self._missing(op)
        if self._settings.inspect.strict and not rules.validate(raw):
            return self._failure(
                op,
                "INVALID_NID",
                f"{raw!r} is not a valid NID",
                detail={"id": raw, "strict": True},
            )
        if individual:
            try:
                kind = rules.category(raw)
            except NIDParseError as exc:
                return self._parse_failure(op, raw, exc)
            if kind is not Category.INDIVIDUAL:
                return self._failure(
                    op,
                    "NOT_INDIVIDUAL",
                    f"{raw!r} does not identify an individual",
                    detail={"id": raw, "category": str(kind)},
                )
        return None

    def _missing(self, op: str) -> ServiceResult:
        return self._failure(op, "MISSING_INPUT", "No NID given")

    def _parse_failure(self, op: str, raw: str | None, exc: NIDParseError) -> ServiceResult:
        return self._failure(op, "PARSE_ERROR", str(exc), detail={"id": raw})

    def _date_failure(self, op: str, raw: str | None, exc: InvalidDateError) -> ServiceResult:
        return self._failure(op, "INVALID_DATE", str(exc), detail={"id": raw})
