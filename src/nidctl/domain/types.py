"""Classification enums for NID categories."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Who a NID belongs to, decided by its first digit."""

    INDIVIDUAL = "individual"
    COMPANY = "company"
    UNKNOWN = "unknown"


# First-digit ranges per category. 8 and 9 belong to neither.
INDIVIDUAL_MARKERS: frozenset[int] = frozenset({0, 1, 2, 3})
COMPANY_MARKERS: frozenset[int] = frozenset({4, 5, 6, 7})
