"""Typed failures raised by the NID domain functions.

Absent input is never an error; these cover malformed digits and
impossible calendar dates only.
"""

from __future__ import annotations


class NIDError(ValueError):
    """Base class for NID failures."""

    def __init__(self, message: str, *, nid: str | None = None) -> None:
        super().__init__(message)
        self.nid = nid


class NIDParseError(NIDError):
    """A position that must hold a decimal digit does not."""


class InvalidDateError(NIDError):
    """Day, month and year do not form a real calendar date."""
