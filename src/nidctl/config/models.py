"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nidctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from nidctl.domain.nid import DEFAULT_DELIMITER, is_safe_delimiter


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    delimiter: str = DEFAULT_DELIMITER

    @field_validator("delimiter")
    @classmethod
    def _no_digits(cls, value: str) -> str:
        if not is_safe_delimiter(value):
            msg = "delimiter must not contain digits"
            raise ValueError(msg)
        return value


class InspectConfig(BaseModel):
    """[inspect] section.

    With ``strict`` enabled, derivations refuse NIDs whose check digit
    does not validate.
    """

    model_config = {"frozen": True}

    strict: bool = False
