"""BaseService — shared foundation for nidctl services.

Every service receives the frozen :class:`NidSettings` at construction
time and converts domain failures into :class:`ServiceResult` errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from nidctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from nidctl.config.settings import NidSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class NidService(BaseService):
            def normalize(self, raw: str | None) -> ServiceResult:
                ...
    """

    def __init__(self, settings: NidSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> NidSettings:
        return self._settings

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Build a failed ServiceResult and log it at debug level."""
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
