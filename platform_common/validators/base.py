from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from platform_common.kernel.errors import ValidationError
from platform_common.kernel.text import is_blank

logger = structlog.get_logger()

MANDATORY_PARAMS_MISSING = "request.mandatory_params_missing"


def request_body(request: Any) -> Mapping[str, Any]:
    """Accept either a plain mapping or an object exposing a `.request` mapping."""
    if isinstance(request, Mapping):
        return request
    body = getattr(request, "request", None)
    if isinstance(body, Mapping):
        return body
    raise ValidationError(message="Request body is missing", code="request.body_missing")


class BaseRequestValidator:
    """Shared field checks for request validators."""

    def validate_param(
        self,
        value: Any,
        name: str,
        *,
        code: str = MANDATORY_PARAMS_MISSING,
    ) -> None:
        if value is None or (isinstance(value, str) and is_blank(value)):
            logger.info("Mandatory request parameter missing", param=name)
            raise ValidationError(
                message=f"Mandatory parameter {name} is missing.",
                code=code,
                meta={"param": name},
            )
