from __future__ import annotations

from typing import Any

from platform_common.validators.base import BaseRequestValidator, request_body

ID = "id"
FIELD = "field"
VALUE = "value"


class SystemSettingsRequestValidator(BaseRequestValidator):
    def validate_update_system_setting(self, request: Any) -> None:
        """Require non-blank `id`, `field` and `value`, checked in that order."""
        body = request_body(request)
        for name in (ID, FIELD, VALUE):
            self.validate_param(body.get(name), name)
