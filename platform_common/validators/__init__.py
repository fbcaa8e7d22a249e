"""Request validators. Each raises `ValidationError` on the first failing field."""

from platform_common.validators.base import BaseRequestValidator
from platform_common.validators.system_settings import SystemSettingsRequestValidator

__all__ = ["BaseRequestValidator", "SystemSettingsRequestValidator"]
