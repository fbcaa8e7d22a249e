from __future__ import annotations

import re
from typing import Any


_ERROR_CODE_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")

CLIENT_ERROR = 400
SERVER_ERROR = 500


class PlatformError(Exception):
    """Base typed error for the platform.

    Goals:
    - Stable `code` for programmatic handling across services.
    - Human-readable `message` for operators and API responses.
    - HTTP-style `status_code` so callers can map failures to a response class.
    - Optional `meta` payload for debugging (safe-to-expose only).
    """

    def __init__(
        self,
        *,
        code: str,
        message: str,
        status_code: int = SERVER_ERROR,
        meta: dict[str, Any] | None = None,
    ) -> None:
        if not _ERROR_CODE_RE.fullmatch(code):
            raise ValueError(
                "Invalid error code. Expected dot-separated lowercase tokens, "
                f"got: {code!r}"
            )
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = int(status_code)
        self.meta = dict(meta or {})

    def to_public_dict(self, *, request_id: str | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if request_id:
            payload["request_id"] = request_id
        if self.meta:
            payload["meta"] = self.meta
        return payload


class ValidationError(PlatformError):
    def __init__(
        self,
        *,
        message: str = "Validation error",
        code: str = "request.validation_error",
        meta: dict[str, Any] | None = None,
        status_code: int = CLIENT_ERROR,
    ):
        super().__init__(code=code, message=message, status_code=status_code, meta=meta)


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigError(PlatformError):
    """Base class for every failure raised by the configuration layer."""


class InvalidArgumentError(ConfigError):
    """A required string argument (e.g. a config source name) was blank."""

    def __init__(
        self,
        *,
        message: str = "Please provide a valid file name.",
        code: str = "config.invalid_source_name",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=CLIENT_ERROR, meta=meta)


class MissingMandatoryConfigError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Mandatory configuration parameter is missing.",
        code: str = "config.mandatory_param_missing",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)


class EmptyConfigInputError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Empty string passed for config parsing.",
        code: str = "config.empty_string",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)


class ConfigParseError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Unable to parse config.",
        code: str = "config.parse_failed",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)


class EmptyConfigResultError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Parsed config is empty.",
        code: str = "config.empty_config",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)


class ConfigKeyMissingError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Configuration key not found.",
        code: str = "config.key_missing",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)


class ConfigValueTypeError(ConfigError):
    def __init__(
        self,
        *,
        message: str = "Configuration value has the wrong type.",
        code: str = "config.wrong_type",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code=code, message=message, status_code=SERVER_ERROR, meta=meta)
