"""Layered configuration: environment variables over a named base source."""

from platform_common.configuration.model import Configuration, deep_merge
from platform_common.configuration.provider import (
    DEFAULT_CONFIG_SOURCE,
    ConfigProvider,
    get_config,
    get_config_provider,
    parse_config_string,
    validate_mandatory_config_value,
)

__all__ = [
    "DEFAULT_CONFIG_SOURCE",
    "ConfigProvider",
    "Configuration",
    "deep_merge",
    "get_config",
    "get_config_provider",
    "parse_config_string",
    "validate_mandatory_config_value",
]
