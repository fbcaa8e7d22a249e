"""Process-wide configuration provider.

The merged configuration is built once per provider, lazily, under a lock:
environment variables first, then the named base source as fallback.
Module-level helpers delegate to a shared default provider.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from platform_common.configuration.model import Configuration
from platform_common.configuration.sources import environment_layer, load_base_source
from platform_common.kernel.errors import (
    ConfigParseError,
    EmptyConfigInputError,
    EmptyConfigResultError,
    InvalidArgumentError,
    MissingMandatoryConfigError,
)
from platform_common.kernel.text import is_blank
from platform_common.settings import get_settings

logger = structlog.get_logger()

DEFAULT_CONFIG_SOURCE = "service"

BaseLoader = Callable[[str], Mapping[str, Any]]

_UNSET: Any = object()


class ConfigProvider:
    """Builds and caches a single merged Configuration.

    Args:
        loader: Callable returning the base layer for a source name.
            Defaults to a file lookup on `search_path`.
        search_path: Directories searched by the default loader. Defaults to
            `Settings.config_search_path`, read at build time.
        environ: Environment mapping; defaults to `os.environ` at build time.
    """

    def __init__(
        self,
        *,
        loader: BaseLoader | None = None,
        search_path: Iterable[str | Path] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._loader = loader
        self._search_path = list(search_path) if search_path is not None else None
        self._environ = environ
        self._config: Configuration | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._config is not None

    def get_config(self, source_name: Any = _UNSET) -> Configuration:
        """Return the cached configuration, building it on first use.

        `source_name` only matters for the first successful build; later
        calls return the cached instance whatever name they pass.
        """
        if source_name is _UNSET:
            source_name = DEFAULT_CONFIG_SOURCE
        elif is_blank(source_name):
            logger.info("Given config source name is null or empty", source_name=source_name)
            raise InvalidArgumentError(meta={"source_name": source_name})

        config = self._config
        if config is None:
            with self._lock:
                config = self._config
                if config is None:
                    config = self._build(source_name)
                    self._config = config
        return config

    def reset(self) -> None:
        """Drop the cached configuration. Intended for tests."""
        with self._lock:
            self._config = None

    def _load_base(self, source_name: str) -> Mapping[str, Any]:
        if self._loader is not None:
            return self._loader(source_name)
        search_path = self._search_path
        if search_path is None:
            search_path = get_settings().config_search_path
        return load_base_source(source_name, search_path)

    def _build(self, source_name: str) -> Configuration:
        base = Configuration(self._load_base(source_name))
        env = Configuration(environment_layer(self._environ))
        config = env.with_fallback(base)
        logger.info(
            "Configuration loaded",
            source_name=source_name,
            base_keys=len(base),
            env_keys=len(env),
        )
        return config


def validate_mandatory_config_value(value: str | None) -> None:
    """Raise if a required configuration value is missing or blank."""
    if is_blank(value):
        logger.error("Missing mandatory configuration parameter", value=value)
        raise MissingMandatoryConfigError(meta={"value": value})


def _load_text(text: str) -> Any:
    """JSON first; YAML only for text that is not valid JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)


def parse_config_string(text: str | None) -> Configuration:
    """Parse JSON (or YAML) text into a standalone Configuration.

    Raises:
        EmptyConfigInputError: `text` is None or blank.
        ConfigParseError: the text is not valid, or its root is not a mapping.
        EmptyConfigResultError: parsing succeeded but produced no keys.
    """
    logger.info("Parsing config string")
    if is_blank(text):
        logger.error("Empty string passed for config parsing")
        raise EmptyConfigInputError()

    try:
        data = _load_text(text)
    except yaml.YAMLError as exc:
        logger.error("Error while parsing config string", error=str(exc))
        raise ConfigParseError() from exc

    if not isinstance(data, dict):
        logger.error("Config string root is not a mapping", root_type=type(data).__name__)
        raise ConfigParseError(meta={"root_type": type(data).__name__})

    config = Configuration(data)
    if config.is_empty():
        logger.error("Parsed config is empty")
        raise EmptyConfigResultError()

    logger.info("Config string parsed", keys=len(config))
    return config


# =============================================================================
# Factory Functions
# =============================================================================

_provider: ConfigProvider | None = None
_provider_lock = threading.Lock()


def get_config_provider() -> ConfigProvider:
    """Get or create the global config provider instance."""
    global _provider

    if _provider is None:
        with _provider_lock:
            if _provider is None:
                _provider = ConfigProvider()

    return _provider


def get_config(source_name: Any = _UNSET) -> Configuration:
    """Return the process-wide configuration (see `ConfigProvider.get_config`)."""
    return get_config_provider().get_config(source_name)
