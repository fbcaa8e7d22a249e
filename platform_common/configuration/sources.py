"""Configuration layers: named base files on a search path and the process environment."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from platform_common.kernel.errors import ConfigParseError

logger = structlog.get_logger()

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def _candidate_files(source_name: str, search_path: Iterable[str | Path]) -> list[Path]:
    name = Path(source_name)
    if name.suffix.lower() in SUPPORTED_SUFFIXES:
        names = [name]
    else:
        names = [name.with_name(name.name + s) for s in SUPPORTED_SUFFIXES]
    if name.is_absolute():
        return names
    return [Path(directory) / candidate for directory in search_path for candidate in names]


def find_source(source_name: str, search_path: Iterable[str | Path]) -> Path | None:
    """Return the first existing file for `source_name`, or None."""
    for candidate in _candidate_files(source_name, search_path):
        if candidate.is_file():
            return candidate
    return None


def load_file(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON file whose root must be a mapping.

    Empty files load as an empty mapping.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ConfigParseError(
            message=f"Unsupported config format: {path.suffix}",
            meta={"path": str(path)},
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Failed to parse config file", path=str(path), error=str(exc))
        raise ConfigParseError(
            message=f"Unable to parse config file: {path.name}",
            meta={"path": str(path)},
        ) from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigParseError(
            message=f"Config root must be a mapping, got: {type(data).__name__}",
            meta={"path": str(path)},
        )

    return data


def load_base_source(source_name: str, search_path: Iterable[str | Path]) -> dict[str, Any]:
    """Load the named base layer.

    A source that cannot be found contributes an empty layer so that packaged
    defaults stay optional when the environment supplies every value.
    """
    search_path = list(search_path)
    path = find_source(source_name, search_path)
    if path is None:
        logger.warning(
            "Config source not found, using empty base layer",
            source_name=source_name,
            search_path=[str(p) for p in search_path],
        )
        return {}

    logger.debug("Loading config source", source_name=source_name, path=str(path))
    return load_file(path)


def environment_layer(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Snapshot environment variables as a flat layer."""
    return dict(os.environ if environ is None else environ)
