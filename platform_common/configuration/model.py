"""Immutable hierarchical configuration and its merge policy.

Merge policy:
    - mapping + mapping -> recursive merge by key
    - anything else     -> the override's value replaces the base's value
    - inputs are never mutated
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from platform_common.kernel.errors import ConfigKeyMissingError, ConfigValueTypeError


_MISSING = object()

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge `override` on top of `base` and return a new plain dict.

    Nested mappings present on both sides are merged recursively; for any
    other collision the override's value wins. Lists are replaced, never
    concatenated.
    """
    result: dict[str, Any] = _thaw(base)

    for key, override_value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
        else:
            result[key] = _thaw(override_value)

    return result


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Configuration):
        return value.as_dict()
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value


class Configuration(Mapping[str, Any]):
    """Read-only tree of configuration values addressed by dotted paths.

    A literal top-level key wins over a dotted walk, so flat keys such as
    environment variable names containing dots still resolve.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Mapping[str, Any] = _freeze(data or {})

    # Mapping protocol (top-level keys; item access accepts dotted paths)

    def __getitem__(self, path: str) -> Any:
        value = self._resolve(path)
        if value is _MISSING:
            raise KeyError(path)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._data)!r})"

    def _resolve(self, path: str) -> Any:
        if path in self._data:
            return self._data[path]
        node: Any = self._data
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def has_path(self, path: str) -> bool:
        return self._resolve(path) is not _MISSING

    def is_empty(self) -> bool:
        return not self._data

    def get_value(self, path: str) -> Any:
        value = self._resolve(path)
        if value is _MISSING:
            raise ConfigKeyMissingError(
                message=f"No configuration setting found for key '{path}'",
                meta={"path": path},
            )
        return value

    def get_string(self, path: str, default: Any = _MISSING) -> str:
        if default is not _MISSING and not self.has_path(path):
            return default
        value = self.get_value(path)
        if isinstance(value, (Mapping, tuple)):
            raise self._wrong_type(path, "string", value)
        return value if isinstance(value, str) else str(value)

    def get_int(self, path: str, default: Any = _MISSING) -> int:
        if default is not _MISSING and not self.has_path(path):
            return default
        value = self.get_value(path)
        if isinstance(value, bool):
            raise self._wrong_type(path, "int", value)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip(), 10)
            except ValueError:
                raise self._wrong_type(path, "int", value) from None
        raise self._wrong_type(path, "int", value)

    def get_bool(self, path: str, default: Any = _MISSING) -> bool:
        if default is not _MISSING and not self.has_path(path):
            return default
        value = self.get_value(path)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise self._wrong_type(path, "bool", value)

    @staticmethod
    def _wrong_type(path: str, expected: str, value: Any) -> ConfigValueTypeError:
        return ConfigValueTypeError(
            message=f"Configuration key '{path}' is not a valid {expected}",
            meta={"path": path, "expected": expected, "actual": type(value).__name__},
        )

    def with_fallback(self, fallback: Mapping[str, Any]) -> "Configuration":
        """Return a new Configuration where this one wins over `fallback`."""
        return Configuration(deep_merge(fallback, self._data))

    def as_dict(self) -> dict[str, Any]:
        """Deep plain-dict copy, safe to mutate."""
        return _thaw(self._data)
