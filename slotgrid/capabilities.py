"""
Capabilities
============

Immutable key -> value mapping describing what a slot offers (stereotype)
or what a new session needs (requested capabilities).

Values are JSON-shaped: str, bool, int/float, nested mappings and lists.
Nested containers are frozen at construction so a Capabilities instance
can be shared across threads without copying.
"""

import json
from collections.abc import Mapping as MappingABC
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

BROWSER_NAME = "browserName"
BROWSER_VERSION = "browserVersion"
PLATFORM_NAME = "platformName"

EXTENSION_SEPARATOR = ":"
DOWNLOADS_ENABLED = "se:downloadsEnabled"

CORE_KEYS = frozenset({BROWSER_NAME, BROWSER_VERSION, PLATFORM_NAME})


class CapabilitiesFormatError(ValueError):
    """Raised when capabilities cannot be decoded into a key -> value mapping."""


def _freeze(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality over capability values.

    Booleans only equal booleans (``True != 1`` here, unlike plain ``==``).
    Numbers compare numerically, mappings by key set and per-key value,
    lists and tuples element-wise.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    if isinstance(a, MappingABC) and isinstance(b, MappingABC):
        if set(a.keys()) != set(b.keys()):
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b


class Capabilities(MappingABC):
    """Read-only capability set.

    Keys with a ``None`` value are dropped: an explicit null means
    "not set" in the W3C capability model.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        merged: Dict[str, Any] = {}
        for source in (data or {}, kwargs):
            for key, value in source.items():
                if not isinstance(key, str):
                    raise CapabilitiesFormatError(
                        f"Capability names must be strings, got {key!r}"
                    )
                if value is None:
                    merged.pop(key, None)
                    continue
                merged[key] = _freeze(value)
        self._data = MappingProxyType(merged)

    @classmethod
    def of(cls, value: Mapping[str, Any]) -> "Capabilities":
        """Return ``value`` unchanged if it is already Capabilities."""
        if isinstance(value, Capabilities):
            return value
        return cls(value)

    @classmethod
    def from_json(cls, text: str) -> "Capabilities":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CapabilitiesFormatError(f"Invalid capabilities JSON: {e}") from e
        if not isinstance(data, dict):
            raise CapabilitiesFormatError(
                f"Capabilities must be a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingABC):
            return NotImplemented
        return values_equal(self, other)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.keys()))

    def __repr__(self) -> str:
        return f"Capabilities({self.as_dict()!r})"

    def as_dict(self) -> Dict[str, Any]:
        """Mutable deep copy, suitable for JSON encoding."""
        return _thaw(self._data)

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), sort_keys=True, default=str)
