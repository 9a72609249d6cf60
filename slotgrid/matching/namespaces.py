"""
Capability Namespaces
=====================

Classifies capability names for matching:

- CORE: unprefixed names (browserName, acceptInsecureCerts, ...)
- IGNORED: vendor/tooling extensions (goog:, moz:, ms:, safari:) and the
  grid's own se: namespace, never compared
- BINDING: any other extension (appium:, myApp:, ...), must match exactly
- DOWNLOADS: se:downloadsEnabled, which has its own rule
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from ..capabilities import DOWNLOADS_ENABLED, EXTENSION_SEPARATOR

VENDOR_NAMESPACES: FrozenSet[str] = frozenset({"goog", "moz", "ms", "safari"})
RESERVED_NAMESPACE = "se"


class KeyKind(str, Enum):
    CORE = "core"
    IGNORED = "ignored"
    BINDING = "binding"
    DOWNLOADS = "downloads"


def namespace_of(key: str) -> Optional[str]:
    """Prefix before the first ':' or None for unprefixed names."""
    prefix, sep, _ = key.partition(EXTENSION_SEPARATOR)
    return prefix if sep else None


@dataclass(frozen=True)
class NamespaceRegistry:
    """Static, read-only namespace classification."""

    ignored_namespaces: FrozenSet[str] = VENDOR_NAMESPACES
    reserved_namespace: str = RESERVED_NAMESPACE
    downloads_key: str = DOWNLOADS_ENABLED

    def with_ignored(self, namespaces: Iterable[str]) -> "NamespaceRegistry":
        """Return a new registry that also ignores ``namespaces``."""
        extra = {ns.strip().rstrip(EXTENSION_SEPARATOR) for ns in namespaces}
        extra.discard("")
        return NamespaceRegistry(
            ignored_namespaces=self.ignored_namespaces | frozenset(extra),
            reserved_namespace=self.reserved_namespace,
            downloads_key=self.downloads_key,
        )

    def classify(self, key: str) -> KeyKind:
        if key == self.downloads_key:
            return KeyKind.DOWNLOADS
        namespace = namespace_of(key)
        if namespace is None:
            return KeyKind.CORE
        if namespace == self.reserved_namespace or namespace in self.ignored_namespaces:
            return KeyKind.IGNORED
        return KeyKind.BINDING

    def is_ignored(self, key: str) -> bool:
        return self.classify(key) is KeyKind.IGNORED


DEFAULT_REGISTRY = NamespaceRegistry()
