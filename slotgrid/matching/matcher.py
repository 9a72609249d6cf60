"""
Slot Matching
=============

Decides whether a slot's stereotype satisfies the capabilities requested
for a new session. Matching is directional: the request states minimum
needs, and the slot may offer more than was asked.

- SlotMatcher: abstract matching policy
- DefaultSlotMatcher: the standard rules (browser, version, platform,
  downloads flag, then every remaining requested capability)
- matches(): module-level shortcut using a shared DefaultSlotMatcher
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..capabilities import (
    BROWSER_NAME,
    BROWSER_VERSION,
    CORE_KEYS,
    PLATFORM_NAME,
    Capabilities,
    values_equal,
)
from .namespaces import DEFAULT_REGISTRY, KeyKind, NamespaceRegistry
from .platform import DEFAULT_HIERARCHY, PlatformHierarchy
from .version import SemanticVersionComparator


class SlotMatcher(ABC):
    """Policy deciding whether a stereotype can host a requested session."""

    @abstractmethod
    def matches(self, stereotype: Mapping[str, Any], requested: Mapping[str, Any]) -> bool:
        """Return True if ``stereotype`` satisfies ``requested``."""
        ...


def _version_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        try:
            return str(value)
        except ValueError:
            # int too large to render under the interpreter digit limit
            return None
    return None


@dataclass(frozen=True)
class DefaultSlotMatcher(SlotMatcher):
    """Standard stereotype matching rules.

    Pure and stateless: the registry, hierarchy and comparator are
    read-only, so one instance may be shared by any number of threads.
    Values of the wrong shape for browserName, browserVersion,
    platformName or se:downloadsEnabled fail the check instead of raising.
    """

    registry: NamespaceRegistry = DEFAULT_REGISTRY
    hierarchy: PlatformHierarchy = DEFAULT_HIERARCHY
    comparator: SemanticVersionComparator = SemanticVersionComparator()

    def matches(self, stereotype: Mapping[str, Any], requested: Mapping[str, Any]) -> bool:
        return self.explain(stereotype, requested) is None

    def explain(
        self,
        stereotype: Mapping[str, Any],
        requested: Mapping[str, Any],
    ) -> Optional[str]:
        """Reason the stereotype does not satisfy the request, or None on a match.

        Args:
            stereotype: Capabilities advertised by the slot.
            requested: Capabilities asked for by the new session.

        Returns:
            None if the slot matches, otherwise a short description of the
            first failed check (for operator logs only).
        """
        stereotype = Capabilities.of(stereotype)
        requested = Capabilities.of(requested)

        if not requested:
            return "no capabilities requested"

        return (
            self._core_mismatch(stereotype, requested)
            or self._extension_mismatch(stereotype, requested)
        )

    # ------------------------------------------------------------------
    # Fixed fields
    # ------------------------------------------------------------------

    def _core_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        return (
            self._browser_name_mismatch(stereotype, requested)
            or self._browser_version_mismatch(stereotype, requested)
            or self._platform_mismatch(stereotype, requested)
            or self._downloads_mismatch(stereotype, requested)
        )

    def _browser_name_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        wanted = requested.get(BROWSER_NAME)
        if wanted is None or wanted == "":
            return None
        if not isinstance(wanted, str):
            return f"requested {BROWSER_NAME} {wanted!r} is not a string"
        offered = stereotype.get(BROWSER_NAME)
        if not isinstance(offered, str) or offered != wanted:
            return f"{BROWSER_NAME} {offered!r} does not satisfy {wanted!r}"
        return None

    def _browser_version_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        if BROWSER_VERSION not in requested:
            return None
        wanted = _version_text(requested[BROWSER_VERSION])
        if wanted is None:
            return f"requested {BROWSER_VERSION} {requested[BROWSER_VERSION]!r} is not a version"
        if not wanted:
            return None
        offered = _version_text(stereotype.get(BROWSER_VERSION))
        if offered is None:
            return f"slot does not advertise a usable {BROWSER_VERSION}"
        if self.comparator.compare(offered, wanted) != 0:
            return f"{BROWSER_VERSION} {offered!r} does not satisfy {wanted!r}"
        return None

    def _platform_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        wanted = requested.get(PLATFORM_NAME)
        if wanted is None or wanted == "":
            return None
        offered = stereotype.get(PLATFORM_NAME)
        if offered is None:
            return f"slot does not advertise a {PLATFORM_NAME}"
        if not self.hierarchy.is_or_descendant_of(offered, wanted):
            return f"{PLATFORM_NAME} {offered!r} is not {wanted!r}"
        return None

    def _downloads_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        key = self.registry.downloads_key
        wanted = requested.get(key)
        if wanted is None or wanted is False:
            return None
        if wanted is not True:
            return f"requested {key} {wanted!r} is not a boolean"
        if stereotype.get(key) is not True:
            return f"slot does not have {key} enabled"
        return None

    # ------------------------------------------------------------------
    # Remaining requested capabilities
    # ------------------------------------------------------------------

    def _extension_mismatch(self, stereotype: Capabilities, requested: Capabilities) -> Optional[str]:
        for key, wanted in requested.items():
            if key in CORE_KEYS:
                continue
            kind = self.registry.classify(key)
            if kind is KeyKind.IGNORED or kind is KeyKind.DOWNLOADS:
                continue
            if key not in stereotype:
                return f"slot does not advertise {key}"
            if not values_equal(stereotype[key], wanted):
                return f"{key} {stereotype[key]!r} does not equal {wanted!r}"
        return None


DEFAULT_MATCHER = DefaultSlotMatcher()


def matches(stereotype: Mapping[str, Any], requested: Mapping[str, Any]) -> bool:
    """Check if a slot stereotype satisfies the requested capabilities.

    Args:
        stereotype: Capabilities the slot registered with.
        requested: Capabilities from the new session request.

    Returns:
        True if the slot can host the session.
    """
    return DEFAULT_MATCHER.matches(stereotype, requested)
