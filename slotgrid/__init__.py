"""
Slotgrid
========

Capability-based slot matching for a browser-automation grid.

Usage:
    from slotgrid import matches

    matches(
        {"browserName": "chrome", "browserVersion": "131.0.6778.85"},
        {"browserName": "chrome", "browserVersion": "131"},
    )  # True
"""

from .capabilities import (
    BROWSER_NAME,
    BROWSER_VERSION,
    DOWNLOADS_ENABLED,
    PLATFORM_NAME,
    Capabilities,
    CapabilitiesFormatError,
    values_equal,
)
from .config import SlotgridSettings
from .distributor import Slot, SlotEvaluator
from .matching import (
    DefaultSlotMatcher,
    KeyKind,
    NamespaceRegistry,
    Platform,
    PlatformHierarchy,
    SemanticVersionComparator,
    SlotMatcher,
    compare,
    is_or_descendant_of,
    matches,
)

__all__ = [
    # Capabilities
    "BROWSER_NAME",
    "BROWSER_VERSION",
    "DOWNLOADS_ENABLED",
    "PLATFORM_NAME",
    "Capabilities",
    "CapabilitiesFormatError",
    "values_equal",
    # Matching
    "SlotMatcher",
    "DefaultSlotMatcher",
    "matches",
    "SemanticVersionComparator",
    "compare",
    "Platform",
    "PlatformHierarchy",
    "is_or_descendant_of",
    "KeyKind",
    "NamespaceRegistry",
    # Distributor boundary
    "Slot",
    "SlotEvaluator",
    # Config
    "SlotgridSettings",
]

__version__ = "0.1.0"
