"""
Matching Package
================

Pure capability matching: version comparison, platform families,
namespace classification and the slot matcher built on top of them.
"""

from .matcher import DEFAULT_MATCHER, DefaultSlotMatcher, SlotMatcher, matches
from .namespaces import DEFAULT_REGISTRY, KeyKind, NamespaceRegistry, namespace_of
from .platform import DEFAULT_HIERARCHY, Platform, PlatformHierarchy, is_or_descendant_of, parse_platform
from .version import SemanticVersionComparator, compare

__all__ = [
    "DEFAULT_MATCHER",
    "DefaultSlotMatcher",
    "SlotMatcher",
    "matches",
    "DEFAULT_REGISTRY",
    "KeyKind",
    "NamespaceRegistry",
    "namespace_of",
    "DEFAULT_HIERARCHY",
    "Platform",
    "PlatformHierarchy",
    "is_or_descendant_of",
    "parse_platform",
    "SemanticVersionComparator",
    "compare",
]
