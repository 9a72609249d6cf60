"""
Platform Hierarchy
==================

Static platform family tree. Every platform descends from ANY; concrete
releases descend from their family (WIN10 -> WINDOWS -> ANY).

    is_or_descendant_of("windows 10", "WINDOWS")  # True
    is_or_descendant_of("WINDOWS", "windows 10")  # False
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class Platform(str, Enum):
    """Known platform values."""

    ANY = "ANY"

    WINDOWS = "WINDOWS"
    XP = "XP"
    VISTA = "VISTA"
    WIN7 = "WIN7"
    WIN8 = "WIN8"
    WIN8_1 = "WIN8_1"
    WIN10 = "WIN10"
    WIN11 = "WIN11"

    MAC = "MAC"
    SNOW_LEOPARD = "SNOW_LEOPARD"
    MOUNTAIN_LION = "MOUNTAIN_LION"
    MAVERICKS = "MAVERICKS"
    YOSEMITE = "YOSEMITE"
    EL_CAPITAN = "EL_CAPITAN"
    SIERRA = "SIERRA"
    HIGH_SIERRA = "HIGH_SIERRA"
    MOJAVE = "MOJAVE"
    CATALINA = "CATALINA"
    BIG_SUR = "BIG_SUR"
    MONTEREY = "MONTEREY"
    VENTURA = "VENTURA"
    SONOMA = "SONOMA"
    SEQUOIA = "SEQUOIA"

    UNIX = "UNIX"
    LINUX = "LINUX"
    BSD = "BSD"
    SOLARIS = "SOLARIS"

    IOS = "IOS"
    ANDROID = "ANDROID"


_MAC_RELEASES = (
    Platform.SNOW_LEOPARD, Platform.MOUNTAIN_LION, Platform.MAVERICKS,
    Platform.YOSEMITE, Platform.EL_CAPITAN, Platform.SIERRA,
    Platform.HIGH_SIERRA, Platform.MOJAVE, Platform.CATALINA,
    Platform.BIG_SUR, Platform.MONTEREY, Platform.VENTURA,
    Platform.SONOMA, Platform.SEQUOIA,
)
_WINDOWS_RELEASES = (
    Platform.XP, Platform.VISTA, Platform.WIN7, Platform.WIN8,
    Platform.WIN8_1, Platform.WIN10, Platform.WIN11,
)
_UNIX_VARIANTS = (Platform.LINUX, Platform.BSD, Platform.SOLARIS)


def _build_parents() -> Dict[Platform, Optional[Platform]]:
    parents: Dict[Platform, Optional[Platform]] = {Platform.ANY: None}
    for family in (Platform.WINDOWS, Platform.MAC, Platform.UNIX,
                   Platform.IOS, Platform.ANDROID):
        parents[family] = Platform.ANY
    for release in _WINDOWS_RELEASES:
        parents[release] = Platform.WINDOWS
    for release in _MAC_RELEASES:
        parents[release] = Platform.MAC
    for variant in _UNIX_VARIANTS:
        parents[variant] = Platform.UNIX
    return parents


PARENTS: Mapping[Platform, Optional[Platform]] = MappingProxyType(_build_parents())

# Lower-cased alias -> platform. Enum names are matched separately.
_ALIASES: Mapping[str, Platform] = MappingProxyType({
    "windows": Platform.WINDOWS,
    "win": Platform.WINDOWS,
    "windows xp": Platform.XP,
    "winnt": Platform.XP,
    "windows_nt": Platform.XP,
    "windows nt": Platform.XP,
    "windows server 2003": Platform.XP,
    "windows vista": Platform.VISTA,
    "windows server 2008": Platform.VISTA,
    "windows 7": Platform.WIN7,
    "windows 8": Platform.WIN8,
    "windows server 2012": Platform.WIN8,
    "windows 8.1": Platform.WIN8_1,
    "win8.1": Platform.WIN8_1,
    "windows 10": Platform.WIN10,
    "windows 11": Platform.WIN11,
    "mac": Platform.MAC,
    "darwin": Platform.MAC,
    "macos": Platform.MAC,
    "mac os x": Platform.MAC,
    "os x": Platform.MAC,
    "snow leopard": Platform.SNOW_LEOPARD,
    "os x 10.6": Platform.SNOW_LEOPARD,
    "mountain lion": Platform.MOUNTAIN_LION,
    "os x 10.8": Platform.MOUNTAIN_LION,
    "os x 10.9": Platform.MAVERICKS,
    "os x 10.10": Platform.YOSEMITE,
    "el capitan": Platform.EL_CAPITAN,
    "os x 10.11": Platform.EL_CAPITAN,
    "macos 10.12": Platform.SIERRA,
    "high sierra": Platform.HIGH_SIERRA,
    "macos 10.13": Platform.HIGH_SIERRA,
    "macos 10.14": Platform.MOJAVE,
    "macos 10.15": Platform.CATALINA,
    "big sur": Platform.BIG_SUR,
    "macos 11.0": Platform.BIG_SUR,
    "macos 12.0": Platform.MONTEREY,
    "macos 13.0": Platform.VENTURA,
    "macos 14.0": Platform.SONOMA,
    "macos 15.0": Platform.SEQUOIA,
    "unix": Platform.UNIX,
    "linux": Platform.LINUX,
    "freebsd": Platform.BSD,
    "openbsd": Platform.BSD,
    "sunos": Platform.SOLARIS,
    "ios": Platform.IOS,
    "dalvik": Platform.ANDROID,
    "": Platform.ANY,
})


def parse_platform(value: Any) -> Optional[Platform]:
    """Resolve a capability value to a Platform.

    Matches enum names and aliases case-insensitively, ignoring surrounding
    whitespace. Returns None for unknown or non-string values.
    """
    if isinstance(value, Platform):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return Platform[text.upper().replace(" ", "_")]
    except KeyError:
        return _ALIASES.get(text.lower())


class PlatformHierarchy:
    """Read-only view over the platform tree.

    Immutable after construction; one instance is shared by every matcher.
    """

    def __init__(self, parents: Mapping[Platform, Optional[Platform]] = PARENTS):
        self._parents = MappingProxyType(dict(parents))

    def is_or_descendant_of(self, platform: Any, family: Any) -> bool:
        """True if ``platform`` equals ``family`` or sits below it in the tree.

        Any non-empty platform name is below ANY, known or not. Otherwise
        unknown strings only relate to themselves (case-insensitively).
        Non-string values never match.
        """
        node = parse_platform(platform)
        target = parse_platform(family)
        if target is Platform.ANY and isinstance(platform, str) and platform.strip():
            return True
        if node is None or target is None:
            if isinstance(platform, str) and isinstance(family, str):
                return platform.strip().lower() == family.strip().lower()
            return False

        while node is not None:
            if node is target:
                return True
            node = self._parents.get(node)
        return False


DEFAULT_HIERARCHY = PlatformHierarchy()


def is_or_descendant_of(platform: Any, family: Any) -> bool:
    return DEFAULT_HIERARCHY.is_or_descendant_of(platform, family)
