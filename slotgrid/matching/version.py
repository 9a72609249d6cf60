"""
Browser Version Comparison
==========================

Dotted version ordering with prefix equality, so a requested major
version ("131") is satisfied by a fully qualified stereotype version
("131.0.6778.85").

- compare(): -1 / 0 / 1 for two version strings
- SemanticVersionComparator: comparator object, usable with cmp_to_key
"""

import re
from functools import cmp_to_key
from typing import Callable, List, Tuple

_LEADING_DIGITS = re.compile(r"[0-9]*")
_ALL_DIGITS = re.compile(r"[0-9]+")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _split_segment(segment: str) -> Tuple[str, str]:
    digits = _LEADING_DIGITS.match(segment).group(0)
    return digits, segment[len(digits):]


def _compare_text(a: str, b: str) -> int:
    a, b = a.lower(), b.lower()
    return (a > b) - (a < b)


def _compare_digits(a: str, b: str) -> int:
    """Numeric order of two ASCII digit runs of any length."""
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return _sign(len(a) - len(b))
    return (a > b) - (a < b)


def _compare_segment(a: str, b: str) -> int:
    """Compare one dotted segment, e.g. "0a1" against "0"."""
    a_digits, a_rest = _split_segment(a)
    b_digits, b_rest = _split_segment(b)

    if not a_digits or not b_digits:
        # Not a numbered segment ("dev", "beta"): plain text ordering
        return _compare_text(a, b)

    result = _compare_digits(a_digits, b_digits)
    if result != 0:
        return result
    return _compare_text(a_rest, b_rest)


def _is_numeric(segments: List[str]) -> bool:
    return all(_ALL_DIGITS.fullmatch(s) for s in segments)


def compare(a: str, b: str) -> int:
    """Compare two dotted version strings.

    An empty version sorts above everything else. When all shared segments
    are equal:

    - ``a`` longer than ``b``: equal (``b`` is a prefix of ``a``).
    - ``a`` shorter than ``b``: equal if ``b``'s extra segments are purely
      numeric, otherwise ``a`` is greater ("133" > "133.0a1").

    Args:
        a: Version offered (usually the stereotype's browserVersion).
        b: Version asked for (usually the requested browserVersion).

    Returns:
        -1, 0 or 1.
    """
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1

    a_parts = a.split(".")
    b_parts = b.split(".")

    for a_seg, b_seg in zip(a_parts, b_parts):
        result = _compare_segment(a_seg, b_seg)
        if result != 0:
            return result

    if len(a_parts) >= len(b_parts):
        return 0

    # A plain release outranks a qualified build with the same numeric prefix
    if _is_numeric(b_parts[len(a_parts):]):
        return 0
    return 1


class SemanticVersionComparator:
    """Comparator object wrapping compare().

    Stateless; a single instance can be shared across threads.
    """

    def compare(self, a: str, b: str) -> int:
        return compare(a, b)

    __call__ = compare

    def sort_key(self) -> Callable[[str], object]:
        return cmp_to_key(compare)
