"""
Tests for slotgrid.matching.version
====================================

Dotted browser version ordering with prefix equality.
"""

import pytest

from slotgrid.matching.version import SemanticVersionComparator, compare


# ===========================================================================
# compare()
# ===========================================================================


class TestCompare:

    @pytest.mark.parametrize("a, b, expected", [
        ("", "", 0),
        ("", "130.0", 1),
        ("130.0", "", -1),
        ("131.0.6778.85", "131", 0),
        ("131.0.6778.85", "131.0", 0),
        ("131.0.6778.85", "131.0.6778", 0),
        ("131.0.6778.85", "131.0.6778.95", -1),
        ("130.0", "130.0", 0),
        ("130.0", "130", 0),
        ("130.0.1", "130", 0),
        ("130.0.1", "130.0.1", 0),
        ("130.0.1", "130.0.2", -1),
        ("130.1", "130.0", 1),
        ("131.0", "130.0", 1),
        ("130.0", "131", -1),
    ])
    def test_numeric_versions(self, a, b, expected):
        assert compare(a, b) == expected

    def test_prefix_matches_fully_qualified_version(self):
        assert compare("131.0.6778.85", "131") == 0
        assert compare("131.0.6778.85", "131.0.6778.95") == -1

    def test_qualified_build_against_plain_release(self):
        assert compare("133.0a1", "133") == 0
        assert compare("133", "133.0a1") == 1

    def test_shorter_version_equal_to_numeric_extension(self):
        """Missing trailing segments that are purely numeric don't matter."""
        assert compare("130", "130.0") == 0
        assert compare("131", "131.0.6778.85") == 0

    def test_channel_names_case_insensitive(self):
        assert compare("dev", "Dev") == 0
        assert compare("Beta", "beta") == 0
        assert compare("stable", "beta") == 1

    def test_alphanumeric_segments(self):
        assert compare("133.0a1", "133.0a2") == -1
        assert compare("133.0b1", "133.0a9") == 1
        assert compare("133.0A1", "133.0a1") == 0
        # Numeric part decides before the qualifier
        assert compare("133.1a1", "133.0b9") == 1

    def test_large_numbers_compare_numerically(self):
        assert compare("10", "9") == 1
        assert compare("131.0.10000.1", "131.0.9999.1") == 1

    def test_unparseable_segments_never_raise(self):
        assert compare("latest", "131") in (-1, 0, 1)
        assert compare("1..2", "1.0.2") in (-1, 0, 1)
        assert compare("🦊", "131") in (-1, 0, 1)
        assert compare("١٢٣", "123") in (-1, 0, 1)

    def test_digit_runs_beyond_int_conversion_limit(self):
        huge = "9" * 5000
        assert compare(huge, "131") == 1
        assert compare("131", huge) == -1
        assert compare("1" * 5000, "1" * 5000) == 0
        assert compare(huge + ".0", huge) == 0

    def test_leading_zeros_are_numeric(self):
        assert compare("007", "7") == 0
        assert compare("0010", "9") == 1
        assert compare("131.000", "131.0") == 0

    @pytest.mark.parametrize("a, b", [
        ("", "130.0"),
        ("131.0.6778.85", "131.0.6778.95"),
        ("130.1", "130.0"),
        ("131.0", "130.0"),
        ("dev", "Dev"),
        ("stable", "beta"),
        ("133.0a1", "133.0a2"),
        ("130.0", "130"),
        ("latest", "131"),
        ("10", "9"),
    ])
    def test_anti_symmetric(self, a, b):
        assert compare(a, b) == -compare(b, a)


# ===========================================================================
# SemanticVersionComparator
# ===========================================================================


class TestSemanticVersionComparator:

    def test_compare_delegates(self):
        comparator = SemanticVersionComparator()
        assert comparator.compare("131.0.6778.85", "131") == 0
        assert comparator("130.0", "131") == -1

    def test_sort_key_orders_versions(self):
        comparator = SemanticVersionComparator()
        versions = ["131.0", "9", "130.1", "130.0.5"]
        ordered = sorted(versions, key=comparator.sort_key())
        assert ordered == ["9", "130.0.5", "130.1", "131.0"]

    def test_empty_sorts_last(self):
        comparator = SemanticVersionComparator()
        ordered = sorted(["", "120", "99"], key=comparator.sort_key())
        assert ordered[-1] == ""
