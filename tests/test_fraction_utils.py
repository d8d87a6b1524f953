"""Tests for leasecheck.fraction_utils"""

import pytest

from leasecheck.fraction_utils import EPSILON, is_negligible, parse_fraction


class TestParseFraction:

    @pytest.mark.parametrize("text, expected", [
        ("1/4", 0.25),
        ("  3/8 ", 0.375),
        ("1/1", 1.0),
        ("0/5", 0.0),
    ])
    def test_valid(self, text, expected):
        assert parse_fraction(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [
        None, "", "   ", "0.25", "1 1/2", "1/0", "one quarter", "1/4 NMI", "-1/4", "1 / 4",
        "1" + "0" * 400 + "/1",
        "1" * 5000 + "/3",
    ])
    def test_unrecognized_returns_none(self, text):
        assert parse_fraction(text) is None

    def test_non_string_is_stringified(self):
        assert parse_fraction(0.5) is None


class TestNegligible:

    def test_below_epsilon(self):
        assert is_negligible(EPSILON / 2)
        assert is_negligible(-EPSILON / 2)
        assert is_negligible(0.0)

    def test_at_or_above_epsilon(self):
        assert not is_negligible(EPSILON)
        assert not is_negligible(-0.001)
