"""
Tests for Utility Helpers
=========================
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from toolkit.utils import (
    PROJECT_ROOT,
    format_amount,
    format_number,
    format_percentage,
    resolve_path,
    round_half_away,
    round_to_int,
    safe_float,
    safe_int,
)


class TestRounding:
    """Tests for half-away-from-zero rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.675, 2.68),
            (1.005, 1.01),
            (0.125, 0.13),
            (-0.125, -0.13),
            (-2.675, -2.68),
            (10.0, 10.0),
            (3.14159, 3.14),
        ],
    )
    def test_two_places(self, value, expected):
        """Ties round away from zero at 2 places."""
        assert round_half_away(value) == expected

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), None, "x"])
    def test_non_finite_rounds_to_zero(self, value):
        """Non-finite and unusable values round to 0."""
        assert round_half_away(value) == 0.0

    def test_no_negative_zero(self):
        """Tiny negatives come back as plain zero."""
        result = round_half_away(-0.001)

        assert result == 0.0
        assert str(result) == "0.0"

    @pytest.mark.parametrize("value", [1e26, 2e26, -3.5e27, 1e28, 1.7e308])
    def test_large_values_keep_magnitude(self, value):
        """Values past 28 significant digits still round to themselves."""
        assert round_half_away(value) == value
        assert round_to_int(value) == int(value)

    def test_round_to_int(self):
        """Integer rounding sends halves away from zero."""
        assert round_to_int(2.5) == 3
        assert round_to_int(-2.5) == -3
        assert round_to_int(2.4999) == 2


class TestConversion:
    """Tests for lenient number conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [("12.5", 12.5), (" 7 ", 7.0), (3, 3.0), ("", 0.0), (None, 0.0), ("abc", 0.0), (float("nan"), 0.0)],
    )
    def test_safe_float(self, value, expected):
        """Unparsable input falls back to the default."""
        assert safe_float(value) == expected

    def test_safe_float_custom_default(self):
        assert safe_float("bad", default=-1.0) == -1.0

    @pytest.mark.parametrize("value,expected", [("20", 20), ("20.7", 20), (15.0, 15), ("", 0), ("x", 0)])
    def test_safe_int(self, value, expected):
        """Integers are truncated from numeric strings."""
        assert safe_int(value) == expected


class TestFormatting:
    """Tests for display formatting."""

    def test_format_amount(self):
        assert format_amount(2000) == "₹ 2,000.00"
        assert format_amount(-40.5) == "-₹ 40.50"
        assert format_amount(12.5, symbol="$") == "$ 12.50"

    def test_format_percentage(self):
        assert format_percentage(2) == "2.00%"
        assert format_percentage(10, with_sign=True) == "+10.00%"

    def test_format_number_trims_zeros(self):
        assert format_number(85698.25) == "85,698.25"
        assert format_number(4.0) == "4"
        assert format_number(-0.125) == "-0.125"


class TestPaths:
    """Tests for project path helpers."""

    def test_resolve_relative(self):
        assert resolve_path("data/x.db") == PROJECT_ROOT / "data" / "x.db"

    def test_resolve_absolute(self, tmp_path):
        assert resolve_path(tmp_path) == tmp_path
