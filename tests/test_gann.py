"""
Tests for Gann Module
=====================
"""

import math
import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from toolkit.gann import (
    STEP_PRESETS,
    GannInputError,
    RoundingMode,
    calculate_gann_levels,
    export_filename,
    format_diff,
    get_preset_steps,
    levels_to_csv,
    parse_price,
)


class TestParsePrice:
    """Tests for free-text price parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("85,698.25", 85698.25),
            ("85698", 85698.0),
            ("  24500.5 ", 24500.5),
            ("NIFTY 24500", 24500.0),
            (24500, 24500.0),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_price(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank(self, text):
        with pytest.raises(GannInputError, match="valid index price"):
            parse_price(text)

    def test_not_a_number(self):
        with pytest.raises(GannInputError, match="must be a number"):
            parse_price("abc")

    @pytest.mark.parametrize("text", ["-5", "0", "0.0"])
    def test_not_positive(self, text):
        with pytest.raises(GannInputError, match="positive"):
            parse_price(text)

    def test_is_value_error(self):
        """Callers catching ValueError also catch input errors."""
        with pytest.raises(ValueError):
            parse_price("abc")


class TestPresets:
    """Tests for step presets."""

    def test_every_preset_has_base_step(self):
        for steps in STEP_PRESETS.values():
            assert 0 in steps

    def test_known_preset(self):
        assert get_preset_steps("Intraday (tight)") == [-0.5, -0.25, 0, 0.25, 0.5]

    def test_unknown_preset_falls_back(self):
        assert get_preset_steps("Monthly") == get_preset_steps("Intraday (standard)")

    def test_returns_copy(self):
        steps = get_preset_steps("Intraday (tight)")
        steps.append(99)

        assert 99 not in STEP_PRESETS["Intraday (tight)"]


class TestCalculateGannLevels:
    """Tests for level computation."""

    def test_base_row_reproduces_price(self):
        result = calculate_gann_levels("85,698.25")

        base = result.base_level
        assert base is not None
        assert base.step == 0
        assert base.level_raw == pytest.approx(85698.25, abs=1e-6)
        assert base.diff_from_price == pytest.approx(0.0, abs=1e-6)

    def test_exactly_one_base_row(self):
        result = calculate_gann_levels("24500", preset="Very tight (scalping)")

        assert sum(level.is_base for level in result.levels) == 1

    def test_levels_sorted_ascending(self):
        result = calculate_gann_levels("24500")
        values = [level.level_raw for level in result.levels]

        assert values == sorted(values)
        assert len(values) == len(STEP_PRESETS["Intraday (standard)"])

    def test_level_formula(self):
        """Each level is (sqrt(price) + step) squared."""
        result = calculate_gann_levels("10000")

        assert result.sqrt_value == 100.0
        by_step = {level.step: level for level in result.levels}
        assert by_step[1].level_raw == pytest.approx(10201.0)
        assert by_step[-1].level_raw == pytest.approx(9801.0)
        assert by_step[0.5].root == pytest.approx(100.5)
        assert by_step[2].diff_from_price == pytest.approx(404.0)

    def test_result_metadata(self):
        result = calculate_gann_levels(" 24,500 ", preset="Intraday (tight)", rounding="floor")

        assert result.original_input == " 24,500 "
        assert result.price == 24500.0
        assert result.preset == "Intraday (tight)"
        assert result.rounding is RoundingMode.FLOOR

    @pytest.mark.parametrize(
        "mode,expected",
        [(RoundingMode.ROUND, 24578), (RoundingMode.FLOOR, 24578), (RoundingMode.CEIL, 24579)],
    )
    def test_rounding_modes(self, mode, expected):
        # (sqrt(24500) + 0.25)^2 = 24578.32...
        result = calculate_gann_levels("24500", preset="Intraday (tight)", rounding=mode)
        level = next(level for level in result.levels if level.step == 0.25)

        assert level.level_raw == pytest.approx(24500 + 0.5 * math.sqrt(24500) + 0.0625)
        assert level.level_rounded == expected

    def test_rounding_half_goes_up(self):
        assert RoundingMode.ROUND.apply(100.5) == 101
        assert RoundingMode.FLOOR.apply(100.999) == 100
        assert RoundingMode.CEIL.apply(100.001) == 101

    def test_invalid_rounding_mode(self):
        with pytest.raises(ValueError):
            calculate_gann_levels("24500", rounding="nearest")

    def test_custom_steps(self):
        result = calculate_gann_levels("10000", steps=[3, 0, -3])

        assert result.preset == "Custom"
        assert [level.level_raw for level in result.levels] == pytest.approx([9409.0, 10000.0, 10609.0])

    def test_huge_price_rounds_to_level(self):
        """Nearest rounding agrees with floor and ceil on integral levels."""
        price = "10000000000000000000000000000"
        by_mode = {
            mode: calculate_gann_levels(price, preset="Intraday (tight)", rounding=mode).base_level
            for mode in RoundingMode
        }

        base = by_mode[RoundingMode.ROUND]
        assert base.level_raw == pytest.approx(1e28)
        assert base.level_rounded == int(base.level_raw)
        assert base.level_rounded == by_mode[RoundingMode.FLOOR].level_rounded

    def test_invalid_price_raises(self):
        with pytest.raises(GannInputError):
            calculate_gann_levels("-5")


class TestExport:
    """Tests for CSV export helpers."""

    def test_csv_header_and_rows(self):
        result = calculate_gann_levels("10000", preset="Intraday (tight)")
        lines = levels_to_csv(result).split("\n")

        assert lines[0] == "Step,Root,Level (precise),Level (rounded),Diff from price"
        assert len(lines) == 1 + len(result.levels)
        assert not levels_to_csv(result).endswith("\n")

    def test_csv_base_row(self):
        result = calculate_gann_levels("10000", preset="Intraday (tight)")
        rows = [line.split(",") for line in levels_to_csv(result).split("\n")[1:]]
        base = next(row for row in rows if float(row[0]) == 0)

        assert float(base[1]) == 100.0
        assert float(base[2]) == 10000.0
        assert base[3] == "10000"
        assert float(base[4]) == 0.0

    def test_csv_steps_written_as_entered(self):
        """Whole steps have no trailing .0 in the export."""
        result = calculate_gann_levels("10000", preset="Intraday (standard)")
        steps = [line.split(",")[0] for line in levels_to_csv(result).split("\n")[1:]]

        assert steps == ["-2", "-1", "-0.5", "-0.25", "0", "0.25", "0.5", "1", "2"]

    def test_csv_empty_without_result(self):
        assert levels_to_csv(None) == ""

    def test_dataframe_columns(self):
        df = calculate_gann_levels("10000").to_dataframe()

        assert list(df.columns) == ["Step", "Root", "Level (precise)", "Level (rounded)", "Diff from price"]

    def test_export_filename(self):
        name = export_filename(datetime(2025, 1, 31, 9, 5, 7))

        assert name == "gann-levels-2025-01-31-09-05-07.csv"

    def test_format_diff(self):
        assert format_diff(404.0) == "+404"
        assert format_diff(-39.75) == "-39.75"
