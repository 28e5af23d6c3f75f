"""
Gann Square-Root Levels
=======================
Support/resistance levels from offsets on the square root of a price.

For an index price P and step s the level is (sqrt(P) + s) ** 2, so a
step of 0 reproduces P itself and is flagged as the base row.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import numpy as np
import pandas as pd

from toolkit.constants import (
    GANN_BASE_STEP_TOLERANCE,
    GANN_CSV_HEADERS,
    GANN_DEFAULT_PRESET,
    GANN_STEP_PRESETS,
)
from toolkit.utils import format_number, round_half_away, round_to_int

logger = logging.getLogger(__name__)

STEP_PRESETS = GANN_STEP_PRESETS

_NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?")


class GannInputError(ValueError):
    """Raised when the price input cannot be used for a Gann calculation."""


class RoundingMode(Enum):
    """How the precise level is rounded for plotting."""
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"

    def apply(self, value: float) -> int:
        if self is RoundingMode.FLOOR:
            return int(np.floor(value))
        if self is RoundingMode.CEIL:
            return int(np.ceil(value))
        return round_to_int(value)


@dataclass(frozen=True)
class GannLevel:
    """One Gann level row."""
    step: float
    root: float
    level_raw: float
    level_rounded: int
    diff_from_price: float
    is_base: bool = False


@dataclass
class GannResult:
    """Levels computed for one price, sorted ascending by precise level."""
    original_input: str
    price: float
    sqrt_value: float
    preset: str
    rounding: RoundingMode
    levels: list[GannLevel] = field(default_factory=list)

    @property
    def base_level(self) -> GannLevel | None:
        for level in self.levels:
            if level.is_base:
                return level
        return None

    def to_dataframe(self) -> pd.DataFrame:
        """
        Levels as a display/export table with the CSV headers.

        Steps are written as entered (-2, 0.25) rather than as floats.
        """
        rows = [
            [
                format_number(level.step + 0.0, max_decimals=6),
                round(level.root, 6),
                round(level.level_raw, 6),
                level.level_rounded,
                round(level.diff_from_price, 4),
            ]
            for level in self.levels
        ]
        return pd.DataFrame(rows, columns=GANN_CSV_HEADERS)


def parse_price(text) -> float:
    """
    Parse a free-text index price.

    Thousands separators are stripped and the first signed decimal number
    in the text is used, so "85,698.25" and "NIFTY 24500" both parse.

    Args:
        text: Raw price input

    Returns:
        Positive finite price

    Raises:
        GannInputError: If the input is blank, not numeric or not positive
    """
    if text is None or not str(text).strip():
        raise GannInputError("Please enter a valid index price (e.g. 85698 or 85698.25).")

    match = _NUMBER_PATTERN.search(str(text).replace(",", ""))
    if not match:
        raise GannInputError("Input must be a number (digits, optional single decimal point).")

    price = float(match.group(0))
    if not math.isfinite(price) or price <= 0:
        raise GannInputError("Please enter a positive numeric index price.")
    return price


def get_preset_steps(preset: str) -> list[float]:
    """Return the step list for a preset, falling back to the standard preset."""
    steps = STEP_PRESETS.get(preset)
    if steps is None:
        logger.warning(f"Unknown Gann preset '{preset}', using '{GANN_DEFAULT_PRESET}'")
        steps = STEP_PRESETS[GANN_DEFAULT_PRESET]
    return list(steps)


def calculate_gann_levels(
    price_input,
    preset: str = GANN_DEFAULT_PRESET,
    rounding: RoundingMode | str = RoundingMode.ROUND,
    steps: Sequence[float] | None = None,
) -> GannResult:
    """
    Compute Gann levels around a price.

    Args:
        price_input: Raw price text or number
        preset: Name of a step preset
        rounding: Rounding mode for the plotted level
        steps: Custom step offsets; overrides the preset when given

    Returns:
        GannResult with levels sorted ascending by precise level

    Raises:
        GannInputError: If the price input is invalid
    """
    price = parse_price(price_input)
    rounding = RoundingMode(rounding)

    if steps is None:
        step_list = get_preset_steps(preset)
    else:
        step_list = [float(s) for s in steps]
        preset = "Custom"

    sqrt_value = float(np.sqrt(price))

    levels = []
    for step in step_list:
        root = sqrt_value + step
        level_raw = root * root
        levels.append(
            GannLevel(
                step=step,
                root=root,
                level_raw=level_raw,
                level_rounded=rounding.apply(level_raw),
                diff_from_price=level_raw - price,
                is_base=abs(step) < GANN_BASE_STEP_TOLERANCE,
            )
        )

    levels.sort(key=lambda level: level.level_raw)

    logger.debug(f"Computed {len(levels)} Gann levels for {price} ({preset}, {rounding.value})")
    return GannResult(
        original_input=str(price_input),
        price=price,
        sqrt_value=sqrt_value,
        preset=preset,
        rounding=rounding,
        levels=levels,
    )


def levels_to_csv(result: GannResult | None) -> str:
    """
    Serialize levels as CSV text.

    Returns an empty string when there is no result to export.
    """
    if result is None or not result.levels:
        return ""
    return result.to_dataframe().to_csv(index=False, lineterminator="\n").rstrip("\n")


def export_filename(now: datetime | None = None) -> str:
    """Timestamped download filename, e.g. gann-levels-2025-01-31-09-15-00.csv."""
    now = now or datetime.now()
    return f"gann-levels-{now.strftime('%Y-%m-%d-%H-%M-%S')}.csv"


def format_diff(value: float) -> str:
    """Signed difference from price for display."""
    rounded = round_half_away(value, 4)
    return f"{rounded:+,.4f}".rstrip("0").rstrip(".")
