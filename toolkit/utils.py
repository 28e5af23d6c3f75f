"""
Toolkit Utilities
=================
Centralized utility functions used across the calculators.

This module provides a single source of truth for common operations like:
- Rounding (half away from zero, as traders expect on screen)
- Lenient number coercion for form input
- Number formatting (rupee amounts, percentages)
- Path resolution
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path


# =============================================================================
# PROJECT PATHS (Single source of truth)
# =============================================================================

# Project root is two levels up from this file (toolkit/utils.py -> workspace)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"


def resolve_path(path: str | Path) -> Path:
    """Resolve a path relative to the project root unless already absolute."""
    path = Path(path)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path


# =============================================================================
# ROUNDING
# =============================================================================

def round_half_away(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    The value goes through its shortest string form first so that inputs
    like 1.005 round the way they read (1.01) rather than the way binary
    floats store them. Non-finite values round to 0.

    Args:
        value: Number to round
        places: Decimal places

    Returns:
        Rounded float

    Examples:
        >>> round_half_away(2.675)
        2.68
        >>> round_half_away(-0.125)
        -0.13
        >>> round_half_away(float("nan"))
        0.0
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0

    exact = Decimal(repr(number))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    # Avoid handing back -0.0 for tiny negatives
    return float(rounded) + 0.0


def round_to_int(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(round_half_away(value, 0))


# =============================================================================
# DATA CONVERSION HELPERS
# =============================================================================

def safe_float(value, default: float = 0.0) -> float:
    """
    Safely convert a value to float.

    Blank strings, None, unparsable text and non-finite numbers all
    return the default.

    Args:
        value: Value to convert
        default: Default if conversion fails

    Returns:
        Float value or default
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number):
        return default
    return number


def safe_int(value, default: int = 0) -> int:
    """
    Safely convert a value to int.

    Numeric strings with a fractional part are truncated, so "20.0" and
    "20.7" both give 20.

    Args:
        value: Value to convert
        default: Default if conversion fails

    Returns:
        Int value or default
    """
    number = safe_float(value, default=math.nan)
    if math.isnan(number):
        return default
    return int(number)


# =============================================================================
# FORMATTING UTILITIES
# =============================================================================

def format_amount(value: float, symbol: str = "₹", precision: int = 2) -> str:
    """
    Format a money amount with currency symbol and thousands separators.

    Examples:
        >>> format_amount(2000)
        '₹ 2,000.00'
        >>> format_amount(-40.5)
        '-₹ 40.50'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {abs(value):,.{precision}f}"


def format_percentage(value: float, precision: int = 2, with_sign: bool = False) -> str:
    """
    Format a percentage value.

    Examples:
        >>> format_percentage(2)
        '2.00%'
        >>> format_percentage(10, with_sign=True)
        '+10.00%'
    """
    if with_sign:
        return f"{value:+.{precision}f}%"
    return f"{value:.{precision}f}%"


def format_number(value: float, max_decimals: int = 4) -> str:
    """
    Format a number with thousands separators and trailing zeros trimmed.

    Examples:
        >>> format_number(85698.25)
        '85,698.25'
        >>> format_number(292.74)
        '292.74'
        >>> format_number(4.0)
        '4'
    """
    text = f"{value:,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
