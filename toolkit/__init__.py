"""
Options Trade Toolkit Core Module
=================================
Business logic for the options trading decision-support dashboard.

Submodules:
- calculator: Option profit/loss, stop loss and target calculator
- journal: Paper trade journal with local key-value persistence
- gann: Gann square-root support/resistance levels
- settings: YAML/.env configuration and logging setup
- utils: Rounding, coercion and formatting helpers
"""

from . import constants, utils
from .constants import COLORS
from .utils import (
    PROJECT_ROOT,
    CONFIG_DIR,
    DATA_DIR,
    format_amount,
    format_number,
    format_percentage,
    round_half_away,
    safe_float,
    safe_int,
)

__version__ = "1.0.0"
__all__ = [
    "constants",
    "utils",
    "COLORS",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "DATA_DIR",
    "format_amount",
    "format_number",
    "format_percentage",
    "round_half_away",
    "safe_float",
    "safe_int",
]
