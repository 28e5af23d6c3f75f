"""
Gann Module
===========
Gann square-root support/resistance levels and CSV export.
"""

from .levels import (
    STEP_PRESETS,
    GannInputError,
    GannLevel,
    GannResult,
    RoundingMode,
    calculate_gann_levels,
    export_filename,
    format_diff,
    get_preset_steps,
    levels_to_csv,
    parse_price,
)

__all__ = [
    "STEP_PRESETS",
    "GannInputError",
    "GannLevel",
    "GannResult",
    "RoundingMode",
    "calculate_gann_levels",
    "export_filename",
    "format_diff",
    "get_preset_steps",
    "levels_to_csv",
    "parse_price",
]
