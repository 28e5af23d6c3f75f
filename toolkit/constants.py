"""
Toolkit Constants
=================
Centralized constants for the Options Trade Toolkit.

This module provides a single source of truth for:
- Profit/loss calculator defaults
- Paper trade journal rules
- Gann level presets
- UI colors
"""

from typing import Final

# =============================================================================
# PROFIT / LOSS CALCULATOR
# =============================================================================

DEFAULT_PREMIUM: Final[float] = 100.0
DEFAULT_LOT_SIZE: Final[int] = 20
DEFAULT_SL_PERCENT: Final[float] = 2.0
DEFAULT_TARGET_MULTIPLIER: Final[float] = 5.0

# =============================================================================
# PAPER TRADE JOURNAL
# =============================================================================

JOURNAL_STORAGE_KEY: Final[str] = "paperTrades"
JOURNAL_DEFAULT_LOT_SIZE: Final[int] = 20

# Stop loss sits 2% under the premium, target pays 5x the stop distance
JOURNAL_STOP_LOSS_FACTOR: Final[float] = 0.98
JOURNAL_TARGET_MULTIPLIER: Final[float] = 5.0

DATE_DISPLAY_FORMAT: Final[str] = "%d/%m/%Y"

# =============================================================================
# GANN LEVELS
# =============================================================================

GANN_STEP_PRESETS: Final[dict[str, list[float]]] = {
    "Intraday (tight)": [-0.5, -0.25, 0, 0.25, 0.5],
    "Intraday (standard)": [-2, -1, -0.5, -0.25, 0, 0.25, 0.5, 1, 2],
    "Very tight (scalping)": [-0.5, -0.25, -0.125, 0, 0.125, 0.25, 0.5],
}
GANN_DEFAULT_PRESET: Final[str] = "Intraday (standard)"
GANN_BASE_STEP_TOLERANCE: Final[float] = 1e-9

GANN_CSV_HEADERS: Final[list[str]] = [
    "Step",
    "Root",
    "Level (precise)",
    "Level (rounded)",
    "Diff from price",
]

# =============================================================================
# UI COLORS (Single source of truth)
# =============================================================================

COLORS: Final[dict[str, str]] = {
    "primary": "#0ea5e9",
    "success": "#00DC82",
    "warning": "#f59e0b",
    "error": "#FF5252",

    # P&L specific colors
    "profit": "#5cb85c",
    "loss": "#ff2c2c",
    "neutral": "#94a3b8",

    # Calculator cards
    "amount": "#ff9f1c",
    "target": "#26c1e8",
    "stop_loss": "#ff7b7b",

    # Gann base level highlight
    "base_level": "#f97316",

    "text": "#e2e8f0",
    "text_muted": "#94a3b8",
    "text_dim": "#64748b",
    "background": "#0f172a",
    "surface": "#1e293b",
    "border": "#334155",
}
