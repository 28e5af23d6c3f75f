"""
Shared State Module
===================
Manages shared state across all toolkit pages.

This module provides:
- Settings access (cached with @st.cache_resource)
- The local key-value store behind the paper trade journal
- A per-session TradeJournal, loaded from storage once
- Calculator input state and its reset callback
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports (done once at module load)
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from toolkit.calculator import CalculatorInputs, reset_inputs
from toolkit.journal import SQLiteKeyValueStore, TradeJournal
from toolkit.settings import AppSettings, load_settings

CALCULATOR_KEYS = {
    "premium": "calc_premium",
    "lot_size": "calc_lot_size",
    "sl_percent": "calc_sl_percent",
    "target_multiplier": "calc_target_multiplier",
}


@st.cache_resource(show_spinner=False)
def get_settings() -> AppSettings:
    """Load settings once per server process."""
    return load_settings()


@st.cache_resource(show_spinner=False)
def _create_store(db_path: str) -> SQLiteKeyValueStore:
    """
    Create the journal store (cached as resource).

    Schema creation runs once; each call afterwards opens its own
    connection, so sharing the instance is safe.
    """
    return SQLiteKeyValueStore(db_path=db_path)


def get_journal() -> TradeJournal:
    """
    Get this session's trade journal.

    Trades are read from storage the first time a session asks for the
    journal; every later mutation writes through to storage.
    """
    if "trade_journal" not in st.session_state:
        settings = get_settings()
        store = _create_store(str(settings.resolved_db_path))
        st.session_state.trade_journal = TradeJournal(
            store,
            storage_key=settings.storage_key,
            default_lot_size=settings.default_lot_size,
        )
    return st.session_state.trade_journal


def init_calculator_state() -> None:
    """Seed calculator widgets with their defaults on first visit."""
    defaults = reset_inputs()
    for field, key in CALCULATOR_KEYS.items():
        st.session_state.setdefault(key, getattr(defaults, field))


def reset_calculator_state() -> None:
    """Restore calculator defaults (use as an on_click callback)."""
    defaults = reset_inputs()
    for field, key in CALCULATOR_KEYS.items():
        st.session_state[key] = getattr(defaults, field)


def get_calculator_inputs() -> CalculatorInputs:
    """Current calculator inputs, blanks coerced to 0."""
    return CalculatorInputs.from_raw(
        **{field: st.session_state.get(key) for field, key in CALCULATOR_KEYS.items()}
    )
