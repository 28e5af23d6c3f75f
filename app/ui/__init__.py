"""
UI helpers for the Streamlit toolkit.
"""

from .views import (
    CalculatorView,
    GannView,
    JournalFormView,
    JournalSummaryView,
    JournalTableView,
)

__all__ = [
    "CalculatorView",
    "GannView",
    "JournalFormView",
    "JournalSummaryView",
    "JournalTableView",
]
