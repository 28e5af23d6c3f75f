"""
Options Trade Toolkit - Streamlit entry point.
Landing page is the option profit/loss calculator; the paper trade
journal and Gann levels live under app/pages/.

Run with:
    streamlit run app/main.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.page_utils import init_page
from app.ui import CalculatorView


class CalculatorApp:
    """Calculator page orchestrator."""

    def __init__(self):
        self.settings = init_page(
            title="🧮 Option Profit / Loss Calculator",
            page_title="Calculator | Options Toolkit",
            icon="🧮",
        )
        self.calculator_view = CalculatorView(currency_symbol=self.settings.currency_symbol)

    def run(self) -> None:
        """Render the calculator."""
        st.caption("Stop loss, target and lot P&L from premium, SL% and target multiplier")
        self.calculator_view.render()
        self._render_footer()

    def _render_footer(self) -> None:
        st.divider()
        st.caption(f"{self.settings.app_title} | Figures are for planning only, not trade advice")


def main() -> None:
    app = CalculatorApp()
    app.run()


if __name__ == "__main__":
    main()
