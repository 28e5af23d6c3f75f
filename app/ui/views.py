"""
Reusable view classes for the toolkit pages.
Each view renders one calculator and owns no state beyond st.session_state.
"""

from __future__ import annotations

import streamlit as st

from app import shared_state
from app.components.theme import COLORS
from app.components.ui_components import (
    render_empty_state,
    render_info_banner,
    render_result_card,
    render_status_badge,
)
from toolkit.calculator import FORMULAS, CalculatorResult, calculate_profit_loss
from toolkit.constants import GANN_DEFAULT_PRESET
from toolkit.gann import (
    STEP_PRESETS,
    GannInputError,
    GannResult,
    RoundingMode,
    calculate_gann_levels,
    export_filename,
    format_diff,
    levels_to_csv,
)
from toolkit.journal import JournalSummary, TradeJournal, TradeStatus, TradeValidationError
from toolkit.utils import format_amount, format_number, format_percentage


class CalculatorView:
    """Profit/loss calculator: inputs on the left, result cards on the right."""

    def __init__(self, currency_symbol: str = "₹"):
        self.currency = currency_symbol
        shared_state.init_calculator_state()

    def render(self) -> None:
        inputs_col, results_col = st.columns([1, 2])
        with inputs_col:
            self._render_inputs()

        inputs = shared_state.get_calculator_inputs()
        result = calculate_profit_loss(inputs)
        lot_label = f"For {int(inputs.lot_size)} qty"

        with results_col:
            self._render_results(result, lot_label)

        self._render_formulas()

    def _render_inputs(self) -> None:
        keys = shared_state.CALCULATOR_KEYS
        st.subheader("Inputs")
        st.number_input(f"Premium Price ({self.currency})", min_value=0.0, step=0.01, key=keys["premium"])
        st.number_input("Lot Size (qty)", min_value=1, step=1, key=keys["lot_size"])
        st.number_input("Stop Loss % (SL%)", min_value=0.0, step=0.01, key=keys["sl_percent"])
        st.number_input("Target Multiplier (M)", min_value=1.0, step=0.1, key=keys["target_multiplier"])
        st.button("Reset", on_click=shared_state.reset_calculator_state)

    def _render_results(self, result: CalculatorResult, lot_label: str) -> None:
        st.subheader("Results")
        money = self._money
        cards = [
            ("Amount to Trade", money(result.amount_needed), lot_label, COLORS["amount"]),
            (
                "Target Price",
                money(result.tp_price),
                f"Profit per qty: {money(result.profit_per_qty)} ({format_percentage(result.profit_percent)})",
                COLORS["target"],
            ),
            (
                "Stop Loss Price",
                money(result.sl_price),
                f"Loss per qty: {money(result.loss_per_qty)} ({format_percentage(result.loss_percent)})",
                COLORS["stop_loss"],
            ),
            ("Total Profit", money(result.total_profit), lot_label, COLORS["profit"]),
            (
                "Total Profit with traded amount",
                money(result.total_profit_with_investment),
                lot_label,
                COLORS["profit"],
            ),
            ("Total Loss", money(result.total_loss), lot_label, COLORS["loss"]),
            (
                "Total Loss with traded amount",
                money(result.total_loss_with_investment),
                lot_label,
                COLORS["loss"],
            ),
        ]

        columns = st.columns(2)
        for i, (label, value, sub_text, color) in enumerate(cards):
            with columns[i % 2]:
                render_result_card(label, value, sub_text, color)

    def _render_formulas(self) -> None:
        with st.expander("Formulas used"):
            st.markdown("\n".join(f"- {formula}" for formula in FORMULAS))

    def _money(self, value: float) -> str:
        return format_amount(value, symbol=self.currency)


class JournalFormView:
    """New paper trade entry form."""

    def __init__(self, journal: TradeJournal):
        self.journal = journal

    def render(self) -> None:
        with st.form("paper_trade_form", clear_on_submit=True):
            cols = st.columns(4)
            with cols[0]:
                option_type = st.text_input("Option Type", placeholder="Option Type (CE/PE)")
            with cols[1]:
                strike_price = st.text_input("Strike Price", placeholder="Strike Price")
            with cols[2]:
                premium_price = st.text_input("Premium Price", placeholder="Premium Price")
            with cols[3]:
                lot_size = st.text_input("Lot Size", value=str(self.journal.default_lot_size))

            submitted = st.form_submit_button("➕ Add Trade")

        if submitted:
            try:
                trade = self.journal.add_trade(option_type, strike_price, premium_price, lot_size)
            except TradeValidationError as e:
                st.error(str(e))
            else:
                st.success(f"Trade added: {trade.option_type} {trade.strike_price} @ {trade.premium_price}")


class JournalTableView:
    """Trade list with per-row status and delete actions."""

    HEADERS = [
        "No.", "Option", "Strike", "Amount", "Premium", "SL / qty", "Target / qty",
        "SL (whole)", "Profit / qty", "Profit (whole)", "Status", "Delete",
    ]
    WIDTHS = [0.5, 0.8, 0.9, 1.1, 0.9, 0.9, 1, 1, 0.9, 1.1, 1.6, 0.7]

    def __init__(self, journal: TradeJournal):
        self.journal = journal

    def render(self) -> None:
        trades = self.journal.trades
        if not trades:
            render_empty_state("No paper trades yet", "Add a trade above to start tracking it.")
            return

        header = st.columns(self.WIDTHS)
        for col, label in zip(header, self.HEADERS):
            col.markdown(f"**{label}**")

        for index, trade in enumerate(trades, start=1):
            row = st.columns(self.WIDTHS)
            values = [
                index,
                trade.option_type,
                trade.strike_price,
                f"{trade.lot_size_amount:,.2f}",
                f"{trade.premium_price:,.2f}",
                f"{trade.stop_loss_per_qty:.2f}",
                f"{trade.target_per_qty:.2f}",
                f"{trade.stop_loss_whole:.2f}",
                f"{trade.profit_per_qty:.2f}",
                f"{trade.profit_whole:.2f}",
            ]
            for col, value in zip(row, values):
                col.write(value)

            with row[10]:
                self._render_status_cell(trade.id, trade.status)
            with row[11]:
                st.button(
                    "🗑️",
                    key=f"delete_{trade.id}",
                    help="Delete trade",
                    on_click=self.journal.delete_trade,
                    args=(trade.id,),
                )

    def _render_status_cell(self, trade_id: int, status: TradeStatus) -> None:
        if status.is_terminal:
            render_status_badge(status.value)
            return

        done_col, close_col = st.columns(2)
        done_col.button(
            "✅",
            key=f"done_{trade_id}",
            help="Target hit",
            on_click=self.journal.mark_status,
            args=(trade_id, TradeStatus.DONE),
        )
        close_col.button(
            "❌",
            key=f"close_{trade_id}",
            help="Stopped out",
            on_click=self.journal.mark_status,
            args=(trade_id, TradeStatus.CLOSE),
        )


class JournalSummaryView:
    """Totals row under the trade list."""

    def __init__(self, journal: TradeJournal, currency_symbol: str = "₹"):
        self.journal = journal
        self.currency = currency_symbol

    def render(self) -> None:
        summary: JournalSummary = self.journal.summary()

        def money(value: float) -> str:
            return format_amount(value, symbol=self.currency)

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Total Invested", money(summary.total_invested))
        col2.metric("Total Profit (Done)", money(summary.total_profit))
        col3.metric("Total Loss (Closed)", money(summary.total_loss))
        col4.metric(
            "Final Adjusted Profit",
            money(summary.final_adjusted_profit),
            f"Hit rate {summary.hit_rate:.0f}%" if summary.done_trades + summary.closed_trades else None,
            delta_color="normal" if summary.final_adjusted_profit >= 0 else "inverse",
        )
        st.caption(
            f"{summary.total_trades} trades | {summary.pending_trades} pending | "
            f"{summary.done_trades} done | {summary.closed_trades} closed"
        )

        if summary.total_trades:
            with st.expander("Clear journal"):
                confirm = st.checkbox("I understand every trade will be deleted permanently")
                if st.button("Delete all trades", disabled=not confirm):
                    removed = self.journal.clear()
                    st.success(f"Deleted {removed} trades")
                    st.rerun()


class GannView:
    """Gann level calculator with CSV export."""

    PRICE_KEY = "gann_price_input"
    RESULT_KEY = "gann_result"
    ERROR_KEY = "gann_error"

    def render(self) -> None:
        session = st.session_state
        session.setdefault(self.RESULT_KEY, None)
        session.setdefault(self.ERROR_KEY, "")

        input_col, preset_col, rounding_col = st.columns([2, 2, 1])
        with input_col:
            st.text_input(
                "Current index price",
                placeholder="e.g. 85698 or 85698.25",
                key=self.PRICE_KEY,
            )
        with preset_col:
            preset = st.selectbox(
                "Preset",
                options=list(STEP_PRESETS),
                index=list(STEP_PRESETS).index(GANN_DEFAULT_PRESET),
                format_func=lambda name: f"{name} | {', '.join(format_number(s) for s in STEP_PRESETS[name])}",
            )
        with rounding_col:
            rounding = st.selectbox(
                "Rounding",
                options=[mode.value for mode in RoundingMode],
                format_func=str.capitalize,
            )

        st.caption(
            "Enter a positive number. Commas are allowed (e.g. 85,698) and decimals (e.g. 85698.25). "
            "Use the Intraday presets for tighter levels."
        )

        calc_col, clear_col, _ = st.columns([1, 1, 4])
        calc_col.button("Calculate Gann Levels", on_click=self._calculate, args=(preset, rounding))
        clear_col.button("Clear", on_click=self._clear)

        if session[self.ERROR_KEY]:
            render_info_banner(session[self.ERROR_KEY], variant="error")

        result: GannResult | None = session[self.RESULT_KEY]
        if result is not None:
            self._render_result(result)

    def _calculate(self, preset: str, rounding: str) -> None:
        session = st.session_state
        session[self.RESULT_KEY] = None
        session[self.ERROR_KEY] = ""
        try:
            session[self.RESULT_KEY] = calculate_gann_levels(
                session.get(self.PRICE_KEY, ""),
                preset=preset,
                rounding=rounding,
            )
        except GannInputError as e:
            session[self.ERROR_KEY] = str(e)

    def _clear(self) -> None:
        session = st.session_state
        session[self.PRICE_KEY] = ""
        session[self.RESULT_KEY] = None
        session[self.ERROR_KEY] = ""

    def _render_result(self, result: GannResult) -> None:
        st.markdown(
            f"**Raw input:** {result.original_input}  \n"
            f"**Normalized price:** {format_number(result.price)}  \n"
            f"**Square root of price:** {format_number(result.sqrt_value, max_decimals=8)}"
        )
        st.caption(
            f'Levels use the preset "{result.preset}". The "Level (rounded)" column is what '
            "most traders plot as horizontal lines."
        )

        table = result.to_dataframe()
        table["Diff from price"] = [format_diff(level.diff_from_price) for level in result.levels]
        base_flags = [level.is_base for level in result.levels]
        styled = table.style.apply(
            lambda row: [
                f"color: {COLORS['base_level']}; font-weight: 700" if base_flags[row.name] else ""
                for _ in row
            ],
            axis=1,
        )
        st.dataframe(styled, hide_index=True, use_container_width=True)

        csv_text = levels_to_csv(result)
        st.download_button(
            "⬇️ Download CSV",
            data=csv_text,
            file_name=export_filename(),
            mime="text/csv",
        )
        with st.expander("Copy CSV"):
            st.caption("Use the copy icon to paste into TradingView or a sheet.")
            st.code(csv_text, language="csv")
