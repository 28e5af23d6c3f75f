"""
UI Components
=============
Reusable UI components for the toolkit pages.
"""

import streamlit as st
from typing import Literal

from toolkit.constants import COLORS


def render_result_card(
    label: str,
    value: str,
    sub_text: str = "",
    color: str = COLORS["text"],
) -> None:
    """
    Render a calculator result card.

    Args:
        label: Card label
        value: Main value, already formatted
        sub_text: Optional line under the value
        color: Value color
    """
    sub_html = f'<div class="result-card-sub">{sub_text}</div>' if sub_text else ""

    st.markdown(f"""
    <div class="result-card">
        <div class="result-card-label">{label}</div>
        <div class="result-card-value" style="color: {color};">{value}</div>
        {sub_html}
    </div>
    """, unsafe_allow_html=True)


def render_status_badge(status: str) -> None:
    """Render a coloured trade status label."""
    colors = {
        "pending": COLORS["warning"],
        "done": COLORS["success"],
        "close": COLORS["error"],
    }
    labels = {"pending": "Pending", "done": "✅ Done", "close": "❌ Closed"}

    st.markdown(
        f'<span class="trade-status" style="color: {colors.get(status, COLORS["neutral"])};">'
        f'{labels.get(status, status)}</span>',
        unsafe_allow_html=True,
    )


def render_empty_state(
    title: str,
    description: str = "",
    icon: str = "📭",
) -> None:
    """
    Render an empty state placeholder.

    Args:
        title: Empty state title
        description: Optional description
        icon: Icon to display
    """
    st.markdown(f"""
    <div style="
        text-align: center;
        padding: 40px 20px;
        background: rgba(30, 41, 59, 0.3);
        border-radius: 12px;
        border: 1px dashed rgba(51, 65, 85, 0.5);
    ">
        <div style="font-size: 48px; margin-bottom: 16px; opacity: 0.5;">{icon}</div>
        <div style="font-size: 16px; font-weight: 600; color: #e2e8f0; margin-bottom: 8px;">
            {title}
        </div>
        {f'<div style="font-size: 14px; color: #64748b;">{description}</div>' if description else ''}
    </div>
    """, unsafe_allow_html=True)


def render_info_banner(
    message: str,
    variant: Literal["info", "success", "warning", "error"] = "info",
) -> None:
    """
    Render an info banner.

    Args:
        message: Banner message
        variant: Banner style
    """
    colors = {
        "info": ("#0ea5e9", "rgba(14, 165, 233, 0.1)", "rgba(14, 165, 233, 0.3)"),
        "success": ("#00DC82", "rgba(0, 220, 130, 0.1)", "rgba(0, 220, 130, 0.3)"),
        "warning": ("#f59e0b", "rgba(245, 158, 11, 0.1)", "rgba(245, 158, 11, 0.3)"),
        "error": ("#ef4444", "rgba(239, 68, 68, 0.1)", "rgba(239, 68, 68, 0.3)"),
    }
    text_color, bg_color, border_color = colors.get(variant, colors["info"])

    st.markdown(f"""
    <div style="
        background: {bg_color};
        border: 1px solid {border_color};
        border-radius: 10px;
        padding: 12px 16px;
        margin: 8px 0;
    ">
        <span style="color: {text_color}; font-size: 14px;">{message}</span>
    </div>
    """, unsafe_allow_html=True)
