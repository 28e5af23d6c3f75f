"""
UI Components
=============
Reusable UI components for the toolkit pages.
"""

from .ui_components import (
    render_empty_state,
    render_info_banner,
    render_result_card,
    render_status_badge,
)

__all__ = [
    "render_empty_state",
    "render_info_banner",
    "render_result_card",
    "render_status_badge",
]
