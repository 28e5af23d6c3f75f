"""
Page Utilities
==============
Shared utilities for all toolkit pages to eliminate code duplication.

Usage:
    from app.page_utils import init_page

    settings = init_page(
        title="📒 Paper Trade List",
        page_title="Paper Trade | Options Toolkit",
        icon="📒",
    )
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Ensure project root is in path (do this once at module load)
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from app import shared_state
from app.components.theme import COLORS, apply_theme
from toolkit.settings import AppSettings, configure_logging


def init_page(
    title: str,
    page_title: str,
    icon: str,
    layout: str = "wide",
) -> AppSettings:
    """
    Initialize a toolkit page with standard configuration.

    Sets the page config, applies the theme, configures logging and
    renders the page title.
    """
    st.set_page_config(page_title=page_title, page_icon=icon, layout=layout)
    apply_theme(st)

    settings = shared_state.get_settings()
    configure_logging(settings)

    st.title(title)
    return settings


# Re-export commonly used items for convenience
__all__ = [
    'init_page',
    'COLORS',
]
