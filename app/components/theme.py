"""
Dashboard Theme
===============
Shared styling for all toolkit pages.
Dark trading-terminal look with monospace figures.
"""

from toolkit.constants import COLORS

DASHBOARD_THEME_CSS = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=IBM+Plex+Mono:wght@400;500;600&family=Inter:wght@400;500;600;700&display=swap');

    /* ========== ROOT VARIABLES ========== */
    :root {
        --bg-primary: #0a0f1a;
        --bg-secondary: #111827;
        --bg-card: rgba(30, 41, 59, 0.6);

        --border-primary: #334155;
        --border-light: rgba(51, 65, 85, 0.5);

        --text-primary: #f1f5f9;
        --text-secondary: #e2e8f0;
        --text-muted: #94a3b8;
        --text-dim: #64748b;

        --accent-blue: #0ea5e9;
        --accent-orange: #f97316;

        --radius-md: 10px;
        --radius-lg: 14px;
    }

    /* ========== BASE STYLES ========== */
    .stApp {
        background: linear-gradient(135deg, var(--bg-primary) 0%, var(--bg-secondary) 50%, #0f172a 100%);
    }

    h1 {
        font-family: 'Inter', sans-serif;
        font-weight: 700;
        color: var(--text-primary) !important;
        letter-spacing: -0.03em;
    }

    h2, h3, h4 {
        font-family: 'Inter', sans-serif;
        font-weight: 600;
        color: var(--text-secondary) !important;
    }

    /* ========== METRICS ========== */
    [data-testid="stMetricValue"] {
        font-size: 24px;
        font-weight: 600;
        font-family: 'IBM Plex Mono', 'SF Mono', monospace;
        color: var(--text-primary) !important;
    }

    [data-testid="stMetric"] {
        background: linear-gradient(135deg, var(--bg-card) 0%, rgba(15, 23, 42, 0.7) 100%);
        padding: 14px 18px;
        border-radius: var(--radius-lg);
        border: 1px solid var(--border-light);
    }

    /* ========== RESULT CARDS ========== */
    .result-card {
        background: linear-gradient(135deg, rgba(30, 41, 59, 0.6) 0%, rgba(15, 23, 42, 0.8) 100%);
        border-radius: 12px;
        padding: 16px;
        border: 1px solid var(--border-light);
        margin-bottom: 12px;
    }

    .result-card-label {
        font-size: 11px;
        color: var(--text-dim);
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-bottom: 4px;
    }

    .result-card-value {
        font-family: 'IBM Plex Mono', monospace;
        font-size: 22px;
        font-weight: 600;
    }

    .result-card-sub {
        font-size: 12px;
        color: var(--text-muted);
        margin-top: 4px;
    }

    /* ========== TRADE STATUS ========== */
    .trade-status {
        font-size: 12px;
        font-weight: 600;
        text-transform: uppercase;
        letter-spacing: 0.05em;
    }

    /* ========== GANN TABLE ========== */
    .gann-base-row {
        color: var(--accent-orange);
        font-weight: 700;
    }
</style>
"""


def apply_theme(st):
    """Apply the dashboard theme to the current page."""
    st.markdown(DASHBOARD_THEME_CSS, unsafe_allow_html=True)


__all__ = ["COLORS", "DASHBOARD_THEME_CSS", "apply_theme"]
