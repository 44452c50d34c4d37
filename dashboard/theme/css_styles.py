"""
Main CSS Stylesheet for the Camogie Performance Dashboard
"""

from .colors import (
    ACCENT_ORANGE, NEUTRAL_GRAY, BACKGROUND, SURFACE, TEXT_PRIMARY, TEXT_SECONDARY,
    TEXT_MUTED, BORDER
)


def get_main_css():
    """Return the main CSS stylesheet as a string."""
    return f"""
    <style>
    /* ============================================
       1. CSS CUSTOM PROPERTIES (Variables)
       ============================================ */
    :root {{
        --accent: {ACCENT_ORANGE};
        --neutral: {NEUTRAL_GRAY};

        --bg-primary: {BACKGROUND};
        --bg-surface: {SURFACE};
        --text-primary: {TEXT_PRIMARY};
        --text-secondary: {TEXT_SECONDARY};
        --text-muted: {TEXT_MUTED};
        --border: {BORDER};

        --shadow-card: 0 1px 3px rgba(0, 0, 0, 0.08);
        --radius-md: 8px;
        --radius-lg: 12px;
    }}

    /* ============================================
       2. BASE STYLES
       ============================================ */
    .stApp {{
        font-family: 'Inter', sans-serif;
        background: var(--bg-primary);
    }}

    .main .block-container {{
        padding: 1rem 1.5rem;
        max-width: 1400px;
    }}

    /* ============================================
       3. HEADER
       ============================================ */
    .cd-header {{
        background: var(--bg-surface);
        padding: 1.5rem;
        border-bottom: 1px solid var(--border);
        margin-bottom: 1rem;
    }}

    .cd-header h1 {{
        color: var(--text-primary);
        font-weight: 700;
        font-size: 1.875rem;
        margin: 0;
    }}

    .cd-header p {{
        color: var(--text-muted);
        margin: 0.25rem 0 0 0;
    }}

    /* ============================================
       4. CARDS
       ============================================ */
    .cd-card {{
        background: var(--bg-surface);
        border-radius: var(--radius-lg);
        padding: 1.25rem 1.5rem;
        box-shadow: var(--shadow-card);
        border-left: 4px solid var(--accent);
        margin-bottom: 1rem;
    }}

    .cd-metric-card {{
        background: var(--bg-surface);
        border-radius: var(--radius-md);
        padding: 0.75rem 1rem;
        text-align: center;
        box-shadow: var(--shadow-card);
        border-bottom: 3px solid var(--accent);
    }}

    .cd-metric-value {{
        font-size: 1.5rem;
        font-weight: 700;
        color: var(--accent);
        line-height: 1.2;
    }}

    .cd-metric-label {{
        font-size: 0.75rem;
        color: var(--text-secondary);
        text-transform: uppercase;
        letter-spacing: 0.5px;
        margin-bottom: 0.25rem;
    }}

    /* ============================================
       5. TABS
       ============================================ */
    .stTabs [data-baseweb="tab-list"] {{
        background: var(--bg-surface);
        padding: 0.25rem;
        gap: 0.25rem;
        border-radius: var(--radius-md);
    }}

    .stTabs [data-baseweb="tab"] {{
        padding: 0.5rem 1rem;
        font-weight: 500;
    }}

    .stTabs [aria-selected="true"] {{
        color: var(--accent);
    }}

    .stTabs [data-baseweb="tab-highlight"] {{
        background-color: var(--accent) !important;
    }}

    /* ============================================
       6. SECTION HEADERS
       ============================================ */
    .cd-section-header {{
        color: var(--text-primary);
        font-weight: 600;
        font-size: 1.125rem;
        margin: 1.5rem 0 0.5rem 0;
        padding-bottom: 0.5rem;
        border-bottom: 1px solid var(--border);
    }}

    /* ============================================
       7. RESPONSIVE
       ============================================ */
    @media (max-width: 768px) {{
        .cd-header h1 {{
            font-size: 1.4rem;
        }}

        .stTabs [data-baseweb="tab"] {{
            padding: 0 12px;
            font-size: 0.8rem;
        }}
    }}
    </style>
    """
