"""
Theme Module for the Camogie Performance Dashboard

This module provides centralized styling including:
- Color palette and design tokens
- CSS stylesheet
- Reusable UI components
- Plotly chart theming

Usage:
    from dashboard.theme import get_main_css, render_header, apply_dashboard_theme
    from dashboard.theme import ACCENT_ORANGE, NEUTRAL_GRAY
"""

# Color constants
from .colors import (
    ACCENT_ORANGE,
    NEUTRAL_GRAY,
)

# CSS stylesheet
from .css_styles import get_main_css

# UI component functions
from .components import (
    render_header,
    info_card,
    section_header,
    format_metric_value,
    metric_card,
    empty_state,
)

# Plotly theming functions
from .plotly_theme import (
    apply_dashboard_theme,
    get_series_color,
    add_benchmark_line,
    add_average_line,
    add_zero_line,
)

__version__ = '1.0.0'
__all__ = [
    # Colors
    'ACCENT_ORANGE', 'NEUTRAL_GRAY',
    # CSS
    'get_main_css',
    # Components
    'render_header', 'info_card', 'section_header', 'format_metric_value',
    'metric_card', 'empty_state',
    # Plotly
    'apply_dashboard_theme', 'get_series_color', 'add_benchmark_line',
    'add_average_line', 'add_zero_line',
]
