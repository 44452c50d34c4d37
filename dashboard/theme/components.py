"""
Reusable Styled Components for the Camogie Performance Dashboard
"""

import math

import streamlit as st
from .colors import ACCENT_ORANGE, NEUTRAL_GRAY, TEXT_PRIMARY, TEXT_SECONDARY


def render_header(title: str, subtitle: str = None):
    """
    Render the page header.

    Args:
        title: Main header title
        subtitle: Optional subtitle text
    """
    subtitle_html = f'<p>{subtitle}</p>' if subtitle else ''

    st.markdown(f"""
    <div class="cd-header">
        <h1>{title}</h1>
        {subtitle_html}
    </div>
    """, unsafe_allow_html=True)


def info_card(title: str, content: str, accent_color: str = None):
    """
    Render an info card with accent border.

    Args:
        title: Card title
        content: Card content text
        accent_color: Optional custom accent color (hex)
    """
    color = accent_color or ACCENT_ORANGE
    st.markdown(f"""
    <div class="cd-card" style="border-left-color: {color};">
        <h4 style="margin: 0 0 0.5rem 0; color: {TEXT_PRIMARY}; font-weight: 600;">{title}</h4>
        <p style="margin: 0; color: {TEXT_SECONDARY}; line-height: 1.5;">{content}</p>
    </div>
    """, unsafe_allow_html=True)


def section_header(title: str):
    """Render a chart card title."""
    st.markdown(f'<div class="cd-section-header">{title}</div>', unsafe_allow_html=True)


def format_metric_value(value: float, decimals: int = 1) -> str:
    """Average as card text; undefined averages show as N/A"""
    if value is None or not math.isfinite(value):
        return 'N/A'
    return f"{value:.{decimals}f}"


def metric_card(label: str, value: str):
    """
    Render a small group-average card.

    Args:
        label: Metric label text
        value: Metric value to display
    """
    st.markdown(f"""
    <div class="cd-metric-card">
        <div class="cd-metric-label">{label}</div>
        <div class="cd-metric-value">{value}</div>
    </div>
    """, unsafe_allow_html=True)


def empty_state(message: str):
    """Muted placeholder shown while a tab has no data."""
    st.markdown(f"""
    <div style="color: {NEUTRAL_GRAY}; padding: 1rem 0; font-style: italic;">{message}</div>
    """, unsafe_allow_html=True)
