"""
Plotly Chart Theming for the Camogie Performance Dashboard
"""

from .colors import (
    ACCENT_ORANGE, NEUTRAL_GRAY, REFERENCE_BLACK, TEXT_PRIMARY, TEXT_SECONDARY,
    BORDER, BENCHMARK_COLORS, SERIES_COLORS
)


CHART_HEIGHT = 400


def get_plotly_layout():
    """
    Return consistent Plotly layout settings.

    Returns:
        dict: Layout configuration for Plotly figures
    """
    return {
        'font': {
            'family': 'Inter, sans-serif',
            'color': TEXT_PRIMARY,
            'size': 12,
        },
        'paper_bgcolor': 'white',
        'plot_bgcolor': 'white',
        # Room for rotated athlete names and right-hand line labels
        'margin': {'l': 60, 'r': 170, 't': 40, 'b': 110},
        'hovermode': 'closest',
        'height': CHART_HEIGHT,
        'legend': {
            'orientation': 'h',
            'yanchor': 'bottom',
            'y': 1.02,
            'xanchor': 'left',
            'x': 0,
            'bgcolor': 'rgba(255, 255, 255, 0.9)',
            'font': {'size': 11},
        },
    }


def get_axis_style():
    """
    Return consistent axis styling (dashed grid).

    Returns:
        dict: Axis configuration for Plotly figures
    """
    return {
        'showgrid': True,
        'gridcolor': 'rgba(128, 128, 128, 0.2)',
        'griddash': 'dash',
        'linecolor': BORDER,
        'tickfont': {'size': 12, 'color': TEXT_SECONDARY},
        'title': {'font': {'size': 14, 'color': TEXT_PRIMARY}},
        'zeroline': False,
    }


def apply_dashboard_theme(fig, title: str = None, show_legend: bool = True):
    """
    Apply dashboard styling to a Plotly figure.

    Args:
        fig: Plotly figure object
        title: Optional chart title
        show_legend: Whether to show legend (default True)

    Returns:
        fig: Styled Plotly figure
    """
    layout = get_plotly_layout()
    axis_style = get_axis_style()

    fig.update_layout(
        font=layout['font'],
        paper_bgcolor=layout['paper_bgcolor'],
        plot_bgcolor=layout['plot_bgcolor'],
        margin=layout['margin'],
        hovermode=layout['hovermode'],
        height=layout['height'],
        showlegend=show_legend,
        legend=layout['legend'] if show_legend else None,
    )

    if title:
        fig.update_layout(
            title=dict(
                text=title,
                font=dict(size=14, color=TEXT_PRIMARY),
                x=0,
                xanchor='left',
            )
        )

    fig.update_xaxes(**axis_style)
    fig.update_yaxes(**axis_style)

    return fig


def get_series_color(role: str) -> str:
    """Bar color for a series role ('accent' or 'neutral')."""
    return SERIES_COLORS.get(role, ACCENT_ORANGE)


def get_benchmark_color(kind: str) -> str:
    """Line color for a benchmark kind ('high', 'minimum', 'target')."""
    return BENCHMARK_COLORS.get(kind, BENCHMARK_COLORS['minimum'])


def add_benchmark_line(fig, value: float, label: str, kind: str = 'minimum'):
    """
    Add a static benchmark threshold line to a figure.

    Args:
        fig: Plotly figure object
        value: Threshold (y-axis position)
        label: Label text shown on the right
        kind: Benchmark kind, selects the line color

    Returns:
        fig: Figure with benchmark line added
    """
    color = get_benchmark_color(kind)
    fig.add_hline(
        y=value,
        line_color=color,
        line_width=2,
        annotation_text=label,
        annotation_position="right",
        annotation_font_color=color,
        annotation_font_size=12,
    )
    return fig


def add_average_line(fig, value: float, label: str = "Group Average"):
    """
    Add a dashed group average line to a figure.

    Args:
        fig: Plotly figure object
        value: Average value (y-axis position)
        label: Label text (default "Group Average")

    Returns:
        fig: Figure with average line added
    """
    fig.add_hline(
        y=value,
        line_dash="dash",
        line_color=NEUTRAL_GRAY,
        line_width=1,
        annotation_text=label,
        annotation_position="top left",
        annotation_font_color=NEUTRAL_GRAY,
        annotation_font_size=11,
    )
    return fig


def add_zero_line(fig):
    """Solid black reference at zero for signed charts."""
    fig.add_hline(y=0, line_color=REFERENCE_BLACK, line_width=1)
    return fig
