"""
Theme exports and card formatting.
"""
import plotly.graph_objects as go
import pytest

import dashboard.theme as theme
from dashboard.theme import add_benchmark_line, format_metric_value, get_series_color
from dashboard.theme.colors import HIGH_PERFORMANCE, MINIMUM_TARGET


def test_exports_resolve():
    for name in theme.__all__:
        assert hasattr(theme, name), name


@pytest.mark.parametrize('value,expected', [
    (30.0, '30.0'),
    (1.8666, '1.9'),
    (float('nan'), 'N/A'),
    (None, 'N/A'),
])
def test_format_metric_value(value, expected):
    assert format_metric_value(value) == expected


def test_series_colors():
    assert get_series_color('accent') == theme.ACCENT_ORANGE
    assert get_series_color('neutral') == theme.NEUTRAL_GRAY


@pytest.mark.parametrize('kind,color', [
    ('high', HIGH_PERFORMANCE),
    ('minimum', MINIMUM_TARGET),
    ('target', MINIMUM_TARGET),
])
def test_benchmark_line_color(kind, color):
    fig = add_benchmark_line(go.Figure(), 25, 'Line', kind)

    assert fig.layout.shapes[0].line.color == color
