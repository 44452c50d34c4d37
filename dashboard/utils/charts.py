"""
Bar chart builders for the test tabs.

Every chart is an athlete-by-athlete bar chart in view order, with static
benchmark lines, an optional dashed group average, and for asymmetry charts
a zero line, side-coloured bars and 'N% Left / N% Right' tick labels.
"""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from dashboard.config.test_protocols import NAME_COLUMN, ChartSpec, TestProtocol
from dashboard.theme import (
    ACCENT_ORANGE,
    NEUTRAL_GRAY,
    add_average_line,
    add_benchmark_line,
    add_zero_line,
    apply_dashboard_theme,
    get_series_color,
)
from dashboard.utils.aggregation import is_finite
from dashboard.utils.data_loader import format_asymmetry_tick
from dashboard.utils.pipeline import TestDataset
from dashboard.utils.views import View


def bar_fill(value: float) -> str:
    """Neutral for left-sided (negative) asymmetry, accent otherwise"""
    if value is not None and not pd.isna(value) and value < 0:
        return NEUTRAL_GRAY
    return ACCENT_ORANGE


MAX_TICKS_PER_SIDE = 10


def _nice_step(raw: float) -> float:
    """Smallest 1/2/5 x 10^n step >= raw"""
    magnitude = 10 ** math.floor(math.log10(raw))
    for multiple in (1, 2, 5, 10):
        if raw <= multiple * magnitude:
            return multiple * magnitude
    return 10 * magnitude


def asymmetry_ticks(values: Sequence[float], threshold: float = 10.0,
                    step: float = 5.0) -> Tuple[List[float], List[str]]:
    """
    Symmetric tick positions and labels for a signed asymmetry axis.

    Covers the largest finite |value| and the target threshold, so the
    +/- threshold lines are always on screen. The step widens past `step`
    when needed to keep at most MAX_TICKS_PER_SIDE ticks either side of zero.
    """
    finite = [abs(v) for v in values if v is not None and not pd.isna(v) and math.isfinite(v)]
    bound = max(finite + [abs(threshold)])
    if bound > step * MAX_TICKS_PER_SIDE:
        step = max(step, _nice_step(bound / MAX_TICKS_PER_SIDE))
    bound = math.ceil(bound / step) * step

    count = int(round(bound / step))
    tickvals = [float(i * step) for i in range(-count, count + 1)]
    return tickvals, [format_asymmetry_tick(v) for v in tickvals]


def unique_labels(names: Sequence[str]) -> List[str]:
    """
    Category labels with one slot per row.

    A repeated name (e.g. a retest) gets ' (2)', ' (3)' ... so its bar
    does not stack onto the first row's category.
    """
    seen = Counter()
    taken = set(names)
    labels = []
    for name in names:
        seen[name] += 1
        if seen[name] == 1:
            labels.append(name)
            continue
        n = seen[name]
        label = f"{name} ({n})"
        while label in taken:
            n += 1
            label = f"{name} ({n})"
        seen[name] = n
        taken.add(label)
        labels.append(label)
    return labels


def _hover_template(chart: ChartSpec) -> str:
    if chart.asymmetry:
        return '<b>%{x}</b><br>%{customdata}<extra></extra>'
    return '<b>%{x}</b><br>%{fullData.name}: %{y:.2f}<extra></extra>'


def build_bar_chart(view: View, chart: ChartSpec,
                    averages: Optional[Dict[str, float]] = None) -> go.Figure:
    """
    Bar chart for one view.

    Non-finite bar values are left as gaps and a non-finite group average
    draws no line, so empty or partial data never raises here.
    """
    records = view.records
    names = unique_labels(records[NAME_COLUMN].astype(str).tolist()) if NAME_COLUMN in records.columns else []

    fig = go.Figure()

    for series in chart.series:
        values = pd.to_numeric(records[series.column], errors='coerce') if series.column in records.columns \
            else pd.Series(np.nan, index=records.index)
        y = values.tolist()

        bar_kwargs = dict(
            x=names,
            y=y,
            name=series.name,
            marker_line_width=0,
            hovertemplate=_hover_template(chart),
        )

        if chart.asymmetry:
            bar_kwargs['marker_color'] = [bar_fill(v) for v in y]
            bar_kwargs['customdata'] = [format_asymmetry_tick(v) for v in y]
        else:
            bar_kwargs['marker_color'] = get_series_color(series.role)

        fig.add_trace(go.Bar(**bar_kwargs))

    if chart.asymmetry:
        add_zero_line(fig)

    for benchmark in chart.benchmarks:
        add_benchmark_line(fig, benchmark.value, benchmark.label, benchmark.kind)

    if chart.average_column and averages is not None:
        average = averages.get(chart.average_column)
        if is_finite(average):
            add_average_line(fig, average)

    apply_dashboard_theme(fig)

    fig.update_layout(barmode='group', bargap=0.2)
    fig.update_xaxes(tickangle=-45, type='category', automargin=True, tickfont=dict(size=12))
    fig.update_yaxes(title_text=chart.y_label)

    if chart.y_from_zero:
        fig.update_yaxes(rangemode='tozero')

    if chart.asymmetry:
        threshold = max([abs(b.value) for b in chart.benchmarks] or [10.0])
        all_values = [v for trace in fig.data for v in (trace.y if trace.y is not None else ())]
        tickvals, ticktext = asymmetry_ticks(all_values, threshold=threshold)
        fig.update_yaxes(
            tickmode='array',
            tickvals=tickvals,
            ticktext=ticktext,
            range=[tickvals[0], tickvals[-1]],
        )

    return fig


def _empty_view(chart: ChartSpec, protocol: TestProtocol) -> View:
    columns = [NAME_COLUMN] + protocol.referenced_columns() + [f.target for f in protocol.asymmetry_fields]
    empty = pd.DataFrame(columns=columns)
    return View(name=chart.key, frame=empty, order=empty.index)


def build_test_charts(dataset: TestDataset, protocol: TestProtocol) -> Dict[str, go.Figure]:
    """
    All chart figures for a test, keyed by chart key.

    A test that has not loaded yet gets empty charts with axes, benchmarks
    and legend so the tab keeps its layout.
    """
    figures = {}
    for chart in protocol.charts:
        view = dataset.view(chart.key)
        if view is None:
            view = _empty_view(chart, protocol)
        figures[chart.key] = build_bar_chart(view, chart, dataset.averages)
    return figures
