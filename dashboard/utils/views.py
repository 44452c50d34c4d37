"""
Chart Views
Down GAA Senior Camogie - Sports Science Performance Dashboard

A view is one chart's ranking of the cleaned athletes. Views keep a
reference to the shared cleaned frame plus an ordering of its index, so
every chart of a test reads the same records.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from dashboard.config.test_protocols import ChartSpec, SortSpec


@dataclass
class View:
    """Named ordering of the cleaned records for one chart"""
    name: str
    frame: pd.DataFrame
    order: pd.Index

    @property
    def records(self) -> pd.DataFrame:
        """Records in chart order"""
        return self.frame.loc[self.order]

    def column(self, col: str) -> pd.Series:
        return self.records[col]

    def __len__(self):
        return len(self.order)


def sort_key(df: pd.DataFrame, spec: SortSpec) -> pd.Series:
    """Per-row value a chart ranks on"""
    if spec.kind == 'field':
        return pd.to_numeric(df[spec.columns[0]], errors='coerce')

    if spec.kind == 'max_pair':
        pair = df[list(spec.columns)].apply(pd.to_numeric, errors='coerce')
        # Whichever side is stronger
        return pair.max(axis=1)

    if spec.kind == 'abs':
        return pd.to_numeric(df[spec.columns[0]], errors='coerce').abs()

    raise ValueError(f"Unknown sort kind: {spec.kind}")


def sort_order(df: pd.DataFrame, spec: SortSpec) -> pd.Index:
    """
    Index labels of df ordered by the sort spec.

    Stable (mergesort) so ties keep input order and re-sorting a sorted
    view is a no-op. Missing keys go last in either direction.
    """
    key = sort_key(df, spec)
    return key.sort_values(ascending=spec.ascending, kind='mergesort', na_position='last').index


def build_view(df: pd.DataFrame, chart: ChartSpec) -> View:
    return View(name=chart.key, frame=df, order=sort_order(df, chart.sort))


def build_views(df: pd.DataFrame, charts: Iterable[ChartSpec]) -> Dict[str, View]:
    """One view per chart, all over the same cleaned frame"""
    return {chart.key: build_view(df, chart) for chart in charts}
