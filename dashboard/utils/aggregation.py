"""
Group averages for the reference lines and summary cards.
"""

from typing import Dict, Iterable, Mapping, Union

import numpy as np
import pandas as pd


def group_mean(df: pd.DataFrame, column: str) -> float:
    """
    Arithmetic mean of a metric over the cleaned records.

    Non-numeric and missing cells are excluded from both sum and count.
    Returns NaN (never raises) for an empty set or a missing column.
    """
    if column not in df.columns:
        return float('nan')

    values = pd.to_numeric(df[column], errors='coerce').dropna()
    count = len(values)
    if count == 0:
        return float('nan')

    return float(values.sum() / count)


def group_averages(df: pd.DataFrame,
                   metrics: Union[Mapping[str, str], Iterable[str]]) -> Dict[str, float]:
    """
    Means keyed by column name.

    Accepts either column names or a {label: column} mapping; the result
    is always keyed by column so charts can look up their own metric.
    """
    columns = metrics.values() if isinstance(metrics, Mapping) else metrics
    return {col: group_mean(df, col) for col in columns}


def is_finite(value) -> bool:
    return value is not None and bool(np.isfinite(value))
