"""
Group averages.
"""
import math

import numpy as np
import pandas as pd
import pytest

from dashboard.utils.aggregation import group_averages, group_mean, is_finite


def test_mean_of_recorded_values():
    df = pd.DataFrame({'Height': [20, 30, 40]})

    assert group_mean(df, 'Height') == pytest.approx(30.0)


def test_single_value():
    df = pd.DataFrame({'RSI': [2.1]})

    assert group_mean(df, 'RSI') == pytest.approx(2.1)


def test_missing_cells_excluded_from_count():
    df = pd.DataFrame({'Force': [200, np.nan, 300, 'n/a']})

    assert group_mean(df, 'Force') == pytest.approx(250.0)


def test_empty_records_give_nan():
    df = pd.DataFrame({'Height': pd.Series([], dtype=float)})

    assert math.isnan(group_mean(df, 'Height'))


def test_all_missing_gives_nan():
    df = pd.DataFrame({'Height': [np.nan, np.nan]})

    assert math.isnan(group_mean(df, 'Height'))


def test_missing_column_gives_nan():
    assert math.isnan(group_mean(pd.DataFrame({'Name': ['A']}), 'Height'))


def test_averages_keyed_by_column():
    df = pd.DataFrame({'Nordic L': [300, 200], 'Nordic R': [250, 270]})

    averages = group_averages(df, {'Nordic L': 'Nordic L', 'Right side': 'Nordic R'})

    assert averages == {'Nordic L': pytest.approx(250.0), 'Nordic R': pytest.approx(260.0)}


def test_averages_from_column_list():
    df = pd.DataFrame({'RSI': [1.0, 2.0]})

    assert group_averages(df, ['RSI']) == {'RSI': pytest.approx(1.5)}


@pytest.mark.parametrize('value,expected', [
    (1.5, True),
    (0, True),
    (float('nan'), False),
    (float('inf'), False),
    (None, False),
])
def test_is_finite(value, expected):
    assert is_finite(value) is expected
