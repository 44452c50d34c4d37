"""
Per-test chart, benchmark and column configuration.
"""
import pytest

from dashboard.config.test_protocols import (
    ASYMMETRY_TARGET,
    CMJ_PROTOCOL,
    CMRJ_PROTOCOL,
    HAMSTRING_PROTOCOL,
    HIP_PROTOCOL,
    HOP_PROTOCOL,
    TEST_PROTOCOLS,
    get_protocol,
)


def benchmark_values(protocol, chart_key):
    return sorted(b.value for b in protocol.chart(chart_key).benchmarks)


def test_tab_order():
    assert [p.tab_label for p in TEST_PROTOCOLS.values()] == [
        'CMJ', 'CMRJ', 'Hop Test', 'Hip Strength', 'Hamstring'
    ]


def test_file_names_are_unique():
    files = [p.file_name for p in TEST_PROTOCOLS.values()]

    assert len(set(files)) == len(files)


@pytest.mark.parametrize('protocol,chart_key,expected', [
    (CMJ_PROTOCOL, 'cmj_height', [25, 35]),
    (CMJ_PROTOCOL, 'power_to_weight', [30, 40]),
    (HOP_PROTOCOL, 'rsi', [1.5, 2.5]),
    (HIP_PROTOCOL, 'abduction', [120, 210]),
    (HIP_PROTOCOL, 'adduction', [150, 245]),
    (HIP_PROTOCOL, 'ratio', [1.0, 1.3]),
    (HAMSTRING_PROTOCOL, 'nordic', [210, 315]),
    (HAMSTRING_PROTOCOL, 'iso_prone', [180, 280]),
])
def test_benchmarks(protocol, chart_key, expected):
    assert benchmark_values(protocol, chart_key) == expected


def test_cmrj_has_no_benchmarks():
    assert all(not chart.benchmarks for chart in CMRJ_PROTOCOL.charts if not chart.asymmetry)


def test_asymmetry_charts_share_one_policy():
    asymmetry_charts = [
        chart for protocol in TEST_PROTOCOLS.values() for chart in protocol.charts if chart.asymmetry
    ]

    assert len(asymmetry_charts) == 5
    for chart in asymmetry_charts:
        assert chart.sort.kind == 'abs'
        assert not chart.sort.ascending
        assert sorted(b.value for b in chart.benchmarks) == [-ASYMMETRY_TARGET, ASYMMETRY_TARGET]
        assert chart.average_column is None


def test_contact_time_sorted_ascending():
    chart = CMRJ_PROTOCOL.chart('contact_time')

    assert chart.sort.ascending


def test_left_right_charts_rank_by_stronger_side():
    for protocol in TEST_PROTOCOLS.values():
        for chart in protocol.charts:
            if len(chart.series) == 2:
                assert chart.sort.kind == 'max_pair'
                assert chart.sort.columns == tuple(s.column for s in chart.series)


def test_asymmetry_series_read_derived_columns():
    for protocol in TEST_PROTOCOLS.values():
        derived = {f.target for f in protocol.asymmetry_fields}
        for chart in protocol.charts:
            if chart.asymmetry:
                assert chart.series[0].column in derived


def test_referenced_columns_exclude_derived():
    columns = HAMSTRING_PROTOCOL.referenced_columns()

    assert columns[0] == 'Nordic Max Force L'
    assert 'Nordic Max Imbalance (%)' in columns
    assert 'Nordic Max Imbalance Value' not in columns
    assert len(columns) == len(set(columns))


def test_chart_lookup():
    assert CMJ_PROTOCOL.chart('asymmetry').title == 'Single-Leg CMJ Asymmetry (%)'

    with pytest.raises(KeyError):
        CMJ_PROTOCOL.chart('rsi')


def test_get_protocol():
    assert get_protocol('HIP') is HIP_PROTOCOL

    with pytest.raises(KeyError, match='Unknown test protocol'):
        get_protocol('sprint')
