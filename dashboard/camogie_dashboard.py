"""
CAMOGIE PERFORMANCE DASHBOARD
Down GAA Senior Camogie - Sports Science Performance Dashboard

Features:
- CMJ, CMRJ, Hop Test (RSI), Hip Strength and Hamstring tabs
- Athlete rankings with benchmark reference lines
- Group average lines and summary cards
- Left/right asymmetry charts with side-coloured bars

Run with:
    streamlit run dashboard/camogie_dashboard.py

Version: 1.0
"""

import os
import sys

import streamlit as st

# Add parent directory to path for imports (works locally and on Streamlit Cloud)
_current_dir = os.path.dirname(os.path.abspath(__file__))
_parent_dir = os.path.dirname(_current_dir)
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from dashboard.config.settings import DashboardConfig, DashboardLogger
from dashboard.config.test_protocols import TEST_PROTOCOLS, TestProtocol
from dashboard.theme import (
    empty_state,
    format_metric_value,
    get_main_css,
    info_card,
    metric_card,
    render_header,
    section_header,
)
from dashboard.utils.charts import build_test_charts
from dashboard.utils.pipeline import DatasetStore, TestDataset, scoped_load


STORE_KEY = 'dataset_store'


@st.cache_resource
def get_config() -> DashboardConfig:
    """Configuration and logging, set up once per server process"""
    config = DashboardConfig.from_env()
    config.validate()
    DashboardLogger('dashboard', config)
    return config


def get_store(config: DashboardConfig) -> DatasetStore:
    """Per-session store; each browser session owns its datasets"""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = DatasetStore(config.DATA_DIR, config.LEFT_MARKER)
    return st.session_state[STORE_KEY]


def render_summary_cards(protocol: TestProtocol, dataset: TestDataset):
    """Athlete count plus one card per averaged metric"""
    cards = [('Athletes', str(dataset.athlete_count))]
    for label, column in protocol.average_metrics.items():
        cards.append((f"Avg {label}", format_metric_value(dataset.averages.get(column))))

    cols = st.columns(len(cards))
    for col, (label, value) in zip(cols, cards):
        with col:
            metric_card(label, value)


def render_test_tab(protocol: TestProtocol, store: DatasetStore):
    """
    One test tab: description, group averages, then every chart.

    The load runs inline and always completes inside its scope, so this
    token is never cancelled in time to stop it. It is passed so the tab
    uses the same store call as a load handed to a worker thread, where a
    view closing first does discard the result (see scoped_load).
    """
    with scoped_load() as token:
        dataset = store.ensure_loaded(protocol, token)

    info_card(protocol.title, protocol.description)

    if dataset.loaded:
        render_summary_cards(protocol, dataset)
    else:
        empty_state(f"No {protocol.tab_label} data available yet.")

    figures = build_test_charts(dataset, protocol)

    for chart in protocol.charts:
        section_header(chart.title)
        st.plotly_chart(figures[chart.key], key=f"{protocol.key}_{chart.key}")


def render_sidebar(config: DashboardConfig, store: DatasetStore):
    st.sidebar.markdown("### Data")
    st.sidebar.caption(f"Source folder: `{config.DATA_DIR}`")

    for protocol in TEST_PROTOCOLS.values():
        dataset = store.get(protocol)
        status = f"{dataset.athlete_count} athletes" if dataset.loaded else "not loaded"
        st.sidebar.caption(f"{protocol.tab_label}: {status}")

    if st.sidebar.button("Reload data"):
        store.clear()
        st.rerun()


def main():
    st.set_page_config(
        page_title="Down GAA Senior Camogie | Performance Dashboard",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    config = get_config()
    store = get_store(config)

    st.markdown(get_main_css(), unsafe_allow_html=True)
    render_header(config.TEAM_NAME, config.SUBTITLE)

    protocols = list(TEST_PROTOCOLS.values())
    tabs = st.tabs([p.tab_label for p in protocols])

    for tab, protocol in zip(tabs, protocols):
        with tab:
            render_test_tab(protocol, store)

    render_sidebar(config, store)


if __name__ == "__main__":
    main()
