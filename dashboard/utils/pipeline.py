"""
Test Load Pipeline
Down GAA Senior Camogie - Sports Science Performance Dashboard

One generic load -> clean -> derive -> sort -> average pipeline, run once
per test tab with that tab's TestProtocol. Loads are cancellable and their
results are applied to the session's DatasetStore in a single update.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Event, Lock
from typing import Dict, Iterator, Optional, Set

import pandas as pd

from dashboard.config.test_protocols import NAME_COLUMN, TestProtocol
from dashboard.utils.aggregation import group_averages
from dashboard.utils.data_loader import (
    DashboardDataError,
    add_signed_values,
    clean_records,
    ensure_columns,
    read_test_csv,
)
from dashboard.utils.views import View, build_views


logger = logging.getLogger(__name__)


# ============================================================================
# DATASET
# ============================================================================

@dataclass
class TestDataset:
    """Everything one test tab renders"""
    __test__ = False  # not a pytest class

    protocol_key: str
    records: pd.DataFrame = field(default_factory=pd.DataFrame)
    views: Dict[str, View] = field(default_factory=dict)
    averages: Dict[str, float] = field(default_factory=dict)
    loaded: bool = False

    @classmethod
    def empty(cls, protocol: TestProtocol) -> 'TestDataset':
        return cls(protocol_key=protocol.key)

    @property
    def athlete_count(self) -> int:
        return len(self.records)

    def view(self, chart_key: str) -> Optional[View]:
        return self.views.get(chart_key)


# ============================================================================
# CANCELLATION
# ============================================================================

class LoadCancelled(Exception):
    """The view that requested a load went away before it finished"""


class CancelToken:
    """Thread-safe cancellation flag shared by a view and its load"""

    def __init__(self):
        self._event = Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, what: str = 'load'):
        if self._event.is_set():
            raise LoadCancelled(f"{what} cancelled")


@contextmanager
def scoped_load() -> Iterator[CancelToken]:
    """
    Token that is cancelled as soon as the view's scope exits.

    On the script thread the load finishes before the scope can exit, so the
    token only matters once the load runs elsewhere: a load started in a
    worker thread whose view has already gone raises LoadCancelled after the
    read, or is discarded by DatasetStore.load if it completes late.
    """
    token = CancelToken()
    try:
        yield token
    finally:
        token.cancel()


# ============================================================================
# PIPELINE
# ============================================================================

def transform_records(raw: pd.DataFrame, protocol: TestProtocol,
                      left_marker: str = 'L') -> TestDataset:
    """Clean, derive, sort and average an already parsed export"""
    cleaned = clean_records(raw, protocol.primary_metric)

    if NAME_COLUMN not in cleaned.columns:
        logger.warning(f"{protocol.file_name}: no '{NAME_COLUMN}' column, using row numbers")
        cleaned[NAME_COLUMN] = [f"Athlete {i + 1}" for i in range(len(cleaned))]

    cleaned = ensure_columns(cleaned, protocol.referenced_columns())

    for asym in protocol.asymmetry_fields:
        cleaned = add_signed_values(cleaned, asym.source, asym.target, left_marker)

    return TestDataset(
        protocol_key=protocol.key,
        records=cleaned,
        views=build_views(cleaned, protocol.charts),
        averages=group_averages(cleaned, protocol.average_metrics),
        loaded=True,
    )


def load_test_dataset(protocol: TestProtocol, data_dir: str, left_marker: str = 'L',
                      token: Optional[CancelToken] = None) -> TestDataset:
    """
    Read and transform one test's export.

    Raises:
        DataLoadError / SchemaError: file or schema problems
        LoadCancelled: token cancelled while the file was being read
    """
    path = os.path.join(data_dir, protocol.file_name)
    raw = read_test_csv(path)

    if token is not None:
        token.raise_if_cancelled(f"{protocol.tab_label} load")

    dataset = transform_records(raw, protocol, left_marker)
    logger.info(f"Loaded {dataset.athlete_count} athletes for {protocol.tab_label} from {path}")
    return dataset


# ============================================================================
# SESSION STORE
# ============================================================================

class DatasetStore:
    """
    Latest successfully loaded dataset per test.

    A failed or cancelled load leaves the previous dataset in place.
    """

    def __init__(self, data_dir: str, left_marker: str = 'L'):
        self.data_dir = data_dir
        self.left_marker = left_marker
        self._datasets: Dict[str, TestDataset] = {}
        self._attempted: Set[str] = set()
        self._lock = Lock()

    def get(self, protocol: TestProtocol) -> TestDataset:
        with self._lock:
            return self._datasets.get(protocol.key) or TestDataset.empty(protocol)

    def is_loaded(self, protocol: TestProtocol) -> bool:
        with self._lock:
            return protocol.key in self._datasets

    def was_attempted(self, protocol: TestProtocol) -> bool:
        with self._lock:
            return protocol.key in self._attempted

    def load(self, protocol: TestProtocol, token: Optional[CancelToken] = None) -> TestDataset:
        """Load a test and apply the result; errors are logged, never raised"""
        with self._lock:
            self._attempted.add(protocol.key)

        try:
            dataset = load_test_dataset(protocol, self.data_dir, self.left_marker, token)
        except LoadCancelled as e:
            logger.debug(str(e))
            with self._lock:
                self._attempted.discard(protocol.key)
            return self.get(protocol)
        except DashboardDataError as e:
            logger.error(f"Error loading {protocol.tab_label} data: {e}")
            return self.get(protocol)

        with self._lock:
            if token is not None and token.cancelled:
                logger.debug(f"{protocol.tab_label} load finished after its view closed, discarded")
                self._attempted.discard(protocol.key)
                return self._datasets.get(protocol.key) or TestDataset.empty(protocol)
            self._datasets[protocol.key] = dataset
        return dataset

    def ensure_loaded(self, protocol: TestProtocol, token: Optional[CancelToken] = None) -> TestDataset:
        """Load on first display only, failed loads are not retried"""
        if self.was_attempted(protocol):
            return self.get(protocol)
        return self.load(protocol, token)

    def clear(self):
        with self._lock:
            self._datasets.clear()
            self._attempted.clear()
