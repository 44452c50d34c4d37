"""
Data Loading and Processing Utilities
Down GAA Senior Camogie - Sports Science Performance Dashboard

Reads the per-test CSV exports, drops athletes who did not perform the
test, and derives signed asymmetry values from '12% L' style labels.
"""

import logging
import math
import re
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd


logger = logging.getLogger(__name__)

# Whole-cell numeric literal, e.g. '35', '-1.2', '.5', '1e3'
_NUMERIC_CELL = re.compile(r'^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$')

# Leading magnitude of an asymmetry label, e.g. '12' in '12% L'
_LEADING_NUMBER = re.compile(r'^\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?')


# ============================================================================
# ERRORS
# ============================================================================

class DashboardDataError(Exception):
    """Base class for data problems caught at the load boundary"""


class DataLoadError(DashboardDataError):
    """CSV export missing, unreadable, empty or unparseable"""


class SchemaError(DashboardDataError):
    """CSV export lacks a column the test cannot do without"""


# ============================================================================
# CSV INGESTION
# ============================================================================

def _coerce_cell(value: Any) -> Any:
    """Turn a string cell into a number when the whole cell is numeric"""
    if not isinstance(value, str):
        return value

    stripped = value.strip()
    if not stripped:
        return np.nan

    if _NUMERIC_CELL.match(stripped):
        if '.' in stripped or 'e' in stripped.lower():
            return float(stripped)
        return int(stripped)

    return value


def read_test_csv(path: str) -> pd.DataFrame:
    """
    Read a test export into a DataFrame.

    Header row gives the column names. Blank lines are skipped, empty cells
    become null, and text columns are coerced cell-by-cell so that a column
    mixing '12' and '12% L' keeps the label strings but exposes 12 as a number.

    Raises:
        DataLoadError: file missing, unreadable, empty or malformed
    """
    try:
        # Only empty cells are null; 'NA', 'N/A', 'None' etc. stay as text
        df = pd.read_csv(path, encoding='utf-8', skip_blank_lines=True, skipinitialspace=True,
                         keep_default_na=False, na_values=[''])
    except FileNotFoundError as e:
        raise DataLoadError(f"File not found: {path}") from e
    except pd.errors.EmptyDataError as e:
        raise DataLoadError(f"File is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Could not parse {path}: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e

    df.columns = [str(col).strip() for col in df.columns]

    for col in df.columns:
        if df[col].dtype == object:
            df[col] = df[col].map(_coerce_cell)

    # Rows that were only separators
    df = df.dropna(how='all').reset_index(drop=True)

    logger.debug(f"Read {len(df)} rows from {path}")
    return df


# ============================================================================
# RECORD CLEANER
# ============================================================================

def clean_records(df: pd.DataFrame, primary_metric: str) -> pd.DataFrame:
    """
    Keep only athletes who recorded the test's primary metric.

    Raises:
        SchemaError: the primary metric column is missing
    """
    if primary_metric not in df.columns:
        raise SchemaError(f"Missing primary metric column: {primary_metric}")

    cleaned = df[df[primary_metric].notna()].copy()

    dropped = len(df) - len(cleaned)
    if dropped:
        logger.debug(f"Dropped {dropped} rows without '{primary_metric}'")

    return cleaned


def ensure_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Add any missing columns as all-null so charts render empty instead of failing"""
    for col in columns:
        if col not in df.columns:
            logger.warning(f"Column '{col}' not found in export, treating as empty")
            df[col] = np.nan
    return df


# ============================================================================
# DIRECTIONAL VALUE DERIVER
# ============================================================================

def parse_signed_percentage(raw: Any, left_marker: str = 'L') -> Optional[float]:
    """
    Signed asymmetry from a side-labelled percentage.

    '12% L' -> -12.0, '8% R' -> 8.0. Returns None when the field is empty
    (not computed) and NaN when it has no numeric prefix. A bare number has
    no side label and is treated as right-sided.
    """
    if raw is None:
        return None

    if isinstance(raw, (int, float, np.number)) and not isinstance(raw, bool):
        if math.isnan(raw):
            return None
        return abs(float(raw))

    text = str(raw)
    if not text.strip():
        return None

    match = _LEADING_NUMBER.match(text)
    if not match:
        return float('nan')

    magnitude = abs(float(match.group(0)))
    return -magnitude if left_marker in text else magnitude


def add_signed_values(df: pd.DataFrame, source: str, target: str,
                      left_marker: str = 'L') -> pd.DataFrame:
    """Add the signed numeric column for an asymmetry label column"""
    if source not in df.columns:
        logger.warning(f"Asymmetry column '{source}' not found, '{target}' left empty")
        df[target] = np.nan
        return df

    signed = df[source].map(lambda raw: parse_signed_percentage(raw, left_marker))
    df[target] = pd.to_numeric(signed, errors='coerce').astype(float)

    malformed = df[source].notna() & df[target].isna()
    if malformed.any():
        logger.warning(f"{int(malformed.sum())} unparseable value(s) in '{source}'")

    return df


def format_asymmetry_tick(value: float) -> str:
    """Axis label for a signed asymmetry: -12 -> '12% Left', 8 -> '8% Right'"""
    if value is None or not np.isfinite(value):
        return ''
    side = 'Left' if value < 0 else 'Right'
    return f"{abs(value):g}% {side}"
