"""Reduce one table column to a descriptive statistic.

All reductions accumulate in float32 to match the table storage and return a
plain Python ``float``.
"""

from __future__ import annotations

import math
from functools import cmp_to_key

import numpy as np

from ..data_processing import Table
from ..vectors import create_float_vector


def _checked_column(table: Table, col) -> np.ndarray:
    if not isinstance(table, Table):
        raise TypeError(f"table must be a Table, got {type(table)}")
    if table.rows == 0:
        raise ValueError("Cannot compute statistics of a table with zero rows.")
    return table.column(col)


def mean(table: Table, col) -> float:
    """Return the arithmetic mean of column ``col``.

    Args:
        table (Table): Source table; not modified.
        col (int | str): Column index in ``[0, table.cols)`` or column label.

    Returns:
        float: Mean of all ``table.rows`` values.

    Raises:
        ValueError: If the table is empty or ``col`` does not name a column.
    """
    values = _checked_column(table, col)
    total = np.sum(values, dtype=np.float32)
    return float(total / np.float32(len(values)))


def compare_vectors(a: float, b: float) -> int:
    """Three-way comparison for ascending sorts: -1, 0 or 1."""
    return (a > b) - (a < b)


def median(table: Table, col) -> float:
    """Return the median of column ``col``.

    The column is copied into a scratch vector and sorted ascending; the
    middle element (odd row count) or the mean of the two central elements
    (even row count) is read from the sorted copy.

    Raises:
        ValueError: If the table is empty or ``col`` does not name a column.
    """
    values = _checked_column(table, col)
    n = len(values)

    sorted_feature = create_float_vector(n)
    sorted_feature[:] = sorted(values.tolist(), key=cmp_to_key(compare_vectors))

    if n % 2 == 1:
        return float(sorted_feature[(n - 1) // 2])
    return float((sorted_feature[n // 2] + sorted_feature[n // 2 - 1]) / np.float32(2))


def variance(table: Table, col) -> float:
    """Population variance of column ``col`` (no ``n - 1`` correction).

    A single-row column has variance ``0.0``.
    """
    values = _checked_column(table, col)
    mean_val = np.float32(mean(table, col))
    distance = values - mean_val
    total = np.sum(distance * distance, dtype=np.float32)
    return float(total / np.float32(len(values)))


def standard_deviation(table: Table, col) -> float:
    """Population standard deviation of column ``col``.

    Returns the square root of :func:`variance`.
    """
    return math.sqrt(variance(table, col))
