"""Pytest configuration for repository-relative imports."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from dml.data_processing import Table  # noqa: E402


@pytest.fixture
def small_table():
    """Four rows, three columns with easy-to-check statistics."""
    return Table.from_rows(
        [
            [1.0, 5.0, 7.0],
            [2.0, 1.0, 7.0],
            [3.0, 3.0, 7.0],
            [4.0, 7.0, 7.0],
        ],
        columns=["a", "b", "c"],
    )
