"""Draw random cell values from a table.

A single :class:`numpy.random.Generator` is created when the module is first
imported and reused by every call, so rapid successive calls never share a
seed. Pass ``rng`` explicitly for reproducible or thread-local streams.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..data_processing import Table
from ..vectors import create_float_vector

logger = logging.getLogger(__name__)

_DEFAULT_RNG = {"rng": np.random.default_rng()}


def get_default_rng() -> np.random.Generator:
    """Return the process-wide generator used when no ``rng`` is given."""
    return _DEFAULT_RNG["rng"]


def seed_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the process-wide generator with one seeded by ``seed``."""
    _DEFAULT_RNG["rng"] = np.random.default_rng(seed)
    return _DEFAULT_RNG["rng"]


def random_data_stream(
    table: Table, num_of_data: int, rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Sample ``num_of_data`` cell values uniformly with replacement.

    Each element is taken from row ``U[0, rows)`` and column ``U[0, cols)``,
    drawn independently, so the same cell may appear more than once.

    Args:
        table (Table): Source table; not modified.
        num_of_data (int): Number of values to draw; ``0`` gives an empty vector.
        rng (numpy.random.Generator, optional): Generator to draw from.
            Defaults to the process-wide generator.

    Returns:
        numpy.ndarray: New float32 vector of length ``num_of_data``.

    Raises:
        TypeError: If ``table`` is not a Table or ``num_of_data`` is not an integer.
        ValueError: If ``num_of_data`` is negative or the table is empty.
        MemoryError: If the output vector cannot be allocated.
    """
    if not isinstance(table, Table):
        raise TypeError(f"table must be a Table, got {type(table)}")
    if isinstance(num_of_data, bool) or not isinstance(num_of_data, (int, np.integer)):
        raise TypeError(f"num_of_data must be an integer, got {type(num_of_data)}")
    if num_of_data < 0:
        raise ValueError(f"num_of_data cannot be negative, got {num_of_data}")
    if table.rows == 0 or table.cols == 0:
        raise ValueError("Cannot sample from an empty table.")

    generator = rng if rng is not None else get_default_rng()
    stream = create_float_vector(int(num_of_data))

    x_index = generator.integers(0, table.rows, size=len(stream))
    y_index = generator.integers(0, table.cols, size=len(stream))
    stream[:] = table.data[x_index, y_index]

    logger.debug("Sampled %d values from a %dx%d table", len(stream), table.rows, table.cols)
    return stream
