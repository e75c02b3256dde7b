"""
Handles CSV parsing and the read-only table consumed by every statistic.
"""

# Algorithm summary: read a delimited file with pandas, coerce every column to
# numeric, drop columns with no numeric content and rows with gaps, then store
# the result as a non-writeable float32 matrix with its column labels.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

TABLE_DTYPE = np.float32


@dataclass(frozen=True, eq=False)
class Table:
    """Rectangular float32 data with labelled columns.

    The array is marked non-writeable on construction so that statistics and
    display helpers can borrow it without copying.
    """

    data: np.ndarray
    columns: tuple = ()

    def __post_init__(self):
        data = np.array(self.data, dtype=TABLE_DTYPE, copy=True)
        if data.ndim != 2:
            raise ValueError(f"Table data must be 2-D, got {data.ndim} dimension(s)")
        if data.shape[0] > 0 and data.shape[1] == 0:
            raise ValueError("Table rows must have at least one column.")
        data.setflags(write=False)
        object.__setattr__(self, "data", data)

        labels = tuple(self.columns) if self.columns is not None else ()
        if len(labels):
            columns = tuple(str(c) for c in labels)
        else:
            columns = tuple(str(i) for i in range(data.shape[1]))
        if len(columns) != data.shape[1]:
            raise ValueError(
                f"Expected {data.shape[1]} column labels, got {len(columns)}"
            )
        object.__setattr__(self, "columns", columns)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], columns=None) -> "Table":
        """Build a table from nested row sequences.

        Raises:
            ValueError: If the rows do not all have the same length.
        """
        labels = tuple(columns) if columns is not None else ()
        rows = [list(r) for r in rows]
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise ValueError(f"All rows must have the same length, got {sorted(widths)}")
        n_cols = widths.pop() if widths else len(labels)
        data = np.asarray(rows, dtype=TABLE_DTYPE).reshape(len(rows), n_cols)
        return cls(data, labels)

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def cols(self) -> int:
        return int(self.data.shape[1])

    def column_index(self, col) -> int:
        """Resolve an integer index or column label to a validated index."""
        if isinstance(col, str):
            try:
                return self.columns.index(col)
            except ValueError:
                raise ValueError(
                    f"Unknown column '{col}'. Available columns: {list(self.columns)}"
                ) from None
        if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
            raise TypeError(f"Column must be an int index or a label, got {type(col)}")
        idx = int(col)
        if not 0 <= idx < self.cols:
            raise ValueError(f"Column index {idx} out of range [0, {self.cols})")
        return idx

    def column(self, col) -> np.ndarray:
        """Return a read-only view of one column."""
        return self.data[:, self.column_index(col)]

    def value(self, row: int, col) -> float:
        """Return the element at ``(row, col)`` with bounds checking."""
        row = int(row)
        if not 0 <= row < self.rows:
            raise ValueError(f"Row index {row} out of range [0, {self.rows})")
        return float(self.data[row, self.column_index(col)])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.data.copy(), columns=list(self.columns))


def table_from_frame(df: pd.DataFrame) -> Table:
    """Convert a DataFrame into a numeric :class:`Table`.

    Every column is coerced with ``pd.to_numeric(errors="coerce")``. Columns
    with no numeric content are dropped, then rows holding any missing value
    are dropped; both are reported as warnings.

    Args:
        df: Frame as returned by :func:`pandas.read_csv`.

    Returns:
        Table: float32 table with the surviving column labels.

    Raises:
        ValueError: If no numeric column remains.
    """
    numeric = df.apply(pd.to_numeric, errors="coerce")

    empty_cols = [c for c in numeric.columns if numeric[c].isna().all()]
    if empty_cols:
        logger.warning("Dropping non-numeric column(s): %s", ", ".join(map(str, empty_cols)))
        numeric = numeric.drop(columns=empty_cols)

    if numeric.shape[1] == 0:
        raise ValueError("No numeric columns found in input data.")

    n_before = len(numeric)
    numeric = numeric.dropna(how="any")
    n_dropped = n_before - len(numeric)
    if n_dropped:
        logger.warning("Dropped %d row(s) with missing or non-numeric values", n_dropped)

    return Table(numeric.to_numpy(dtype=TABLE_DTYPE), tuple(numeric.columns))


def load_table(filepath, columns=None, header="infer") -> Table:
    """
    Load a numeric table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.
        columns (list[str], optional): Subset of columns to keep, in order.
        header: Passed through to :func:`pandas.read_csv`; use ``None`` for
            files without a header row.

    Returns:
        Table: Loaded table.
    """
    df = pd.read_csv(filepath, header=header, usecols=columns)
    if columns is not None:
        df = df[list(columns)]
    table = table_from_frame(df)
    logger.debug("Loaded %s with shape (%d, %d)", filepath, table.rows, table.cols)
    return table
