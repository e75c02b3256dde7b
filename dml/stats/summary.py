"""Build and print per-column summary tables."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..data_processing import Table
from ..schema import SummaryColumns
from .descriptive import mean, median, standard_deviation, variance

COLS = SummaryColumns()


def describe_table(table: Table, columns=None) -> pd.DataFrame:
    """Summarize each requested column of ``table``.

    Args:
        table (Table): Source table.
        columns (list, optional): Column indices or labels; all columns when
            omitted.

    Returns:
        pandas.DataFrame: One row per column with the labels of
        :class:`dml.schema.SummaryColumns`. An empty table yields an empty
        frame with those columns.
    """
    if table.rows == 0:
        return pd.DataFrame(columns=COLS.ordered())

    selected = range(table.cols) if columns is None else columns
    records = []
    for col in selected:
        idx = table.column_index(col)
        values = table.column(idx)
        records.append(
            {
                COLS.column: table.columns[idx],
                COLS.count: int(len(values)),
                COLS.mean: mean(table, idx),
                COLS.median: median(table, idx),
                COLS.std: standard_deviation(table, idx),
                COLS.variance: variance(table, idx),
                COLS.minimum: float(np.min(values)),
                COLS.maximum: float(np.max(values)),
            }
        )
    return pd.DataFrame.from_records(records, columns=COLS.ordered())


def print_summary(summary_df: pd.DataFrame):
    print("\nColumn summary:")
    if summary_df.empty:
        print("  (no data)")
        return

    for _, row in summary_df.iterrows():
        print(
            f" - {row[COLS.column]}: mean = {row[COLS.mean]:.3f}, "
            f"median = {row[COLS.median]:.3f}, std = {row[COLS.std]:.3f} "
            f"(n={int(row[COLS.count])})"
        )
        print(f"     range: {row[COLS.minimum]:.3f} .. {row[COLS.maximum]:.3f}")
