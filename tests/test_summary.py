import numpy as np
import pandas as pd

from dml.data_processing import Table
from dml.schema import SummaryColumns
from dml.stats.summary import describe_table, print_summary

COLS = SummaryColumns()


def test_describe_table_values(small_table):
    stats = describe_table(small_table)
    assert list(stats.columns) == COLS.ordered()
    assert len(stats) == 3

    row_a = stats[stats[COLS.column] == "a"].iloc[0]
    assert int(row_a[COLS.count]) == 4
    assert np.isclose(row_a[COLS.mean], 2.5)
    assert np.isclose(row_a[COLS.median], 2.5)
    assert np.isclose(row_a[COLS.variance], 1.25)
    assert np.isclose(row_a[COLS.std], np.sqrt(1.25))
    assert row_a[COLS.minimum] == 1.0
    assert row_a[COLS.maximum] == 4.0

    row_c = stats[stats[COLS.column] == "c"].iloc[0]
    assert row_c[COLS.std] == 0.0


def test_describe_table_column_subset(small_table):
    stats = describe_table(small_table, columns=["b", 0])
    assert stats[COLS.column].tolist() == ["b", "a"]


def test_describe_empty_table():
    stats = describe_table(Table.from_rows([], columns=["x"]))
    assert stats.empty
    assert list(stats.columns) == COLS.ordered()


def test_print_summary(capsys, small_table):
    print_summary(describe_table(small_table))
    out = capsys.readouterr().out
    assert "Column summary:" in out
    assert " - a: mean = 2.500, median = 2.500" in out
    assert "(n=4)" in out


def test_print_summary_no_data(capsys):
    print_summary(pd.DataFrame(columns=COLS.ordered()))
    assert "(no data)" in capsys.readouterr().out
