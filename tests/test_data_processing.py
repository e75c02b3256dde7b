import logging

import numpy as np
import pandas as pd
import pytest

from dml.data_processing import Table, load_table, table_from_frame


def test_table_shape_and_access(small_table):
    assert small_table.rows == 4
    assert small_table.cols == 3
    assert small_table.columns == ("a", "b", "c")
    assert small_table.value(3, 1) == 7.0
    assert small_table.value(0, "c") == 7.0
    assert small_table.data.dtype == np.float32


def test_table_is_read_only(small_table):
    with pytest.raises(ValueError):
        small_table.data[0, 0] = 99.0


def test_column_resolution_rejects_out_of_range(small_table):
    with pytest.raises(ValueError, match="out of range"):
        small_table.column(3)
    with pytest.raises(ValueError, match="out of range"):
        small_table.column(-1)
    with pytest.raises(ValueError, match="Unknown column"):
        small_table.column("missing")
    with pytest.raises(TypeError, match="int index or a label"):
        small_table.column(1.5)


def test_value_rejects_bad_row(small_table):
    with pytest.raises(ValueError, match="Row index 4 out of range"):
        small_table.value(4, 0)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError, match="same length"):
        Table.from_rows([[1.0, 2.0], [3.0]])


def test_default_column_labels():
    table = Table(np.zeros((2, 3)))
    assert table.columns == ("0", "1", "2")


def test_table_does_not_alias_source_array():
    source = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
    table = Table(source)
    source[0, 0] = 100.0
    assert table.value(0, 0) == 1.0


def test_table_from_frame_drops_non_numeric(caplog):
    caplog.set_level(logging.WARNING)
    df = pd.DataFrame(
        {
            "name": ["x", "y", "z"],
            "score": [1.5, "bad", 3.5],
            "age": [10, 20, 30],
        }
    )
    table = table_from_frame(df)

    assert table.columns == ("score", "age")
    assert table.rows == 2
    np.testing.assert_allclose(table.column("age"), [10.0, 30.0])
    assert any("non-numeric column" in rec.message for rec in caplog.records)
    assert any("Dropped 1 row" in rec.message for rec in caplog.records)


def test_table_from_frame_without_numeric_columns_raises():
    with pytest.raises(ValueError, match="No numeric columns"):
        table_from_frame(pd.DataFrame({"name": ["x", "y"]}))


def test_load_table_round_trip(tmp_path):
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1, 2, 3], "y": [0.5, 0.25, 0.125]}).to_csv(csv_path, index=False)

    table = load_table(str(csv_path))
    assert table.rows == 3
    assert table.cols == 2
    assert table.columns == ("x", "y")
    assert table.value(2, "y") == pytest.approx(0.125)


def test_load_table_column_subset_and_no_header(tmp_path):
    csv_path = tmp_path / "raw.csv"
    csv_path.write_text("1,2,3\n4,5,6\n")

    table = load_table(str(csv_path), header=None)
    assert table.rows == 2
    assert table.columns == ("0", "1", "2")

    named = tmp_path / "named.csv"
    named.write_text("a,b,c\n1,2,3\n4,5,6\n")
    subset = load_table(str(named), columns=["c", "a"])
    assert subset.columns == ("c", "a")
    np.testing.assert_allclose(subset.column(0), [3.0, 6.0])


def test_load_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_table(str(tmp_path / "nope.csv"))


def test_column_labels_from_index_or_array():
    from_index = Table.from_rows([[1.0, 2.0]], columns=pd.Index(["a", "b"]))
    assert from_index.columns == ("a", "b")
    from_array = Table(np.ones((2, 2)), columns=np.array(["x", "y"]))
    assert from_array.columns == ("x", "y")


def test_rows_without_columns_rejected():
    with pytest.raises(ValueError, match="at least one column"):
        Table.from_rows([[], []])
    with pytest.raises(ValueError, match="at least one column"):
        Table(np.zeros((3, 0)))
