"""Print fixed-width previews of the first or last rows of a table."""

from __future__ import annotations

from typing import List

import numpy as np

from .data_processing import Table
from .schema import HEAD_FORMAT, TAIL_FORMAT, DisplayFormat


def _check_lines(table: Table, lines: int) -> int:
    if not isinstance(table, Table):
        raise TypeError(f"table must be a Table, got {type(table)}")
    if isinstance(lines, bool) or not isinstance(lines, (int, np.integer)):
        raise TypeError(f"lines must be an integer, got {type(lines)}")
    if lines <= 0:
        raise ValueError(f"lines must be positive, got {lines}")
    if lines > table.rows:
        raise ValueError(f"lines ({lines}) exceeds the number of rows ({table.rows})")
    return int(lines)


def _format_rows(table: Table, row_indices, lines: int, fmt: DisplayFormat) -> List[str]:
    out = [fmt.banner.format(lines=lines)]
    for row in row_indices:
        out.append("".join(fmt.format_value(v) for v in table.data[row]) + " ")
    out.append(fmt.footer)
    return out


def format_head(table: Table, lines: int, fmt: DisplayFormat = HEAD_FORMAT) -> List[str]:
    """Return the preview lines for rows ``0 .. lines-1``.

    Raises:
        ValueError: If ``lines`` is not in ``[1, table.rows]``.
    """
    lines = _check_lines(table, lines)
    return _format_rows(table, range(lines), lines, fmt)


def format_tail(table: Table, lines: int, fmt: DisplayFormat = TAIL_FORMAT) -> List[str]:
    """Return the preview lines for the last ``lines`` rows, newest first."""
    lines = _check_lines(table, lines)
    return _format_rows(
        table, range(table.rows - 1, table.rows - lines - 1, -1), lines, fmt
    )


def head(table: Table, lines: int) -> None:
    """Print the top ``lines`` rows of ``table`` to standard output."""
    print("\n".join(format_head(table, lines)))


def tail(table: Table, lines: int) -> None:
    """Print the bottom ``lines`` rows of ``table``, last row first."""
    print("\n".join(format_tail(table, lines)))
