"""Define display formats and standardized column names for summary tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayFormat:
    """Formatting rules for one row-preview listing.

    Attributes:
        banner: Opening banner template; ``{lines}`` is replaced by the row count.
        footer: Closing banner printed after the last row.
        width: Minimum field width for each value (right-aligned).
        precision: Number of decimal digits for each value.
        separator: Text written after every value.
    """

    banner: str
    footer: str
    width: int = 10
    precision: int = 3
    separator: str = "\t"

    def format_value(self, value: float) -> str:
        return f"{value:{self.width}.{self.precision}f}{self.separator}"


HEAD_FORMAT = DisplayFormat(
    banner="*** ================ TOP {lines} ROWS ================ ***",
    footer="*** ============================================= ***",
    width=10,
    precision=3,
    separator="\t",
)

# The bottom listing keeps its historical two-decimal layout.
TAIL_FORMAT = DisplayFormat(
    banner="*** ================ BOTTOM {lines} ROWS ================ ***",
    footer="*** ========================================== ***",
    width=10,
    precision=2,
    separator=" ",
)


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels of ``describe_table`` output.

    Attributes:
        column: Source column label from the table.
        count: Number of rows that contributed to the statistics.
        mean: Arithmetic mean.
        median: Middle value of the sorted column.
        std: Population standard deviation (square root of ``variance``).
        variance: Population variance, without the ``n - 1`` correction.
        minimum: Smallest value in the column.
        maximum: Largest value in the column.
    """

    column: str = "Column"
    count: str = "Count"
    mean: str = "Mean"
    median: str = "Median"
    std: str = "Std"
    variance: str = "Variance"
    minimum: str = "Min"
    maximum: str = "Max"

    def ordered(self) -> list[str]:
        return [
            self.column,
            self.count,
            self.mean,
            self.median,
            self.std,
            self.variance,
            self.minimum,
            self.maximum,
        ]
