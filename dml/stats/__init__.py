"""
Statistical utilities over numeric tables.

This subpackage reduces table columns to scalars and samples cell values.
All functions borrow the table read-only and return new objects.

Modules:
    descriptive:
        Mean, median (with its three-way comparator), population variance
        and population standard deviation of one column.

    sampling:
        Uniform random sampling of cells with replacement, backed by one
        process-wide generator.

    summary:
        Per-column summary frame and console listing built from the
        descriptive statistics.

Design Principle:
    This subpackage has no dependencies on plotting or output modules.
"""

from .descriptive import compare_vectors, mean, median, standard_deviation, variance
from .sampling import get_default_rng, random_data_stream, seed_default_rng
from .summary import describe_table, print_summary

__all__ = [
    "compare_vectors",
    "mean",
    "median",
    "standard_deviation",
    "variance",
    "get_default_rng",
    "random_data_stream",
    "seed_default_rng",
    "describe_table",
    "print_summary",
]
