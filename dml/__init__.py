"""
A Python package for descriptive statistics and rescaling of tabular numeric data.

Loads delimited files into read-only float32 tables, previews rows, samples
cells, reduces columns to summary statistics and rescales vectors.

Modules:
    - data_processing: Loads CSV files into read-only tables.
    - display: Prints head/tail previews of a table.
    - stats: Mean, median, variance, standard deviation, sampling and summaries.
    - vectors: Allocates vectors and applies linear rescaling.
    - output: Writes summaries and vectors to CSV.
    - plotting: Renders column distributions and rescaled vectors.
"""

__version__ = "1.0.0"

from .data_processing import Table, load_table, table_from_frame
from .display import format_head, format_tail, head, tail
from .output import save_summary_to_csv, save_vector_to_csv
from .stats import (
    compare_vectors,
    describe_table,
    mean,
    median,
    print_summary,
    random_data_stream,
    seed_default_rng,
    standard_deviation,
    variance,
)
from .vectors import create_float_vector, scale_to_unity, scale_vector

__all__ = [
    # Data processing
    "Table",
    "load_table",
    "table_from_frame",
    # Display
    "head",
    "tail",
    "format_head",
    "format_tail",
    # Statistics
    "mean",
    "median",
    "variance",
    "standard_deviation",
    "compare_vectors",
    "random_data_stream",
    "seed_default_rng",
    "describe_table",
    "print_summary",
    # Vectors
    "create_float_vector",
    "scale_to_unity",
    "scale_vector",
    # Output
    "save_summary_to_csv",
    "save_vector_to_csv",
]
