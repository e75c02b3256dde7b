"""Write summaries and vectors to reproducible CSV files.

This module is the output boundary between in-memory statistics and files on
disk.
"""

from __future__ import annotations

import logging
import os

import numpy as np
import pandas as pd

from .schema import SummaryColumns

logger = logging.getLogger(__name__)


def save_summary_to_csv(summary_df: pd.DataFrame, output_dir: str = "output") -> str:
    """Save a ``describe_table`` frame to ``column_summary.csv``.

    Args:
        summary_df (pandas.DataFrame): Output from ``describe_table``.
        output_dir (str): Directory where the CSV is written.

    Returns:
        str: Path to the written file.

    Raises:
        KeyError: If any summary column is missing from ``summary_df``.
    """
    required = SummaryColumns().ordered()
    missing = [c for c in required if c not in summary_df.columns]
    if missing:
        raise KeyError(f"summary_df missing required columns: {missing}")

    os.makedirs(output_dir, exist_ok=True)
    summary_path = os.path.join(output_dir, "column_summary.csv")
    summary_df[required].to_csv(summary_path, index=False)

    logger.info("Saved column summary to %s", summary_path)
    return summary_path


def save_vector_to_csv(vector, path: str, name: str = "value") -> str:
    """Save a 1-D vector as a single-column CSV with header ``name``."""
    arr = np.asarray(vector, dtype=np.float32)
    if arr.ndim != 1:
        raise ValueError(f"vector must be 1-D, got {arr.ndim} dimension(s)")

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    pd.DataFrame({name: arr}).to_csv(path, index=False)

    logger.info("Saved %d values to %s", len(arr), path)
    return path
