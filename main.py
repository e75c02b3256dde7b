#!/usr/bin/env python3
"""
Main script for summarizing a numeric CSV file.
"""

# Pipeline overview:
# 1) Load the CSV into a read-only float32 table.
# 2) Print head/tail previews.
# 3) Compute and print per-column mean, median and standard deviation.
# 4) Draw a random stream of cell values, optionally rescale it.
# 5) Export the summary and vectors to CSV, and figures on request.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dml.data_processing import load_table
from dml.display import head, tail
from dml.output import save_summary_to_csv, save_vector_to_csv
from dml.stats import describe_table, print_summary, random_data_stream, seed_default_rng
from dml.vectors import scale_vector

DEFAULT_LINES = 5
DEFAULT_SAMPLES = 10
DEFAULT_OUTPUT_DIR = "output"
LOG_FILE = "dml_analysis.log"


def configure_logging(log_file: str = LOG_FILE):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, mode="w"),
        ],
    )


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Descriptive statistics for a numeric CSV file.")
    ap.add_argument("csv_path", help="Path to the CSV file (e.g., data/train.csv)")
    ap.add_argument("--lines", type=int, default=DEFAULT_LINES, help="Rows shown by head/tail")
    ap.add_argument("--columns", nargs="+", default=None, help="Subset of columns to load")
    ap.add_argument("--samples", type=int, default=DEFAULT_SAMPLES, help="Size of the random stream")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the random stream")
    ap.add_argument(
        "--scale",
        nargs=2,
        type=float,
        metavar=("LOW", "HIGH"),
        default=None,
        help="Rescale the random stream from its own range to [LOW, HIGH]",
    )
    ap.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR, help="Directory for CSV/PNG outputs")
    ap.add_argument("--plots", action="store_true", help="Also save distribution figures")
    return ap.parse_args(argv)


def main(argv=None):
    """Run the summary pipeline and return a process exit code."""

    args = parse_args(argv)
    start_time = time.time()
    logging.info("Loading %s", args.csv_path)

    try:
        table = load_table(args.csv_path, columns=args.columns)
    except (FileNotFoundError, ValueError) as e:
        logging.error("Failed to load %s: %s", args.csv_path, e)
        return 1

    if table.rows == 0:
        logging.error("No complete numeric rows in %s. Terminating execution.", args.csv_path)
        return 1
    logging.info("Loaded table with %d rows and %d columns", table.rows, table.cols)

    lines = min(max(args.lines, 1), table.rows)
    head(table, lines)
    tail(table, lines)

    summary_df = describe_table(table)
    print_summary(summary_df)

    if args.seed is not None:
        seed_default_rng(args.seed)
    stream = random_data_stream(table, max(args.samples, 0))
    logging.info("Drew %d random values from the table", len(stream))

    os.makedirs(args.output_dir, exist_ok=True)
    outputs = [save_summary_to_csv(summary_df, args.output_dir)]
    outputs.append(
        save_vector_to_csv(stream, os.path.join(args.output_dir, "random_stream.csv"), name="sample")
    )

    scaled = None
    if args.scale is not None and len(stream):
        lo, hi = float(stream.min()), float(stream.max())
        if lo == hi:
            logging.warning("Random stream is constant (%g); skipping rescale", lo)
        else:
            scaled = scale_vector(stream, lo, hi, args.scale[0], args.scale[1])
            outputs.append(
                save_vector_to_csv(scaled, os.path.join(args.output_dir, "scaled_stream.csv"), name="scaled")
            )

    if args.plots:
        from dml.plotting import plot_column_distribution, plot_scaled_vector

        for idx in range(table.cols):
            outputs.append(plot_column_distribution(table, idx, args.output_dir))
        if scaled is not None:
            outputs.append(plot_scaled_vector(stream, scaled, args.output_dir))

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.2f seconds", total_duration)
    logging.info("Generated output files:")
    for path in outputs:
        logging.info("  - %s", path)
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
