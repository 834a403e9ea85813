#!/usr/bin/env python3
"""Command-line entry point: stats CSV in, stacked box-plot figure out."""

import argparse

from genomeplot.errors import GenomePlotError
from genomeplot.log import configure_logging, get_logger
from genomeplot.panels import build_panels
from genomeplot.records import DEFAULT_DELIMITER, METRICS, extract_samples, find_metric, read_records
from genomeplot.render import DEFAULT_SIZE, render_figure
from genomeplot.stats import format_summary

logger = get_logger(__name__)

DEFAULT_OUTPUT = "count-fasta.png"


def positive_int(value):
    """argparse type for pixel sizes."""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw one box plot per assembly metric (size, scaffold count, N50, GC and N ratio) "
                    "from a delimited genome assembly statistics file."
    )
    parser.add_argument("csv_file", help="Path to the assembly statistics CSV file.")
    parser.add_argument(
        "--output",
        help=f"Output image file. Defaults to {DEFAULT_OUTPUT}.",
        default=DEFAULT_OUTPUT
    )
    parser.add_argument(
        "--delimiter",
        help=f"Field delimiter of the CSV file. Defaults to '{DEFAULT_DELIMITER}'.",
        default=DEFAULT_DELIMITER
    )
    parser.add_argument(
        "--metrics",
        help="Comma-delimited metric keys to plot, top to bottom "
             f"(default: {','.join(m.key for m in METRICS)}).",
        default=None
    )
    parser.add_argument("--width", type=positive_int, default=DEFAULT_SIZE[0], help="Image width in pixels.")
    parser.add_argument("--height", type=positive_int, default=DEFAULT_SIZE[1], help="Image height in pixels.")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the box-plot statistics of each metric."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on NaN or infinite values instead of ordering them after all numbers."
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to $GENOMEPLOT_LOG_LEVEL or INFO.",
        default=None
    )
    return parser.parse_args(argv)


def select_metrics(spec):
    """Turn the --metrics string into Metric definitions."""
    if spec is None:
        return list(METRICS)
    keys = [key.strip() for key in spec.split(',') if key.strip()]
    return [find_metric(key) for key in keys]


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        metrics = select_metrics(args.metrics)
    except KeyError as e:
        logger.error("%s", e.args[0])
        return 2
    if not metrics:
        logger.error("No metrics selected.")
        return 2

    try:
        frame = read_records(args.csv_file, delimiter=args.delimiter, metrics=metrics)
        samples = extract_samples(frame, metrics)
        panels = build_panels(samples, metrics, strict=args.strict)
    except GenomePlotError as e:
        logger.error("%s", e)
        return 1

    if args.summary:
        print(format_summary(panels))

    try:
        render_figure(panels, args.output, size=(args.width, args.height))
    except (OSError, ValueError) as e:
        # Missing output directory or an image format matplotlib doesn't know.
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    print(f"Saved {args.output}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
