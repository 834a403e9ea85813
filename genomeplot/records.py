"""Read the assembly statistics table and pull out one sample set per metric."""

from collections import namedtuple

import pandas as pd

from genomeplot.errors import RecordError
from genomeplot.log import get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = ";"


class Metric(namedtuple("Metric", ["key", "title", "unit", "column", "accessor"])):
    """
    One plotted metric.

    ``accessor(frame)`` returns the metric's values as a Series. When it is
    None the metric reads ``frame[column]``.
    """

    __slots__ = ()

    def __new__(cls, key, title, unit, column, accessor=None):
        return super().__new__(cls, key, title, unit, column, accessor)

    def extract(self, frame):
        if self.accessor is not None:
            return self.accessor(frame)
        return frame[self.column]


# Panel order of the count-fasta figure.
METRICS = (
    Metric("assembly_length", "Assembly size (bp.)", "bp.", "assembly_length"),
    Metric("number_of_sequences", "Scaffold count", "Count", "number_of_sequences"),
    Metric("n50", "N50 (bp.)", "bp.", "N50"),
    Metric("gc_percentage", "GC ratio (%)", "GC ratio (%)", "GC_percentage"),
    Metric("n_percentage", "N's ratio (%)", "Ratio (%)", "N_percentage"),
)


def find_metric(key, metrics=METRICS):
    for metric in metrics:
        if metric.key == key:
            return metric
    known = ", ".join(m.key for m in metrics)
    raise KeyError(f"Unknown metric '{key}' (expected one of: {known})")


def read_records(path, delimiter=DEFAULT_DELIMITER, metrics=METRICS):
    """
    Load the statistics table.

    Args:
        path: CSV file, one row per assembly, with a header row.
        delimiter: Field separator; the assembly stats files use ';'.
        metrics: Metrics whose columns must be present.

    Returns:
        pandas.DataFrame with header names stripped of surrounding whitespace.

    Raises:
        RecordError: The file can't be read or a required column is missing.
    """
    try:
        frame = pd.read_csv(path, sep=delimiter)
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise RecordError(f"Could not read {path}: {e}") from e

    frame.columns = [str(c).strip() for c in frame.columns]

    missing = [m.column for m in metrics if m.column not in frame.columns]
    if missing:
        raise RecordError(
            f"{path} is missing column(s) {', '.join(missing)}; "
            f"found {', '.join(frame.columns)} (is the delimiter '{delimiter}' right?)"
        )

    logger.info("Read %d records from %s", len(frame), path)
    return frame


def extract_samples(frame, metrics=METRICS):
    """
    Return ``{metric.key: [float, ...]}`` in the order of ``metrics``.

    Blank or non-numeric cells are skipped with a warning.
    """
    samples = {}
    for metric in metrics:
        values = pd.to_numeric(metric.extract(frame), errors="coerce")
        valid = values.dropna()
        skipped = len(values) - len(valid)
        if skipped:
            logger.warning("Skipping %d non-numeric value(s) in '%s'", skipped, metric.column)
        samples[metric.key] = [float(v) for v in valid]
    return samples
