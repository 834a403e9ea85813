"""Box-plot statistics and figures for genome-assembly quality tables."""

from genomeplot.errors import EmptyInputError, GenomePlotError, InvalidSampleError, RecordError
from genomeplot.geometry import BoxGeometry, Partition, box_geometry, build, partition
from genomeplot.quantiles import QuantileSummary, compute

__version__ = "0.1.0"

__all__ = [
    "BoxGeometry",
    "EmptyInputError",
    "GenomePlotError",
    "InvalidSampleError",
    "Partition",
    "QuantileSummary",
    "RecordError",
    "box_geometry",
    "build",
    "compute",
    "partition",
]
