"""Exceptions raised by genomeplot."""


class GenomePlotError(Exception):
    """Base class for every error genomeplot raises on purpose."""


class EmptyInputError(GenomePlotError, ValueError):
    """Raised when box-plot statistics are requested for zero samples."""

    def __init__(self, metric=None):
        self.metric = metric
        if metric is None:
            message = "Cannot compute quartiles of an empty sample set."
        else:
            message = f"No samples for metric '{metric}'."
        super().__init__(message)


class InvalidSampleError(GenomePlotError, ValueError):
    """Raised in strict mode for a NaN or infinite sample."""

    def __init__(self, value, index):
        self.value = value
        self.index = index
        super().__init__(f"Sample {index} is not a finite number: {value!r}")


class RecordError(GenomePlotError):
    """Raised when the statistics table cannot be read or lacks columns."""
