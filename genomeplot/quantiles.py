"""
Quartiles and fences for one sample set.

Quartiles use the nearest-rank-floor rule on the sorted samples: for ``n``
values, Q1, median and Q3 are ``s[floor(n*0.25)]``, ``s[floor(n*0.5)]`` and
``s[floor(n*0.75)]``. There is no interpolation between ranks, and the median
follows the same rule, so for even ``n`` it is the upper of the two middle
values.

Sorting follows numpy's total order: NaN goes after every real number
(including +inf) and all NaNs tie. ``compute(..., strict=True)`` rejects NaN
and infinite samples instead.
"""

from dataclasses import dataclass

import numpy as np

from genomeplot.errors import EmptyInputError, InvalidSampleError

# Fence distance from the box, in IQRs.
WHISKER_FACTOR = 1.5

QUARTILE_POSITIONS = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class QuantileSummary:
    q1: float
    median: float
    q3: float
    iqr: float
    lower_fence: float
    upper_fence: float
    count: int


def sorted_samples(samples, strict=False):
    """Ascending float64 copy of samples; strict rejects NaN and +/-inf."""
    values = np.array(samples, dtype=np.float64).ravel()
    if strict:
        bad = np.flatnonzero(~np.isfinite(values))
        if bad.size:
            index = int(bad[0])
            raise InvalidSampleError(float(values[index]), index)
    # Stable so equal values keep their input order.
    return np.sort(values, kind="stable")


def rank_index(n, position):
    """Nearest-rank-floor index of ``position`` (0..1) in a sorted array of length n."""
    return int(n * position)


def summarize_sorted(ordered):
    """Build a QuantileSummary from an already sorted array."""
    n = len(ordered)
    if n == 0:
        raise EmptyInputError()

    q1, median, q3 = (float(ordered[rank_index(n, p)]) for p in QUARTILE_POSITIONS)
    iqr = q3 - q1
    return QuantileSummary(
        q1=q1,
        median=median,
        q3=q3,
        iqr=iqr,
        lower_fence=q1 - WHISKER_FACTOR * iqr,
        upper_fence=q3 + WHISKER_FACTOR * iqr,
        count=n,
    )


def compute(samples, strict=False):
    """Quartiles, IQR and outlier fences of a non-empty sample set."""
    return summarize_sorted(sorted_samples(samples, strict=strict))
