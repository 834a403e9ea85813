"""
Box-plot geometry in data coordinates.

``build`` turns the samples and their QuantileSummary into the pieces a
renderer draws: the box ``[q1, q3]``, the median marker, the two whisker
segments and the outlier points. No pixel, colour or axis information lives
here.

Samples are compared in the same total order used for sorting (NaN after
+inf), via ``numpy.searchsorted`` on the sorted array, so every sample lands
in exactly one region even when NaN is present.
"""

from dataclasses import dataclass

import numpy as np

from genomeplot.quantiles import sorted_samples, summarize_sorted


@dataclass(frozen=True)
class BoxGeometry:
    q1: float
    median: float
    q3: float
    whisker_min: float
    whisker_max: float
    outliers: tuple = ()

    @property
    def box(self):
        return (self.q1, self.q3)

    @property
    def lower_whisker(self):
        """Segment from the lowest non-outlier sample up to the box."""
        return (self.whisker_min, self.q1)

    @property
    def upper_whisker(self):
        """Segment from the box up to the highest non-outlier sample."""
        return (self.q3, self.whisker_max)


@dataclass(frozen=True)
class Partition:
    """Every sample, ascending, in exactly one of four regions."""

    lower_whisker: tuple
    box: tuple
    upper_whisker: tuple
    outliers: tuple

    @property
    def total(self):
        return len(self.lower_whisker) + len(self.box) + len(self.upper_whisker) + len(self.outliers)


def _fence_bounds(ordered, summary):
    """Index range [lo, hi) of the samples inside both fences."""
    lo = int(np.searchsorted(ordered, summary.lower_fence, side="left"))
    hi = int(np.searchsorted(ordered, summary.upper_fence, side="right"))
    return lo, hi


def _as_floats(values):
    return tuple(float(v) for v in values)


def build(samples, summary):
    """Drawable geometry of samples; whiskers fall back to q1/q3 when no sample is inside the fences."""
    ordered = sorted_samples(samples)
    lo, hi = _fence_bounds(ordered, summary)

    if lo < hi:
        whisker_min, whisker_max = float(ordered[lo]), float(ordered[hi - 1])
    else:
        whisker_min, whisker_max = summary.q1, summary.q3

    return BoxGeometry(
        q1=summary.q1,
        median=summary.median,
        q3=summary.q3,
        whisker_min=whisker_min,
        whisker_max=whisker_max,
        outliers=_as_floats(ordered[:lo]) + _as_floats(ordered[hi:]),
    )


def partition(samples, summary):
    """
    Split samples into lower whisker, box, upper whisker and outlier regions.

    The box region is ``[q1, q3]`` inclusive; the whisker regions hold the
    remaining samples inside the fences.
    """
    ordered = sorted_samples(samples)
    lo, hi = _fence_bounds(ordered, summary)

    # Q3 can be NaN while Q1 is not, which puts both fences above the box.
    box_lo = int(np.searchsorted(ordered, summary.q1, side="left"))
    box_hi = int(np.searchsorted(ordered, summary.q3, side="right"))
    box_lo = min(max(box_lo, lo), hi)
    box_hi = min(max(box_hi, box_lo), hi)

    return Partition(
        lower_whisker=_as_floats(ordered[lo:box_lo]),
        box=_as_floats(ordered[box_lo:box_hi]),
        upper_whisker=_as_floats(ordered[box_hi:hi]),
        outliers=_as_floats(ordered[:lo]) + _as_floats(ordered[hi:]),
    )


def box_geometry(samples, strict=False):
    """Compute the QuantileSummary and BoxGeometry of samples in one pass."""
    ordered = sorted_samples(samples, strict=strict)
    summary = summarize_sorted(ordered)
    return summary, build(ordered, summary)
