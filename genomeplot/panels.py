"""Per-metric box-plot statistics, computed independently for each panel."""

from collections import namedtuple

from genomeplot.errors import EmptyInputError
from genomeplot.geometry import box_geometry
from genomeplot.log import get_logger

logger = get_logger(__name__)

# summary and geometry are None when the metric had no samples.
Panel = namedtuple("Panel", ["metric", "summary", "geometry"])


def build_panels(samples_by_metric, metrics, strict=False):
    """
    Compute one Panel per metric, in the order of ``metrics``.

    Args:
        samples_by_metric: ``{metric.key: sequence of float}``.
        metrics: Metric definitions to plot.
        strict: Passed to the quantile engine; rejects NaN and infinite samples.

    Returns:
        List of Panel. An empty metric is logged and returned without
        statistics so the remaining panels still get drawn.
    """
    panels = []
    for metric in metrics:
        samples = samples_by_metric.get(metric.key, [])
        try:
            summary, geometry = box_geometry(samples, strict=strict)
        except EmptyInputError:
            logger.warning("No samples for '%s'; its panel will be empty", metric.key)
            panels.append(Panel(metric, None, None))
            continue
        logger.debug(
            "%s: n=%d q1=%g median=%g q3=%g outliers=%d",
            metric.key, summary.count, summary.q1, summary.median, summary.q3, len(geometry.outliers),
        )
        panels.append(Panel(metric, summary, geometry))
    return panels
