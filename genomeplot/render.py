"""
Draw box-plot panels with matplotlib.

Each panel gets its own axes, stacked vertically, with the x axis scaled to
that metric's data alone. The y axis only positions the box (range 0..2,
box centred on 1).
"""

import math

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from genomeplot.log import get_logger

logger = get_logger(__name__)

DEFAULT_SIZE = (800, 1120)
DEFAULT_DPI = 100

BOX_HALF_HEIGHT = 0.3
BOX_COLOR = "blue"
BOX_ALPHA = 0.3
MEDIAN_COLOR = "red"
WHISKER_COLOR = "black"
OUTLIER_COLOR = "black"
# Marker area in points^2 (about a 3 px radius at 100 dpi).
OUTLIER_SIZE = 20

CAPTION_FONT = {"family": "sans-serif", "size": 20}


def _finite(values):
    return [v for v in values if math.isfinite(v)]


def axis_limits(geometry, padding=0.1):
    """
    x-axis range covering every drawn value plus ``padding`` of the range on each side.

    The smallest sample is either the lower whisker end or an outlier (and the
    same for the largest), so the samples themselves aren't needed.
    """
    values = _finite(
        [geometry.whisker_min, geometry.q1, geometry.median, geometry.q3, geometry.whisker_max]
        + list(geometry.outliers)
    )
    if not values:
        return (-1.0, 1.0)

    low, high = min(values), max(values)
    pad = (high - low) * padding
    if pad == 0:
        pad = abs(low) * padding or 1.0
    return (low - pad, high + pad)


def draw_boxplot(ax, geometry, y=1.0):
    """Draw one horizontal box plot centred on ``y``. Non-finite parts are left out."""
    q1, q3 = geometry.box
    if math.isfinite(q1) and math.isfinite(q3):
        ax.add_patch(Rectangle(
            (q1, y - BOX_HALF_HEIGHT), q3 - q1, 2 * BOX_HALF_HEIGHT,
            facecolor=BOX_COLOR, alpha=BOX_ALPHA, edgecolor="none",
        ))

    if math.isfinite(geometry.median):
        ax.plot([geometry.median] * 2, [y - BOX_HALF_HEIGHT, y + BOX_HALF_HEIGHT],
                color=MEDIAN_COLOR, linewidth=2)

    for start, end in (geometry.lower_whisker, geometry.upper_whisker):
        if math.isfinite(start) and math.isfinite(end):
            ax.plot([start, end], [y, y], color=WHISKER_COLOR, linewidth=1)

    outliers = _finite(geometry.outliers)
    if outliers:
        ax.scatter(outliers, [y] * len(outliers), s=OUTLIER_SIZE, color=OUTLIER_COLOR, zorder=3)


def render_figure(panels, output, size=DEFAULT_SIZE, dpi=DEFAULT_DPI):
    """
    Draw every panel into one image file.

    Args:
        panels: List of Panel, top to bottom.
        output: Image path; matplotlib picks the format from the extension.
        size: (width, height) in pixels.
        dpi: Resolution used to convert size to inches.
    """
    width, height = size
    fig, axes = plt.subplots(len(panels), 1, figsize=(width / dpi, height / dpi), dpi=dpi, squeeze=False)

    for i, (ax, panel) in enumerate(zip(axes[:, 0], panels)):
        ax.set_title(panel.metric.title, fontdict=CAPTION_FONT)
        ax.set_ylabel(chr(ord("A") + i))
        ax.set_xlabel(panel.metric.unit)
        ax.set_ylim(0.0, 2.0)
        ax.set_yticks([])

        if panel.geometry is None:
            ax.text(0.5, 0.5, "no data", transform=ax.transAxes, ha="center", va="center")
            continue

        draw_boxplot(ax, panel.geometry)
        ax.set_xlim(*axis_limits(panel.geometry))
        # Disable scientific notation on the x-axis.
        ax.ticklabel_format(style="plain", axis="x", useOffset=False)

    fig.tight_layout()
    try:
        fig.savefig(output, dpi=dpi)
    finally:
        plt.close(fig)
    logger.info("Wrote %s", output)
    return output
