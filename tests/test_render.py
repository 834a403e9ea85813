"""Tests for the matplotlib renderer."""

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import pytest

from genomeplot.geometry import box_geometry
from genomeplot.panels import Panel
from genomeplot.records import METRICS
from genomeplot.render import axis_limits, draw_boxplot, render_figure


def _panel(metric, samples):
    summary, geometry = box_geometry(samples)
    return Panel(metric, summary, geometry)


def test_axis_limits_pad_ten_percent(ten_samples):
    _, g = box_geometry(ten_samples)
    low, high = axis_limits(g)
    assert low == pytest.approx(0.1)
    assert high == pytest.approx(10.9)


def test_axis_limits_include_outliers(ten_with_outlier):
    _, g = box_geometry(ten_with_outlier)
    low, high = axis_limits(g)
    assert low == pytest.approx(1.0 - 9.9)
    assert high == pytest.approx(100.0 + 9.9)


def test_axis_limits_single_value():
    _, g = box_geometry([5.0])
    assert axis_limits(g) == pytest.approx((4.5, 5.5))


def test_axis_limits_zero():
    _, g = box_geometry([0.0, 0.0])
    assert axis_limits(g) == (-1.0, 1.0)


def test_axis_limits_ignore_nan():
    _, g = box_geometry([1, 2, 3, 4, 5, 6, 7, 8, 9, float("nan")])
    low, high = axis_limits(g)
    assert low == pytest.approx(0.2)
    assert high == pytest.approx(9.8)


def test_draw_boxplot_artists(ten_with_outlier):
    _, g = box_geometry(ten_with_outlier)
    fig, ax = plt.subplots()
    try:
        draw_boxplot(ax, g)
        assert len(ax.patches) == 1
        # Median marker and two whiskers.
        assert len(ax.lines) == 3
        assert len(ax.collections) == 1
        box = ax.patches[0]
        assert box.get_x() == 3.0
        assert box.get_width() == 5.0
    finally:
        plt.close(fig)


def test_draw_boxplot_without_outliers(ten_samples):
    _, g = box_geometry(ten_samples)
    fig, ax = plt.subplots()
    try:
        draw_boxplot(ax, g)
        assert len(ax.collections) == 0
    finally:
        plt.close(fig)


def test_render_figure_size(tmp_path, ten_samples, ten_with_outlier):
    panels = [
        _panel(METRICS[0], ten_samples),
        _panel(METRICS[1], ten_with_outlier),
        Panel(METRICS[2], None, None),
    ]
    out = tmp_path / "figure.png"
    render_figure(panels, out, size=(400, 600))
    image = mpimg.imread(out)
    assert image.shape[:2] == (600, 400)


def test_render_figure_closes_figure(tmp_path, ten_samples):
    before = len(plt.get_fignums())
    render_figure([_panel(METRICS[0], ten_samples)], tmp_path / "one.png")
    assert len(plt.get_fignums()) == before
