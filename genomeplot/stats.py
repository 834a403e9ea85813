"""Plain-text statistics table for the computed panels."""

COLUMNS = [
    "Metric", "N", "Q1", "Median", "Q3", "IQR",
    "Lower fence", "Upper fence", "Whisker min", "Whisker max", "Outliers",
]


def summary_rows(panels):
    """
    One row (list of cells) per panel, matching COLUMNS.

    Metrics without samples get a count of 0 and blank statistics.
    """
    rows = []
    for panel in panels:
        summary, geometry = panel.summary, panel.geometry
        if summary is None:
            rows.append([panel.metric.key, 0] + [None] * (len(COLUMNS) - 2))
            continue
        rows.append([
            panel.metric.key,
            summary.count,
            summary.q1,
            summary.median,
            summary.q3,
            summary.iqr,
            summary.lower_fence,
            summary.upper_fence,
            geometry.whisker_min,
            geometry.whisker_max,
            len(geometry.outliers),
        ])
    return rows


def _cell(value):
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.4f}"
    return str(value)


def format_summary(panels):
    """Render summary_rows as a markdown table."""
    table = [COLUMNS] + [[_cell(v) for v in row] for row in summary_rows(panels)]
    widths = [max(len(row[i]) for row in table) for i in range(len(COLUMNS))]

    def line(cells):
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [line(table[0]), "|" + "|".join("-" * (w + 2) for w in widths) + "|"]
    lines.extend(line(row) for row in table[1:])
    return "\n".join(lines)
