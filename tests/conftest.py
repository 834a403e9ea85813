import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

STATS_HEADER = "assembly_length;number_of_sequences;N50;GC_percentage;N_percentage"

STATS_ROWS = [
    "4641652;1;4641652;50.79;0.0",
    "4700121;3;2500310;50.61;0.01",
    "4689733;2;3100455;50.70;0.0",
    "4655012;5;1800220;50.82;0.02",
    "4720345;4;2204118;50.55;0.0",
    "4666980;2;3501207;50.74;0.0",
    "4702216;7;1200553;50.66;0.05",
    "4679901;3;2900870;50.71;0.0",
    "4694410;2;3300012;50.69;0.0",
    "9120033;140;95120;48.90;1.75",
]


@pytest.fixture
def stats_csv(tmp_path):
    """Semicolon-delimited assembly statistics with one poor assembly in the last row."""
    path = tmp_path / "stats.csv"
    path.write_text("\n".join([STATS_HEADER] + STATS_ROWS) + "\n")
    return path


@pytest.fixture
def ten_samples():
    return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


@pytest.fixture
def ten_with_outlier():
    return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 100.0]
