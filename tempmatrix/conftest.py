"""pytest fixtures shared by tempmatrix tests."""

import pytest


SAMPLE_CSV = """\
date,max_temperature,min_temperature
2015-01-15,20.0,10.0
2015-01-16,22.0,11.0
2015-03-01,12.5,2.5
2016-02-01,4.5,-2.5
2018-06-01,30.0,21.0
"""


@pytest.fixture
def sample_csv(tmp_path):
    """Path to a small daily temperature CSV file."""
    path = tmp_path / "temperature_daily.csv"
    path.write_text(SAMPLE_CSV)
    return path
