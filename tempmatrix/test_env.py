import pytest

from .env import ChartConfig


@pytest.fixture
def clear_env(monkeypatch):
    for k in [
        "TEMPMATRIX_DATA_FILE",
        "TEMPMATRIX_YEAR_START",
        "TEMPMATRIX_YEAR_END",
        "TEMPMATRIX_TEMP_MIN",
        "TEMPMATRIX_TEMP_MAX",
    ]:
        monkeypatch.delenv(k, raising=False)


def test_from_env_defaults(clear_env):
    config = ChartConfig.from_env()
    assert config.data_file == "temperature_daily.csv"
    assert (config.year_range.start, config.year_range.end) == (2008, 2017)
    assert (config.temp_range.min, config.temp_range.max) == (0, 40)
    assert (config.cell_width, config.cell_height) == (90, 55)
    assert config.day_range == (1, 31)


def test_from_env_overrides(monkeypatch, clear_env):
    monkeypatch.setenv("TEMPMATRIX_DATA_FILE", "/data/hk.csv")
    monkeypatch.setenv("TEMPMATRIX_YEAR_START", "1998")
    monkeypatch.setenv("TEMPMATRIX_YEAR_END", "2007")
    monkeypatch.setenv("TEMPMATRIX_TEMP_MIN", "-10.5")
    monkeypatch.setenv("TEMPMATRIX_TEMP_MAX", "35")

    config = ChartConfig.from_env()
    assert config.data_file == "/data/hk.csv"
    assert (config.year_range.start, config.year_range.end) == (1998, 2007)
    assert (config.temp_range.min, config.temp_range.max) == (-10.5, 35.0)


def test_from_env_inverted_years_raises(monkeypatch, clear_env):
    monkeypatch.setenv("TEMPMATRIX_YEAR_START", "2017")
    monkeypatch.setenv("TEMPMATRIX_YEAR_END", "2008")
    with pytest.raises(ValueError):
        ChartConfig.from_env()


def test_from_env_empty_temp_range_raises(monkeypatch, clear_env):
    monkeypatch.setenv("TEMPMATRIX_TEMP_MIN", "20")
    monkeypatch.setenv("TEMPMATRIX_TEMP_MAX", "20")
    with pytest.raises(ValueError):
        ChartConfig.from_env()


def test_from_env_nan_temp_raises(monkeypatch, clear_env):
    monkeypatch.setenv("TEMPMATRIX_TEMP_MIN", "nan")
    with pytest.raises(ValueError):
        ChartConfig.from_env()


def test_from_env_non_numeric_raises(monkeypatch, clear_env):
    monkeypatch.setenv("TEMPMATRIX_YEAR_START", "last year")
    with pytest.raises(ValueError):
        ChartConfig.from_env()


def test_with_overrides(clear_env):
    config = ChartConfig.from_env().with_overrides(start_year=2012)
    assert (config.year_range.start, config.year_range.end) == (2012, 2017)
    assert config.data_file == "temperature_daily.csv"

    config = config.with_overrides(data_file="x.csv", end_year=2013)
    assert (config.year_range.start, config.year_range.end) == (2012, 2013)
    assert config.data_file == "x.csv"


def test_with_overrides_invalid_range_raises(clear_env):
    with pytest.raises(ValueError):
        ChartConfig().with_overrides(start_year=2020)
