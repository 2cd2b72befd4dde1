"""Aggregation of daily temperature records into monthly summaries.

The pipeline is a chain of pure functions:

    parse_records -> select_year_range -> aggregate_monthly

Records are kept in a pandas DataFrame with one row per day; only the
final output is turned into (immutable) MonthlySummary models.
"""

import logging
from typing import Iterable, Iterator, NamedTuple

import numpy as np
import pandas as pd

from tempmatrix import models
from tempmatrix.base import constants as bc
from tempmatrix.base import dates
from tempmatrix.base.errors import ParseError


logger = logging.getLogger(__name__)


class YearSelection(NamedTuple):
    records: pd.DataFrame
    # Distinct years present in records, strictly ascending.
    years: list[int]


def _verify_columns(df: pd.DataFrame, columns: Iterable[str]):
    if not set(columns) <= set(df.columns):
        raise ParseError(
            f"Input does not contain expected columns (want: {list(columns)}, got: {list(df.columns)})"
        )


def _raise_on_invalid(raw: pd.Series, bad: pd.Series, column: str):
    """Raises a ParseError for the first row flagged in bad, if any."""
    if bad.any():
        row = bad.idxmax()
        raise ParseError(
            f"Invalid {column} value",
            row=row,
            column=column,
            value=raw.loc[row],
        )


def _parse_temperature(raw: pd.DataFrame, column: str) -> pd.Series:
    values = pd.to_numeric(raw[column], errors="coerce").astype("float64")
    # Empty strings, "NaN" and "inf" all end up here. Never treat them as 0.
    _raise_on_invalid(raw[column], ~np.isfinite(values), column)
    return values


def parse_records(raw: pd.DataFrame) -> pd.DataFrame:
    """Converts raw CSV rows into typed daily records.

    Args:
        raw: a DataFrame with (at least) the columns "date", "max_temperature"
            and "min_temperature". Other columns are ignored.

    Returns:
        A DataFrame with a fresh RangeIndex and the columns
        date (datetime64, naive), max_temperature, min_temperature (float64),
        year, month (0-based), day.

    Raises:
        ParseError: for the first row with a malformed date or temperature.
            The whole batch is rejected.
    """
    _verify_columns(raw, bc.REQUIRED_COLUMNS)

    # Dates are calendar dates without a time zone, so the date part
    # always matches the input string.
    date = pd.to_datetime(raw[bc.COL_DATE], format=bc.DATE_FORMAT, errors="coerce")
    # to_datetime also accepts unpadded dates like "2015-1-5".
    padded = raw[bc.COL_DATE].astype(str).str.fullmatch(r"\d{4}-\d{2}-\d{2}")
    _raise_on_invalid(raw[bc.COL_DATE], date.isna() | ~padded, bc.COL_DATE)

    max_temp = _parse_temperature(raw, bc.COL_MAX_TEMPERATURE)
    min_temp = _parse_temperature(raw, bc.COL_MIN_TEMPERATURE)

    df = pd.DataFrame(
        {
            bc.COL_DATE: date,
            bc.COL_MAX_TEMPERATURE: max_temp,
            bc.COL_MIN_TEMPERATURE: min_temp,
            bc.COL_YEAR: date.dt.year.astype(int),
            bc.COL_MONTH: date.dt.month.astype(int) - 1,
            bc.COL_DAY: date.dt.day.astype(int),
        }
    ).reset_index(drop=True)

    logger.info("Parsed %d daily records", len(df))
    return df


def select_year_range(
    records: pd.DataFrame, start_year: int, end_year: int
) -> YearSelection:
    """Returns the records with start_year <= year <= end_year and the years present.

    An empty selection is not an error: it yields an empty frame and no years.
    """
    if start_year > end_year:
        raise ValueError(f"start_year {start_year} is after end_year {end_year}")

    selected = records[records[bc.COL_YEAR].between(start_year, end_year)]
    years = sorted(int(y) for y in selected[bc.COL_YEAR].unique())

    logger.info(
        "Selected %d of %d records for %d-%d (%d years with data)",
        len(selected),
        len(records),
        start_year,
        end_year,
        len(years),
    )
    return YearSelection(records=selected, years=years)


def _daily_records(group: pd.DataFrame) -> Iterator[models.DailyRecord]:
    for r in group.to_dict(orient="records"):
        yield models.DailyRecord(
            date=r[bc.COL_DATE].date(),
            max_temperature=float(r[bc.COL_MAX_TEMPERATURE]),
            min_temperature=float(r[bc.COL_MIN_TEMPERATURE]),
            year=int(r[bc.COL_YEAR]),
            month=int(r[bc.COL_MONTH]),
            day=int(r[bc.COL_DAY]),
        )


def _clipped_mean(values: pd.Series) -> float:
    """Returns the mean of values, kept within [min, max] despite float error."""
    return float(np.clip(values.mean(), values.min(), values.max()))


def _summarize(year: int, month: int, group: pd.DataFrame) -> models.MonthlySummary:
    max_temp = group[bc.COL_MAX_TEMPERATURE]
    min_temp = group[bc.COL_MIN_TEMPERATURE]
    return models.MonthlySummary(
        year=year,
        month=month,
        month_name=dates.month_name(month),
        max_temp=float(max_temp.max()),
        min_temp=float(min_temp.min()),
        avg_max=_clipped_mean(max_temp),
        avg_min=_clipped_mean(min_temp),
        daily_records=tuple(_daily_records(group)),
    )


def aggregate_monthly(
    records: pd.DataFrame, years: Iterable[int]
) -> list[models.MonthlySummary]:
    """Computes one MonthlySummary per (year, month) that has records.

    Summaries are ordered by year, then month. Months without records are
    omitted, so the result can have fewer than len(years) * 12 entries.
    Daily records inside each summary are ordered by day; rows with the same
    day keep their input order.
    """
    df = records[records[bc.COL_YEAR].isin(list(years))]
    if df.empty:
        logger.info("No records to aggregate")
        return []

    df = df.sort_values([bc.COL_YEAR, bc.COL_MONTH, bc.COL_DAY], kind="stable")

    summaries = []
    for (year, month), group in df.groupby([bc.COL_YEAR, bc.COL_MONTH], sort=True):
        s = _summarize(int(year), int(month), group)
        logger.debug(
            "%s: %d days, max %.1f, min %.1f, avg max %.2f, avg min %.2f",
            dates.year_month_label(s.year, s.month),
            len(s.daily_records),
            s.max_temp,
            s.min_temp,
            s.avg_max,
            s.avg_min,
        )
        summaries.append(s)

    logger.info("Aggregated %d monthly summaries", len(summaries))
    return summaries


def summaries_by_cell(
    summaries: Iterable[models.MonthlySummary],
) -> dict[tuple[int, int], models.MonthlySummary]:
    """Returns the summaries keyed by their (year, month) matrix cell."""
    return {s.key: s for s in summaries}
