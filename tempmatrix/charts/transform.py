from typing import Iterable, Sequence

import pandas as pd

from tempmatrix import models
from tempmatrix.base import dates


# Columns of the long matrix frame consumed by the Altair chart.
MATRIX_COLUMNS = [
    "year",
    "month",
    "month_name",
    "date_label",
    "day",
    "max_temperature",
    "min_temperature",
    "max_temp",
    "min_temp",
    "avg_max",
    "avg_min",
    "cell_anchor",
]


def matrix_frame(
    summaries: Iterable[models.MonthlySummary], years: Sequence[int] = ()
) -> pd.DataFrame:
    """Flattens monthly summaries into one row per daily record.

    Every row carries the statistics of its (year, month) cell, so a single
    data source can feed both the cell rectangles and the daily line charts.
    The first row of each cell has cell_anchor=True; the cell rectangles
    are drawn from those rows only.

    If years is given, every month missing from the data gets one padding
    row (in the first year, without temperatures and not an anchor), so the
    chart still shows all twelve month rows.
    """
    rows = []
    for s in summaries:
        label = dates.year_month_label(s.year, s.month)
        for i, r in enumerate(s.daily_records):
            rows.append(
                {
                    "year": s.year,
                    "month": s.month,
                    "month_name": s.month_name,
                    "date_label": label,
                    "day": r.day,
                    "max_temperature": r.max_temperature,
                    "min_temperature": r.min_temperature,
                    "max_temp": s.max_temp,
                    "min_temp": s.min_temp,
                    "avg_max": s.avg_max,
                    "avg_min": s.avg_min,
                    "cell_anchor": i == 0,
                }
            )
    if years:
        present = {r["month_name"] for r in rows}
        for month, name in enumerate(dates.MONTH_NAMES):
            if name not in present:
                rows.append(
                    {
                        "year": years[0],
                        "month": month,
                        "month_name": name,
                        "date_label": dates.year_month_label(years[0], month),
                        "cell_anchor": False,
                    }
                )
    return pd.DataFrame(rows, columns=MATRIX_COLUMNS)
