"""Helpers for dealing with environment variables.

All chart parameters have sensible defaults and can be overridden
by TEMPMATRIX_ env vars.
"""

import os
from pydantic import BaseModel, ConfigDict

from tempmatrix import models


class Margin(BaseModel):
    top: int = 50
    right: int = 150
    bottom: int = 50
    left: int = 100

    model_config = ConfigDict(frozen=True)


class ChartConfig(BaseModel):
    data_file: str = "temperature_daily.csv"
    year_range: models.YearRange = models.YearRange(start=2008, end=2017)
    temp_range: models.TempRange = models.TempRange(min=0, max=40)
    day_range: tuple[int, int] = (1, 31)

    # Layout (pixels).
    margin: Margin = Margin()
    cell_width: int = 90
    cell_height: int = 55
    cell_padding: int = 2
    cell_rounding: int = 3
    cell_stroke_width: int = 2
    line_stroke_width: float = 1.5
    legend_height: int = 200

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "ChartConfig":
        defaults = cls()

        data_file = os.getenv("TEMPMATRIX_DATA_FILE") or defaults.data_file
        start = os.getenv("TEMPMATRIX_YEAR_START")
        end = os.getenv("TEMPMATRIX_YEAR_END")
        tmin = os.getenv("TEMPMATRIX_TEMP_MIN")
        tmax = os.getenv("TEMPMATRIX_TEMP_MAX")

        return cls(
            data_file=data_file,
            year_range=models.YearRange(
                start=int(start) if start else defaults.year_range.start,
                end=int(end) if end else defaults.year_range.end,
            ),
            temp_range=models.TempRange(
                min=float(tmin) if tmin else defaults.temp_range.min,
                max=float(tmax) if tmax else defaults.temp_range.max,
            ),
        )

    def with_overrides(
        self,
        data_file: str | None = None,
        start_year: int | None = None,
        end_year: int | None = None,
    ) -> "ChartConfig":
        """Returns a copy of self with the given (non-None) values replaced."""
        update = {}
        if data_file is not None:
            update["data_file"] = data_file
        if start_year is not None or end_year is not None:
            update["year_range"] = models.YearRange(
                start=start_year if start_year is not None else self.year_range.start,
                end=end_year if end_year is not None else self.year_range.end,
            )
        return self.model_copy(update=update)
