import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator


class DailyRecord(BaseModel):
    """One day of parsed temperature data."""

    date: datetime.date
    max_temperature: float
    min_temperature: float
    year: int
    # 0-based, 0 = January.
    month: int = Field(..., ge=0, le=11)
    day: int = Field(..., ge=1, le=31)

    model_config = ConfigDict(frozen=True)


class MonthlySummary(BaseModel):
    """Temperature statistics for a single (year, month) cell of the matrix."""

    year: int
    month: int = Field(..., ge=0, le=11)
    month_name: str
    max_temp: float
    min_temp: float
    avg_max: float
    avg_min: float
    # Ordered ascending by day.
    daily_records: tuple[DailyRecord, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)


class YearRange(BaseModel):
    """Inclusive range of years to display."""

    start: int
    end: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> "YearRange":
        if self.start > self.end:
            raise ValueError(f"start year {self.start} is after end year {self.end}")
        return self


class TempRange(BaseModel):
    """Temperature domain (in °C) used for the color scale and chart axes."""

    min: float
    max: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> "TempRange":
        # Also rejects NaN, which compares false to everything.
        if not self.min < self.max:
            raise ValueError(
                f"min temperature {self.min} must be below max temperature {self.max}"
            )
        return self
