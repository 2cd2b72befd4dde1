from .models import *

__all__ = [
    "DailyRecord",
    "MonthlySummary",
    "TempRange",
    "YearRange",
]
