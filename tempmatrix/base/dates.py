from . import constants as bc


# Indexed by 0-based month.
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def month_name(month: int) -> str:
    """Returns the English name of the given 0-based month."""
    if not 0 <= month < bc.MONTH_COUNT:
        raise ValueError(f"Invalid month index {month}")
    return MONTH_NAMES[month]


def year_month_label(year: int, month: int) -> str:
    """Returns a "YYYY-MM" label for the given year and 0-based month.

    Example: year_month_label(2015, 0) == "2015-01"
    """
    return f"{year}-{month + 1:02d}"
