"""File for widely used constants."""

# Input CSV column names.
COL_DATE = "date"
COL_MAX_TEMPERATURE = "max_temperature"
COL_MIN_TEMPERATURE = "min_temperature"

REQUIRED_COLUMNS = [COL_DATE, COL_MAX_TEMPERATURE, COL_MIN_TEMPERATURE]

# Derived date component columns. Months are 0-based (0 = January).
COL_YEAR = "year"
COL_MONTH = "month"
COL_DAY = "day"

# Fixed date format of the input data. Dates are naive calendar dates.
DATE_FORMAT = "%Y-%m-%d"

MONTH_COUNT = 12
