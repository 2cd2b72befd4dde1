"""Loading of the daily temperature CSV file.

This is the only place where the pipeline touches the file system.
"""

import logging
import os

import pandas as pd

from tempmatrix.base.errors import DataLoadError


logger = logging.getLogger(__name__)


def load_csv(path: str | os.PathLike) -> pd.DataFrame:
    """Reads the raw CSV file at path.

    All columns are read as strings; type conversion is done by
    calc.monthly.parse_records. Empty fields are kept as "" so they
    can be reported verbatim.

    Raises:
        DataLoadError: if the file is missing, unreadable, empty or not valid CSV.
    """
    logger.info("Reading temperature data from %s", path)
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as e:
        raise DataLoadError(f"Data file not found: {path}") from e
    except pd.errors.EmptyDataError as e:
        raise DataLoadError(f"Data file is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Data file {path} is not valid CSV: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Cannot read data file {path}: {e}") from e

    logger.info("Read %d rows (columns: %s)", len(df), list(df.columns))
    return df
