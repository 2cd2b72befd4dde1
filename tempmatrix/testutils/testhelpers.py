from typing import Any
import pandas as pd
import unittest


class PandasTestCase(unittest.TestCase):
    def assertSeriesValuesEqual(self, series: pd.Series, expected_values: list[Any]):
        """Check only the values of a Series (ignore index, dtype, name)."""
        self.assertEqual(series.tolist(), expected_values)

    def assertColumnNames(self, df: pd.DataFrame, expected_names):
        self.assertEqual(df.columns.to_list(), expected_names)


def raw_frame(rows: list[tuple[str, str, str]]) -> pd.DataFrame:
    """Builds a raw (all-string) input frame as returned by data.loader.load_csv."""
    return pd.DataFrame(
        rows, columns=["date", "max_temperature", "min_temperature"], dtype=str
    )
