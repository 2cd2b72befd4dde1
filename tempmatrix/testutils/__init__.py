from .testhelpers import PandasTestCase, raw_frame

__all__ = [
    "PandasTestCase",
    "raw_frame",
]
