"""Renders the monthly temperature matrix chart to a standalone HTML file.

Usage:

    python -m tempmatrix.app --data temperature_daily.csv --output chart.html
"""

import argparse
import logging
import sys

import altair as alt

from tempmatrix.base import logging_config as _  # configure logging

from tempmatrix.base.errors import DataLoadError, ParseError
from tempmatrix.calc import monthly
from tempmatrix.charts import charts
from tempmatrix.charts.display import DisplayController, DisplayMode
from tempmatrix.data import loader
from tempmatrix.env import ChartConfig


logger = logging.getLogger("app")


def build_chart(config: ChartConfig, controller: DisplayController) -> alt.FacetChart:
    """Runs the full load -> parse -> select -> aggregate -> render sequence.

    Raises:
        DataLoadError: if the data file cannot be read.
        ParseError: if the data file contains a malformed row.
    """
    raw = loader.load_csv(config.data_file)
    records = monthly.parse_records(raw)
    selection = monthly.select_year_range(
        records, config.year_range.start, config.year_range.end
    )
    summaries = monthly.aggregate_monthly(selection.records, selection.years)

    width, height = charts.matrix_dimensions(len(selection.years), config)
    logger.info(
        "Rendering %d cells for %d years (%dx%d px), %s",
        len(summaries),
        len(selection.years),
        width,
        height,
        controller.mode.label,
    )
    return charts.monthly_matrix_chart(
        summaries, selection.years, config, mode=controller.mode
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tempmatrix",
        description="Render a year x month matrix of daily temperatures.",
    )
    p.add_argument("--data", help="input CSV (default: $TEMPMATRIX_DATA_FILE)")
    p.add_argument("--output", default="temperature_matrix.html")
    p.add_argument("--start-year", type=int, default=None)
    p.add_argument("--end-year", type=int, default=None)
    p.add_argument(
        "--mode",
        choices=[m.value for m in DisplayMode],
        default=DisplayMode.MAXIMUM.value,
        help="initially shown statistic",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ChartConfig.from_env().with_overrides(
            data_file=args.data,
            start_year=args.start_year,
            end_year=args.end_year,
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    controller = DisplayController()
    if DisplayMode(args.mode) is not controller.mode:
        controller.toggle()

    try:
        chart = build_chart(config, controller)
    except (DataLoadError, ParseError) as e:
        logger.error("Cannot render chart: %s", e)
        return 1

    try:
        chart.save(args.output)
    except OSError as e:
        logger.error("Cannot write chart to %s: %s", args.output, e)
        return 1
    logger.info("Wrote chart to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
