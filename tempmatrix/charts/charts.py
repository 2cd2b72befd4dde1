from typing import Sequence

import altair as alt

from tempmatrix import models
from tempmatrix.base import constants as bc
from tempmatrix.base import dates
from tempmatrix.env import ChartConfig

from . import colors
from . import transform as tf
from .display import DisplayMode


# Name of the Vega-Lite parameter bound to the max/min radio buttons.
MODE_PARAM = "display_mode"

# Short names for the color palettes, for concise code.
_C = colors.COLORS_TABLEAU20
_G = colors.COLORS_COMMON_GRAYS


def matrix_dimensions(year_count: int, config: ChartConfig) -> tuple[int, int]:
    """Returns the (width, height) in pixels of a matrix with year_count columns.

    Only used for reporting; the rendered chart is sized per cell by Vega-Lite.
    """
    m = config.margin
    width = year_count * config.cell_width + m.left + m.right
    height = bc.MONTH_COUNT * config.cell_height + m.top + m.bottom
    return width, height


def _cell_value_expr() -> str:
    """Vega expression selecting avg_max or avg_min based on the display mode."""
    return (
        f"{MODE_PARAM} == '{DisplayMode.MAXIMUM.value}'"
        f" ? datum.{DisplayMode.MAXIMUM.field} : datum.{DisplayMode.MINIMUM.field}"
    )


def _mode_param(mode: DisplayMode) -> alt.Parameter:
    modes = list(DisplayMode)
    return alt.param(
        name=MODE_PARAM,
        value=mode.value,
        bind=alt.binding_radio(
            options=[m.value for m in modes],
            labels=[m.label for m in modes],
            name=" ",
        ),
    )


def monthly_matrix_chart(
    summaries: Sequence[models.MonthlySummary],
    years: Sequence[int],
    config: ChartConfig | None = None,
    mode: DisplayMode = DisplayMode.MAXIMUM,
    color_domain: colors.ColorDomain | None = None,
) -> alt.FacetChart:
    """Returns the year x month matrix chart of monthly temperatures.

    Each cell is colored by the monthly average of the daily maximum (or
    minimum, depending on mode) temperature and contains two small line charts
    of the daily maximum and minimum temperatures. Years are columns, months
    are rows. Months without data are left empty, but all twelve month rows
    are always shown.

    The chart embeds radio buttons to switch the display mode in the browser;
    mode only sets their initial value.

    Args:
        summaries: monthly summaries, as returned by calc.monthly.aggregate_monthly.
        years: the years to show as columns, in ascending order.
        config: layout and domain configuration. Defaults to ChartConfig().
        mode: the initial display mode.
        color_domain: the color mapping. Defaults to the config's temp_range.
    """
    if config is None:
        config = ChartConfig()
    if color_domain is None:
        color_domain = colors.ColorDomain(config.temp_range.min, config.temp_range.max)

    data = tf.matrix_frame(summaries, years)
    mode_param = _mode_param(mode)

    cells = (
        alt.Chart()
        .transform_filter("datum.cell_anchor")
        .transform_calculate(cell_value=_cell_value_expr())
        # Without x/y encodings, the rect covers the whole facet cell.
        .mark_rect(
            cornerRadius=config.cell_rounding,
            stroke=_G["White"],
            strokeWidth=config.cell_stroke_width,
        )
        .encode(
            color=alt.Color(
                "cell_value:Q",
                scale=color_domain.scale(),
                legend=alt.Legend(title="°C", gradientLength=config.legend_height),
            ),
            tooltip=[
                alt.Tooltip("date_label:N", title="Date"),
                alt.Tooltip("max_temp:Q", title="Max (°C)", format=".1f"),
                alt.Tooltip("min_temp:Q", title="Min (°C)", format=".1f"),
            ],
        )
    )

    x = alt.X(
        "day:Q",
        scale=alt.Scale(domain=list(config.day_range)),
        axis=None,
    )
    y_scale = alt.Scale(domain=[config.temp_range.min, config.temp_range.max])

    def daily_line(column: str, color: str) -> alt.Chart:
        return (
            alt.Chart()
            .mark_line(
                interpolate="monotone",
                color=color,
                strokeWidth=config.line_stroke_width,
                clip=True,
            )
            .encode(
                x=x,
                y=alt.Y(f"{column}:Q", scale=y_scale, axis=None),
            )
        )

    max_line = daily_line(bc.COL_MAX_TEMPERATURE, _C["CoralRed"])
    min_line = daily_line(bc.COL_MIN_TEMPERATURE, _C["SteelBlue"])

    if years:
        title = f"Monthly temperatures {years[0]}-{years[-1]}"
    else:
        title = "Monthly temperatures (no data)"

    layer = alt.layer(cells, max_line, min_line, data=data).properties(
        width=config.cell_width - 2 * config.cell_padding,
        height=config.cell_height - 2 * config.cell_padding,
    )

    return (
        layer.facet(
            column=alt.Column(
                "year:O",
                sort=list(years) or "ascending",
                title=None,
                header=alt.Header(labelFontWeight="bold"),
            ),
            row=alt.Row(
                "month_name:N",
                sort=dates.MONTH_NAMES,
                title=None,
                header=alt.Header(labelAngle=0, labelAlign="right"),
            ),
            spacing=2 * config.cell_padding,
        )
        # Vega-Lite variable params are only allowed at the top level.
        .properties(title=title, params=[mode_param.param])
        .configure_view(stroke=None)
    )
