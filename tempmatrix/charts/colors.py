from typing import Callable, Sequence

import altair as alt
import numpy as np


# Yellow-orange-red sequential scheme (9 classes) from
# https://vega.github.io/vega/docs/schemes/#yelloworangered
COLORS_YLORRD = [
    "#ffffcc",
    "#ffeda0",
    "#fed976",
    "#feb24c",
    "#fd8d3c",
    "#fc4e2a",
    "#e31a1c",
    "#bd0026",
    "#800026",
]

# A few tableau20 colors, see
# https://vega.github.io/vega/docs/schemes/
COLORS_TABLEAU20 = {
    "SteelBlue": "#4c78a8",
    "CoralRed": "#e45756",
}

COLORS_COMMON_GRAYS = {
    "White": "#ffffff",
}


def _hex_to_rgb(color: str) -> tuple[float, float, float]:
    """Convert a #rrggbb hex color to (r, g, b) tuple in [0.0, 1.0]."""
    if len(color) != 7 or not color.startswith("#"):
        raise ValueError(f"Not a #rrggbb color: {color!r}")
    r = int(color[1:3], 16) / 255.0
    g = int(color[3:5], 16) / 255.0
    b = int(color[5:7], 16) / 255.0
    return (r, g, b)


def _rgb_to_hex(rgb: Sequence[float]) -> str:
    """Convert an (r, g, b) tuple in [0.0, 1.0] to a #rrggbb hex color."""
    return "#{:02x}{:02x}{:02x}".format(
        *(int(round(float(c) * 255)) for c in rgb[:3])
    )


class ColorDomain:
    """Maps temperatures in [min_value, max_value] onto a sequential palette.

    The palette colors are spread evenly across the domain and interpolated
    linearly in RGB space. Values outside the domain are clamped to the
    first or last color.

    The same mapping is available as an Altair scale via scale(), so colors
    computed in Python match the colors in the rendered chart.
    """

    def __init__(
        self,
        min_value: float,
        max_value: float,
        colors: Sequence[str] = COLORS_YLORRD,
    ):
        if not min_value < max_value:
            raise ValueError(
                f"Color domain needs min_value < max_value (got {min_value}, {max_value})"
            )
        if len(colors) < 2:
            raise ValueError("Color domain needs at least two colors")
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self._colors = list(colors)
        self._stops = np.linspace(self.min_value, self.max_value, len(self._colors))
        self._rgb = np.array([_hex_to_rgb(c) for c in self._colors])

    def __call__(self, value: float) -> str:
        if np.isnan(value):
            raise ValueError("Cannot map NaN to a color")
        # np.interp clamps to the first/last value outside of the domain.
        rgb = [np.interp(value, self._stops, self._rgb[:, i]) for i in range(3)]
        return _rgb_to_hex(rgb)

    @property
    def domain(self) -> list[float]:
        return [self.min_value, self.max_value]

    def scale(self) -> alt.Scale:
        """Returns an equivalent (clamped, piecewise linear) Altair color scale."""
        return alt.Scale(
            domain=[float(s) for s in self._stops],
            range=list(self._colors),
            interpolate="rgb",
            clamp=True,
        )

    def __str__(self) -> str:
        return f"{self.__class__.__name__}([{self.min_value}, {self.max_value}], {self._colors})"


def build_color_domain(min_value: float, max_value: float) -> Callable[[float], str]:
    """Returns a function mapping a temperature to a cold-to-hot #rrggbb color."""
    return ColorDomain(min_value, max_value)
