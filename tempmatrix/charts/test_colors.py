import altair as alt
import pytest

from .colors import (
    COLORS_YLORRD,
    ColorDomain,
    build_color_domain,
    _hex_to_rgb,
    _rgb_to_hex,
)


def test_endpoints_map_to_first_and_last_color():
    color = build_color_domain(0, 40)
    assert color(0) == COLORS_YLORRD[0]
    assert color(40) == COLORS_YLORRD[-1]


def test_clamps_above_domain():
    color = build_color_domain(0, 40)
    assert color(50) == color(40)


def test_clamps_below_domain():
    color = build_color_domain(0, 40)
    assert color(-10) == color(0)


def test_stops_hit_palette_colors():
    # 9 colors over [0, 40] puts a palette color every 5 degrees.
    color = build_color_domain(0, 40)
    assert color(5) == COLORS_YLORRD[1]
    assert color(20) == COLORS_YLORRD[4]


def test_interpolates_between_stops():
    color = ColorDomain(0, 1, colors=["#000000", "#ffffff"])
    assert color(0.5) == "#808080"
    assert color(0.25) == "#404040"


def test_monotone_gets_darker():
    color = build_color_domain(0, 40)
    greens = [_hex_to_rgb(color(t))[1] for t in range(0, 41, 5)]
    assert greens == sorted(greens, reverse=True)


def test_pure():
    color = build_color_domain(0, 40)
    assert color(17.3) == color(17.3) == build_color_domain(0, 40)(17.3)


def test_invalid_domain_raises():
    with pytest.raises(ValueError):
        build_color_domain(40, 0)
    with pytest.raises(ValueError):
        build_color_domain(10, 10)


def test_nan_raises():
    with pytest.raises(ValueError):
        build_color_domain(0, 40)(float("nan"))


def test_too_few_colors_raises():
    with pytest.raises(ValueError):
        ColorDomain(0, 1, colors=["#000000"])


def test_scale_matches_domain():
    cd = ColorDomain(0, 40)
    scale = cd.scale()
    assert isinstance(scale, alt.Scale)
    d = scale.to_dict()
    assert d["domain"][0] == 0 and d["domain"][-1] == 40
    assert d["range"] == COLORS_YLORRD
    assert d["clamp"] is True
    assert cd.domain == [0.0, 40.0]


def test_hex_roundtrip():
    assert _rgb_to_hex(_hex_to_rgb("#fd8d3c")) == "#fd8d3c"


def test_hex_invalid_raises():
    with pytest.raises(ValueError):
        _hex_to_rgb("fd8d3c")


def test_str_representation():
    s = str(ColorDomain(0, 40))
    assert "ColorDomain" in s
    assert "#ffffcc" in s
