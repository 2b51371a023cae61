import math

import numpy as np
import pytest
from coloraide import Color

from chromascale.colors import parse_color, to_hex
from chromascale.easing import cosine, ease_in, ease_out, smootherstep, smoothstep
from chromascale.errors import InvalidArgument
from chromascale.interpolate import (
    ACHROMATIC_EPS,
    angle,
    eased,
    lerp,
    oklab,
    oklch,
    rgb,
    samples,
)
from chromascale.oklab import oklab_to_srgb, srgb_to_oklab, srgb_to_oklch

PAIRS = [
    ((255, 0, 0), (0, 0, 255)),
    ((165, 42, 42), (70, 130, 180)),
    ((0, 0, 0), (255, 255, 255)),
    ((12, 34, 250), (250, 240, 5)),
    ((128, 128, 128), (0, 255, 0)),
    ((1, 2, 3), (254, 253, 252)),
]


def to_u8(color):
    srgb = color.convert("srgb").fit(method="clip")
    return tuple(round(c * 255.0) for c in srgb.coords())


def test_lerp_numbers_and_extrapolation():
    i = lerp(0, 10)
    assert i(0.25) == 2.5
    assert i(0) == 0
    assert i(1.5) == 15.0
    assert i(-0.5) == -5.0


def test_lerp_preserves_composite_shape():
    assert lerp((0, 0), (10, 20))(0.5) == (5.0, 10.0)
    assert lerp([0, 0, 0], [2, 4, 6])(0.5) == [1.0, 2.0, 3.0]
    assert lerp(((0, 1), [2]), ((10, 11), [12]))(0.5) == ((5.0, 6.0), [7.0])


def test_lerp_numpy_arrays():
    a = np.array([0, 10, 20])
    b = np.array([10, 20, 40])
    assert np.allclose(lerp(a, b)(0.5), [5.0, 15.0, 30.0])


@pytest.mark.parametrize(
    "a, b",
    [
        ((0, 0), (1, 2, 3)),
        ([0], [1, 2]),
        ((0, 0), [1, 1]),
        ("a", "b"),
        ((0, "x"), (1, "y")),
        (True, False),
        (np.zeros(2), np.zeros(3)),
    ],
)
def test_lerp_rejects_mismatched_or_non_numeric(a, b):
    with pytest.raises(InvalidArgument):
        lerp(a, b)


def test_rgb_rounds_half_away_from_zero():
    assert rgb((255, 0, 0), (0, 0, 255))(0.5) == (128, 0, 128)
    # 1 + (0 - 1) * 0.5 == 0.5 rounds up, not to even
    assert rgb((1, 1, 1), (0, 0, 0))(0.5) == (1, 1, 1)


def test_rgb_clamps_extrapolation():
    i = rgb((0, 128, 255), (255, 128, 0))
    assert i(-1.0) == (0, 128, 255)
    assert i(2.0) == (255, 128, 0)


def test_rgb_accepts_css_strings():
    i = rgb("brown", "#4682b4")
    assert i(0.0) == (165, 42, 42)
    assert i(1.0) == (70, 130, 180)


def test_parse_color_and_hex():
    assert parse_color("steelblue") == (70, 130, 180)
    assert parse_color(" #F00 ") == (255, 0, 0)
    assert to_hex((70, 130, 180)) == "#4682b4"
    with pytest.raises(InvalidArgument):
        parse_color("not-a-colour")
    with pytest.raises(InvalidArgument):
        rgb((1, 2), (3, 4))


def test_oklab_matches_coloraide():
    for rgb8 in [(255, 0, 0), (70, 130, 180), (12, 34, 250), (128, 128, 128), (0, 0, 0)]:
        ours = srgb_to_oklab(rgb8)
        ref = Color("srgb", [c / 255.0 for c in rgb8]).convert("oklab").coords()
        assert np.allclose(ours, ref, atol=1e-4)


def test_oklab_reference_red():
    assert np.allclose(srgb_to_oklab((255, 0, 0)), [0.627955, 0.224863, 0.125846], atol=1e-5)


def test_oklab_round_trip_every_grey():
    for v in range(256):
        assert oklab_to_srgb(srgb_to_oklab((v, v, v))) == (v, v, v)


@pytest.mark.parametrize("c0, c1", PAIRS)
def test_color_space_endpoints_exact(c0, c1):
    for interp in (oklab, oklch):
        i = interp(c0, c1)
        assert i(0.0) == c0
        assert i(1.0) == c1


def test_oklab_midpoint_close_to_coloraide():
    ref = Color.interpolate([Color("srgb", [1, 0, 0]), Color("srgb", [0, 0, 1])], space="oklab")
    ours = oklab((255, 0, 0), (0, 0, 255))(0.5)
    assert all(abs(x - y) <= 1 for x, y in zip(ours, to_u8(ref(0.5))))


def test_oklch_midpoint_close_to_coloraide():
    ref = Color.interpolate(
        [Color("srgb", [1, 0, 0]), Color("srgb", [0, 0, 1])], space="oklch", hue="shorter"
    )
    ours = oklch((255, 0, 0), (0, 0, 255))(0.5)
    assert all(abs(x - y) <= 1 for x, y in zip(ours, to_u8(ref(0.5))))


def test_black_borrows_hue_of_other_endpoint():
    # black has zero chroma: the ramp stays on red's hue and only darkens
    assert oklch((0, 0, 0), (255, 0, 0))(0.5) == (99, 0, 0)
    assert oklch((255, 0, 0), (0, 0, 0))(0.5) == (99, 0, 0)
    assert oklab((0, 0, 0), (255, 0, 0))(0.5) == (99, 0, 0)


def test_every_grey_is_achromatic():
    for v in range(256):
        assert srgb_to_oklch((v, v, v))[1] < ACHROMATIC_EPS
    assert np.allclose(srgb_to_oklab((255, 255, 255)), [1.0, 0.0, 0.0], atol=1e-12)


@pytest.mark.parametrize("grey", [(255, 255, 255), (128, 128, 128), (17, 17, 17)])
@pytest.mark.parametrize("color", [(255, 0, 0), (0, 0, 255), (70, 130, 180)])
def test_grey_borrows_hue_of_other_endpoint(grey, color):
    # from a grey, OKLCH keeps the colour's hue, so it follows the OKLab line
    for c0, c1 in [(grey, color), (color, grey)]:
        lch, lab = oklch(c0, c1), oklab(c0, c1)
        for t in (0.25, 0.5, 0.75):
            assert all(abs(x - y) <= 1 for x, y in zip(lch(t), lab(t)))


def test_white_to_red_stays_pink():
    mid = oklch((255, 255, 255), (255, 0, 0))(0.5)
    h_red = srgb_to_oklch((255, 0, 0))[2]
    assert abs(srgb_to_oklch(mid)[2] - h_red) < 0.2


def test_both_achromatic():
    assert oklch((0, 0, 0), (0, 0, 0))(0.5) == (0, 0, 0)
    assert oklch((255, 255, 255), (0, 0, 0))(0.5) == oklab((255, 255, 255), (0, 0, 0))(0.5)


def test_angle_takes_shortest_path():
    rng = np.random.default_rng(7)
    for h0, h1 in rng.uniform(-math.pi, math.pi, size=(200, 2)):
        i = angle(h0, h1)
        delta = i(1.0) - i(0.0)
        assert abs(delta) <= math.pi + 1e-12
        assert math.isclose(math.cos(i(1.0)), math.cos(h1), abs_tol=1e-9)
        assert math.isclose(math.sin(i(1.0)), math.sin(h1), abs_tol=1e-9)


def test_angle_wraps_across_zero():
    i = angle(math.radians(350), math.radians(10))
    assert math.isclose(i(0.5), math.radians(360), abs_tol=1e-12)


def test_oklch_hue_never_goes_long_way_round():
    h_red = srgb_to_oklch((255, 0, 0))[2]
    h_blue = srgb_to_oklch((0, 0, 255))[2]
    i = oklch((255, 0, 0), (0, 0, 255))
    for t in np.linspace(0.05, 0.95, 10):
        h = srgb_to_oklch(i(float(t)))[2]
        # red ≈ 29°, blue ≈ -96°: the short way passes through magenta, not green
        assert h_blue - 0.1 <= h <= h_red + 0.1


def test_smoothstep_values():
    assert smoothstep(0.0) == 0.0
    assert smoothstep(1.0) == 1.0
    assert smoothstep(0.5) == 0.5
    assert smoothstep(0.25) == pytest.approx(0.15625)
    assert smoothstep(-3.0) == 0.0
    assert smoothstep(3.0) == 1.0
    assert smoothstep(5.0, 0.0, 10.0) == 0.5


def test_smootherstep_values():
    assert smootherstep(0.0) == 0.0
    assert smootherstep(1.0) == 1.0
    assert smootherstep(0.5) == 0.5
    assert smootherstep(0.25) == pytest.approx(0.103515625)
    assert smootherstep(15.0, 10.0, 20.0) == 0.5


def test_easing_rejects_equal_edges():
    with pytest.raises(InvalidArgument):
        smoothstep(0.5, 1.0, 1.0)
    with pytest.raises(InvalidArgument):
        smootherstep(0.5, 2.0, 2.0)


def test_other_easings_fix_endpoints():
    for fn in (cosine, ease_in(), ease_out(2.0)):
        assert fn(0.0) == pytest.approx(0.0)
        assert fn(1.0) == pytest.approx(1.0)
    assert ease_in(2.0)(0.5) == pytest.approx(0.25)
    assert ease_out(2.0)(0.5) == pytest.approx(0.75)


def test_eased_composes_easing_before_interpolation():
    i = eased(lerp, smoothstep)(0, 10)
    assert i(0.0) == 0.0
    assert i(0.5) == 5.0
    assert i(0.25) == pytest.approx(1.5625)
    c = eased(rgb, smootherstep)((255, 0, 0), (0, 0, 255))
    assert c(0.0) == (255, 0, 0)
    assert c(1.0) == (0, 0, 255)


def test_samples():
    assert samples(lerp(0, 1), 5) == [0.0, 0.25, 0.5, 0.75, 1.0]
    ramp = samples(oklab("#005457", "#fa7a76"), 7)
    assert ramp[0] == (0, 84, 87)
    assert ramp[-1] == (250, 122, 118)
    with pytest.raises(InvalidArgument):
        samples(lerp(0, 1), 1)
