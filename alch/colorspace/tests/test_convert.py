"""Tests for record-level conversions and ColorConverter."""

import math

import numpy as np
import pytest

from alch import config
from alch.colorspace import (
    ColorConverter,
    SRGB_POLICY,
    WIDE_GAMUT_POLICY,
    adaptive_luminosity,
    oklab_to_rgb,
    oklch_to_rgb,
    rgb_to_oklab,
    rgb_to_oklch,
)
from alch.types import RGB, Lab, LCh, GamutResult, create_default_color


@pytest.fixture(autouse=True)
def fresh_display_config():
    config._reset_display_config()
    yield
    config._reset_display_config()


@pytest.fixture
def random_rgbs():
    rng = np.random.default_rng(1234)
    return [RGB(*map(float, row)) for row in rng.random((1200, 3))]


class TestOklab:

    def test_round_trip(self, random_rgbs):
        for rgb in random_rgbs:
            result = oklab_to_rgb(rgb_to_oklab(rgb), SRGB_POLICY)
            assert result.in_gamut
            assert result.r == pytest.approx(rgb.r, abs=1e-4)
            assert result.g == pytest.approx(rgb.g, abs=1e-4)
            assert result.b == pytest.approx(rgb.b, abs=1e-4)

    def test_returns_plain_floats(self):
        lab = rgb_to_oklab(RGB(0.2, 0.4, 0.6))
        assert type(lab.L) is float
        result = oklab_to_rgb(lab, SRGB_POLICY)
        assert type(result.r) is float
        assert type(result.in_gamut) is bool

    def test_white(self):
        lab = rgb_to_oklab(RGB(1.0, 1.0, 1.0))
        assert lab.L == pytest.approx(1.0, abs=1e-6)
        assert lab.a == pytest.approx(0.0, abs=1e-6)
        assert lab.b == pytest.approx(0.0, abs=1e-6)

    def test_out_of_gamut_srgb_clamped(self):
        result = oklab_to_rgb(Lab(1.0, 0.5, 0.0), SRGB_POLICY)
        assert isinstance(result, GamutResult)
        assert result.in_gamut is False
        for channel in (result.r, result.g, result.b):
            assert 0.0 <= channel <= 1.0

    def test_wide_gamut_unclamped(self):
        """Wide policy returns raw channels and uses the relaxed window."""
        lab = Lab(1.0, 0.5, 0.0)
        wide = oklab_to_rgb(lab, WIDE_GAMUT_POLICY)
        assert wide.r > 1.0
        assert wide.g < 0.0
        assert wide.in_gamut is False

    def test_slightly_outside_srgb_fits_wide(self):
        lch = LCh(0.7, 0.2, 30.0)
        srgb = oklch_to_rgb(lch, SRGB_POLICY)
        wide = oklch_to_rgb(lch, WIDE_GAMUT_POLICY)
        assert not srgb.in_gamut
        assert wide.in_gamut
        assert max(wide.r, wide.g, wide.b) > 1.0 or min(wide.r, wide.g, wide.b) < 0.0


class TestOklch:

    def test_round_trip(self, random_rgbs):
        for rgb in random_rgbs:
            result = oklch_to_rgb(rgb_to_oklch(rgb), SRGB_POLICY)
            assert result.r == pytest.approx(rgb.r, abs=1e-4)
            assert result.g == pytest.approx(rgb.g, abs=1e-4)
            assert result.b == pytest.approx(rgb.b, abs=1e-4)

    def test_hue_range(self, random_rgbs):
        for rgb in random_rgbs:
            lch = rgb_to_oklch(rgb)
            assert 0.0 <= lch.h < 360.0
            assert lch.C >= 0.0

    def test_achromatic_gray(self):
        result = oklch_to_rgb(LCh(0.5, 0.0, 0.0), SRGB_POLICY)
        assert result.in_gamut
        assert result.r == pytest.approx(result.g, abs=1e-6)
        assert result.g == pytest.approx(result.b, abs=1e-6)

    def test_achromatic_hue_is_ignored(self):
        a = oklch_to_rgb(LCh(0.5, 0.0, 0.0), SRGB_POLICY)
        b = oklch_to_rgb(LCh(0.5, 0.0, 217.0), SRGB_POLICY)
        assert a == b

    @pytest.mark.parametrize("value", [0.0, 0.18, 0.5, 1.0])
    def test_gray_has_defined_hue(self, value):
        lch = rgb_to_oklch(RGB(value, value, value))
        assert not math.isnan(lch.h)
        assert lch.h == 0.0

    def test_known_red(self):
        lch = rgb_to_oklch(RGB(1.0, 0.0, 0.0))
        assert lch.L == pytest.approx(0.62796, abs=1e-4)
        assert lch.C == pytest.approx(0.25768, abs=1e-4)
        assert lch.h == pytest.approx(29.2339, abs=1e-2)


class TestDefaultPolicy:

    def test_unconfigured_is_srgb(self):
        result = oklab_to_rgb(Lab(1.0, 0.5, 0.0))
        assert result.r == 1.0
        assert config.get_display_config().wide_gamut is False

    def test_configured_wide(self):
        config.configure_display(True)
        result = oklab_to_rgb(Lab(1.0, 0.5, 0.0))
        assert result.r > 1.0


class TestColorConverter:

    def test_bound_policy(self):
        converter = ColorConverter(WIDE_GAMUT_POLICY)
        assert converter.policy is WIDE_GAMUT_POLICY
        assert converter.oklab_to_rgb(Lab(1.0, 0.5, 0.0)).r > 1.0

    def test_defaults_to_display_config(self):
        config.configure_display(True)
        assert ColorConverter().policy is WIDE_GAMUT_POLICY

    def test_explicit_policy_ignores_display(self):
        config.configure_display(True)
        assert ColorConverter(SRGB_POLICY).policy is SRGB_POLICY

    def test_color_to_hex(self):
        converter = ColorConverter(SRGB_POLICY)
        color = create_default_color(100, 1.0, 0.0, 0.0, name="White")
        assert converter.color_to_hex(color) == "#ffffff"
        assert converter.oklch_to_hex(LCh(0.0, 0.0, 0.0)) == "#000000"

    def test_color_to_rgb_uses_lch(self):
        converter = ColorConverter(SRGB_POLICY)
        color = create_default_color(100, 0.6, 0.1, 200.0, name="Teal")
        assert converter.color_to_rgb(color) == converter.oklch_to_rgb(LCh(0.6, 0.1, 200.0))

    def test_color_at_nits(self):
        converter = ColorConverter(SRGB_POLICY)
        color = create_default_color(50, 0.9, 0.05, 120.0, name="Dim")
        expected_L = adaptive_luminosity(0.5, 100)
        assert converter.color_at_nits(color, 100) == converter.oklch_to_rgb(LCh(expected_L, 0.05, 120.0))

    def test_repr(self):
        assert repr(ColorConverter(SRGB_POLICY)) == "ColorConverter(policy='srgb')"
