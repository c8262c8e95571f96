"""Tests for PQ and adaptive-luminosity brightness curves."""

import numpy as np
import pytest

from alch.colorspace import (
    pq_curve,
    perceptual_quantizer,
    simplified_pq,
    adaptive_gamma,
    adaptive_luminosity,
    inverse_adaptive_luminosity,
    lightness_for_nits,
    nits_for_lightness,
)

MAX_LUMINANCES = [1, 100, 500, 10000]


class TestPerceptualQuantizer:

    @pytest.mark.parametrize("max_luminance", [0.5, 1, 80, 100, 203, 500, 1000, 4000, 10000])
    def test_white_is_exactly_one(self, max_luminance):
        assert perceptual_quantizer(1.0, max_luminance) == 1.0

    def test_default_is_sdr(self):
        assert perceptual_quantizer(0.5) == perceptual_quantizer(0.5, 100)

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_strictly_increasing(self, max_luminance):
        t = np.linspace(0, 1, 501)
        out = perceptual_quantizer(t, max_luminance)
        assert (np.diff(out) > 0).all()

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_output_range(self, max_luminance):
        out = perceptual_quantizer(np.linspace(0, 1, 101), max_luminance)
        assert (out > 0).all()
        assert (out <= 1.0 + 1e-12).all()

    def test_black_is_floored_not_zero(self):
        """t=0 maps to the 0.01 cd/m^2 floor, which is above zero."""
        out = perceptual_quantizer(0.0, 100)
        assert 0 < out < 0.1
        assert out == pytest.approx(pq_curve(0.01) / pq_curve(100.0))

    def test_matches_formula(self):
        m1, m2 = 0.1593017578125, 78.84375
        c1, c2, c3 = 0.8359375, 18.8515625, 18.6875

        def curve(L):
            Lp = (L / 10000.0) ** m1
            return ((c1 + c2 * Lp) / (1 + c3 * Lp)) ** m2

        t, m = 0.37, 600.0
        expected = curve(0.01 + t * (m - 0.01)) / curve(m)
        assert perceptual_quantizer(t, m) == pytest.approx(expected, rel=1e-12)

    def test_pq_curve_peak(self):
        """10000 cd/m^2 is the top of the PQ signal range."""
        assert pq_curve(10000.0) == pytest.approx(1.0)

    def test_array_max_luminance(self):
        m = np.array([100.0, 1000.0])
        out = perceptual_quantizer(np.array([0.5, 0.5]), m)
        assert out[0] == pytest.approx(perceptual_quantizer(0.5, 100.0))
        assert out[1] == pytest.approx(perceptual_quantizer(0.5, 1000.0))


class TestSimplifiedPq:

    def test_power_law(self):
        assert simplified_pq(0.5) == pytest.approx(0.5 ** 0.22)
        assert simplified_pq(0.0) == 0.0
        assert simplified_pq(1.0) == 1.0

    def test_tracks_pq_at_100_nits(self):
        """Close to the real curve at the SDR reference over the upper range."""
        t = np.linspace(0.2, 1, 41)
        np.testing.assert_allclose(simplified_pq(t), perceptual_quantizer(t, 100), atol=0.1)


class TestAdaptiveLuminosity:

    def test_gamma_interpolation(self):
        assert adaptive_gamma(30) == pytest.approx(0.205)
        assert adaptive_gamma(100) == pytest.approx(0.22)

    def test_gamma_clamps_luminance(self):
        assert adaptive_gamma(1e6) == adaptive_gamma(10000)
        assert adaptive_gamma(0.0) == adaptive_gamma(0.01)

    def test_exponent_at_sdr(self):
        """At 100 cd/m^2 the curve is t^(0.125 / 0.22)."""
        assert adaptive_luminosity(0.5, 100) == pytest.approx(0.5 ** (0.125 / 0.22))

    def test_default_is_sdr(self):
        assert adaptive_luminosity(0.3) == adaptive_luminosity(0.3, 100)
        assert inverse_adaptive_luminosity(0.3) == inverse_adaptive_luminosity(0.3, 100)

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_inverse_law(self, max_luminance):
        t = np.linspace(0, 1, 1001)
        back = inverse_adaptive_luminosity(adaptive_luminosity(t, max_luminance), max_luminance)
        np.testing.assert_allclose(back, t, atol=1e-9)

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_inverse_law_scalar(self, max_luminance):
        for t in (0.0, 0.01, 0.25, 0.5, 0.99, 1.0):
            back = inverse_adaptive_luminosity(adaptive_luminosity(t, max_luminance), max_luminance)
            assert back == pytest.approx(t, abs=1e-9)

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_endpoints_fixed(self, max_luminance):
        assert adaptive_luminosity(0.0, max_luminance) == 0.0
        assert adaptive_luminosity(1.0, max_luminance) == 1.0

    def test_monotonic(self):
        t = np.linspace(0, 1, 201)
        assert (np.diff(adaptive_luminosity(t, 100)) > 0).all()

    def test_scalar_returns_float(self):
        assert isinstance(adaptive_luminosity(0.5), float)
        assert isinstance(inverse_adaptive_luminosity(0.5), float)
        assert isinstance(perceptual_quantizer(0.5), float)


class TestNits:

    def test_peak_is_full_lightness(self):
        assert lightness_for_nits(100, 100) == 1.0
        assert lightness_for_nits(0, 100) == 0.0

    def test_above_peak_saturates(self):
        assert lightness_for_nits(400, 100) == 1.0

    def test_uses_adaptive_curve(self):
        assert lightness_for_nits(250, 1000) == pytest.approx(adaptive_luminosity(0.25, 1000))

    @pytest.mark.parametrize("max_luminance", MAX_LUMINANCES)
    def test_round_trip(self, max_luminance):
        for fraction in (0.0, 0.1, 0.5, 0.9, 1.0):
            nits = fraction * max_luminance
            L = lightness_for_nits(nits, max_luminance)
            assert nits_for_lightness(L, max_luminance) == pytest.approx(nits, abs=1e-9 * max_luminance)

    def test_arrays(self):
        nits = np.array([0.0, 50.0, 100.0])
        np.testing.assert_allclose(
            nits_for_lightness(lightness_for_nits(nits)), nits, atol=1e-9,
        )
