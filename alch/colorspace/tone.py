"""Perceptual brightness curves.

``perceptual_quantizer`` is the SMPTE ST 2084 (PQ) curve renormalized so
that the display's own peak maps to 1.0. ``adaptive_luminosity`` is a
cheap power-law stand-in for it whose exponent slides with the peak
luminance: around 100 cd/m^2 it lands at t^0.568, and toward dim
displays it approaches t^0.61, between the APCA text and non-text
exponents. The same slider therefore reads evenly for absolute
brightness and for contrast.

All functions accept floats, numpy arrays or torch tensors for ``t``.
"""

from functools import lru_cache

from . import _backend as B
from ._backend import Array
from alch.defaults import (
    ADAPTIVE_EXPONENT_NUMERATOR,
    ADAPTIVE_GAMMA_BASE,
    ADAPTIVE_GAMMA_PIVOT,
    ADAPTIVE_GAMMA_SLOPE,
    ADAPTIVE_GAMMA_SPAN,
    DEFAULT_MAX_LUMINANCE,
    MAX_LUMINANCE,
    MIN_LUMINANCE,
    PQ_C1,
    PQ_C2,
    PQ_C3,
    PQ_M1,
    PQ_M2,
    SIMPLIFIED_PQ_EXPONENT,
)


# === PQ ===

def pq_curve(luminance: Array) -> Array:
    """ST 2084 inverse EOTF: absolute cd/m^2 -> PQ signal."""
    Lp = B.pow(luminance / MAX_LUMINANCE, PQ_M1)
    return B.as_output(B.pow((PQ_C1 + PQ_C2 * Lp) / (1 + PQ_C3 * Lp), PQ_M2), luminance)


@lru_cache(maxsize=64)
def _pq_white(max_luminance: float) -> float:
    return pq_curve(max_luminance)


def perceptual_quantizer(t: Array, max_luminance: Array = DEFAULT_MAX_LUMINANCE) -> Array:
    """PQ curve normalized to the display peak.

    Args:
        t: 0 = black, 1 = full white at ``max_luminance``
        max_luminance: peak cd/m^2 of the range, assumed > 0

    Returns:
        Brightness in [0, 1]; ``t = 1`` maps to exactly 1.0.
    """
    # Lerp from the 0.01 floor rather than 0 to keep the curve finite.
    # Written as a two-sided lerp so t=1 reproduces max_luminance exactly.
    L = (1 - t) * MIN_LUMINANCE + t * max_luminance

    if B.is_scalar(max_luminance):
        white = _pq_white(float(max_luminance))
    else:
        white = pq_curve(max_luminance)

    return pq_curve(L) / white


def simplified_pq(t: Array) -> Array:
    """PQ approximation valid at 100 cd/m^2 only."""
    return B.as_output(B.pow(t, SIMPLIFIED_PQ_EXPONENT), t)


# === Adaptive luminosity ===

def adaptive_gamma(max_luminance: Array = DEFAULT_MAX_LUMINANCE) -> Array:
    """Shape parameter shared by the forward and inverse curve."""
    clamped = B.clip(max_luminance, MIN_LUMINANCE, MAX_LUMINANCE)
    t_interp = (clamped - ADAPTIVE_GAMMA_PIVOT) / ADAPTIVE_GAMMA_SPAN
    return B.as_output(ADAPTIVE_GAMMA_BASE + t_interp * ADAPTIVE_GAMMA_SLOPE, max_luminance)


def adaptive_luminosity(t: Array, max_luminance: Array = DEFAULT_MAX_LUMINANCE) -> Array:
    """Brightness t in [0, 1] -> perceptual lightness."""
    gamma = adaptive_gamma(max_luminance)
    return B.as_output(B.pow(t, ADAPTIVE_EXPONENT_NUMERATOR / gamma), t)


def inverse_adaptive_luminosity(L: Array, max_luminance: Array = DEFAULT_MAX_LUMINANCE) -> Array:
    """Perceptual lightness -> brightness t. Exact inverse of ``adaptive_luminosity``."""
    gamma = adaptive_gamma(max_luminance)
    return B.as_output(B.pow(L, gamma / ADAPTIVE_EXPONENT_NUMERATOR), L)


# === Nits ===

def lightness_for_nits(nits: Array, max_luminance: float = DEFAULT_MAX_LUMINANCE) -> Array:
    """Target OKLCH lightness for an absolute brightness on a given display.

    Brightness above the display peak saturates at lightness 1.
    """
    t = B.clip(nits / max_luminance, 0.0, 1.0)
    return B.as_output(adaptive_luminosity(t, max_luminance), nits)


def nits_for_lightness(lightness: Array, max_luminance: float = DEFAULT_MAX_LUMINANCE) -> Array:
    """Absolute brightness in cd/m^2 that ``lightness_for_nits`` maps to ``lightness``."""
    t = inverse_adaptive_luminosity(B.clip(lightness, 0.0, 1.0), max_luminance)
    return B.as_output(t * max_luminance, lightness)
