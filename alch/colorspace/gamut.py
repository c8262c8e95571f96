"""Gamut policies and gamut checks for OKLCH values.

Not all (L, C, H) combinations are displayable. Whether a color counts
as in-gamut depends on the active display:

- sRGB: every gamma-encoded channel must land in [0, 1], and results
  are clamped before display.
- wide gamut: a relaxed window of [-0.1, 1.4] stands in for P3 reach
  beyond the sRGB primaries. Results are passed through unclamped since
  the display can show them.
"""

from dataclasses import dataclass
from typing import Literal

from . import _backend as B
from ._backend import Array
from .oklch import oklch_to_srgb, oklab_to_srgb, oklch_to_oklab, srgb_to_oklch
from alch.defaults import SRGB_GAMUT_RANGE, WIDE_GAMUT_RANGE


@dataclass(frozen=True)
class GamutPolicy:
    """Tolerance window on gamma-encoded channels plus output clamping."""
    name: str
    lower: float
    upper: float
    clamp_output: bool


SRGB_POLICY = GamutPolicy("srgb", *SRGB_GAMUT_RANGE, clamp_output=True)
WIDE_GAMUT_POLICY = GamutPolicy("wide", *WIDE_GAMUT_RANGE, clamp_output=False)


def policy_for(wide_gamut: bool) -> GamutPolicy:
    """Pick the policy for a display capability flag."""
    return WIDE_GAMUT_POLICY if wide_gamut else SRGB_POLICY


# === Gamut checking ===

def channels_in_gamut(
    r: Array,
    g: Array,
    b: Array,
    policy: GamutPolicy = SRGB_POLICY,
    tolerance: float = 0.0,
) -> Array:
    """Check unclamped gamma-encoded channels against the policy window."""
    lo = policy.lower - tolerance
    hi = policy.upper + tolerance
    return (
        (r >= lo) & (r <= hi)
        & (g >= lo) & (g <= hi)
        & (b >= lo) & (b <= hi)
    )


def apply_gamut_policy(
    r: Array,
    g: Array,
    b: Array,
    policy: GamutPolicy = SRGB_POLICY,
) -> tuple[Array, Array, Array, Array]:
    """Classify unclamped channels, then clamp them if the policy says so.

    Returns:
        (r, g, b, in_gamut); in_gamut always reflects the unclamped input.
    """
    in_gamut = channels_in_gamut(r, g, b, policy)
    if policy.clamp_output:
        r, g, b = B.clip(r, 0.0, 1.0), B.clip(g, 0.0, 1.0), B.clip(b, 0.0, 1.0)
    return r, g, b, in_gamut


def is_in_gamut(
    L: Array,
    C: Array,
    H: Array,
    policy: GamutPolicy = SRGB_POLICY,
    tolerance: float = 0.0,
) -> Array:
    """Check if OKLCH values are displayable under ``policy``."""
    r, g, b = oklab_to_srgb(*oklch_to_oklab(L, C, H))
    return channels_in_gamut(r, g, b, policy, tolerance)


# === Gamut mapping methods ===

def gamut_clip(L: Array, C: Array, H: Array) -> Array:
    """Convert to sRGB and hard-clip to [0,1].

    Fast but may distort colors (hue shifts, flattened gradients).

    Returns:
        RGB array (..., 3) with values clamped to [0,1]
    """
    rgb = oklch_to_srgb(L, C, H)
    return B.clip(rgb, 0.0, 1.0)


def max_chroma_for_lh(
    L: Array,
    H: Array,
    policy: GamutPolicy = SRGB_POLICY,
    steps: int = 16,
) -> Array:
    """Find maximum valid chroma for given L and H via binary search.

    The search is capped at 0.5, beyond anything sRGB or P3 can show.
    """
    lo = B.zeros_like(L)
    hi = B.full_like(L, 0.5)

    for _ in range(steps):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid, H, policy)
        lo = B.where(valid, mid, lo)
        hi = B.where(valid, hi, mid)

    return lo


def gamut_compress(
    L: Array,
    C: Array,
    H: Array,
    method: Literal['clip', 'chroma'] = 'chroma',
    policy: GamutPolicy = SRGB_POLICY,
) -> tuple[Array, Array, Array]:
    """Bring out-of-gamut colors into gamut.

    Args:
        L, C, H: OKLCH values
        method: 'clip' for RGB clipping (sRGB only), 'chroma' for chroma
            reduction under ``policy``

    Returns:
        (L, C, H) tuple with adjusted values
    """
    if method == 'clip':
        rgb_clipped = gamut_clip(L, C, H)
        return srgb_to_oklch(rgb_clipped)

    elif method == 'chroma':
        max_C = max_chroma_for_lh(L, H, policy)
        C_compressed = B.minimum(C, max_C)
        return L, C_compressed, H

    raise ValueError(f"Unknown gamut method: {method}")
