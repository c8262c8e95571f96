"""OKLab/OKLCH conversions, gamut policies, brightness curves and hex I/O.

This module provides:
- sRGB transfer functions and OKLab/OKLCH kernels (floats, numpy, torch)
- Gamut policies (sRGB, or a relaxed wide-gamut window) and gamut checks
- PQ and adaptive-luminosity brightness curves
- Hex string encode/decode
- Record-level conversions on ``alch.types`` values

Example:
    from alch.colorspace import ColorConverter, WIDE_GAMUT_POLICY
    from alch.types import LCh

    converter = ColorConverter(WIDE_GAMUT_POLICY)
    result = converter.oklch_to_rgb(LCh(0.7, 0.15, 30))
    if not result.in_gamut:
        ...
"""

from .oklch import (
    srgb_to_linear,
    linear_to_srgb,
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    oklab_to_srgb,
    srgb_to_oklab,
    oklch_to_srgb,
    srgb_to_oklch,
    oklch_to_linear_rgb,
)

from .gamut import (
    GamutPolicy,
    SRGB_POLICY,
    WIDE_GAMUT_POLICY,
    policy_for,
    channels_in_gamut,
    apply_gamut_policy,
    is_in_gamut,
    gamut_clip,
    gamut_compress,
    max_chroma_for_lh,
)

from .tone import (
    pq_curve,
    perceptual_quantizer,
    simplified_pq,
    adaptive_gamma,
    adaptive_luminosity,
    inverse_adaptive_luminosity,
    lightness_for_nits,
    nits_for_lightness,
)

from .hexcodec import (
    HexParseError,
    HexParseFailure,
    rgb_to_hex,
    parse_hex,
    hex_to_rgb,
)

from .convert import (
    ColorConverter,
    oklab_to_rgb,
    rgb_to_oklab,
    oklch_to_rgb,
    rgb_to_oklch,
)

__all__ = [
    # Record-level API
    'ColorConverter',
    'oklab_to_rgb',
    'rgb_to_oklab',
    'oklch_to_rgb',
    'rgb_to_oklch',
    # Transfer functions
    'srgb_to_linear',
    'linear_to_srgb',
    # OKLab/OKLCH kernels
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'oklab_to_srgb',
    'srgb_to_oklab',
    'oklch_to_srgb',
    'srgb_to_oklch',
    'oklch_to_linear_rgb',
    # Gamut
    'GamutPolicy',
    'SRGB_POLICY',
    'WIDE_GAMUT_POLICY',
    'policy_for',
    'channels_in_gamut',
    'apply_gamut_policy',
    'is_in_gamut',
    'gamut_clip',
    'gamut_compress',
    'max_chroma_for_lh',
    # Brightness curves
    'pq_curve',
    'perceptual_quantizer',
    'simplified_pq',
    'adaptive_gamma',
    'adaptive_luminosity',
    'inverse_adaptive_luminosity',
    'lightness_for_nits',
    'nits_for_lightness',
    # Hex
    'HexParseError',
    'HexParseFailure',
    'rgb_to_hex',
    'parse_hex',
    'hex_to_rgb',
]
