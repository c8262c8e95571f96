"""alch: adaptive OKLCH color core.

Perceptual color editing primitives: OKLab/OKLCH <-> sRGB with gamut
classification, a luminance-adaptive brightness curve, and hex I/O.
"""

__version__ = "0.1.0"

from alch.types import (
    RGB,
    Lab,
    LCh,
    GamutResult,
    AdaptiveLchColor,
    create_default_color,
    create_sample_palette,
)
from alch.colorspace import (
    ColorConverter,
    GamutPolicy,
    SRGB_POLICY,
    WIDE_GAMUT_POLICY,
    srgb_to_linear,
    linear_to_srgb,
    oklab_to_rgb,
    rgb_to_oklab,
    oklch_to_rgb,
    rgb_to_oklch,
    perceptual_quantizer,
    simplified_pq,
    adaptive_luminosity,
    inverse_adaptive_luminosity,
    rgb_to_hex,
    parse_hex,
    hex_to_rgb,
)
from alch.config import configure_display, get_display_config

__all__ = [
    'RGB',
    'Lab',
    'LCh',
    'GamutResult',
    'AdaptiveLchColor',
    'create_default_color',
    'create_sample_palette',
    'ColorConverter',
    'GamutPolicy',
    'SRGB_POLICY',
    'WIDE_GAMUT_POLICY',
    'srgb_to_linear',
    'linear_to_srgb',
    'oklab_to_rgb',
    'rgb_to_oklab',
    'oklch_to_rgb',
    'rgb_to_oklch',
    'perceptual_quantizer',
    'simplified_pq',
    'adaptive_luminosity',
    'inverse_adaptive_luminosity',
    'rgb_to_hex',
    'parse_hex',
    'hex_to_rgb',
    'configure_display',
    'get_display_config',
]
