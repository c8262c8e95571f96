"""Record-level conversions between RGB, OKLab and OKLCH.

Thin wrappers over the array kernels in ``oklch`` and ``gamut`` that take
and return the value records from ``alch.types``. RGB-producing calls
take an optional ``policy``; without one they use the process-wide
display configuration from ``alch.config``.
"""

from __future__ import annotations

from alch import config
from alch.types import RGB, Lab, LCh, GamutResult, AdaptiveLchColor
from .gamut import GamutPolicy, apply_gamut_policy
from .hexcodec import rgb_to_hex
from .oklch import oklab_to_srgb, srgb_to_oklab, oklch_to_oklab, oklab_to_oklch
from .tone import lightness_for_nits


def _resolve(policy: GamutPolicy | None) -> GamutPolicy:
    return policy if policy is not None else config.active_gamut_policy()


def oklab_to_rgb(lab: Lab, policy: GamutPolicy | None = None) -> GamutResult:
    """OKLab -> RGB, classified and clamped according to ``policy``."""
    r, g, b = oklab_to_srgb(lab.L, lab.a, lab.b)
    r, g, b, in_gamut = apply_gamut_policy(r, g, b, _resolve(policy))
    return GamutResult(float(r), float(g), float(b), bool(in_gamut))


def rgb_to_oklab(rgb: RGB) -> Lab:
    """RGB -> OKLab. Any input is accepted; there is no gamut check."""
    L, a, b = srgb_to_oklab(rgb.r, rgb.g, rgb.b)
    return Lab(float(L), float(a), float(b))


def oklch_to_rgb(lch: LCh, policy: GamutPolicy | None = None) -> GamutResult:
    """OKLCH -> RGB via OKLab."""
    L, a, b = oklch_to_oklab(lch.L, lch.C, lch.h)
    return oklab_to_rgb(Lab(float(L), float(a), float(b)), policy)


def rgb_to_oklch(rgb: RGB) -> LCh:
    """RGB -> OKLCH with hue in [0, 360); achromatic colors get hue 0."""
    lab = rgb_to_oklab(rgb)
    L, C, h = oklab_to_oklch(lab.L, lab.a, lab.b)
    return LCh(float(L), float(C), float(h))


class ColorConverter:
    """Conversions bound to one gamut policy.

    Built once from the display capability and passed to whoever needs
    displayable colors, instead of consulting process state per call.
    """

    def __init__(self, policy: GamutPolicy | None = None):
        self.policy = _resolve(policy)

    def __repr__(self) -> str:
        return f"ColorConverter(policy={self.policy.name!r})"

    def oklab_to_rgb(self, lab: Lab) -> GamutResult:
        return oklab_to_rgb(lab, self.policy)

    def oklch_to_rgb(self, lch: LCh) -> GamutResult:
        return oklch_to_rgb(lch, self.policy)

    def oklch_to_hex(self, lch: LCh) -> str:
        return rgb_to_hex(self.oklch_to_rgb(lch))

    def color_to_rgb(self, color: AdaptiveLchColor) -> GamutResult:
        """Displayable RGB of a saved color's OKLCH coordinates."""
        return self.oklch_to_rgb(color.lch)

    def color_to_hex(self, color: AdaptiveLchColor) -> str:
        return rgb_to_hex(self.color_to_rgb(color))

    def color_at_nits(self, color: AdaptiveLchColor, max_luminance: float) -> GamutResult:
        """RGB of ``color`` with its lightness derived from its nits.

        Chroma and hue are kept; lightness comes from the adaptive
        brightness curve for a display peaking at ``max_luminance``.
        """
        L = lightness_for_nits(color.nits, max_luminance)
        return self.oklch_to_rgb(LCh(float(L), color.chroma, color.hue))
