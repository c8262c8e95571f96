"""Core data types for alch - framework-agnostic."""

import itertools
import random
import string
import time
from dataclasses import dataclass

from alch import defaults


@dataclass(frozen=True)
class RGB:
    """Gamma-encoded sRGB triple, nominally in [0, 1]."""
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class Lab:
    """OKLab coordinates. L in [0, 1]; a, b signed and unbounded."""
    L: float
    a: float
    b: float


@dataclass(frozen=True)
class LCh:
    """OKLCH coordinates. C >= 0; h in degrees."""
    L: float
    C: float
    h: float


@dataclass(frozen=True)
class GamutResult:
    """RGB from a perceptual color, plus whether it fit the active gamut.

    ``in_gamut`` is judged on the unclamped channels, so a clamped sRGB
    result can still report ``False``.
    """
    r: float
    g: float
    b: float
    in_gamut: bool

    @property
    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)


@dataclass
class AdaptiveLchColor:
    """A saved color: brightness in nits plus OKLCH coordinates.

    Attributes:
        id: Process-unique opaque identifier
        name: Display name
        nits: Target peak brightness in cd/m^2
        lightness: OKLCH L, conventionally in [0, 1]
        chroma: OKLCH C
        hue: OKLCH h in degrees
    """
    id: str
    name: str
    nits: float
    lightness: float
    chroma: float
    hue: float

    @property
    def lch(self) -> LCh:
        return LCh(self.lightness, self.chroma, self.hue)


_id_sequence = itertools.count()
_name_counter = itertools.count(1)
_ID_ALPHABET = string.ascii_lowercase + string.digits


def _new_color_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"color-{int(time.time() * 1000)}-{next(_id_sequence)}-{suffix}"


def create_default_color(
    nits: float = defaults.DEFAULT_NITS,
    lightness: float = defaults.DEFAULT_LIGHTNESS,
    chroma: float = defaults.DEFAULT_CHROMA,
    hue: float = defaults.DEFAULT_HUE,
    name: str | None = None,
) -> AdaptiveLchColor:
    """Create a color with a fresh id.

    Without a name, the color is called "Color {n}" with n counting up
    across the process.
    """
    if not name:
        name = defaults.DEFAULT_COLOR_NAME_FORMAT.format(n=next(_name_counter))
    return AdaptiveLchColor(
        id=_new_color_id(),
        name=name,
        nits=nits,
        lightness=lightness,
        chroma=chroma,
        hue=hue,
    )


def create_sample_palette() -> list[AdaptiveLchColor]:
    """Initial palette for an empty session."""
    return [
        create_default_color(100, 0.3, 0.15, 0, "Red"),
        create_default_color(100, 0.5, 0.15, 120, "Green"),
        create_default_color(100, 0.5, 0.15, 240, "Blue"),
        create_default_color(100, 0.7, 0.15, 60, "Yellow"),
    ]
