"""Hex color strings (#rgb / #rrggbb) <-> RGB.

Encoding is lossy: channels are clamped and quantized to 8 bits.
The leading ``#`` is mandatory, so bare words such as "bad" or "cafe"
are never taken for colors. Decoding never raises; malformed input comes back as a ``HexParseError``
value (or ``None`` from ``hex_to_rgb``) so callers can reject user
input inline.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, Union

from alch.types import RGB

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class HexParseFailure(enum.Enum):
    """Why a hex string was rejected."""

    MISSING_PREFIX = "missing_prefix"
    WRONG_LENGTH = "wrong_length"
    INVALID_CHARACTER = "invalid_character"
    NOT_A_STRING = "not_a_string"


@dataclass(frozen=True)
class HexParseError:
    """Failed decode. Falsy, so ``if parse_hex(s):`` reads naturally."""
    text: object
    reason: HexParseFailure

    def __bool__(self) -> bool:
        return False


HexParseResult = Union[RGB, HexParseError]


def _to_byte(value: float) -> int:
    """Clamp to [0, 1] and quantize, rounding halves up."""
    value = min(1.0, max(0.0, float(value)))
    return int(math.floor(value * 255 + 0.5))


def rgb_to_hex(rgb: RGB | Iterable[float]) -> str:
    """Encode as lowercase ``#rrggbb``.

    Accepts an ``RGB``, a ``GamutResult`` or any (r, g, b) sequence.
    """
    if hasattr(rgb, "r"):
        channels = (rgb.r, rgb.g, rgb.b)
    else:
        channels = tuple(rgb)
    return "#" + "".join(f"{_to_byte(c):02x}" for c in channels)


def parse_hex(text: object) -> HexParseResult:
    """Decode ``#rgb`` / ``#rrggbb`` (case-insensitive)."""
    if not isinstance(text, str):
        return HexParseError(text, HexParseFailure.NOT_A_STRING)
    if not text.startswith("#"):
        return HexParseError(text, HexParseFailure.MISSING_PREFIX)

    digits = text[1:]

    if _HEX_DIGITS.fullmatch(digits) is None:
        return HexParseError(text, HexParseFailure.INVALID_CHARACTER)

    match len(digits):
        case 3:
            pairs = [d * 2 for d in digits]
        case 6:
            pairs = [digits[i:i + 2] for i in (0, 2, 4)]
        case _:
            return HexParseError(text, HexParseFailure.WRONG_LENGTH)

    r, g, b = (int(p, 16) / 255 for p in pairs)
    return RGB(r, g, b)


def hex_to_rgb(text: object) -> RGB | None:
    """Decode a hex string, or ``None`` if it is malformed."""
    result = parse_hex(text)
    if isinstance(result, HexParseError):
        logger.debug("Rejected hex color %r: %s", text, result.reason.value)
        return None
    return result
