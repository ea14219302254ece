"""
Pure-Python OKLCH color conversion.

Converts between hex/sRGB and the OKLCH color space and maps out-of-gamut
colors back into sRGB by reducing chroma. No external color libraries required.

Pipeline: hex -> sRGB -> linear sRGB -> LMS -> OKLab -> OKLCH, and back.
"""

from __future__ import annotations

import math
import re

from .errors import make_color_error
from .ir.designspec import OklchColor

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Chroma below this is treated as achromatic; its hue is undefined and reported as 0.
_ACHROMATIC_CHROMA = 1e-7

# Linear-sRGB channels may overshoot [0, 1] by this much and still count as in gamut.
_GAMUT_EPSILON = 1e-6

# Binary search stops once the chroma interval is narrower than this.
_CHROMA_RESOLUTION = 1e-5


def oklch_to_css(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """Format an OKLCH color as a CSS string.

    Args:
        L: Lightness (0-1).
        C: Chroma (0-0.4).
        H: Hue (0-360).
        alpha: Opacity (0-1).

    Returns:
        CSS oklch() string.
    """
    L_fmt = f"{L:.3f}"
    C_fmt = f"{C:.4f}"
    H_fmt = f"{H:.1f}"
    if alpha < 1.0:
        return f"oklch({L_fmt} {C_fmt} {H_fmt} / {alpha:.2f})"
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"


# =============================================================================
# Hex / sRGB
# =============================================================================


def parse_hex(value: object) -> tuple[float, float, float] | None:
    """Parse a 3- or 6-digit hex string (leading '#' optional) into sRGB 0-1.

    Returns None when the value is not a well-formed hex color.
    """
    if not isinstance(value, str) or not _HEX_RE.match(value.strip()):
        return None
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def is_valid_hex(value: object) -> bool:
    """Check whether a value is a well-formed hex color."""
    return parse_hex(value) is not None


def hex_to_srgb(hex_str: str, field: str = "color") -> tuple[float, float, float]:
    """Normalized sRGB components (channel / 255) of a hex color."""
    rgb = parse_hex(hex_str)
    if rgb is None:
        raise make_color_error(field, hex_str)
    return rgb


def srgb_to_hex(r: float, g: float, b: float) -> str:
    """Format gamma-encoded sRGB (clamped to 0-1) as '#RRGGBB'."""
    channels = (max(0.0, min(1.0, c)) for c in (r, g, b))
    return "#" + "".join(f"{int(c * 255 + 0.5):02X}" for c in channels)


def _to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _to_gamma(c: float) -> float:
    sign = -1.0 if c < 0 else 1.0
    c = abs(c)
    if c <= 0.0031308:
        return sign * 12.92 * c
    return sign * (1.055 * (c ** (1.0 / 2.4)) - 0.055)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


# =============================================================================
# OKLCH
# =============================================================================


def srgb_to_oklch(r: float, g: float, b: float) -> OklchColor:
    """Convert gamma-encoded sRGB (0-1) to OKLCH."""
    lr, lg, lb = _to_linear(r), _to_linear(g), _to_linear(b)

    l_ = _cbrt(0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb)
    m_ = _cbrt(0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb)
    s_ = _cbrt(0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb)

    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_ = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    C = math.hypot(a, b_)
    H = 0.0 if C < _ACHROMATIC_CHROMA else math.degrees(math.atan2(b_, a)) % 360.0
    if H >= 360.0:
        # tiny negative angles wrap to exactly 360.0 in float
        H = 0.0
    return OklchColor(l=max(0.0, min(1.0, L)), c=C, h=H)


def hex_to_oklch(hex_str: str, field: str = "color") -> OklchColor:
    """Parse a hex color into OKLCH.

    Raises:
        InvalidColorInput: If the value is not a well-formed hex color.
    """
    return srgb_to_oklch(*hex_to_srgb(hex_str, field))


def oklch_to_linear_srgb(color: OklchColor) -> tuple[float, float, float]:
    """Convert OKLCH to (unclamped) linear sRGB."""
    H = math.radians(color.h)
    a = color.c * math.cos(H)
    b = color.c * math.sin(H)

    l_ = color.l + 0.3963377774 * a + 0.2158037573 * b
    m_ = color.l - 0.1055613458 * a - 0.0638541728 * b
    s_ = color.l - 0.0894841775 * a - 1.2914855480 * b

    l, m, s = l_**3, m_**3, s_**3  # noqa: E741

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def oklch_to_srgb(color: OklchColor) -> tuple[float, float, float]:
    """Convert OKLCH to gamma-encoded sRGB (not clamped)."""
    r, g, b = oklch_to_linear_srgb(color)
    return _to_gamma(r), _to_gamma(g), _to_gamma(b)


def oklch_to_hex(color: OklchColor) -> str:
    """Convert OKLCH to '#RRGGBB', clamping each channel into range."""
    return srgb_to_hex(*oklch_to_srgb(color))


# =============================================================================
# Gamut mapping
# =============================================================================


def is_in_gamut(color: OklchColor) -> bool:
    """Check whether an OKLCH color is displayable in sRGB."""
    return all(
        -_GAMUT_EPSILON <= channel <= 1.0 + _GAMUT_EPSILON
        for channel in oklch_to_linear_srgb(color)
    )


def clamp_to_gamut(color: OklchColor) -> OklchColor:
    """Reduce chroma until the color fits sRGB.

    Lightness and hue are returned unchanged; the returned chroma is never
    larger than the input chroma.
    """
    if is_in_gamut(color):
        return color

    low, high = 0.0, color.c
    while high - low > _CHROMA_RESOLUTION:
        mid = (low + high) / 2
        if is_in_gamut(OklchColor(l=color.l, c=mid, h=color.h)):
            low = mid
        else:
            high = mid
    return OklchColor(l=color.l, c=low, h=color.h)
