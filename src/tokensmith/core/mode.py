"""
Light/dark mode detection from the background color.
"""

from __future__ import annotations

from .oklch import hex_to_oklch

# Backgrounds with OKLCH lightness above this are treated as light.
LIGHT_MODE_THRESHOLD = 0.5


def is_light_lightness(lightness: float) -> bool:
    """Return True if an OKLCH lightness belongs to a light background."""
    return lightness > LIGHT_MODE_THRESHOLD


def detect_light_mode(background_hex: str, field: str = "colors.background.default") -> bool:
    """Decide light vs dark mode from the background's OKLCH lightness.

    Raises:
        InvalidColorInput: If the background is not a valid hex color.
    """
    return is_light_lightness(hex_to_oklch(background_hex, field).l)
