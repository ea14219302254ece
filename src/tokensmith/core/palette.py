"""
Primitive color palette generation.

Builds 10-step color scales (50 through 900) in OKLCH space. Every step keeps
the seed's hue, takes its lightness from a fixed calibration table and scales
the seed chroma, then is clamped into sRGB by reducing chroma only.
"""

from __future__ import annotations

import logging

from .ir.designspec import (
    PALETTE_STEPS,
    BackgroundMode,
    ColorEntry,
    ColorScale,
    DesignSystemInput,
    GeneratedPalettes,
    OklchColor,
    StatusPalettes,
)
from .mode import is_light_lightness
from .oklch import clamp_to_gamut, hex_to_oklch, hex_to_srgb, oklch_to_hex

logger = logging.getLogger(__name__)

# Per-step (target lightness, chroma scale factor). 500 is the full-chroma anchor.
LIGHTNESS_SCALE: dict[int, tuple[float, float]] = {
    50: (0.97, 0.25),
    100: (0.93, 0.40),
    200: (0.87, 0.60),
    300: (0.78, 0.80),
    400: (0.68, 0.95),
    500: (0.55, 1.00),
    600: (0.48, 0.95),
    700: (0.40, 0.85),
    800: (0.32, 0.75),
    900: (0.24, 0.65),
}

# Neutral chroma per background mode
TINTED_NEUTRAL_CHROMA = 0.012
PURE_NEUTRAL_CHROMA = 0.005

# Fixed reference seeds for status scales (green, amber, red, blue)
STATUS_COLORS: dict[str, str] = {
    "success": "#22C55E",
    "warning": "#F59E0B",
    "error": "#EF4444",
    "info": "#3B82F6",
}


def _color_entry(candidate: OklchColor) -> ColorEntry:
    """Clamp a candidate into gamut and express it as hex, OKLCH and sRGB."""
    clamped = clamp_to_gamut(candidate)
    hex_value = oklch_to_hex(clamped)
    return ColorEntry(hex=hex_value, oklch=clamped, srgb=hex_to_srgb(hex_value))


# =============================================================================
# Brand scales
# =============================================================================


def generate_palette(seed_hex: str, field: str = "colors.primary") -> ColorScale:
    """Generate a 10-step scale from a seed color.

    Args:
        seed_hex: Seed hex color (3 or 6 digits).
        field: Input path reported if the seed is invalid.

    Returns:
        Dict mapping each step (50-900) to a ColorEntry.

    Raises:
        InvalidColorInput: If the seed is not a valid hex color.
    """
    base = hex_to_oklch(seed_hex, field)

    scale: ColorScale = {}
    for step in PALETTE_STEPS:
        lightness, chroma_scale = LIGHTNESS_SCALE[step]
        candidate = OklchColor(l=lightness, c=base.c * chroma_scale, h=base.h)
        scale[step] = _color_entry(candidate)

    logger.debug(f"Generated palette for {seed_hex} ({field}): 500={scale[500].hex}")
    return scale


def generate_status_palettes() -> StatusPalettes:
    """Generate the success/warning/error/info scales from their fixed seeds."""
    scales = {
        name: generate_palette(seed, field=f"status.{name}")
        for name, seed in STATUS_COLORS.items()
    }
    return StatusPalettes(**scales)


# =============================================================================
# Neutral scale
# =============================================================================


def _light_background_ladder(background_l: float) -> dict[int, float]:
    """Lightness ladder for light backgrounds; step 50 is the background itself."""
    return {
        50: background_l,
        100: max(0.90, background_l - 0.03),
        200: max(0.85, background_l - 0.08),
        300: 0.78,
        400: 0.65,
        500: 0.55,
        600: 0.45,
        700: 0.35,
        800: 0.25,
        900: 0.15,
    }


def _dark_background_ladder(background_l: float) -> dict[int, float]:
    """Lightness ladder for dark backgrounds; step 900 is the background itself."""
    return {
        50: 0.97,
        100: 0.93,
        200: 0.85,
        300: 0.75,
        400: 0.60,
        500: 0.50,
        600: 0.40,
        700: 0.30,
        800: min(0.25, background_l + 0.05),
        900: background_l,
    }


def generate_neutral_palette(
    background_hex: str,
    primary_hex: str,
    mode: BackgroundMode | str = BackgroundMode.PURE,
) -> ColorScale:
    """Generate a near-achromatic scale anchored to the background lightness.

    Args:
        background_hex: Background hex color.
        primary_hex: Primary hex color (hue source in tinted mode).
        mode: Background mode (pure, tinted or custom).

    Returns:
        Dict mapping each step (50-900) to a ColorEntry.

    Raises:
        InvalidColorInput: If either color is not a valid hex color.
    """
    background = hex_to_oklch(background_hex, "colors.background.default")
    primary = hex_to_oklch(primary_hex, "colors.primary")
    tinted = mode == BackgroundMode.TINTED

    hue = primary.h if tinted else background.h
    chroma = TINTED_NEUTRAL_CHROMA if tinted else PURE_NEUTRAL_CHROMA

    if is_light_lightness(background.l):
        ladder = _light_background_ladder(background.l)
    else:
        ladder = _dark_background_ladder(background.l)

    scale: ColorScale = {}
    for step in PALETTE_STEPS:
        scale[step] = _color_entry(OklchColor(l=ladder[step], c=chroma, h=hue))

    logger.debug(
        f"Generated neutral palette (mode={mode}, background L={background.l:.3f}): "
        f"50={scale[50].hex} 900={scale[900].hex}"
    )
    return scale


# =============================================================================
# All primitives
# =============================================================================


def generate_palettes(design: DesignSystemInput) -> GeneratedPalettes:
    """Generate every primitive scale for a design system."""
    colors = design.colors
    return GeneratedPalettes(
        primary=generate_palette(colors.primary, "colors.primary"),
        neutral=generate_neutral_palette(
            colors.background.default,
            colors.primary,
            colors.background.mode,
        ),
        secondary=(
            generate_palette(colors.secondary, "colors.secondary") if colors.secondary else None
        ),
        accent=generate_palette(colors.accent, "colors.accent") if colors.accent else None,
        status=generate_status_palettes(),
    )
