"""
tokensmith Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .designspec import (
    GRID_UNITS,
    MAX_BASE_FONT_SIZE,
    MIN_BASE_FONT_SIZE,
    PALETTE_STEPS,
    TYPOGRAPHY_RATIO_VALUES,
    BackgroundInput,
    BackgroundMode,
    ColorEntry,
    ColorInput,
    ColorScale,
    DesignSystemInput,
    FontFamilyInput,
    FormFactor,
    GeneratedPalettes,
    OklchColor,
    RadiusInput,
    RadiusStyle,
    SpacingInput,
    StatusPalettes,
    TypographyInput,
    TypographyRatioPreset,
    normalize_scale_ratio,
)

__all__ = [
    "GRID_UNITS",
    "MAX_BASE_FONT_SIZE",
    "MIN_BASE_FONT_SIZE",
    "PALETTE_STEPS",
    "TYPOGRAPHY_RATIO_VALUES",
    "BackgroundInput",
    "BackgroundMode",
    "ColorEntry",
    "ColorInput",
    "ColorScale",
    "DesignSystemInput",
    "FontFamilyInput",
    "FormFactor",
    "GeneratedPalettes",
    "OklchColor",
    "RadiusInput",
    "RadiusStyle",
    "SpacingInput",
    "StatusPalettes",
    "TypographyInput",
    "TypographyRatioPreset",
    "normalize_scale_ratio",
]
