"""
DesignSpec IR types for declarative design-system configuration.

Defines the structure of designsystem.yaml (the user-facing input) and the
intermediate color types passed between pipeline stages. A DesignSystemInput
produces a TokenFile through tokensmith.core.dtcg_export.generate.

Input sections: colors, typography, spacing, radius, form_factors.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class FormFactor(StrEnum):
    """Target platform class with its own responsive sizing rules."""

    WEB = "web"
    TABLET = "tablet"
    MOBILE = "mobile"


class BackgroundMode(StrEnum):
    """How the neutral scale relates to the background color."""

    PURE = "pure"
    TINTED = "tinted"
    CUSTOM = "custom"


class RadiusStyle(StrEnum):
    """Border radius presets."""

    SHARP = "sharp"
    ROUNDED = "rounded"
    PILL = "pill"


class TypographyRatioPreset(StrEnum):
    """Modular scale ratio presets with associated float values."""

    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    PERFECT_FOURTH = "perfect_fourth"
    AUGMENTED_FOURTH = "augmented_fourth"
    PERFECT_FIFTH = "perfect_fifth"
    GOLDEN_RATIO = "golden_ratio"


# Mapping from preset to numeric ratio
TYPOGRAPHY_RATIO_VALUES: dict[str, float] = {
    TypographyRatioPreset.MINOR_SECOND: 1.067,
    TypographyRatioPreset.MAJOR_SECOND: 1.125,
    TypographyRatioPreset.MINOR_THIRD: 1.200,
    TypographyRatioPreset.MAJOR_THIRD: 1.250,
    TypographyRatioPreset.PERFECT_FOURTH: 1.333,
    TypographyRatioPreset.AUGMENTED_FOURTH: 1.414,
    TypographyRatioPreset.PERFECT_FIFTH: 1.500,
    TypographyRatioPreset.GOLDEN_RATIO: 1.618,
}

GRID_UNITS: tuple[int, ...] = (4, 8)

MIN_BASE_FONT_SIZE = 10
MAX_BASE_FONT_SIZE = 24


def normalize_scale_ratio(value: Any) -> float | None:
    """Return the canonical ratio for a preset name or numeric value.

    Returns None when the value is not one of the eight fixed ratios.
    """
    if isinstance(value, str):
        if value in TYPOGRAPHY_RATIO_VALUES:
            return TYPOGRAPHY_RATIO_VALUES[value]
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    for ratio in TYPOGRAPHY_RATIO_VALUES.values():
        if abs(float(value) - ratio) < 1e-6:
            return ratio
    return None


class _InputModel(BaseModel):
    """Frozen input section accepting snake_case or camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Section 1: Colors
# =============================================================================


class BackgroundInput(_InputModel):
    """Background color and how neutrals derive from it."""

    default: str = Field(default="#FFFFFF", description="Background hex color")
    mode: BackgroundMode = Field(
        default=BackgroundMode.PURE,
        description="pure: background hue, tinted: primary hue, custom: background hue",
    )


class ColorInput(_InputModel):
    """Brand colors. Hex strings are parsed by the palette stage."""

    primary: str = Field(default="#3B82F6", description="Primary brand hex color")
    secondary: str | None = Field(default=None, description="Optional secondary hex color")
    accent: str | None = Field(default=None, description="Optional accent hex color")
    background: BackgroundInput = Field(
        default_factory=BackgroundInput,
        description="Background color configuration",
    )

    @field_validator("secondary", "accent", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: Any) -> Any:
        # An empty form field means "no color", not an invalid one
        if isinstance(value, str) and not value.strip():
            return None
        return value


# =============================================================================
# Section 2: Typography
# =============================================================================


class FontFamilyInput(_InputModel):
    """Font family names for the primary, heading and mono slots."""

    primary: str = Field(default="Inter", description="Body and UI font family")
    secondary: str | None = Field(
        default=None, description="Heading font family (falls back to primary)"
    )
    mono: str | None = Field(
        default=None, description="Monospace font family (falls back to system mono)"
    )


class TypographyInput(_InputModel):
    """Typography specification using a modular scale."""

    font_family: FontFamilyInput = Field(
        default_factory=FontFamilyInput,
        description="Font family names",
    )
    base_font_size: float = Field(
        default=16,
        ge=MIN_BASE_FONT_SIZE,
        le=MAX_BASE_FONT_SIZE,
        description="Base font size in pixels",
    )
    scale_ratio: float = Field(
        default=1.250,
        description="Modular scale ratio (one of the eight musical ratios)",
    )

    @field_validator("scale_ratio", mode="before")
    @classmethod
    def _check_scale_ratio(cls, value: Any) -> float:
        ratio = normalize_scale_ratio(value)
        if ratio is None:
            allowed = ", ".join(f"{r:.3f}" for r in TYPOGRAPHY_RATIO_VALUES.values())
            raise ValueError(f"scale ratio must be one of {allowed}, got {value!r}")
        return ratio


# =============================================================================
# Section 3: Spacing & radius
# =============================================================================


class SpacingInput(_InputModel):
    """Spacing specification based on a grid unit."""

    grid_unit: int = Field(default=8, description="Base grid unit in pixels (4 or 8)")

    @field_validator("grid_unit")
    @classmethod
    def _check_grid_unit(cls, value: int) -> int:
        if value not in GRID_UNITS:
            raise ValueError(f"grid unit must be 4 or 8, got {value}")
        return value


class RadiusInput(_InputModel):
    """Radius specification."""

    style: RadiusStyle = Field(default=RadiusStyle.ROUNDED, description="Radius preset")


# =============================================================================
# Root input model
# =============================================================================


class DesignSystemInput(_InputModel):
    """Root design-system configuration.

    This model represents the user-facing designsystem.yaml file (or the JSON
    payload of a hosting UI) that drives deterministic token generation.
    """

    system_name: str = Field(default="Design System", description="Design system name")
    form_factors: list[FormFactor] = Field(
        default_factory=lambda: [FormFactor.WEB],
        min_length=1,
        description="Target form factors (at least one)",
    )
    colors: ColorInput = Field(default_factory=ColorInput, description="Color configuration")
    typography: TypographyInput = Field(
        default_factory=TypographyInput,
        description="Typography configuration",
    )
    spacing: SpacingInput = Field(default_factory=SpacingInput, description="Spacing configuration")
    radius: RadiusInput = Field(default_factory=RadiusInput, description="Radius configuration")

    @field_validator("form_factors")
    @classmethod
    def _dedupe_form_factors(cls, value: list[FormFactor]) -> list[FormFactor]:
        return list(dict.fromkeys(value))


# =============================================================================
# Intermediate color types
# =============================================================================

PALETTE_STEPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


class OklchColor(BaseModel):
    """Perceptual color: lightness 0-1, chroma 0-~0.4, hue 0-360."""

    model_config = ConfigDict(frozen=True)

    l: float = Field(ge=0.0, le=1.0)  # noqa: E741
    c: float = Field(ge=0.0)
    h: float = Field(ge=0.0, lt=360.0)


class ColorEntry(BaseModel):
    """One step of a color scale in every representation the pipeline emits."""

    model_config = ConfigDict(frozen=True)

    hex: str
    oklch: OklchColor
    srgb: tuple[float, float, float]


ColorScale = dict[int, ColorEntry]


class StatusPalettes(BaseModel):
    """Fixed status scales derived from reference seeds."""

    model_config = ConfigDict(frozen=True)

    success: ColorScale
    warning: ColorScale
    error: ColorScale
    info: ColorScale


class GeneratedPalettes(BaseModel):
    """Every primitive scale produced for one design system."""

    model_config = ConfigDict(frozen=True)

    primary: ColorScale
    neutral: ColorScale
    secondary: ColorScale | None = None
    accent: ColorScale | None = None
    status: StatusPalettes
