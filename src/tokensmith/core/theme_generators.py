"""
Token generators for spacing, radius, and elevation.

Generates DTCG token groups from fixed tables. All outputs are dicts of
token key -> {"$value": ...} entries ready for assembly.
"""

from __future__ import annotations

from typing import Any

from .errors import make_config_error
from .ir.designspec import GRID_UNITS, RadiusStyle


def _number(value: float) -> int | float:
    """Emit integral floats as ints so the JSON reads 32 rather than 32.0."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def dimension(value: float, unit: str = "px") -> dict[str, Any]:
    """DTCG dimension value."""
    return {"value": _number(value), "unit": unit}


# =============================================================================
# Spacing
# =============================================================================

# Spacing scale multipliers of the grid unit
_SPACING_MULTIPLIERS: tuple[float, ...] = (
    0,
    0.5,
    1,
    1.5,
    2,
    2.5,
    3,
    4,
    5,
    6,
    8,
    10,
    12,
    16,
    20,
    24,
)

# Semantic spacing name -> scale key
_SEMANTIC_SPACING: dict[str, str] = {
    "none": "0",
    "xs": "1",
    "sm": "2",
    "md": "4",
    "lg": "6",
    "xl": "8",
    "2xl": "12",
    "3xl": "16",
    "4xl": "24",
}


def spacing_key(multiplier: float) -> str:
    """Scale key for a multiplier: 4 -> '4', 1.5 -> '1-5'."""
    if float(multiplier).is_integer():
        return str(int(multiplier))
    return str(multiplier).replace(".", "-")


def generate_spacing_scale(grid_unit: int) -> dict[str, dict[str, Any]]:
    """Generate a spacing scale plus semantic aliases.

    Args:
        grid_unit: Base grid unit in pixels (4 or 8).

    Returns:
        Dict of scale keys to dimension tokens, and "semantic.<name>" keys to
        alias tokens of the form "{spacing.<key>}".

    Raises:
        InvalidConfiguration: If the grid unit is not 4 or 8.
    """
    if isinstance(grid_unit, bool) or grid_unit not in GRID_UNITS:
        raise make_config_error("spacing.grid_unit", grid_unit, "grid unit must be 4 or 8")

    scale: dict[str, dict[str, Any]] = {}
    for mult in _SPACING_MULTIPLIERS:
        scale[spacing_key(mult)] = {"$value": dimension(grid_unit * mult, "px")}

    for semantic, key in _SEMANTIC_SPACING.items():
        if key in scale:
            scale[f"semantic.{semantic}"] = {"$value": f"{{spacing.{key}}}"}

    return scale


# =============================================================================
# Radius
# =============================================================================

# Radius values per style (none, sm, md, lg, xl, 2xl, full)
_RADIUS_PRESETS: dict[str, dict[str, int]] = {
    RadiusStyle.SHARP: {
        "none": 0,
        "sm": 2,
        "md": 4,
        "lg": 6,
        "xl": 8,
        "2xl": 12,
        "full": 9999,
    },
    RadiusStyle.ROUNDED: {
        "none": 0,
        "sm": 4,
        "md": 8,
        "lg": 12,
        "xl": 16,
        "2xl": 24,
        "full": 9999,
    },
    RadiusStyle.PILL: {
        "none": 0,
        "sm": 8,
        "md": 16,
        "lg": 24,
        "xl": 32,
        "2xl": 48,
        "full": 9999,
    },
}


def generate_radius_scale(style: RadiusStyle | str) -> dict[str, dict[str, Any]]:
    """Generate the radius tokens for a style.

    Raises:
        InvalidConfiguration: If the style is not sharp, rounded or pill.
    """
    values = _RADIUS_PRESETS.get(style)
    if values is None:
        raise make_config_error(
            "radius.style", style, "radius style must be sharp, rounded or pill"
        )
    return {key: {"$value": dimension(value, "px")} for key, value in values.items()}


# =============================================================================
# Elevation
# =============================================================================

# Base shadow opacity per mode
LIGHT_SHADOW_ALPHA = 0.1
DARK_SHADOW_ALPHA = 0.3

# (offsetY, blur, spread, alpha factor) per layer; offsetX is always 0
_ELEVATION_LAYERS: dict[str, tuple[tuple[int, int, int, float], ...]] = {
    "none": ((0, 0, 0, 0.0),),
    "sm": ((1, 2, 0, 1.0),),
    "md": ((2, 4, -1, 1.0), (4, 6, -1, 0.6)),
    "lg": ((4, 6, -2, 1.0), (10, 15, -3, 0.5)),
    "xl": ((8, 10, -4, 1.0), (20, 25, -5, 0.4)),
}

_ELEVATION_DESCRIPTIONS: dict[str, str] = {
    "none": "No elevation",
    "sm": "Small elevation for subtle depth",
    "md": "Medium elevation for cards",
    "lg": "Large elevation for modals",
    "xl": "Extra large elevation for popovers",
}


def _shadow(offset_y: int, blur: int, spread: int, alpha: float) -> dict[str, Any]:
    return {
        "color": {"colorSpace": "srgb", "components": [0, 0, 0], "alpha": _number(alpha)},
        "offsetX": dimension(0, "px"),
        "offsetY": dimension(offset_y, "px"),
        "blur": dimension(blur, "px"),
        "spread": dimension(spread, "px"),
    }


def generate_elevation_scale(is_light_mode: bool) -> dict[str, dict[str, Any]]:
    """Generate the five shadow tiers.

    Single-layer tiers hold one shadow; layered tiers hold a list of two whose
    second layer is fainter. Opacity depends only on light/dark mode.
    """
    base_alpha = LIGHT_SHADOW_ALPHA if is_light_mode else DARK_SHADOW_ALPHA

    tokens: dict[str, dict[str, Any]] = {}
    for tier, layers in _ELEVATION_LAYERS.items():
        shadows = [
            _shadow(offset_y, blur, spread, round(base_alpha * factor, 4))
            for offset_y, blur, spread, factor in layers
        ]
        tokens[tier] = {
            "$value": shadows[0] if len(shadows) == 1 else shadows,
            "$description": _ELEVATION_DESCRIPTIONS[tier],
        }
    return tokens
