"""
Typography scale engine.

Computes a modular type scale from a base size and ratio, then resolves a fixed
catalog of semantic text tokens (display, heading, title, body, label, caption,
code) into font family, size, weight, line height and letter spacing for each
requested form factor.

Role, emphasis and form-factor branching is done with static lookup tables;
the tables are checked for exhaustiveness when the module is imported.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from enum import StrEnum
from typing import Any, NamedTuple

from .errors import ErrorContext, IncompleteCatalogResolution, make_config_error
from .ir.designspec import (
    MAX_BASE_FONT_SIZE,
    MIN_BASE_FONT_SIZE,
    TYPOGRAPHY_RATIO_VALUES,
    FontFamilyInput,
    FormFactor,
    normalize_scale_ratio,
)
from .theme_generators import dimension

logger = logging.getLogger(__name__)


class SemanticRole(StrEnum):
    """Typographic role of a catalog entry."""

    DISPLAY = "display"
    HEADING = "heading"
    TITLE = "title"
    BODY = "body"
    LABEL = "label"
    CAPTION = "caption"


class Emphasis(StrEnum):
    """Weight emphasis within a role."""

    DEFAULT = "default"
    STRONG = "strong"
    SUBTLE = "subtle"


class FontSlot(StrEnum):
    """Which font stack a catalog entry draws from."""

    PRIMARY = "primary"
    HEADING = "heading"
    MONO = "mono"


# Scale steps relative to the base size (0)
SCALE_STEPS: tuple[int, ...] = tuple(range(-2, 7))

# Generic keywords appended to every stack
SANS_FALLBACK: tuple[str, ...] = ("system-ui", "sans-serif")
MONO_FALLBACK: tuple[str, ...] = ("monospace",)
SYSTEM_MONO_STACK: tuple[str, ...] = ("ui-monospace", "SFMono-Regular", "monospace")

WEIGHT_MAP: dict[SemanticRole, dict[Emphasis, int]] = {
    SemanticRole.DISPLAY: {Emphasis.DEFAULT: 700, Emphasis.STRONG: 800, Emphasis.SUBTLE: 600},
    SemanticRole.HEADING: {Emphasis.DEFAULT: 600, Emphasis.STRONG: 700, Emphasis.SUBTLE: 500},
    SemanticRole.TITLE: {Emphasis.DEFAULT: 600, Emphasis.STRONG: 700, Emphasis.SUBTLE: 500},
    SemanticRole.BODY: {Emphasis.DEFAULT: 400, Emphasis.STRONG: 600, Emphasis.SUBTLE: 400},
    SemanticRole.LABEL: {Emphasis.DEFAULT: 500, Emphasis.STRONG: 600, Emphasis.SUBTLE: 400},
    SemanticRole.CAPTION: {Emphasis.DEFAULT: 400, Emphasis.STRONG: 500, Emphasis.SUBTLE: 400},
}

RESPONSIVE_MULTIPLIERS: dict[SemanticRole, dict[FormFactor, float]] = {
    SemanticRole.DISPLAY: {FormFactor.WEB: 1.0, FormFactor.TABLET: 0.85, FormFactor.MOBILE: 0.70},
    SemanticRole.HEADING: {FormFactor.WEB: 1.0, FormFactor.TABLET: 0.90, FormFactor.MOBILE: 0.80},
    SemanticRole.TITLE: {FormFactor.WEB: 1.0, FormFactor.TABLET: 0.95, FormFactor.MOBILE: 0.90},
    SemanticRole.BODY: {FormFactor.WEB: 1.0, FormFactor.TABLET: 1.00, FormFactor.MOBILE: 1.00},
    SemanticRole.LABEL: {FormFactor.WEB: 1.0, FormFactor.TABLET: 1.00, FormFactor.MOBILE: 1.00},
    SemanticRole.CAPTION: {FormFactor.WEB: 1.0, FormFactor.TABLET: 1.00, FormFactor.MOBILE: 1.00},
}

MIN_SIZES: dict[SemanticRole, float] = {
    SemanticRole.DISPLAY: 32,
    SemanticRole.HEADING: 20,
    SemanticRole.TITLE: 16,
    SemanticRole.BODY: 14,
    SemanticRole.LABEL: 12,
    SemanticRole.CAPTION: 11,
}


class TokenDefinition(NamedTuple):
    """One typography catalog entry."""

    scale_step: int
    role: SemanticRole
    family: FontSlot
    emphasis: Emphasis = Emphasis.DEFAULT


_D, _H, _T = SemanticRole.DISPLAY, SemanticRole.HEADING, SemanticRole.TITLE
_B, _L, _C = SemanticRole.BODY, SemanticRole.LABEL, SemanticRole.CAPTION

TOKEN_CATALOG: dict[str, TokenDefinition] = {
    # Display: marketing, hero sections
    "display.2xl": TokenDefinition(6, _D, FontSlot.HEADING),
    "display.xl": TokenDefinition(5, _D, FontSlot.HEADING),
    "display.lg": TokenDefinition(4, _D, FontSlot.HEADING),
    "display.md": TokenDefinition(3, _D, FontSlot.HEADING),
    "display.sm": TokenDefinition(2, _D, FontSlot.HEADING),
    # Heading: page and section headings
    "heading.h1": TokenDefinition(5, _H, FontSlot.HEADING),
    "heading.h2": TokenDefinition(4, _H, FontSlot.HEADING),
    "heading.h3": TokenDefinition(3, _H, FontSlot.HEADING),
    "heading.h4": TokenDefinition(2, _H, FontSlot.HEADING),
    "heading.h5": TokenDefinition(1, _H, FontSlot.HEADING),
    "heading.h6": TokenDefinition(0, _H, FontSlot.HEADING),
    # Title: cards, modals
    "title.lg": TokenDefinition(2, _T, FontSlot.PRIMARY),
    "title.md": TokenDefinition(1, _T, FontSlot.PRIMARY),
    "title.sm": TokenDefinition(0, _T, FontSlot.PRIMARY),
    # Body
    "body.lg": TokenDefinition(1, _B, FontSlot.PRIMARY),
    "body.md": TokenDefinition(0, _B, FontSlot.PRIMARY),
    "body.sm": TokenDefinition(-1, _B, FontSlot.PRIMARY),
    # Label: buttons, form labels
    "label.lg": TokenDefinition(0, _L, FontSlot.PRIMARY),
    "label.md": TokenDefinition(-1, _L, FontSlot.PRIMARY),
    "label.sm": TokenDefinition(-2, _L, FontSlot.PRIMARY),
    # Caption: helper text
    "caption.md": TokenDefinition(-1, _C, FontSlot.PRIMARY, Emphasis.SUBTLE),
    "caption.sm": TokenDefinition(-2, _C, FontSlot.PRIMARY, Emphasis.SUBTLE),
    # Code
    "code.block": TokenDefinition(-1, _B, FontSlot.MONO),
    "code.inline": TokenDefinition(0, _B, FontSlot.MONO),
}


def _check_tables() -> None:
    """Every role x emphasis and role x form factor combination needs an entry."""
    for role in SemanticRole:
        for emphasis in Emphasis:
            if emphasis not in WEIGHT_MAP.get(role, {}):
                raise IncompleteCatalogResolution(f"No font weight for {role}/{emphasis}")
        for form_factor in FormFactor:
            if form_factor not in RESPONSIVE_MULTIPLIERS.get(role, {}):
                raise IncompleteCatalogResolution(
                    f"No responsive multiplier for {role}/{form_factor}"
                )
        if role not in MIN_SIZES:
            raise IncompleteCatalogResolution(f"No minimum size for {role}")
    for path, definition in TOKEN_CATALOG.items():
        if definition.scale_step not in SCALE_STEPS:
            raise IncompleteCatalogResolution(
                f"Catalog entry {path} uses scale step {definition.scale_step}"
            )


_check_tables()


def _round_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""
    return math.floor(value * 2 + 0.5) / 2


# =============================================================================
# Scale and per-token calculations
# =============================================================================


def generate_type_scale(base_font_size: float, ratio: float | str) -> dict[int, float]:
    """Generate a modular type scale.

    Args:
        base_font_size: Base font size in pixels (10-24).
        ratio: One of the eight musical ratios, or its preset name.

    Returns:
        Dict mapping scale step (-2..6) to size in px, rounded to 0.5.

    Raises:
        InvalidConfiguration: If the ratio or base size is out of range.
    """
    ratio_value = normalize_scale_ratio(ratio)
    if ratio_value is None:
        allowed = ", ".join(f"{r:.3f}" for r in TYPOGRAPHY_RATIO_VALUES.values())
        raise make_config_error(
            "typography.scale_ratio", ratio, f"scale ratio must be one of {allowed}"
        )
    if not MIN_BASE_FONT_SIZE <= base_font_size <= MAX_BASE_FONT_SIZE:
        raise make_config_error(
            "typography.base_font_size",
            base_font_size,
            f"base font size must be {MIN_BASE_FONT_SIZE}-{MAX_BASE_FONT_SIZE}",
        )

    return {step: _round_half(base_font_size * ratio_value**step) for step in SCALE_STEPS}


def calculate_line_height(font_size: float) -> float:
    """Unitless line height: 12px -> 1.7 down to 48px -> 1.15, rounded to 2 decimals."""
    min_size, max_size = 12, 48
    max_lh, min_lh = 1.7, 1.15

    t = min(1.0, max(0.0, (font_size - min_size) / (max_size - min_size)))
    line_height = max_lh - (max_lh - min_lh) * t
    return math.floor(line_height * 100 + 0.5) / 100


def calculate_font_weight(role: str, emphasis: str = Emphasis.DEFAULT) -> int:
    """Look up the font weight for a role and emphasis."""
    try:
        return WEIGHT_MAP[role][emphasis]  # type: ignore[index]
    except KeyError:
        raise IncompleteCatalogResolution(
            "no font weight defined", ErrorContext(field="role/emphasis", value=(role, emphasis))
        ) from None


def calculate_letter_spacing(font_size: float) -> float:
    """Letter spacing in em for a resolved font size."""
    if font_size >= 40:
        return -0.02
    if font_size >= 28:
        return -0.01
    if font_size >= 20:
        return 0
    if font_size >= 14:
        return 0.01
    return 0.02


def calculate_responsive_font_size(base_size: float, role: str, form_factor: str) -> float:
    """Scale a base size for a form factor, floored at the role minimum."""
    try:
        multiplier = RESPONSIVE_MULTIPLIERS[role][form_factor]  # type: ignore[index]
        minimum = MIN_SIZES[role]  # type: ignore[index]
    except KeyError:
        raise IncompleteCatalogResolution(
            "no responsive rule defined",
            ErrorContext(field="role/form_factor", value=(role, form_factor)),
        ) from None
    return max(minimum, _round_half(base_size * multiplier))


# =============================================================================
# Font stacks and catalog resolution
# =============================================================================


def build_font_stacks(font_family: FontFamilyInput) -> dict[FontSlot, list[str]]:
    """Resolve the primary, heading and mono font stacks."""
    primary = [font_family.primary, *SANS_FALLBACK]
    heading = [font_family.secondary, *SANS_FALLBACK] if font_family.secondary else primary
    mono = [font_family.mono, *MONO_FALLBACK] if font_family.mono else list(SYSTEM_MONO_STACK)
    return {FontSlot.PRIMARY: primary, FontSlot.HEADING: heading, FontSlot.MONO: mono}


def resolve_typography_value(
    definition: TokenDefinition,
    scale: dict[int, float],
    stacks: dict[FontSlot, list[str]],
    form_factor: str,
) -> dict[str, Any]:
    """Resolve one catalog entry for one form factor into a DTCG typography value."""
    if definition.scale_step not in scale:
        raise IncompleteCatalogResolution(
            "scale step missing from type scale",
            ErrorContext(field="scale_step", value=definition.scale_step),
        )
    size = calculate_responsive_font_size(
        scale[definition.scale_step], definition.role, form_factor
    )
    return {
        "fontFamily": list(stacks[definition.family]),
        "fontSize": dimension(size, "px"),
        "fontWeight": calculate_font_weight(definition.role, definition.emphasis),
        "lineHeight": calculate_line_height(size),
        "letterSpacing": dimension(calculate_letter_spacing(size), "em"),
    }


def generate_typography_system(
    font_family: FontFamilyInput,
    base_font_size: float,
    scale_ratio: float | str,
    form_factors: Iterable[str],
) -> dict[str, dict[str, dict[str, Any]]]:
    """Resolve every catalog entry for every requested form factor.

    Returns:
        Dict of catalog path -> form factor -> {"$value": typography value}.

    Raises:
        InvalidConfiguration: If the ratio or base size is out of range.
        IncompleteCatalogResolution: If an entry or form factor cannot be resolved.
    """
    scale = generate_type_scale(base_font_size, scale_ratio)
    stacks = build_font_stacks(font_family)
    targets = [str(ff) for ff in form_factors]

    result: dict[str, dict[str, dict[str, Any]]] = {}
    for path, definition in TOKEN_CATALOG.items():
        result[path] = {
            form_factor: {"$value": resolve_typography_value(definition, scale, stacks, form_factor)}
            for form_factor in targets
        }

    logger.debug(
        f"Resolved {len(result)} typography tokens for {targets} "
        f"(base={base_font_size}, ratio={scale_ratio})"
    )
    return result
