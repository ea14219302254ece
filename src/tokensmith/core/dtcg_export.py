"""
W3C Design Token Community Group (DTCG) token file assembly and export.

Generates a DTCG tokens.json document from a DesignSystemInput.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .designspec_loader import parse_design_input
from .ir.designspec import ColorScale, DesignSystemInput, GeneratedPalettes
from .mode import detect_light_mode
from .palette import generate_palettes
from .semantic_colors import generate_semantic_colors
from .theme_generators import (
    generate_elevation_scale,
    generate_radius_scale,
    generate_spacing_scale,
)
from .typography import generate_typography_system

logger = logging.getLogger(__name__)

TOKENS_SUFFIX = ".tokens.json"

# Status scales are published under their hue names
_STATUS_SCALE_NAMES: dict[str, str] = {
    "success": "green",
    "warning": "amber",
    "error": "red",
    "info": "blue",
}


def _freeze(node: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(node, Mapping):
        return MappingProxyType({key: _freeze(value) for key, value in node.items()})
    if isinstance(node, list | tuple):
        return tuple(_freeze(value) for value in node)
    return node


def _thaw(node: Any) -> Any:
    """Rebuild plain dicts and lists from a frozen token group."""
    if isinstance(node, Mapping):
        return {key: _thaw(value) for key, value in node.items()}
    if isinstance(node, tuple):
        return [_thaw(value) for value in node]
    return node


class TokenFile(BaseModel):
    """Root of a generated token document. Immutable once built.

    Every group is stored as a read-only mapping; nested lists become tuples.
    """

    model_config = ConfigDict(frozen=True)

    color: Mapping[str, Any]
    typography: Mapping[str, Any]
    spacing: Mapping[str, Any]
    radius: Mapping[str, Any]
    elevation: Mapping[str, Any]

    @field_validator("color", "typography", "spacing", "radius", "elevation")
    @classmethod
    def _freeze_group(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(value)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable copy of the document in exchange-format shape."""
        return {
            "color": _thaw(self.color),
            "typography": _thaw(self.typography),
            "spacing": _thaw(self.spacing),
            "radius": _thaw(self.radius),
            "elevation": _thaw(self.elevation),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# =============================================================================
# Assembly
# =============================================================================


def format_color_scale(scale: ColorScale) -> dict[str, Any]:
    """Express a color scale as DTCG color tokens keyed by step."""
    return {
        str(step): {
            "$value": {
                "colorSpace": "srgb",
                "components": list(entry.srgb),
                "hex": entry.hex,
            }
        }
        for step, entry in scale.items()
    }


def format_primitives(palettes: GeneratedPalettes) -> dict[str, Any]:
    """Primitive color group: brand scales, neutral, then status hues."""
    primitive: dict[str, Any] = {
        "primary": format_color_scale(palettes.primary),
        "neutral": format_color_scale(palettes.neutral),
    }
    if palettes.secondary is not None:
        primitive["secondary"] = format_color_scale(palettes.secondary)
    if palettes.accent is not None:
        primitive["accent"] = format_color_scale(palettes.accent)
    for status, scale_name in _STATUS_SCALE_NAMES.items():
        primitive[scale_name] = format_color_scale(getattr(palettes.status, status))
    return primitive


def format_typography(typography: Mapping[str, Any]) -> dict[str, Any]:
    """Reshape 'category.size' paths into nested category/size groups."""
    result: dict[str, dict[str, Any]] = {}
    for path, form_factors in typography.items():
        category, size = path.split(".", 1)
        result.setdefault(category, {})[size] = form_factors
    return result


def assemble_token_file(
    *,
    palettes: GeneratedPalettes,
    semantic_colors: Mapping[str, Any],
    typography: Mapping[str, Any],
    spacing: Mapping[str, Any],
    radius: Mapping[str, Any],
    elevation: Mapping[str, Any],
) -> TokenFile:
    """Merge all generator outputs into the five typed top-level groups."""
    return TokenFile(
        color={
            "$type": "color",
            "primitive": format_primitives(palettes),
            "semantic": dict(semantic_colors),
        },
        typography={"$type": "typography", **format_typography(typography)},
        spacing={"$type": "dimension", **spacing},
        radius={"$type": "dimension", **radius},
        elevation={"$type": "shadow", **elevation},
    )


def generate(design: DesignSystemInput | Mapping[str, Any]) -> TokenFile:
    """Generate the complete token file for a design system.

    Args:
        design: DesignSystemInput, or a mapping that is validated into one.

    Returns:
        Immutable TokenFile.

    Raises:
        InvalidColorInput: If any seed color fails to parse.
        InvalidConfiguration: If a configuration value is outside its fixed set.
        IncompleteCatalogResolution: If a typography token cannot be resolved.
    """
    if not isinstance(design, DesignSystemInput):
        design = parse_design_input(design)

    logger.debug(f"Generating tokens for {design.system_name!r}")

    is_light_mode = detect_light_mode(design.colors.background.default)
    typo = design.typography

    token_file = assemble_token_file(
        palettes=generate_palettes(design),
        semantic_colors=generate_semantic_colors(is_light_mode),
        typography=generate_typography_system(
            typo.font_family,
            typo.base_font_size,
            typo.scale_ratio,
            design.form_factors,
        ),
        spacing=generate_spacing_scale(design.spacing.grid_unit),
        radius=generate_radius_scale(design.radius.style),
        elevation=generate_elevation_scale(is_light_mode),
    )

    logger.debug(f"Generated tokens for {design.system_name!r} (light_mode={is_light_mode})")
    return token_file


# =============================================================================
# Export
# =============================================================================


def export_json(token_file: TokenFile, indent: int | None = 2) -> str:
    """Serialize a token file to a JSON document."""
    return token_file.to_json(indent=indent)


def tokens_filename(system_name: str) -> str:
    """File name for a design system's tokens, always ending in .tokens.json."""
    if system_name.endswith(TOKENS_SUFFIX):
        return system_name
    slug = re.sub(r"[^a-z0-9]+", "-", system_name.lower()).strip("-") or "design-tokens"
    return f"{slug}{TOKENS_SUFFIX}"


def export_tokens_file(token_file: TokenFile, output_path: Path, indent: int | None = 2) -> Path:
    """Write a token file as JSON.

    Args:
        token_file: Generated token file.
        output_path: Path to write (parent directories are created).
        indent: JSON indentation.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(export_json(token_file, indent=indent), encoding="utf-8")

    logger.info(f"Wrote design tokens to {output_path}")
    return output_path
