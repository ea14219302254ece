"""
DesignSpec persistence layer for tokensmith.

Handles reading and writing design-system configurations to designsystem.yaml
in the project root. The configuration drives deterministic token generation
from a small set of declarative parameters.

Default location: {project_root}/designsystem.yaml
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import (
    DesignSpecError,
    ErrorContext,
    InvalidColorInput,
    InvalidConfiguration,
)
from .ir.designspec import (
    BackgroundInput,
    BackgroundMode,
    ColorInput,
    DesignSystemInput,
    FontFamilyInput,
    RadiusInput,
    SpacingInput,
    TypographyInput,
)
from .oklch import hex_to_oklch, is_valid_hex

logger = logging.getLogger(__name__)

DESIGNSPEC_FILE = "designsystem.yaml"

# Leaf fields under "colors" that hold hex strings
_HEX_COLOR_FIELDS = frozenset({"primary", "secondary", "accent", "default"})


# =============================================================================
# Path helpers
# =============================================================================


def get_designspec_path(project_root: Path) -> Path:
    """Get the designsystem.yaml file path."""
    return project_root / DESIGNSPEC_FILE


def designspec_exists(project_root: Path) -> bool:
    """Check if a designsystem.yaml exists in the project."""
    return get_designspec_path(project_root).exists()


# =============================================================================
# Parsing
# =============================================================================


def parse_design_input(data: Mapping[str, Any]) -> DesignSystemInput:
    """Validate raw configuration data into a DesignSystemInput.

    Accepts snake_case or camelCase keys.

    Raises:
        InvalidColorInput: If a hex color field has the wrong type.
        InvalidConfiguration: If any other field fails validation.
    """
    if not isinstance(data, Mapping):
        raise InvalidConfiguration(
            "design system configuration must be a mapping",
            ErrorContext(field="<root>", value=type(data).__name__),
        )
    try:
        return DesignSystemInput.model_validate(dict(data))
    except ValidationError as e:
        first = e.errors()[0]
        loc = [str(part) for part in first.get("loc", ())]
        field = ".".join(loc) or "<root>"
        context = ErrorContext(field=field, value=first.get("input"))
        message = first.get("msg", str(e))
        if loc and loc[0] == "colors" and loc[-1] in _HEX_COLOR_FIELDS:
            raise InvalidColorInput(message, context) from e
        raise InvalidConfiguration(message, context) from e


# =============================================================================
# Loading
# =============================================================================


def load_designspec(project_root: Path, *, use_defaults: bool = True) -> DesignSystemInput:
    """Load the design-system configuration from designsystem.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return the default configuration when the file doesn't exist.

    Returns:
        DesignSystemInput instance.

    Raises:
        DesignSpecError: If file doesn't exist (when use_defaults=False), cannot be
            read, or is not YAML.
        InvalidConfiguration: If the YAML does not describe a valid configuration.
    """
    designspec_path = get_designspec_path(project_root)

    if not designspec_path.exists():
        if use_defaults:
            logger.debug("No designsystem.yaml found, using defaults")
            return create_default_designspec()
        raise DesignSpecError(f"Design system config not found: {designspec_path}")

    try:
        content = designspec_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError) as e:
        raise DesignSpecError(f"Cannot read {designspec_path}: {e}") from e
    except yaml.YAMLError as e:
        raise DesignSpecError(f"Invalid YAML in {designspec_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty designsystem.yaml at {designspec_path}, using defaults")
            return create_default_designspec()
        raise DesignSpecError(f"Empty or invalid YAML in {designspec_path}")

    return parse_design_input(data)


def save_designspec(project_root: Path, designspec: DesignSystemInput) -> Path:
    """Save the configuration to designsystem.yaml.

    Args:
        project_root: Root directory of the project.
        designspec: DesignSystemInput to save.

    Returns:
        Path to the saved designsystem.yaml file.
    """
    designspec_path = get_designspec_path(project_root)

    data = designspec.model_dump(mode="json", exclude_none=True)

    designspec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved design system config to {designspec_path}")
    return designspec_path


# =============================================================================
# Validation
# =============================================================================


class DesignSpecValidationResult:
    """Result of design-system configuration validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return (
            f"DesignSpecValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"
        )


_SYSTEM_NAME_RE = re.compile(r"^[a-zA-Z0-9\s\-_]+$")
_FONT_FAMILY_RE = re.compile(r"^[a-zA-Z0-9\s\-_',]+$")

# Primary/background lightness closer than this reads as low contrast
_MIN_BRAND_CONTRAST = 0.15


def _check_system_name(name: str, result: DesignSpecValidationResult) -> None:
    stripped = name.strip()
    if not stripped:
        result.add_error("system_name is required")
    elif len(stripped) < 2:
        result.add_error("system_name must be at least 2 characters")
    elif len(stripped) > 50:
        result.add_error("system_name must be less than 50 characters")
    elif not _SYSTEM_NAME_RE.match(name):
        result.add_error(
            "system_name can only contain letters, numbers, spaces, hyphens, and underscores"
        )


def _check_font_family(field: str, family: str | None, result: DesignSpecValidationResult) -> None:
    if family is None:
        return
    if len(family.strip()) < 2:
        result.add_error(f"{field} must be at least 2 characters, got {family!r}")
    elif not _FONT_FAMILY_RE.match(family):
        result.add_error(f"{field} contains invalid characters: {family!r}")


def validate_designspec(designspec: DesignSystemInput) -> DesignSpecValidationResult:
    """Validate a configuration for semantic correctness.

    Structural problems (ratio, grid unit, radius style, base size) are already
    rejected by the model; this checks hex colors, names and brand contrast.

    Args:
        designspec: DesignSystemInput to validate.

    Returns:
        DesignSpecValidationResult with errors and warnings.
    """
    result = DesignSpecValidationResult()

    _check_system_name(designspec.system_name, result)

    colors = designspec.colors
    color_fields = {
        "colors.primary": colors.primary,
        "colors.secondary": colors.secondary,
        "colors.accent": colors.accent,
        "colors.background.default": colors.background.default,
    }
    for field, value in color_fields.items():
        if value is not None and not is_valid_hex(value):
            result.add_error(f"{field} must be a 3- or 6-digit hex color, got {value!r}")

    fonts = designspec.typography.font_family
    _check_font_family("typography.font_family.primary", fonts.primary, result)
    _check_font_family("typography.font_family.secondary", fonts.secondary, result)
    _check_font_family("typography.font_family.mono", fonts.mono, result)

    # Warnings only make sense once both colors parse
    if is_valid_hex(colors.primary) and is_valid_hex(colors.background.default):
        primary_l = hex_to_oklch(colors.primary).l
        background_l = hex_to_oklch(colors.background.default).l
        if abs(primary_l - background_l) < _MIN_BRAND_CONTRAST:
            result.add_warning(
                f"colors.primary lightness ({primary_l:.2f}) is close to the background "
                f"({background_l:.2f}); brand surfaces will have low contrast"
            )
        if colors.background.mode == BackgroundMode.CUSTOM and colors.background.default.upper() in (
            "#FFFFFF",
            "#FFF",
            "#000000",
            "#000",
        ):
            result.add_warning(
                "colors.background.mode is 'custom' but the background is pure "
                "white/black; 'pure' gives the same result"
            )

    return result


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_designspec(
    system_name: str = "Design System",
    primary: str = "#3B82F6",
) -> DesignSystemInput:
    """Create a default DesignSystemInput with sensible defaults.

    Args:
        system_name: Design system name.
        primary: Primary brand hex color.

    Returns:
        DesignSystemInput with defaults.
    """
    return DesignSystemInput(
        system_name=system_name,
        colors=ColorInput(primary=primary, background=BackgroundInput()),
        typography=TypographyInput(font_family=FontFamilyInput()),
        spacing=SpacingInput(),
        radius=RadiusInput(),
    )


def scaffold_designspec(
    project_root: Path,
    *,
    system_name: str = "Design System",
    primary: str = "#3B82F6",
    overwrite: bool = False,
) -> Path | None:
    """Create a default designsystem.yaml file.

    Args:
        project_root: Root directory of the project.
        system_name: Design system name.
        primary: Primary brand hex color.
        overwrite: If True, overwrite existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    designspec_path = get_designspec_path(project_root)

    if designspec_path.exists() and not overwrite:
        logger.debug(f"Skipping existing designsystem.yaml: {designspec_path}")
        return None

    project_root.mkdir(parents=True, exist_ok=True)
    designspec = create_default_designspec(system_name=system_name, primary=primary)
    return save_designspec(project_root, designspec)
