"""Shared pytest fixtures for tokensmith tests."""

from pathlib import Path
from typing import Any

import pytest

from tokensmith.core.ir import (
    BackgroundInput,
    ColorInput,
    DesignSystemInput,
    FontFamilyInput,
    RadiusInput,
    SpacingInput,
    TypographyInput,
)


@pytest.fixture
def example_input() -> DesignSystemInput:
    """Blue primary on white, Inter 16px, major third, 8px grid, rounded, web."""
    return DesignSystemInput(
        system_name="Example",
        form_factors=["web"],
        colors=ColorInput(
            primary="#3B82F6",
            background=BackgroundInput(default="#FFFFFF", mode="pure"),
        ),
        typography=TypographyInput(
            font_family=FontFamilyInput(primary="Inter"),
            base_font_size=16,
            scale_ratio=1.25,
        ),
        spacing=SpacingInput(grid_unit=8),
        radius=RadiusInput(style="rounded"),
    )


@pytest.fixture
def camel_case_payload() -> dict[str, Any]:
    """The same configuration as a hosting UI would post it."""
    return {
        "systemName": "Example",
        "formFactors": ["web", "tablet", "mobile"],
        "colors": {
            "primary": "#3B82F6",
            "secondary": "#8B5CF6",
            "background": {"default": "#111827", "mode": "tinted"},
        },
        "typography": {
            "fontFamily": {"primary": "Inter", "secondary": "Playfair Display"},
            "baseFontSize": 16,
            "scaleRatio": 1.25,
        },
        "spacing": {"gridUnit": 4},
        "radius": {"style": "pill"},
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory."""
    return tmp_path
