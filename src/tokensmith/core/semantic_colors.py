"""
Semantic color mapping.

Maps abstract roles (background, text, border, interactive, status) to alias
references into the primitive palette. There are two complete static tables,
one per mode; the background lightness picks one and they are never blended.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from .errors import TokenSmithError


def _ref(path: str) -> dict[str, str]:
    """Alias token pointing at a primitive color step (e.g. 'neutral.50')."""
    return {"$value": f"{{color.primitive.{path}}}"}


def _status(scale: str, default: int, subtle: int, text: int) -> dict[str, Any]:
    return {
        "default": _ref(f"{scale}.{default}"),
        "subtle": _ref(f"{scale}.{subtle}"),
        "text": _ref(f"{scale}.{text}"),
    }


_BACKGROUND_DESCRIPTION = "Background colors for surfaces and containers"
_TEXT_DESCRIPTION = "Text colors for content"
_BORDER_DESCRIPTION = "Border colors for dividers and outlines"
_INTERACTIVE_DESCRIPTION = "Colors for interactive elements"


LIGHT_SEMANTICS: dict[str, Any] = {
    "background": {
        "$description": _BACKGROUND_DESCRIPTION,
        "default": _ref("neutral.50"),
        "subtle": _ref("neutral.100"),
        "muted": _ref("neutral.200"),
        "inverse": _ref("neutral.900"),
        "brand": _ref("primary.500"),
        "brand-subtle": _ref("primary.50"),
    },
    "text": {
        "$description": _TEXT_DESCRIPTION,
        "default": _ref("neutral.900"),
        "muted": _ref("neutral.600"),
        "subtle": _ref("neutral.400"),
        "inverse": _ref("neutral.50"),
        "brand": _ref("primary.600"),
        "on-brand": _ref("neutral.50"),
    },
    "border": {
        "$description": _BORDER_DESCRIPTION,
        "default": _ref("neutral.200"),
        "muted": _ref("neutral.100"),
        "strong": _ref("neutral.300"),
        "focus": _ref("primary.500"),
    },
    "interactive": {
        "$description": _INTERACTIVE_DESCRIPTION,
        "default": _ref("primary.500"),
        "hover": _ref("primary.600"),
        "active": _ref("primary.700"),
        "disabled": _ref("neutral.300"),
    },
    "status": {
        "success": _status("green", 500, 50, 700),
        "warning": _status("amber", 500, 50, 700),
        "error": _status("red", 500, 50, 700),
        "info": _status("blue", 500, 50, 700),
    },
}

DARK_SEMANTICS: dict[str, Any] = {
    "background": {
        "$description": _BACKGROUND_DESCRIPTION,
        "default": _ref("neutral.900"),
        "subtle": _ref("neutral.800"),
        "muted": _ref("neutral.700"),
        "inverse": _ref("neutral.50"),
        "brand": _ref("primary.600"),
        "brand-subtle": _ref("primary.900"),
    },
    "text": {
        "$description": _TEXT_DESCRIPTION,
        "default": _ref("neutral.50"),
        "muted": _ref("neutral.400"),
        "subtle": _ref("neutral.500"),
        "inverse": _ref("neutral.900"),
        "brand": _ref("primary.400"),
        "on-brand": _ref("neutral.900"),
    },
    "border": {
        "$description": _BORDER_DESCRIPTION,
        "default": _ref("neutral.700"),
        "muted": _ref("neutral.800"),
        "strong": _ref("neutral.600"),
        "focus": _ref("primary.400"),
    },
    "interactive": {
        "$description": _INTERACTIVE_DESCRIPTION,
        "default": _ref("primary.500"),
        "hover": _ref("primary.400"),
        "active": _ref("primary.300"),
        "disabled": _ref("neutral.600"),
    },
    "status": {
        "success": _status("green", 400, 900, 300),
        "warning": _status("amber", 400, 900, 300),
        "error": _status("red", 400, 900, 300),
        "info": _status("blue", 400, 900, 300),
    },
}


def role_paths(semantics: dict[str, Any], prefix: str = "") -> Iterator[str]:
    """Yield the dotted role path of every alias token in a semantic table."""
    for key, node in semantics.items():
        if key.startswith("$"):
            continue
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(node, dict) and "$value" in node:
            yield path
        elif isinstance(node, dict):
            yield from role_paths(node, path)


def _check_symmetry() -> None:
    light = list(role_paths(LIGHT_SEMANTICS))
    dark = list(role_paths(DARK_SEMANTICS))
    if light != dark:
        missing = sorted(set(light) ^ set(dark))
        raise TokenSmithError(f"Light and dark semantic tables differ: {missing}")


_check_symmetry()


def generate_semantic_colors(is_light_mode: bool) -> dict[str, Any]:
    """Return a fresh copy of the light or dark semantic color table."""
    return copy.deepcopy(LIGHT_SEMANTICS if is_light_mode else DARK_SEMANTICS)
