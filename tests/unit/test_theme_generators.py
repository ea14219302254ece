"""Tests for spacing, radius and elevation generators."""

from __future__ import annotations

import pytest


class TestSpacing:
    def test_grid_8(self):
        from tokensmith.core.theme_generators import generate_spacing_scale

        spacing = generate_spacing_scale(8)
        assert spacing["4"]["$value"] == {"value": 32, "unit": "px"}
        assert spacing["0-5"]["$value"] == {"value": 4, "unit": "px"}
        assert spacing["semantic.md"]["$value"] == "{spacing.4}"

    def test_grid_4(self):
        from tokensmith.core.theme_generators import generate_spacing_scale

        spacing = generate_spacing_scale(4)
        assert spacing["0"]["$value"]["value"] == 0
        assert spacing["1-5"]["$value"]["value"] == 6
        assert spacing["24"]["$value"]["value"] == 96
        assert len(spacing) == 16 + 9

    def test_semantic_aliases_point_into_scale(self):
        from tokensmith.core.theme_generators import generate_spacing_scale

        spacing = generate_spacing_scale(8)
        for key, token in spacing.items():
            if key.startswith("semantic."):
                target = token["$value"][len("{spacing.") : -1]
                assert target in spacing

    @pytest.mark.parametrize("grid_unit", [6, 0, True, "8"])
    def test_invalid_grid_unit(self, grid_unit):
        from tokensmith.core.errors import InvalidConfiguration
        from tokensmith.core.theme_generators import generate_spacing_scale

        with pytest.raises(InvalidConfiguration):
            generate_spacing_scale(grid_unit)

    def test_spacing_key(self):
        from tokensmith.core.theme_generators import spacing_key

        assert spacing_key(4) == "4"
        assert spacing_key(2.0) == "2"
        assert spacing_key(2.5) == "2-5"


class TestRadius:
    @pytest.mark.parametrize("style", ["sharp", "rounded", "pill"])
    def test_fixed_endpoints(self, style):
        from tokensmith.core.theme_generators import generate_radius_scale

        radius = generate_radius_scale(style)
        assert radius["none"]["$value"] == {"value": 0, "unit": "px"}
        assert radius["full"]["$value"] == {"value": 9999, "unit": "px"}

    def test_rounded_md(self):
        from tokensmith.core.ir import RadiusStyle
        from tokensmith.core.theme_generators import generate_radius_scale

        assert generate_radius_scale(RadiusStyle.ROUNDED)["md"]["$value"]["value"] == 8

    def test_unknown_style(self):
        from tokensmith.core.errors import InvalidConfiguration
        from tokensmith.core.theme_generators import generate_radius_scale

        with pytest.raises(InvalidConfiguration) as exc_info:
            generate_radius_scale("round")
        assert exc_info.value.field == "radius.style"


class TestElevation:
    def test_tiers(self):
        from tokensmith.core.theme_generators import generate_elevation_scale

        elevation = generate_elevation_scale(True)
        assert list(elevation) == ["none", "sm", "md", "lg", "xl"]
        for token in elevation.values():
            assert token["$description"]

    def test_single_and_layered(self):
        from tokensmith.core.theme_generators import generate_elevation_scale

        elevation = generate_elevation_scale(True)
        assert isinstance(elevation["none"]["$value"], dict)
        assert isinstance(elevation["sm"]["$value"], dict)
        for tier in ("md", "lg", "xl"):
            assert len(elevation[tier]["$value"]) == 2

    def test_light_alpha(self):
        from tokensmith.core.theme_generators import generate_elevation_scale

        elevation = generate_elevation_scale(True)
        assert elevation["none"]["$value"]["color"]["alpha"] == 0
        assert elevation["sm"]["$value"]["color"]["alpha"] == 0.1
        first, second = elevation["md"]["$value"]
        assert first["color"]["alpha"] == 0.1
        assert second["color"]["alpha"] == 0.06

    def test_dark_alpha(self):
        from tokensmith.core.theme_generators import generate_elevation_scale

        elevation = generate_elevation_scale(False)
        assert elevation["sm"]["$value"]["color"]["alpha"] == 0.3
        first, second = elevation["md"]["$value"]
        assert first["color"]["alpha"] == 0.3
        assert second["color"]["alpha"] == 0.18

    def test_shadow_shape(self):
        from tokensmith.core.theme_generators import generate_elevation_scale

        shadow = generate_elevation_scale(True)["sm"]["$value"]
        assert shadow["color"]["colorSpace"] == "srgb"
        assert shadow["color"]["components"] == [0, 0, 0]
        assert shadow["offsetX"] == {"value": 0, "unit": "px"}
        assert shadow["offsetY"] == {"value": 1, "unit": "px"}
        assert shadow["blur"] == {"value": 2, "unit": "px"}
