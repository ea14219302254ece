"""Tests for the light/dark semantic color tables."""

from __future__ import annotations


class TestSemanticColors:
    def test_tables_have_identical_roles(self):
        from tokensmith.core.semantic_colors import DARK_SEMANTICS, LIGHT_SEMANTICS, role_paths

        assert list(role_paths(LIGHT_SEMANTICS)) == list(role_paths(DARK_SEMANTICS))

    def test_role_paths_skip_descriptions(self):
        from tokensmith.core.semantic_colors import LIGHT_SEMANTICS, role_paths

        paths = list(role_paths(LIGHT_SEMANTICS))
        assert "background.default" in paths
        assert "status.success.subtle" in paths
        assert not any("$description" in p for p in paths)

    def test_light_mode(self):
        from tokensmith.core.semantic_colors import generate_semantic_colors

        semantic = generate_semantic_colors(True)
        assert semantic["background"]["default"]["$value"] == "{color.primitive.neutral.50}"
        assert semantic["text"]["default"]["$value"] == "{color.primitive.neutral.900}"
        assert semantic["status"]["success"]["default"]["$value"] == "{color.primitive.green.500}"

    def test_dark_mode(self):
        from tokensmith.core.semantic_colors import generate_semantic_colors

        semantic = generate_semantic_colors(False)
        assert semantic["background"]["default"]["$value"] == "{color.primitive.neutral.900}"
        assert semantic["text"]["default"]["$value"] == "{color.primitive.neutral.50}"
        assert semantic["status"]["success"]["default"]["$value"] == "{color.primitive.green.400}"

    def test_groups_carry_descriptions(self):
        from tokensmith.core.semantic_colors import generate_semantic_colors

        semantic = generate_semantic_colors(True)
        for group in ("background", "text", "border", "interactive"):
            assert semantic[group]["$description"]

    def test_returns_fresh_copy(self):
        from tokensmith.core.semantic_colors import generate_semantic_colors

        first = generate_semantic_colors(True)
        first["background"]["default"]["$value"] = "changed"
        assert generate_semantic_colors(True)["background"]["default"]["$value"] != "changed"
