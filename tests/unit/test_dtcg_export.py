"""End-to-end tests for token file generation and export."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError


class TestGenerate:
    def test_top_level_groups(self, example_input):
        from tokensmith.core.dtcg_export import generate

        tokens = generate(example_input).to_dict()
        assert list(tokens) == ["color", "typography", "spacing", "radius", "elevation"]
        assert tokens["color"]["$type"] == "color"
        assert tokens["typography"]["$type"] == "typography"
        assert tokens["spacing"]["$type"] == "dimension"
        assert tokens["radius"]["$type"] == "dimension"
        assert tokens["elevation"]["$type"] == "shadow"

    def test_example_values(self, example_input):
        from tokensmith.core.dtcg_export import generate
        from tokensmith.core.oklch import hex_to_oklch

        tokens = generate(example_input).to_dict()
        primitive = tokens["color"]["primitive"]

        assert list(primitive) == ["primary", "neutral", "green", "amber", "red", "blue"]
        primary_500 = primitive["primary"]["500"]["$value"]
        assert primary_500["colorSpace"] == "srgb"
        assert len(primary_500["components"]) == 3
        assert hex_to_oklch(primary_500["hex"]).l == pytest.approx(0.55, abs=0.01)
        assert primitive["neutral"]["50"]["$value"]["hex"] == "#FFFFFF"

        assert tokens["color"]["semantic"]["background"]["default"]["$value"] == (
            "{color.primitive.neutral.50}"
        )
        assert tokens["spacing"]["4"]["$value"] == {"value": 32, "unit": "px"}
        assert tokens["spacing"]["semantic.md"]["$value"] == "{spacing.4}"
        assert tokens["typography"]["body"]["md"]["web"]["$value"]["fontSize"]["value"] == 16
        assert tokens["radius"]["md"]["$value"]["value"] == 8
        assert tokens["elevation"]["sm"]["$value"]["color"]["alpha"] == 0.1

    def test_all_aliases_resolve(self, example_input, camel_case_payload):
        from tokensmith.core.aliases import find_unresolved_aliases, iter_aliases
        from tokensmith.core.dtcg_export import generate

        for design in (example_input, camel_case_payload):
            tokens = generate(design).to_dict()
            assert list(iter_aliases(tokens))
            assert find_unresolved_aliases(tokens) == []

    def test_dark_background(self, camel_case_payload):
        from tokensmith.core.dtcg_export import generate

        tokens = generate(camel_case_payload).to_dict()
        semantic = tokens["color"]["semantic"]
        assert semantic["background"]["default"]["$value"] == "{color.primitive.neutral.900}"
        assert tokens["elevation"]["sm"]["$value"]["color"]["alpha"] == 0.3
        assert "secondary" in tokens["color"]["primitive"]
        assert tokens["radius"]["md"]["$value"]["value"] == 16
        assert set(tokens["typography"]["display"]["lg"]) == {"web", "tablet", "mobile"}

    def test_deterministic(self, example_input):
        from tokensmith.core.dtcg_export import export_json, generate

        assert export_json(generate(example_input)) == export_json(generate(example_input))

    def test_invalid_primary(self):
        from tokensmith.core.dtcg_export import generate
        from tokensmith.core.errors import InvalidColorInput
        from tokensmith.core.ir import ColorInput, DesignSystemInput

        design = DesignSystemInput(colors=ColorInput(primary="not-a-color"))
        with pytest.raises(InvalidColorInput) as exc_info:
            generate(design)
        assert exc_info.value.field == "colors.primary"
        assert "not-a-color" in str(exc_info.value)

    def test_invalid_background(self):
        from tokensmith.core.dtcg_export import generate
        from tokensmith.core.errors import InvalidColorInput
        from tokensmith.core.ir import BackgroundInput, ColorInput, DesignSystemInput

        design = DesignSystemInput(
            colors=ColorInput(background=BackgroundInput(default="#GGGGGG"))
        )
        with pytest.raises(InvalidColorInput) as exc_info:
            generate(design)
        assert exc_info.value.field == "colors.background.default"

    def test_invalid_ratio_in_mapping(self, camel_case_payload):
        from tokensmith.core.dtcg_export import generate
        from tokensmith.core.errors import InvalidConfiguration

        camel_case_payload["typography"]["scaleRatio"] = 1.3
        with pytest.raises(InvalidConfiguration):
            generate(camel_case_payload)

    def test_invalid_background_mode_in_mapping(self, camel_case_payload):
        from tokensmith.core.dtcg_export import generate
        from tokensmith.core.errors import InvalidColorInput, InvalidConfiguration

        camel_case_payload["colors"]["background"]["mode"] = "sepia"
        with pytest.raises(InvalidConfiguration) as exc_info:
            generate(camel_case_payload)
        assert not isinstance(exc_info.value, InvalidColorInput)
        assert exc_info.value.field == "colors.background.mode"

    def test_invalid_ratio_in_model(self):
        from tokensmith.core.ir import TypographyInput

        with pytest.raises(ValidationError):
            TypographyInput(scale_ratio=1.3)


class TestTokenFile:
    def test_immutable(self, example_input):
        from tokensmith.core.dtcg_export import generate

        token_file = generate(example_input)
        with pytest.raises(ValidationError):
            token_file.color = {}  # type: ignore[misc]

    def test_to_dict_is_a_copy(self, example_input):
        from tokensmith.core.dtcg_export import generate

        token_file = generate(example_input)
        tokens = token_file.to_dict()
        tokens["spacing"]["4"]["$value"]["value"] = 0
        assert token_file.to_dict()["spacing"]["4"]["$value"]["value"] == 32

    def test_groups_are_read_only(self, example_input):
        from tokensmith.core.dtcg_export import generate

        token_file = generate(example_input)
        with pytest.raises(TypeError):
            token_file.spacing["4"]["$value"]["value"] = 0  # type: ignore[index]
        with pytest.raises(AttributeError):
            token_file.color["primitive"].pop("primary")  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            token_file.color["primitive"]["primary"]["500"]["$value"]["components"].append(0)

        tokens = token_file.to_dict()
        assert tokens["spacing"]["4"]["$value"]["value"] == 32
        assert "primary" in tokens["color"]["primitive"]
        assert len(tokens["color"]["primitive"]["primary"]["500"]["$value"]["components"]) == 3

    def test_to_dict_returns_plain_containers(self, example_input):
        from tokensmith.core.dtcg_export import generate

        tokens = generate(example_input).to_dict()
        assert type(tokens["color"]["primitive"]) is dict
        assert type(tokens["color"]["primitive"]["primary"]["500"]["$value"]["components"]) is list
        assert type(tokens["elevation"]["md"]["$value"]) is list

    def test_json_round_trip(self, example_input):
        from tokensmith.core.dtcg_export import export_json, generate

        token_file = generate(example_input)
        assert json.loads(export_json(token_file)) == token_file.to_dict()


class TestExport:
    def test_tokens_filename(self):
        from tokensmith.core.dtcg_export import tokens_filename

        assert tokens_filename("Acme UI") == "acme-ui.tokens.json"
        assert tokens_filename("brand.tokens.json") == "brand.tokens.json"
        assert tokens_filename("!!!") == "design-tokens.tokens.json"

    def test_export_tokens_file(self, example_input, tmp_path):
        from tokensmith.core.dtcg_export import export_tokens_file, generate

        token_file = generate(example_input)
        output = tmp_path / "out" / "example.tokens.json"

        written = export_tokens_file(token_file, output)
        assert written == output
        assert json.loads(output.read_text()) == token_file.to_dict()
