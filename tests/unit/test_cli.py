"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tokensmith.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_project(tmp_path: Path):
    """Create a project with a designsystem.yaml."""
    (tmp_path / "designsystem.yaml").write_text(
        """
system_name: Test System
form_factors: [web, mobile]
colors:
  primary: "#3B82F6"
  background:
    default: "#FFFFFF"
    mode: pure
typography:
  font_family:
    primary: Inter
  base_font_size: 16
  scale_ratio: major_third
spacing:
  grid_unit: 8
radius:
  style: rounded
"""
    )
    return tmp_path


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "tokensmith" in result.output


def test_init_creates_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(
        app, ["init", "--project", str(tmp_path), "--name", "Acme UI", "--primary", "#FF5500"]
    )
    assert result.exit_code == 0
    assert (tmp_path / "designsystem.yaml").exists()


def test_init_keeps_existing(cli_runner: CliRunner, test_project: Path):
    before = (test_project / "designsystem.yaml").read_text()
    result = cli_runner.invoke(app, ["init", "--project", str(test_project)])
    assert result.exit_code == 0
    assert "already exists" in result.output
    assert (test_project / "designsystem.yaml").read_text() == before


def test_messages_with_long_paths_stay_on_one_line(cli_runner: CliRunner, tmp_path: Path):
    project = tmp_path / ("a-rather-long-directory-name-" * 4) / "design-system-project"
    result = cli_runner.invoke(app, ["init", "--project", str(project)])
    assert result.exit_code == 0
    assert f"Created {project.resolve() / 'designsystem.yaml'}" in result.output

    result = cli_runner.invoke(app, ["init", "--project", str(project)])
    assert result.exit_code == 0
    assert "already exists (use --force to overwrite)" in result.output


def test_validate_command_success(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["validate", "--project", str(test_project)])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_validate_command_with_errors(cli_runner: CliRunner, tmp_path: Path):
    (tmp_path / "designsystem.yaml").write_text("colors:\n  primary: not-a-color\n")
    result = cli_runner.invoke(app, ["validate", "--project", str(tmp_path)])
    assert result.exit_code == 1


def test_validate_missing_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["validate", "--project", str(tmp_path)])
    assert result.exit_code == 1


def test_generate_writes_default_file(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["generate", "--project", str(test_project)])
    assert result.exit_code == 0

    output = test_project / "test-system.tokens.json"
    assert output.exists()
    tokens = json.loads(output.read_text())
    assert set(tokens) == {"color", "typography", "spacing", "radius", "elevation"}
    assert set(tokens["typography"]["body"]["md"]) == {"web", "mobile"}


def test_generate_to_path(cli_runner: CliRunner, test_project: Path, tmp_path: Path):
    output = tmp_path / "build" / "tokens.json"
    result = cli_runner.invoke(
        app, ["generate", "--project", str(test_project), "--output", str(output)]
    )
    assert result.exit_code == 0
    assert json.loads(output.read_text())["spacing"]["4"]["$value"]["value"] == 32


def test_generate_to_stdout(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["generate", "--project", str(test_project), "-o", "-"])
    assert result.exit_code == 0
    tokens = json.loads(result.stdout)
    assert tokens["color"]["primitive"]["neutral"]["50"]["$value"]["hex"] == "#FFFFFF"


def test_generate_invalid_color(cli_runner: CliRunner, tmp_path: Path):
    (tmp_path / "designsystem.yaml").write_text("colors:\n  primary: not-a-color\n")
    result = cli_runner.invoke(app, ["generate", "--project", str(tmp_path)])
    assert result.exit_code == 1
    assert not list(tmp_path.glob("*.tokens.json"))


def test_palette(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["palette", "--project", str(test_project)])
    assert result.exit_code == 0
