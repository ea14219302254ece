"""
Design token commands for tokensmith CLI.

- init: scaffold designsystem.yaml
- validate: check designsystem.yaml for errors and warnings
- generate: write the DTCG tokens.json document
- palette: preview the primitive color scales
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tokensmith.core.designspec_loader import (
    get_designspec_path,
    load_designspec,
    scaffold_designspec,
    validate_designspec,
)
from tokensmith.core.dtcg_export import export_json, export_tokens_file, generate, tokens_filename
from tokensmith.core.errors import TokenSmithError
from tokensmith.core.ir.designspec import PALETTE_STEPS, ColorScale, DesignSystemInput
from tokensmith.core.oklch import oklch_to_css
from tokensmith.core.palette import generate_palettes

console = Console()
err_console = Console(stderr=True)


def _fail(error: TokenSmithError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {error}", soft_wrap=True)
    return typer.Exit(code=1)


def _load(project_dir: Path) -> DesignSystemInput:
    """Load designsystem.yaml, exiting with a message on failure."""
    try:
        return load_designspec(project_dir.resolve(), use_defaults=False)
    except TokenSmithError as e:
        raise _fail(e) from e


def init_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    name: str = typer.Option("Design System", "--name", "-n", help="Design system name"),
    primary: str = typer.Option("#3B82F6", "--primary", help="Primary brand hex color"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """
    Create a designsystem.yaml with sensible defaults.

    Examples:
        tokensmith init                            # Defaults in current directory
        tokensmith init -n "Acme UI" --primary "#FF5500"
    """
    path = scaffold_designspec(
        project_dir.resolve(), system_name=name, primary=primary, overwrite=force
    )
    if path is None:
        console.print(
            f"[yellow]{get_designspec_path(project_dir)} already exists[/yellow] "
            "(use --force to overwrite)",
            soft_wrap=True,
        )
        return
    console.print(f"[green]Created[/green] {path}", soft_wrap=True)


def validate_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
) -> None:
    """
    Validate designsystem.yaml.

    Exits with code 1 if there are errors; warnings are reported but allowed.
    """
    designspec = _load(project_dir)
    result = validate_designspec(designspec)

    for error in result.errors:
        console.print(f"  [red][error][/red] {error}")
    for warning in result.warnings:
        console.print(f"  [yellow][warn][/yellow] {warning}")

    if not result.is_valid:
        console.print(f"[red]{len(result.errors)} error(s)[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] {designspec.system_name} ({len(result.warnings)} warning(s))")


def generate_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file, or '-' for stdout (default: <system-name>.tokens.json)",
    ),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """
    Generate the DTCG design token file.

    Examples:
        tokensmith generate                     # Writes <system-name>.tokens.json
        tokensmith generate -o tokens.json
        tokensmith generate -o -                # Print to stdout
    """
    designspec = _load(project_dir)
    try:
        token_file = generate(designspec)
    except TokenSmithError as e:
        raise _fail(e) from e

    if output == "-":
        sys.stdout.write(export_json(token_file, indent=indent) + "\n")
        return

    target = Path(output) if output else project_dir / tokens_filename(designspec.system_name)
    written = export_tokens_file(token_file, target, indent=indent)
    console.print(f"[green]Design tokens written to[/green] {written}", soft_wrap=True)


def _scale_row(name: str, scale: ColorScale) -> list[str]:
    cells = [name]
    for step in PALETTE_STEPS:
        entry = scale[step]
        cells.append(
            f"[on {entry.hex}]    [/] {entry.hex}\n"
            f"[dim]{oklch_to_css(entry.oklch.l, entry.oklch.c, entry.oklch.h)}[/dim]"
        )
    return cells


def palette_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
) -> None:
    """Preview every primitive color scale."""
    designspec = _load(project_dir)
    try:
        palettes = generate_palettes(designspec)
    except TokenSmithError as e:
        raise _fail(e) from e

    table = Table(title=f"{designspec.system_name} palette")
    table.add_column("Scale", style="bold")
    for step in PALETTE_STEPS:
        table.add_column(str(step))

    scales: dict[str, ColorScale | None] = {
        "primary": palettes.primary,
        "secondary": palettes.secondary,
        "accent": palettes.accent,
        "neutral": palettes.neutral,
        "success": palettes.status.success,
        "warning": palettes.status.warning,
        "error": palettes.status.error,
        "info": palettes.status.info,
    }
    for name, scale in scales.items():
        if scale is not None:
            table.add_row(*_scale_row(name, scale))

    console.print(table)
