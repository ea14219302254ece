"""
tokensmith CLI Package.

- tokens.py: init / validate / generate / palette commands
- utils.py: version and logging helpers
"""

import sys

import typer

from tokensmith.cli.tokens import (
    generate_command,
    init_command,
    palette_command,
    validate_command,
)
from tokensmith.cli.utils import configure_logging, get_version, version_callback

app = typer.Typer(
    help="""tokensmith – design token generator

Reads designsystem.yaml (brand color, background, fonts, scale ratio,
grid unit, radius style) and writes a W3C DTCG tokens.json document.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """tokensmith CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="init")(init_command)
app.command(name="validate")(validate_command)
app.command(name="generate")(generate_command)
app.command(name="palette")(palette_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "get_version", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
