"""
tokensmith CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform

import typer

from tokensmith import __version__


def get_version() -> str:
    """Get tokensmith version from package metadata or fallback to __version__."""
    try:
        from importlib.metadata import version

        return version("tokensmith")
    except Exception:
        # Fallback if not installed as package
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokensmith {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL environment variable."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
