"""Core tokensmith functionality: IR, color math, generators, assembly, config loading."""

from . import ir
from .aliases import UnresolvedAliasError, find_unresolved_aliases, resolve_alias
from .designspec_loader import load_designspec, parse_design_input, save_designspec
from .dtcg_export import TokenFile, export_json, export_tokens_file, generate
from .errors import (
    DesignSpecError,
    ErrorContext,
    IncompleteCatalogResolution,
    InvalidColorInput,
    InvalidConfiguration,
    TokenSmithError,
)

__all__ = [
    "ir",
    "TokenSmithError",
    "InvalidColorInput",
    "InvalidConfiguration",
    "IncompleteCatalogResolution",
    "DesignSpecError",
    "ErrorContext",
    "TokenFile",
    "generate",
    "export_json",
    "export_tokens_file",
    "load_designspec",
    "save_designspec",
    "parse_design_input",
    "resolve_alias",
    "find_unresolved_aliases",
    "UnresolvedAliasError",
]
