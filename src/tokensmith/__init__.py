"""tokensmith: deterministic design-token generation (OKLCH palettes, type scales, DTCG export)."""

from .core import (
    DesignSpecError,
    IncompleteCatalogResolution,
    InvalidColorInput,
    InvalidConfiguration,
    TokenFile,
    TokenSmithError,
    export_json,
    export_tokens_file,
    generate,
)
from .core.ir import DesignSystemInput

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DesignSystemInput",
    "TokenFile",
    "generate",
    "export_json",
    "export_tokens_file",
    "TokenSmithError",
    "InvalidColorInput",
    "InvalidConfiguration",
    "IncompleteCatalogResolution",
    "DesignSpecError",
]
