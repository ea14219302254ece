"""
Error types for tokensmith input parsing, generation, and loading.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorContext:
    """
    The input location an error refers to.

    Attributes:
        field: Dotted input path (e.g. "colors.background.default")
        value: The offending value as supplied
    """

    field: str
    value: Any = None

    def format(self) -> str:
        """
        Format the context as a human-readable prefix.

        Returns:
            Formatted string like: "colors.primary='not-a-color'"
        """
        return f"{self.field}={self.value!r}"


class TokenSmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    @property
    def field(self) -> str | None:
        return self.context.field if self.context else None

    @property
    def value(self) -> Any:
        return self.context.value if self.context else None

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class InvalidColorInput(TokenSmithError):
    """
    Raised when a color seed cannot be parsed.

    Examples:
    - Primary, secondary or accent color that is not a hex string
    - Background color with a wrong number of digits
    - A fixed status seed that fails to parse
    """

    pass


class InvalidConfiguration(TokenSmithError):
    """
    Raised when a configuration value is outside its enumerated set.

    Examples:
    - Scale ratio that is not one of the musical ratios
    - Grid unit other than 4 or 8
    - Unknown radius style or form factor
    - Base font size outside 10-24
    """

    pass


class IncompleteCatalogResolution(TokenSmithError):
    """
    Raised when a typography catalog entry cannot be resolved.

    Examples:
    - A catalog entry pointing at a scale step that was not generated
    - A role or form factor missing from a lookup table
    """

    pass


class DesignSpecError(TokenSmithError):
    """
    Raised when designsystem.yaml cannot be read or written.

    Examples:
    - Missing file when defaults are not allowed
    - Malformed YAML
    """

    pass


def make_color_error(field: str, value: Any, message: str | None = None) -> InvalidColorInput:
    """
    Helper to create an InvalidColorInput naming the offending value.

    Args:
        field: Dotted input path of the color
        value: The value that failed to parse
        message: Optional description (defaults to a generic one)

    Returns:
        InvalidColorInput with context attached
    """
    return InvalidColorInput(
        message or "not a valid 3- or 6-digit hex color",
        ErrorContext(field=field, value=value),
    )


def make_config_error(field: str, value: Any, message: str) -> InvalidConfiguration:
    """
    Helper to create an InvalidConfiguration with context.

    Args:
        field: Dotted input path
        value: The rejected value
        message: Error description

    Returns:
        InvalidConfiguration with context attached
    """
    return InvalidConfiguration(message, ErrorContext(field=field, value=value))
