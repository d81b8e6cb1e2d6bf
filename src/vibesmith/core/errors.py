"""
Error types for the vibesmith engine.

The engine degrades by omission or substitution for missing data; the
exceptions here cover contract violations by the caller.
"""

from __future__ import annotations


class VibesmithError(Exception):
    """Base exception for all vibesmith errors."""

    def __init__(self, message: str, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class InvalidGeneError(VibesmithError, ValueError):
    """
    Raised when a gene combination references a code outside its category.

    Examples:
    - hero="H13"
    - motion="M0"
    - chaos=1.5
    """

    pass


class InvalidColorError(VibesmithError, ValueError):
    """Raised when a color string cannot be parsed as hex."""

    pass


class ConfigError(VibesmithError):
    """Raised when engine configuration cannot be read or is invalid."""

    pass
