"""Error types raised by the setup flows."""

from typing import Any


class AppneuralError(Exception):
    """Fatal application error that aborts the current flow."""


class ValidationError(AppneuralError):
    """Raised when an input value is not acceptable.

    The ``context`` mapping carries the offending value and, where it
    applies, the set of valid values.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"
