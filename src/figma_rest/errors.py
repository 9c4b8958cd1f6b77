"""Figma API - Errors."""
from typing import Any, Optional


class FigmaError(Exception):
    """Base error for the Figma client."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigError(FigmaError, ValueError):
    """Invalid local input, detected before any request is sent."""


class TransportError(FigmaError):
    """A request failed: network error, error status or malformed body.

    ``status`` is 0 when no response was received.
    """

    def __init__(
        self,
        message: str,
        status: int = 0,
        body: Any = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.status = status
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status:
            result["status"] = self.status
        return result
