"""Base exception for repo-pulse."""

from typing import Any, Dict, Optional


class RepoPulseError(Exception):
    """Base exception for all repo-pulse errors.

    ``details`` carries structured context (paths, git commands, field names)
    that the CLI appends to the message and the HTTP layer returns as JSON.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form for error responses."""
        return {
            "type": type(self).__name__,
            "details": str(self),
            "context": {k: str(v) for k, v in self.details.items()},
        }
