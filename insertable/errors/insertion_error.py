from typing import Any


class InsertionError(Exception):
    """Exception raised when a failed insertion result is unwrapped."""

    def __init__(self, reason: Any, message: str | None = None):
        super().__init__(message or f"Insertion failed: {reason!r}")
        self.reason = reason
