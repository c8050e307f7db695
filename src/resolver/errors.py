"""Request rejection errors.

Every error here maps to an HTTP 400 with a plain-text message; nothing
else about the failure is exposed to the caller.
"""

from __future__ import annotations

from typing import Optional


class ResolutionError(Exception):
    """Base class for requests rejected before any resolution runs."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingField(ResolutionError):
    """A required parameter is absent or empty after normalization."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Missing required field: {field}")
        self.field = field


class NoValidCandidates(ResolutionError):
    """A list parameter parsed to zero usable entries."""

    def __init__(self, field: str) -> None:
        super().__init__(f"No valid numbers in {field}")
        self.field = field


class InvalidInput(ResolutionError):
    """The phone number is empty once normalized."""

    def __init__(self, message: str = "Invalid input: empty after normalization") -> None:
        super().__init__(message)


__all__ = ["ResolutionError", "MissingField", "NoValidCandidates", "InvalidInput"]
