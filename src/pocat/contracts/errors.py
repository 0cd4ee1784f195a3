"""Error definitions for the pocat package."""

from __future__ import annotations
from typing import Dict, Optional


class PocatError(Exception):
    """Base exception for all pocat errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(PocatError):
    """Malformed catalog syntax in one of the merge inputs.

    Carries the position of the failure so the caller can point the user
    at the offending input and line. ``path`` is filled in when the input
    was read from a file.
    """

    def __init__(
        self,
        message: str,
        input_index: int = 0,
        line: Optional[int] = None,
        source: Optional[str] = None,
        path: Optional[str] = None,
    ):
        details = {"input_index": input_index, "line": line}
        if source is not None:
            details["source"] = source
        super().__init__(message, details)
        self.input_index = input_index
        self.line = line
        self.source = source
        self.path: Optional[str] = None
        if path is not None:
            self.set_path(path)

    def set_path(self, path: str) -> None:
        self.path = path
        self.details["path"] = path

    def __str__(self) -> str:
        location = self.path if self.path is not None else f"input #{self.input_index}"
        if self.line is not None:
            location += f", line {self.line}"
        return f"{location}: {self.message}"


class ConfigError(PocatError):
    """Configuration-related errors."""
    pass


class ValidationError(ConfigError):
    """Option validation errors."""
    pass
