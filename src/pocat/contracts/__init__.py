"""Core contracts and interfaces."""

from .errors import (
    PocatError,
    ParseError,
    ConfigError,
    ValidationError,
)
from .stage import Stage

__all__ = [
    "PocatError",
    "ParseError",
    "ConfigError",
    "ValidationError",
    "Stage",
]
