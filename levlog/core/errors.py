"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class LevlogError(Exception):
    """Base for internal errors."""

class InvalidLevelError(LevlogError, ValueError):
    def __init__(self, level: object):
        super().__init__(f"invalid log level: {level!r}")
        self.level = level

class InvalidFlagError(LevlogError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"unknown log flag '{name}'")
        self.name = name

class PanicError(LevlogError):
    """Raised by the panic entry points; carries the undecorated message."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
