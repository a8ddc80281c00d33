"""Severity metadata: labels & ANSI colors.

Provides:
  Severity: ordered levels, FATAL (least verbose threshold) .. DEBUG (most)
  SEVERITY_LABELS: severity -> fixed 5-char label
  SEVERITY_COLORS: severity -> ANSI SGR color code
"""
from __future__ import annotations
from enum import IntEnum
from typing import Dict, Union
from .errors import InvalidLevelError

# ANSI colors
COLOR_NONE = 0
COLOR_RED = 31
COLOR_GREEN = 32
COLOR_YELLOW = 33
COLOR_BLUE = 36
COLOR_WHITE = 37

class Severity(IntEnum):
    FATAL = 0
    PANIC = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5

    @property
    def label(self) -> str:
        return SEVERITY_LABELS[self]

    @property
    def color(self) -> int:
        return SEVERITY_COLORS[self]

    @classmethod
    def parse(cls, value: Union[str, int]) -> "Severity":
        """Accept a member, an int 0-5, a digit string or a case-insensitive name."""
        if isinstance(value, bool):
            raise InvalidLevelError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.parse(int(name))
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise InvalidLevelError(value)

SEVERITY_LABELS: Dict[Severity, str] = {
    Severity.FATAL: "FATAL",
    Severity.PANIC: "PANIC",
    Severity.ERROR: "ERROR",
    Severity.WARN: "WARN ",
    Severity.INFO: "INFO ",
    Severity.DEBUG: "DEBUG",
}

SEVERITY_COLORS: Dict[Severity, int] = {
    Severity.FATAL: COLOR_RED,
    Severity.PANIC: COLOR_RED,
    Severity.ERROR: COLOR_RED,
    Severity.WARN: COLOR_YELLOW,
    Severity.INFO: COLOR_BLUE,
    Severity.DEBUG: COLOR_GREEN,
}

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}

DEFAULT_LEVEL = Severity.ERROR

def valid_level(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and Severity.FATAL <= value <= Severity.DEBUG

__all__ = [
    'Severity','SEVERITY_LABELS','SEVERITY_COLORS','DEFAULT_LEVEL','valid_level',
    'COLOR_NONE','COLOR_RED','COLOR_GREEN','COLOR_YELLOW','COLOR_BLUE','COLOR_WHITE',
]
