"""
Core logger pieces:
- levels.py (Severity, labels, colors)
- flags.py (LogFlag bitmask)
- decorate.py (label/color markup)
- formatter.py (line header and atomic write)
- logger.py (Logger)
- errors.py
"""
from .errors import LevlogError, InvalidLevelError, InvalidFlagError, PanicError
from .flags import LogFlag, STD_FLAGS
from .levels import Severity, DEFAULT_LEVEL
from .decorate import decorate
from .formatter import LineFormatter
from .logger import Logger
__all__ = [
    "LevlogError", "InvalidLevelError", "InvalidFlagError", "PanicError",
    "LogFlag", "STD_FLAGS", "Severity", "DEFAULT_LEVEL", "decorate",
    "LineFormatter", "Logger",
]
