"""
levlog: leveled, labeled, optionally colorized text logging.

    import levlog
    levlog.set_level(levlog.Severity.INFO)
    levlog.set_flags(levlog.STD_FLAGS | levlog.LogFlag.LABEL)
    levlog.infof("listening on %s", addr)
"""
from .core import (
    LevlogError, InvalidLevelError, InvalidFlagError, PanicError,
    LogFlag, STD_FLAGS, Severity, DEFAULT_LEVEL, decorate, LineFormatter, Logger,
)
from .std import *  # noqa: F401,F403
from .std import print, println, printf  # noqa: F401
from . import std as _std

__version__ = "1.0.0"

__all__ = [
    "LevlogError", "InvalidLevelError", "InvalidFlagError", "PanicError",
    "LogFlag", "STD_FLAGS", "Severity", "DEFAULT_LEVEL", "decorate", "LineFormatter", "Logger",
    *_std.__all__,
]
