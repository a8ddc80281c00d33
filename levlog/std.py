"""
Process-wide default logger and the free functions that drive it.

The default logger writes to stderr with DATE | TIME and threshold ERROR. It
is created once, on first use, and lives for the rest of the process.
"""
from __future__ import annotations
import sys
import threading
from typing import Any, NoReturn
from .core.flags import LogFlag, STD_FLAGS
from .core.formatter import Sink
from .core.levels import Severity
from .core.logger import Logger, sprint, sprintln, sprintf

_std: Logger | None = None
_std_lock = threading.Lock()

def std_logger() -> Logger:
    global _std
    if _std is None:
        with _std_lock:
            if _std is None:
                _std = Logger(sys.stderr, "", STD_FLAGS)
    return _std

def set_output(out: Sink): std_logger().set_output(out)

def output(calldepth: int, s: str):
    std_logger().output(calldepth + 1, s)

def enabled(severity: int) -> bool: return std_logger().enabled(severity)

def fatal(*args: Any) -> NoReturn: std_logger()._fatal(sprint, args)
def fatalln(*args: Any) -> NoReturn: std_logger()._fatal(sprintln, args)
def fatalf(template: str, *args: Any) -> NoReturn: std_logger()._fatal(sprintf, (template, *args))

def panic(*args: Any) -> NoReturn: std_logger()._panic(sprint, args)
def panicln(*args: Any) -> NoReturn: std_logger()._panic(sprintln, args)
def panicf(template: str, *args: Any) -> NoReturn: std_logger()._panic(sprintf, (template, *args))

def error(*args: Any): std_logger()._log(Severity.ERROR, sprint, args)
def errorln(*args: Any): std_logger()._log(Severity.ERROR, sprintln, args)
def errorf(template: str, *args: Any): std_logger()._log(Severity.ERROR, sprintf, (template, *args))

def warn(*args: Any): std_logger()._log(Severity.WARN, sprint, args)
def warnln(*args: Any): std_logger()._log(Severity.WARN, sprintln, args)
def warnf(template: str, *args: Any): std_logger()._log(Severity.WARN, sprintf, (template, *args))

def info(*args: Any): std_logger()._log(Severity.INFO, sprint, args)
def infoln(*args: Any): std_logger()._log(Severity.INFO, sprintln, args)
def infof(template: str, *args: Any): std_logger()._log(Severity.INFO, sprintf, (template, *args))

def debug(*args: Any): std_logger()._log(Severity.DEBUG, sprint, args)
def debugln(*args: Any): std_logger()._log(Severity.DEBUG, sprintln, args)
def debugf(template: str, *args: Any): std_logger()._log(Severity.DEBUG, sprintf, (template, *args))

def print(*args: Any): std_logger()._log(Severity.INFO, sprint, args)
def println(*args: Any): std_logger()._log(Severity.INFO, sprintln, args)
def printf(template: str, *args: Any): std_logger()._log(Severity.INFO, sprintf, (template, *args))

def flags() -> LogFlag: return std_logger().flags()
def set_flags(value: int): std_logger().set_flags(value)
def level() -> Severity: return std_logger().level()
def set_level(value: int): std_logger().set_level(value)
def prefix() -> str: return std_logger().prefix()
def set_prefix(value: str): std_logger().set_prefix(value)

# print/println/printf are left out so star imports keep the builtin print
__all__ = [
    "std_logger", "set_output", "output", "enabled",
    "fatal", "fatalln", "fatalf", "panic", "panicln", "panicf",
    "error", "errorln", "errorf", "warn", "warnln", "warnf",
    "info", "infoln", "infof", "debug", "debugln", "debugf",
    "flags", "set_flags", "level", "set_level", "prefix", "set_prefix",
]
