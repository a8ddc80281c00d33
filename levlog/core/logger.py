"""
Leveled logger with optional severity labels and ANSI color.

A Logger generates lines of output to a text sink. Each logging operation
makes a single write to the sink. A Logger can be used from many threads at
once; it serializes the level check, the decoration and the write.
"""
from __future__ import annotations
import os
import sys
import threading
from typing import Any, Callable, NoReturn, Sequence
from .decorate import decorate
from .errors import InvalidLevelError, PanicError
from .flags import LogFlag, STD_FLAGS
from .formatter import LineFormatter, Sink
from .levels import Severity, DEFAULT_LEVEL, valid_level

# Frames between LineFormatter.output and the code that called a logging method.
_CALLDEPTH = 4

def sprint(*args: Any) -> str:
    return "".join(str(a) for a in args)

def sprintln(*args: Any) -> str:
    return " ".join(str(a) for a in args) + "\n"

def sprintf(template: str, *args: Any) -> str:
    try:
        return template % args
    except (TypeError, ValueError):
        # mismatched template and arguments: keep the text as written
        if not args:
            return template
        return f"{template} %!(BADFORMAT {args!r})"

Builder = Callable[..., str]

def _terminate(out: Sink) -> NoReturn:
    try:
        for stream in (out, sys.stdout, sys.stderr):
            flush = getattr(stream, "flush", None)
            if flush is not None:
                flush()
    finally:
        os._exit(1)

class Logger:
    def __init__(self, out: Sink, prefix: str = "", flags: int = STD_FLAGS):
        self._lock = threading.Lock()
        self._flags = LogFlag(flags)
        self._level = DEFAULT_LEVEL
        self._out = LineFormatter(out, prefix, flags)

    # --- emission ---
    def _write(self, severity: Severity, text: str):
        # caller holds self._lock
        if self._level >= severity:
            self._out.output(_CALLDEPTH, decorate(severity, self._flags, text))

    def _log(self, severity: Severity, build: Builder, args: Sequence[Any]):
        with self._lock:
            self._write(severity, build(*args))

    def _fatal(self, build: Builder, args: Sequence[Any]) -> NoReturn:
        with self._lock:
            try:
                self._write(Severity.FATAL, build(*args))
            finally:
                _terminate(self._out.writer())

    def _panic(self, build: Builder, args: Sequence[Any]) -> NoReturn:
        with self._lock:
            text = build(*args)
            try:
                self._write(Severity.PANIC, text)
            except Exception as exc:
                raise PanicError(text) from exc
        raise PanicError(text)

    def output(self, calldepth: int, s: str):
        """Write s unfiltered and undecorated; calldepth 1 names the caller of output()."""
        self._out.output(calldepth + 1, s)

    def enabled(self, severity: int) -> bool:
        with self._lock:
            return self._level >= severity

    # Fatal: log, then terminate the process with status 1. Never returns.
    def fatal(self, *args: Any) -> NoReturn: self._fatal(sprint, args)
    def fatalln(self, *args: Any) -> NoReturn: self._fatal(sprintln, args)
    def fatalf(self, template: str, *args: Any) -> NoReturn: self._fatal(sprintf, (template, *args))

    # Panic: log, then raise PanicError with the raw message. Never returns.
    def panic(self, *args: Any) -> NoReturn: self._panic(sprint, args)
    def panicln(self, *args: Any) -> NoReturn: self._panic(sprintln, args)
    def panicf(self, template: str, *args: Any) -> NoReturn: self._panic(sprintf, (template, *args))

    def error(self, *args: Any): self._log(Severity.ERROR, sprint, args)
    def errorln(self, *args: Any): self._log(Severity.ERROR, sprintln, args)
    def errorf(self, template: str, *args: Any): self._log(Severity.ERROR, sprintf, (template, *args))

    def warn(self, *args: Any): self._log(Severity.WARN, sprint, args)
    def warnln(self, *args: Any): self._log(Severity.WARN, sprintln, args)
    def warnf(self, template: str, *args: Any): self._log(Severity.WARN, sprintf, (template, *args))

    def info(self, *args: Any): self._log(Severity.INFO, sprint, args)
    def infoln(self, *args: Any): self._log(Severity.INFO, sprintln, args)
    def infof(self, template: str, *args: Any): self._log(Severity.INFO, sprintf, (template, *args))

    def debug(self, *args: Any): self._log(Severity.DEBUG, sprint, args)
    def debugln(self, *args: Any): self._log(Severity.DEBUG, sprintln, args)
    def debugf(self, template: str, *args: Any): self._log(Severity.DEBUG, sprintf, (template, *args))

    # stdlib-style aliases, logged at INFO
    def print(self, *args: Any): self._log(Severity.INFO, sprint, args)
    def println(self, *args: Any): self._log(Severity.INFO, sprintln, args)
    def printf(self, template: str, *args: Any): self._log(Severity.INFO, sprintf, (template, *args))

    # --- configuration ---
    def flags(self) -> LogFlag:
        with self._lock:
            return self._flags

    def set_flags(self, flags: int):
        with self._lock:
            self._flags = LogFlag(flags)
            self._out.set_flags(flags)

    def level(self) -> Severity:
        with self._lock:
            return self._level

    def set_level(self, level: int):
        if not valid_level(level):
            raise InvalidLevelError(level)
        with self._lock:
            self._level = Severity(level)

    def prefix(self) -> str:
        return self._out.prefix()

    def set_prefix(self, prefix: str):
        with self._lock:
            self._out.set_prefix(prefix)

    def set_output(self, out: Sink):
        with self._lock:
            self._out.set_output(out)

    def writer(self) -> Sink:
        return self._out.writer()

    def __repr__(self) -> str:
        return f"<Logger level={self._level.name} flags={int(self._flags)}>"
