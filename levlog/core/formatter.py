"""
Line formatter: renders prefix, date/time/file header and message into one
line and writes it to the sink with a single write call.
"""
from __future__ import annotations
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Callable, Protocol
from .flags import LogFlag, LINE_FLAGS

class Sink(Protocol):
    def write(self, s: str) -> object: ...

class LineFormatter:
    def __init__(self, out: Sink, prefix: str = "", flags: int = 0,
                 clock: Callable[[], datetime] | None = None):
        self._out = out
        self._prefix = prefix
        self._flags = int(flags) & LINE_FLAGS
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()

    def set_output(self, out: Sink):
        with self._lock:
            self._out = out

    def writer(self) -> Sink:
        with self._lock:
            return self._out

    def flags(self) -> int:
        with self._lock:
            return self._flags

    def set_flags(self, flags: int):
        with self._lock:
            self._flags = int(flags) & LINE_FLAGS

    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str):
        with self._lock:
            self._prefix = prefix

    def _header(self, now: datetime, file: str, line: int) -> str:
        flags = self._flags
        parts = [self._prefix]
        if flags & (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS):
            now = now.astimezone(timezone.utc) if flags & LogFlag.UTC else now.astimezone()
            if flags & LogFlag.DATE:
                parts.append(now.strftime("%Y/%m/%d "))
            if flags & (LogFlag.TIME | LogFlag.MICROSECONDS):
                parts.append(now.strftime("%H:%M:%S"))
                if flags & LogFlag.MICROSECONDS:
                    parts.append(f".{now.microsecond:06d}")
                parts.append(" ")
        if flags & (LogFlag.SHORTFILE | LogFlag.LONGFILE):
            if flags & LogFlag.SHORTFILE:
                file = os.path.basename(file)
            parts.append(f"{file}:{line}: ")
        return "".join(parts)

    def output(self, calldepth: int, s: str):
        """Write one line. calldepth 1 names the caller of output() in file headers."""
        now = self._clock()
        file, line = "???", 0
        with self._lock:
            if self._flags & (LogFlag.SHORTFILE | LogFlag.LONGFILE):
                try:
                    frame = sys._getframe(calldepth)
                    file, line = frame.f_code.co_filename, frame.f_lineno
                except ValueError:
                    pass
            text = self._header(now, file, line) + s
            if not text.endswith("\n"):
                text += "\n"
            self._out.write(text)
            flush = getattr(self._out, "flush", None)
            if flush is not None:
                flush()
