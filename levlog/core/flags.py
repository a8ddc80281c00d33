"""
Bits or'ed together to control what each log line carries.

There is no control over the order the parts appear in (the order listed
here) or their format. With LONGFILE or SHORTFILE the file name and line
number are followed by a colon. For example DATE | TIME produces

    2009/01/23 01:23:23 message

while DATE | TIME | MICROSECONDS | LONGFILE produces

    2009/01/23 01:23:23.123123 /a/b/c/d.py:23: message
"""
from __future__ import annotations
from enum import IntFlag
from .errors import InvalidFlagError

class LogFlag(IntFlag):
    DATE = 1 << 0          # the date in the local time zone: 2009/01/23
    TIME = 1 << 1          # the time in the local time zone: 01:23:23
    MICROSECONDS = 1 << 2  # microsecond resolution: 01:23:23.123123, assumes TIME
    LONGFILE = 1 << 3      # full file name and line number: /a/b/c/d.py:23
    SHORTFILE = 1 << 4     # final file name element and line number: d.py:23, overrides LONGFILE
    UTC = 1 << 5           # if DATE or TIME is set, use UTC rather than local time
    LABEL = 1 << 6         # severity label: [DEBUG], [ERROR], [PANIC], ...
    COLOR = 1 << 7         # ANSI colored label and message

    @classmethod
    def parse(cls, spec: str) -> "LogFlag":
        """Parse a comma separated list such as "date,time,label".

        "std" expands to DATE | TIME; an empty string means no flags.
        """
        value = cls(0)
        for raw in spec.split(","):
            name = raw.strip().upper()
            if not name:
                continue
            if name == "STD":
                value |= STD_FLAGS
                continue
            member = cls.__members__.get(name)
            if member is None:
                raise InvalidFlagError(raw.strip())
            value |= member
        return value

STD_FLAGS = LogFlag.DATE | LogFlag.TIME  # initial values for the default logger

# Bits understood by the line formatter; LABEL and COLOR are consumed by the decorator.
LINE_FLAGS = (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS
              | LogFlag.LONGFILE | LogFlag.SHORTFILE | LogFlag.UTC)

def flag_names(flags: int) -> str:
    return ",".join(m.name.lower() for m in LogFlag if flags & m)

__all__ = ["LogFlag", "STD_FLAGS", "LINE_FLAGS", "flag_names"]
