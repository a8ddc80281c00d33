"""
Severity label and color markup applied to a message before it is written.
Escape sequences come from colorama; the Windows console is prepared on import.
"""
from __future__ import annotations
import re
from colorama import just_fix_windows_console
from colorama.ansi import code_to_chars
from .flags import LogFlag
from .levels import Severity, COLOR_NONE, COLOR_WHITE

just_fix_windows_console()

RESET = code_to_chars(COLOR_NONE)
MESSAGE_COLOR = code_to_chars(COLOR_WHITE)

def decorate(severity: Severity, flags: int, message: str) -> str:
    if not flags & LogFlag.LABEL:
        return message
    severity = Severity(severity)
    if flags & LogFlag.COLOR:
        # a trailing newline stays outside the color so the reset ends the same line
        body, nl = (message[:-1], "\n") if message.endswith("\n") else (message, "")
        return (f"{code_to_chars(severity.color)}[{severity.label}]{RESET} "
                f"{MESSAGE_COLOR}{body}{RESET}{nl}")
    return f"[{severity.label}] {message}"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = ['decorate', 'strip_ansi', 'RESET', 'MESSAGE_COLOR']
