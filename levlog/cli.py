"""
Command line front end: log a line from shell scripts or show the severity table.
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional
from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from levlog.core.decorate import decorate
from levlog.core.errors import LevlogError, PanicError
from levlog.core.flags import LogFlag
from levlog.core.levels import Severity
from levlog.core.logger import Logger
from levlog.system.settings import Settings

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="levlog", description="Leveled, labeled text logging")
    parser.add_argument("--settings", default=None, help="Path to a .levlog.json settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    emit = sub.add_parser("emit", help="Log one message to stderr")
    emit.add_argument("--level", default="info", help="Severity of the message (default: info)")
    emit.add_argument("--threshold", default=None, help="Most verbose severity let through")
    emit.add_argument("--flags", default=None, help="Comma separated flags, e.g. date,time,label,color")
    emit.add_argument("--prefix", default=None, help="Text put at the start of the line")
    emit.add_argument("message", nargs="+")

    sub.add_parser("levels", help="Show severities with their labels and colors")
    return parser

def _emit(args: argparse.Namespace) -> int:
    settings = Settings.load(args.settings)
    logger = settings.apply(Logger(sys.stderr))
    if args.threshold is not None:
        logger.set_level(Severity.parse(args.threshold))
    if args.flags is not None:
        logger.set_flags(LogFlag.parse(args.flags))
    if args.prefix is not None:
        logger.set_prefix(args.prefix)
    severity = Severity.parse(args.level)
    getattr(logger, severity.name.lower())(" ".join(args.message))
    return 0

def _levels(console: Console) -> int:
    table = Table(title="Severities", box=ROUNDED)
    table.add_column("Value", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Label")
    table.add_column("Color", justify="right")
    table.add_column("Sample")
    flags = LogFlag.LABEL | LogFlag.COLOR
    for sev in Severity:
        sample = Text.from_ansi(decorate(sev, flags, "message"))
        table.add_row(str(int(sev)), sev.name, f"[{sev.label}]", str(sev.color), sample)
    console.print(table)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    err = Console(stderr=True)
    try:
        if args.command == "emit":
            return _emit(args)
        return _levels(Console())
    except PanicError as e:
        err.print(f"[red]panic:[/red] {escape(e.message.rstrip())}")
        return 2
    except LevlogError as e:
        err.print(f"[red]error:[/red] {escape(str(e))}")
        return 1
