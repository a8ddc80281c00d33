from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from levlog.core.errors import LevlogError
from levlog.core.flags import LogFlag, flag_names
from levlog.core.levels import Severity
from levlog.core.logger import Logger
from levlog import std

SETTINGS_FILENAME = ".levlog.json"

@dataclass
class SettingsData:
    level: str = "ERROR"          # FATAL / PANIC / ERROR / WARN / INFO / DEBUG
    flags: str = "date,time"      # comma separated LogFlag names
    prefix: str = ""
    color: bool = True            # keep the COLOR bit when flags ask for it

    def normalize(self):
        try:
            self.level = Severity.parse(self.level).name
        except LevlogError as e:
            std.warnf("settings: %s, using ERROR", e)
            self.level = "ERROR"
        try:
            self.flags = flag_names(LogFlag.parse(str(self.flags)))
        except LevlogError as e:
            std.warnf("settings: %s, using date,time", e)
            self.flags = "date,time"
        if not isinstance(self.prefix, str):
            self.prefix = ""
        self.color = bool(self.color)

    def severity(self) -> Severity:
        return Severity.parse(self.level)

    def log_flags(self) -> LogFlag:
        value = LogFlag.parse(self.flags)
        if not self.color:
            value &= ~LogFlag.COLOR
        return value

def _color_disabled() -> bool:
    return "NO_COLOR" in os.environ or os.environ.get("LEVLOG_COLOR_DISABLED") == "1"

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls, path: Optional[os.PathLike] = None) -> Path:
        if path is not None:
            return Path(path)
        env = os.environ.get("LEVLOG_SETTINGS")
        if env:
            return Path(env)
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[os.PathLike] = None) -> "Settings":
        path = cls._resolve_path(path)
        data_kwargs = {}
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("top level must be an object")
                field_names = {f.name for f in fields(SettingsData)}
                data_kwargs = {k: v for k, v in raw.items() if k in field_names}
                std.debugf("settings loaded from %s", path)
            except (OSError, ValueError) as e:
                std.warnf("settings: failed to parse %s (%s), using defaults", path, e)
                data_kwargs = {}
        # Environment overrides file values
        if os.environ.get("LEVLOG_LEVEL"):
            data_kwargs["level"] = os.environ["LEVLOG_LEVEL"]
        if os.environ.get("LEVLOG_FLAGS") is not None:
            data_kwargs["flags"] = os.environ["LEVLOG_FLAGS"]
        if os.environ.get("LEVLOG_PREFIX") is not None:
            data_kwargs["prefix"] = os.environ["LEVLOG_PREFIX"]
        if _color_disabled():
            data_kwargs["color"] = False
        data = SettingsData(**data_kwargs)
        data.normalize()
        return cls(data, path)

    def save(self):
        self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
        std.debugf("settings saved to %s", self.path)

    def apply(self, logger: Optional[Logger] = None) -> Logger:
        """Push level, flags and prefix onto logger (default: the process logger)."""
        logger = logger or std.std_logger()
        logger.set_level(self.data.severity())
        logger.set_flags(self.data.log_flags())
        logger.set_prefix(self.data.prefix)
        return logger
