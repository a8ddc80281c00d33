# Ensure project root is on sys.path for tests
import io, os, sys, pathlib
import pytest
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from levlog.std import std_logger


class Exited(Exception):
    def __init__(self, code):
        super().__init__(code)
        self.code = code


@pytest.fixture
def std_buffer():
    """Point the default logger at a buffer and restore its state afterwards."""
    logger = std_logger()
    saved = (logger.writer(), logger.flags(), logger.level(), logger.prefix())
    buf = io.StringIO()
    logger.set_output(buf)
    yield buf
    out, flags, level, prefix = saved
    logger.set_output(out)
    logger.set_flags(flags)
    logger.set_level(level)
    logger.set_prefix(prefix)


@pytest.fixture
def fake_exit(monkeypatch):
    """Replace os._exit so fatal calls raise Exited instead of ending the run."""
    def _exit(code):
        raise Exited(code)
    monkeypatch.setattr(os, "_exit", _exit)
    return Exited


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("LEVLOG_LEVEL", "LEVLOG_FLAGS", "LEVLOG_PREFIX", "LEVLOG_SETTINGS",
                 "LEVLOG_COLOR_DISABLED", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
