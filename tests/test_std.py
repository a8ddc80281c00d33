import inspect
import re
import threading
import pytest
import levlog
from levlog import std
from levlog.core.errors import PanicError
from levlog.core.flags import LogFlag, STD_FLAGS
from levlog.core.levels import Severity


def test_single_instance():
    seen = []
    threads = [threading.Thread(target=lambda: seen.append(std.std_logger())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(lg is std.std_logger() for lg in seen)
    assert levlog.std_logger() is std.std_logger()


def test_default_configuration(std_buffer):
    assert levlog.level() == Severity.ERROR
    assert levlog.flags() == STD_FLAGS
    assert levlog.prefix() == ""


def test_error_has_date_time_and_no_label(std_buffer):
    levlog.error("fail")
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} fail\n", std_buffer.getvalue())
    assert "[" not in std_buffer.getvalue()


def test_filtered_below_threshold(std_buffer):
    levlog.warn("w")
    levlog.info("i")
    levlog.debugf("%s", "d")
    levlog.print("p")
    assert std_buffer.getvalue() == ""


def test_free_functions_drive_shared_logger(std_buffer):
    levlog.set_flags(LogFlag.LABEL)
    levlog.set_level(Severity.DEBUG)
    levlog.set_prefix("app ")
    assert std.std_logger().level() == Severity.DEBUG
    levlog.debugln("a", "b")
    levlog.warnf("%d%%", 50)
    levlog.infoln("c")
    levlog.printf("%s", "p")
    assert std_buffer.getvalue() == "app [DEBUG] a b\napp [WARN ] 50%\napp [INFO ] c\napp [INFO ] p\n"
    assert levlog.enabled(Severity.DEBUG)


def test_free_function_reports_caller(std_buffer):
    levlog.set_flags(LogFlag.SHORTFILE)
    line = inspect.currentframe().f_lineno; levlog.error("loc")
    line2 = inspect.currentframe().f_lineno; levlog.output(1, "raw")
    assert std_buffer.getvalue() == f"test_std.py:{line}: loc\ntest_std.py:{line2}: raw\n"


def test_free_panic(std_buffer):
    levlog.set_flags(LogFlag.LABEL)
    with pytest.raises(PanicError) as exc:
        levlog.panic("oh", "no")
    assert exc.value.message == "ohno"
    assert std_buffer.getvalue() == "[PANIC] ohno\n"


def test_free_fatal(std_buffer, fake_exit):
    levlog.set_flags(LogFlag.LABEL)
    with pytest.raises(fake_exit):
        levlog.fatalf("code %d", 7)
    assert std_buffer.getvalue() == "[FATAL] code 7\n"


def test_free_set_level_faults(std_buffer):
    with pytest.raises(levlog.InvalidLevelError):
        levlog.set_level(6)


def test_star_import_keeps_builtin_print():
    namespace = {}
    exec("from levlog import *", namespace)
    assert "print" not in namespace
    assert "errorf" in namespace
