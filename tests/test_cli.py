from levlog.cli import main


def test_emit_respects_threshold(clean_env, capsys):
    assert main(["emit", "--flags", "label", "hidden"]) == 0
    assert capsys.readouterr().err == ""
    assert main(["emit", "--threshold", "info", "--flags", "label", "hello", "world"]) == 0
    assert capsys.readouterr().err == "[INFO ] hello world\n"


def test_emit_prefix_and_level(clean_env, capsys):
    assert main(["emit", "--level", "warn", "--threshold", "warn", "--flags", "label", "--prefix", "job: ", "slow"]) == 0
    assert capsys.readouterr().err == "job: [WARN ] slow\n"


def test_emit_panic(clean_env, capsys):
    assert main(["emit", "--level", "panic", "--flags", "label", "boom"]) == 2
    err = capsys.readouterr().err
    assert "[PANIC] boom" in err
    assert "panic: boom" in err


def test_emit_bad_level(clean_env, capsys):
    assert main(["emit", "--level", "loud", "x"]) == 1
    assert "invalid log level" in capsys.readouterr().err


def test_levels_table(clean_env, capsys):
    assert main(["levels"]) == 0
    out = capsys.readouterr().out
    for name in ("FATAL", "PANIC", "ERROR", "WARN", "INFO", "DEBUG"):
        assert name in out
