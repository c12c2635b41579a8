import os
from pathlib import Path

from minilisp.config import Settings, flag_from_env
from minilisp.interpreter import Interpreter


def test_defaults(monkeypatch):
    for var in ("MINILISP_STRICT_SET", "MINILISP_LOAD_PATH", "MINILISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings.from_env()
    assert settings.strict_set is False
    assert settings.load_path == [Path(".")]
    assert settings.log_level == "WARNING"


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MINILISP_STRICT_SET", "yes")
    monkeypatch.setenv("MINILISP_LOAD_PATH", os.pathsep.join([str(tmp_path), "lib"]))
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.strict_set is True
    assert settings.load_path == [tmp_path, Path("lib")]
    assert settings.log_level == "DEBUG"


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("MINILISP_STRICT_SET", "1")
    assert Settings.from_env(strict_set=False).strict_set is False


def test_flag_parsing(monkeypatch):
    for raw, expected in [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)]:
        monkeypatch.setenv("MINILISP_TEST_FLAG", raw)
        assert flag_from_env("MINILISP_TEST_FLAG") is expected


def test_interpreter_picks_up_environment(monkeypatch, tmp_path):
    (tmp_path / "lib.lisp").write_text("(def found 1)", encoding="utf-8")
    monkeypatch.setenv("MINILISP_LOAD_PATH", str(tmp_path))
    monkeypatch.setenv("MINILISP_STRICT_SET", "0")
    interp = Interpreter()
    assert interp.eval('(load "lib.lisp") found') == 1
