# test_config_and_logging.py

import logging

import pytest

from sambat import logging_setup
from sambat.config import Settings, load_settings
from sambat.logging_setup import TruncateLongMsgs, get_logger, setup_logging


# --------------------------- SETTINGS ---------------------------

def test_defaults(clean_env):
    assert load_settings() == Settings()


def test_env_overrides(clean_env):
    clean_env.setenv("SAMBAT_LOG_LEVEL", "debug")
    clean_env.setenv("SAMBAT_LOG_FILE", "/tmp/sambat.log")
    clean_env.setenv("SAMBAT_PICKER_FIRST_YEAR", "2075")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.log_file == "/tmp/sambat.log"
    assert s.picker_first_year == 2075
    assert s.picker_last_year == 2090


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / "sambat.env"
    env_file.write_text("SAMBAT_LOG_LEVEL=warning\nSAMBAT_PICKER_LAST_YEAR=2085\n", encoding="utf-8")
    s = load_settings(env_file)
    assert s.log_level == "WARNING"
    assert s.picker_last_year == 2085


def test_real_env_wins_over_dotenv(clean_env, tmp_path):
    env_file = tmp_path / "sambat.env"
    env_file.write_text("SAMBAT_LOG_LEVEL=warning\n", encoding="utf-8")
    clean_env.setenv("SAMBAT_LOG_LEVEL", "error")
    assert load_settings(env_file).log_level == "ERROR"


def test_non_integer_year_is_reported(clean_env):
    clean_env.setenv("SAMBAT_PICKER_FIRST_YEAR", "twenty")
    with pytest.raises(RuntimeError, match="SAMBAT_PICKER_FIRST_YEAR"):
        load_settings()


# --------------------------- LOGGING ---------------------------

@pytest.fixture
def restore_root_logging(monkeypatch):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logging_setup, "_configured", False)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_truncate_filter():
    record = logging.LogRecord("sambat", logging.INFO, __file__, 1, "x" * 50, None, None)
    assert TruncateLongMsgs(max_len=10).filter(record)
    assert record.getMessage() == "x" * 10 + " …(truncated)"


def test_truncate_filter_keeps_short_messages():
    record = logging.LogRecord("sambat", logging.INFO, __file__, 1, "short %s", ("msg",), None)
    TruncateLongMsgs(max_len=100).filter(record)
    assert record.getMessage() == "short msg"


def test_setup_logging_writes_file(restore_root_logging, tmp_path):
    log_file = tmp_path / "sambat.log"
    setup_logging(level="DEBUG", console=False, log_file=str(log_file))
    get_logger("sambat.test").debug("hello %s", "file")
    for h in restore_root_logging.handlers:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    assert restore_root_logging.level == logging.DEBUG


def test_setup_logging_runs_once(restore_root_logging):
    setup_logging(level=logging.WARNING, console=True)
    setup_logging(level=logging.DEBUG, console=True)
    assert restore_root_logging.level == logging.WARNING
    setup_logging(level=logging.DEBUG, console=True, force=True)
    assert restore_root_logging.level == logging.DEBUG


def test_unknown_level_rejected(restore_root_logging):
    with pytest.raises(ValueError):
        setup_logging(level="LOUD")
