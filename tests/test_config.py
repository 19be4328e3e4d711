import logging

import pytest

from keystore_core.config import load_settings
from keystore_core.errors import InvalidArgumentError
from keystore_core.logger import get_logger


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("KEYSTORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("KEYSTORE_LOG_FILE", raising=False)
    s = load_settings()
    assert s.log_level == logging.INFO
    assert s.log_file is None


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "debug")
    monkeypatch.setenv("KEYSTORE_LOG_FILE", str(tmp_path / "ks.log"))
    s = load_settings()
    assert s.log_level == logging.DEBUG
    assert s.log_file == str(tmp_path / "ks.log")


def test_explicit_config_wins(monkeypatch):
    monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "DEBUG")
    assert load_settings({"log_level": "ERROR"}).log_level == logging.ERROR


def test_unknown_level_rejected():
    with pytest.raises(InvalidArgumentError):
        load_settings({"log_level": "chatty"})


def test_logger_writes_file(tmp_path):
    log_path = tmp_path / "logs" / "keystore.log"
    log = get_logger("keystore_core.test_file", level=logging.INFO, to_file=str(log_path))
    try:
        log.info("hello from keystore")
        assert "hello from keystore" in log_path.read_text()
        # Handlers are attached once per logger name
        again = get_logger("keystore_core.test_file", to_file=str(log_path))
        assert len(again.handlers) == 2
    finally:
        for h in list(log.handlers):
            h.close()
            log.removeHandler(h)


def test_bad_env_level_does_not_break_import(monkeypatch):
    import importlib
    import keystore_core.logger

    monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "verbose")
    logger_mod = importlib.reload(keystore_core.logger)
    log = logger_mod.get_logger("keystore_core.test_bad_env")
    assert log.level == logging.INFO

    assert load_settings(strict=False).log_level == logging.INFO
    with pytest.raises(InvalidArgumentError):
        load_settings()
    with pytest.raises(InvalidArgumentError):
        load_settings({"log_level": "verbose"})
