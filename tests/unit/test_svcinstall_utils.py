"""Tests for svcinstall.utils helpers."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from svcinstall.utils import get_home_dir, get_package_version
from svcinstall.utils import logger as logger_module


def test_get_home_dir_honors_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SVCINSTALL_HOME", str(tmp_path / "custom"))
    assert get_home_dir() == (tmp_path / "custom").resolve()


def test_get_home_dir_defaults_under_home(tmp_path, monkeypatch):
    monkeypatch.delenv("SVCINSTALL_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == Path(tmp_path) / ".svcinstall"


def test_get_package_version_is_a_string():
    version = get_package_version()
    assert isinstance(version, str)
    assert version


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    pkg_logger = logging.getLogger("svcinstall")
    before = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield pkg_logger
    for handler in pkg_logger.handlers:
        if handler not in before:
            handler.close()
    pkg_logger.handlers = before
    pkg_logger.setLevel(level)


def test_configure_logging_writes_rotating_file(tmp_path, fresh_logging):
    logger_module.configure_logging(home=tmp_path, level=logging.DEBUG)

    added = [h for h in fresh_logging.handlers if isinstance(h, RotatingFileHandler)]
    assert len(added) == 1
    assert added[0].maxBytes == 5 * 1024 * 1024
    assert added[0].backupCount == 3

    logging.getLogger("svcinstall.api.service.Manager").info("hello %s", "log")
    added[0].flush()
    content = (tmp_path / "svcinstall.log").read_text()
    assert "svcinstall.api.service.Manager - INFO - hello log" in content


def test_configure_logging_is_idempotent(tmp_path, fresh_logging):
    logger_module.configure_logging(home=tmp_path)
    count = len(fresh_logging.handlers)
    logger_module.configure_logging(home=tmp_path)
    assert len(fresh_logging.handlers) == count
