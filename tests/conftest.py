"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from svcinstall.api.service.CommandRunner import CommandRunner
from svcinstall.api.service.ServiceError import CommandError


def pytest_configure(config):
    for marker in ("unit", "integration", "service", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Keep config and log files out of the real home directory."""
    home = tmp_path / ".svcinstall"
    monkeypatch.setenv("SVCINSTALL_HOME", str(home))
    monkeypatch.delenv("SVCINSTALL_CONFIG", raising=False)
    return home


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Drop log handlers a test's CLI run attached so later tests start clean."""
    import logging

    from svcinstall.utils import logger as logger_module

    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    pkg_logger = logging.getLogger("svcinstall")
    before = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield
    for handler in pkg_logger.handlers:
        if handler not in before:
            handler.close()
    pkg_logger.handlers = before
    pkg_logger.setLevel(level)


# =============================================================================
# Command runner fake
# =============================================================================


class RecordingRunner(CommandRunner):
    """CommandRunner that records every call instead of touching the host.

    A call fails when one of the `fail` tuples is a prefix of its command line,
    e.g. ("id",) fails every `id` probe and ("systemctl", "stop") fails stop.
    """

    def __init__(self, fail: tuple[tuple[str, ...], ...] = ()):
        self.calls: list[tuple[str, ...]] = []
        self.fail = fail

    def run(self, command: str, *args: str) -> str:
        call = (command, *args)
        self.calls.append(call)
        if any(call[: len(prefix)] == prefix for prefix in self.fail):
            raise CommandError(command, list(args), 1, f"{command}: simulated failure")
        return ""

    def commands(self, command: str) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] == command]


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    """Factory for RecordingRunner instances: make_runner(("useradd",), ...)."""

    def factory(*fail: tuple[str, ...]) -> RecordingRunner:
        return RecordingRunner(fail=fail)

    return factory


@pytest.fixture
def runner() -> RecordingRunner:
    """RecordingRunner where every command succeeds (user and group exist)."""
    return RecordingRunner()


# =============================================================================
# Config helpers
# =============================================================================


@pytest.fixture
def roots(tmp_path: Path) -> dict[str, Path]:
    """Stand-ins for /etc/systemd/system, /etc/rsyslog.d and /etc/logrotate.d."""
    dirs = {
        "systemd": tmp_path / "systemd",
        "rsyslog": tmp_path / "rsyslog.d",
        "logrotate": tmp_path / "logrotate.d",
    }
    for path in dirs.values():
        path.mkdir()
    return dirs


@pytest.fixture
def config_dict(roots: dict[str, Path]) -> dict:
    """Config file contents for a service with one logrotated stream."""
    return {
        "user": "svc",
        "group": "svc",
        "binary_path": "/opt/app/bin/app",
        "log_dir": "/var/log/app",
        "streams": {"CORE": "core.log"},
        "logrotate": True,
        "systemd_file": str(roots["systemd"] / "bin-app.service"),
        "rsyslog_dir": str(roots["rsyslog"]),
        "logrotate_dir": str(roots["logrotate"]),
    }


@pytest.fixture
def config_file(tmp_path: Path, config_dict: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_dict), encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd
