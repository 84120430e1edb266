"""Unit tests for svcinstall.api.service.cmd_uninstall."""

import pytest

from svcinstall.api.service.cmd_install import cmd_install
from svcinstall.api.service.cmd_uninstall import cmd_uninstall

pytestmark = pytest.mark.service


def test_cmd_uninstall_success(config_file, runner, roots, run_cmd):
    run_cmd(cmd_install, config_path=config_file, runner=runner)

    result = run_cmd(cmd_uninstall, config_path=config_file, runner=runner)

    assert result.success is True
    assert result.output["uninstalled"] is True
    assert result.output["errors"] == []
    assert result.output["warnings"] == []
    assert result.output["files"] == [
        str(roots["systemd"] / "bin-app.service"),
        str(roots["rsyslog"] / "bin-app.conf"),
        str(roots["logrotate"] / "bin-app-CORE"),
    ]
    assert list(roots["systemd"].iterdir()) == []


def test_cmd_uninstall_removal_problem_is_warning(config_file, runner, roots, run_cmd):
    blocked = roots["systemd"] / "bin-app.service"
    blocked.mkdir()
    (blocked / "keep").write_text("x")

    result = run_cmd(cmd_uninstall, config_path=config_file, runner=runner)

    assert result.success is True
    assert len(result.output["warnings"]) == 1
    assert "failed to remove" in result.output["warnings"][0]


def test_cmd_uninstall_reload_failure(config_file, make_runner, run_cmd):
    runner = make_runner(("systemctl", "daemon-reload"))
    result = run_cmd(cmd_uninstall, config_path=config_file, runner=runner)

    assert result.success is False
    assert len(result.output["errors"]) == 1
    assert "systemctl failed" in result.output["errors"][0]
    assert result.output["warnings"] == []


def test_cmd_uninstall_missing_config(tmp_path, runner, run_cmd):
    result = run_cmd(cmd_uninstall, config_path=tmp_path / "missing.json", runner=runner)
    assert result.success is False
    assert result.output["uninstalled"] is False


def test_cmd_uninstall_unreadable_config(tmp_path, runner, run_cmd):
    result = run_cmd(cmd_uninstall, config_path=tmp_path, runner=runner)
    assert result.success is False
    assert "Cannot read config file" in result.output["errors"][0]
    assert runner.calls == []
