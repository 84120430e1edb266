"""Unit tests for the svcinstall CLI."""

import importlib
import json

import pytest

from svcinstall.cli import main

pytestmark = pytest.mark.cli


@pytest.fixture
def patched_runner(monkeypatch, runner):
    """Route every Manager created by the CLI through the recording runner."""
    manager_module = importlib.import_module("svcinstall.api.service.Manager")
    monkeypatch.setattr(manager_module, "CommandRunner", lambda: runner)
    return runner


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("svcinstall ")


def test_invalid_display(capsys):
    assert main(["--display", "xml", "service", "render"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_render_json(config_file, roots, capsys):
    code = main(["--display", "json", "service", "render", "--config", str(config_file)])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["service_name"] == "bin-app.service"
    assert str(roots["systemd"] / "bin-app.service") in output["files"]


def test_render_yaml(config_file, capsys):
    assert main(["service", "render", "-c", str(config_file)]) == 0
    assert "service_name: bin-app.service" in capsys.readouterr().out


def test_install_and_uninstall(config_file, roots, patched_runner, capsys):
    assert main(["--display", "json", "service", "install", "--config", str(config_file)]) == 0
    installed = json.loads(capsys.readouterr().out)
    assert installed["installed"] is True
    assert (roots["systemd"] / "bin-app.service").is_file()

    assert main(["--display", "json", "service", "uninstall", "--config", str(config_file)]) == 0
    uninstalled = json.loads(capsys.readouterr().out)
    assert uninstalled["uninstalled"] is True
    assert not (roots["systemd"] / "bin-app.service").exists()
    assert ("systemctl", "enable", "--now", "bin-app.service") in patched_runner.calls


def test_install_failure_exit_code(tmp_path, patched_runner, capsys):
    assert main(["--display", "json", "service", "install", "--config", str(tmp_path / "missing.json")]) == 1
    assert json.loads(capsys.readouterr().out)["installed"] is False
    assert patched_runner.calls == []
