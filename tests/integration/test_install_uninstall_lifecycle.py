"""End-to-end install/uninstall of one service against temporary roots.

Real files are written and removed; OS commands go through a recording runner.
"""

import queue
from pathlib import Path

import pytest

from svcinstall.api.service.Manager import Manager
from svcinstall.api.service.new_service_config import new_service_config
from svcinstall.api.service.ServiceOpt import (
    with_logrotate,
    with_logrotate_dir,
    with_rsyslog_dir,
    with_stream,
    with_systemd_file,
)

pytestmark = pytest.mark.service


@pytest.fixture
def service_config(roots):
    return new_service_config(
        "svc",
        "svc",
        "/opt/app/bin/app",
        "/var/log/app",
        with_stream("CORE", "core.log"),
        with_logrotate(),
        with_systemd_file(str(roots["systemd"] / "bin-app.service")),
        with_rsyslog_dir(str(roots["rsyslog"])),
        with_logrotate_dir(str(roots["logrotate"])),
    )


def test_install_then_uninstall(service_config, roots, runner):
    info: queue.Queue = queue.Queue()
    errors: queue.Queue = queue.Queue()
    manager = Manager(service_config, info_conduit=info, error_conduit=errors, runner=runner)

    written = manager.install()

    unit = roots["systemd"] / "bin-app.service"
    rsyslog = roots["rsyslog"] / "bin-app.conf"
    policy = roots["logrotate"] / "bin-app-CORE"
    assert sorted(written) == sorted(str(p) for p in (unit, rsyslog, policy))
    assert "ExecStart=/opt/app/bin/app\n" in unit.read_text()
    assert "stream=CORE" in rsyslog.read_text()
    assert policy.read_text().startswith("/var/log/app/core.log {\n")

    removed = manager.uninstall()

    assert sorted(removed) == sorted(written)
    for path in (unit, rsyslog, policy):
        assert not path.exists()
    assert errors.empty()

    # Second uninstall finds nothing to remove and still succeeds
    manager.uninstall()
    assert errors.empty()


def test_independent_managers_do_not_interfere(roots, runner):
    configs = [
        new_service_config(
            "svc",
            "svc",
            f"/opt/app{i}/bin/app{i}",
            "/var/log/app",
            with_stream("CORE", f"core{i}.log"),
            with_systemd_file(str(roots["systemd"] / f"bin-app{i}.service")),
            with_rsyslog_dir(str(roots["rsyslog"])),
            with_logrotate_dir(str(roots["logrotate"])),
        )
        for i in range(3)
    ]
    for cfg in configs:
        Manager(cfg, runner=runner).install()

    Manager(configs[1], runner=runner).uninstall()

    remaining = sorted(p.name for p in Path(roots["rsyslog"]).iterdir())
    assert remaining == ["bin-app0.conf", "bin-app2.conf"]
