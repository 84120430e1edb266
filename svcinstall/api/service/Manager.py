"""Install and uninstall a systemd service described by a ServiceConfig."""

import logging
import os
from pathlib import Path

from ...constants import CONFIG_FILE_MODE, NOLOGIN_SHELL
from .CommandRunner import CommandRunner
from .Notifier import Conduit, Notifier
from .render_logrotate import render_logrotate
from .render_rsyslog import render_rsyslog
from .render_unit import render_unit
from .RenderedFile import RenderedFile
from .ServiceConfig import ServiceConfig
from .ServiceError import CommandError, ProvisionError, RemovalError, WriteError

logger = logging.getLogger(__name__)


class Manager:
    """Orchestrates user provisioning, config file generation and systemctl.

    The descriptor is snapshotted at construction and is itself immutable.
    The Manager holds no other mutable state, so separate Managers for
    different services can run concurrently. Two Managers for the same service name are not coordinated.

    Progress goes to `info_conduit` as strings and failures to
    `error_conduit` as exceptions. Both are optional and never block.
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        info_conduit: Conduit | None = None,
        error_conduit: Conduit | None = None,
        runner: CommandRunner | None = None,
    ):
        self.config = config.model_copy()
        self.runner = runner or CommandRunner()
        self._notify = Notifier(info_conduit, error_conduit)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def install(self) -> list[str]:
        """Provision the account, write config files, enable and start the service.

        Stops at the first failing stage. Files written by earlier stages are
        left in place.

        Returns:
            Paths of the files written

        Raises:
            ProvisionError: useradd/groupadd failed
            WriteError: a generated file could not be written
            CommandError: daemon-reload or enable --now failed
        """
        c = self.config
        written: list[str] = []
        self._notify.info("installing service: %s", c.service_name)

        try:
            self._ensure_user(c.user)
            self._notify.info("service user %s ensured", c.user)

            self._ensure_group(c.group)
            self._notify.info("service group %s ensured", c.group)

            if c.log_dir:
                rsyslog = render_rsyslog(c)
                if rsyslog is None:
                    self._notify.info("no streams configured, rsyslog config skipped")
                else:
                    written.append(self._write(rsyslog))
                    self._notify.info("rsyslog config written: %s", rsyslog.path)

                    for policy in render_logrotate(c):
                        written.append(self._write(policy))
                        self._notify.info("logrotate config written: %s", policy.path)

            unit = render_unit(c)
            written.append(self._write(unit))
            self._notify.info("systemd unit file written: %s", unit.path)

            self.runner.run("systemctl", "daemon-reload")
            self._notify.info("daemons reloaded")

            self.runner.run("systemctl", "enable", "--now", c.service_name)
            self._notify.info("service enabled and started")
        except (CommandError, WriteError) as e:
            self._notify.error(e)
            raise

        return written

    def uninstall(self) -> list[str]:
        """Disable and stop the service, remove generated files, reload systemd.

        disable/stop failures are ignored and removal failures are only
        reported through the error conduit. Only the final daemon-reload
        failure is raised.

        Returns:
            Paths whose removal was attempted

        Raises:
            CommandError: daemon-reload failed
        """
        c = self.config
        self._notify.info("uninstalling service: %s", c.service_name)

        # The unit may already be disabled, stopped or unknown
        for action in ("disable", "stop"):
            try:
                self.runner.run("systemctl", action, c.service_name)
            except CommandError as e:
                logger.debug("ignoring systemctl %s failure: %s", action, e)

        paths = [c.systemd_file, c.rsyslog_path(), *c.logrotate_paths()]
        for path in paths:
            try:
                self._remove(path)
            except RemovalError as e:
                self._notify.error(e)
            else:
                self._notify.info("removed %s", path)

        try:
            self.runner.run("systemctl", "daemon-reload")
        except CommandError as e:
            self._notify.error(e)
            raise
        self._notify.info("daemons reloaded")

        return paths

    def render(self) -> list[RenderedFile]:
        """Return every file install() would write, without side effects."""
        c = self.config
        files: list[RenderedFile] = []
        if c.log_dir:
            rsyslog = render_rsyslog(c)
            if rsyslog is not None:
                files.append(rsyslog)
                files.extend(render_logrotate(c))
        files.append(render_unit(c))
        return files

    # ------------------------------------------------------------------
    # OS-level helpers
    # ------------------------------------------------------------------

    def _ensure_user(self, user: str) -> None:
        if self.runner.probe("id", "-u", user):
            return
        try:
            self.runner.run("useradd", "--system", "--no-create-home", "--shell", NOLOGIN_SHELL, user)
        except CommandError as e:
            raise ProvisionError.from_command_error(e) from e

    def _ensure_group(self, group: str) -> None:
        if self.runner.probe("getent", "group", group):
            return
        try:
            self.runner.run("groupadd", "--system", group)
        except CommandError as e:
            raise ProvisionError.from_command_error(e) from e

    @staticmethod
    def _write(rendered: RenderedFile) -> str:
        path = Path(rendered.path)
        try:
            path.write_text(rendered.content, encoding="utf-8")
            os.chmod(path, CONFIG_FILE_MODE)
        except OSError as e:
            raise WriteError(rendered.path, str(e)) from e
        return rendered.path

    @staticmethod
    def _remove(path: str) -> None:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise RemovalError(path, str(e)) from e
