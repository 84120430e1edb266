"""Service module - descriptor, renderers and install/uninstall orchestration."""

from .CommandRunner import CommandRunner
from .Manager import Manager
from .Notifier import Notifier
from .new_service_config import derive_unique_name, new_service_config
from .RenderedFile import RenderedFile
from .render_logrotate import render_logrotate
from .render_rsyslog import render_rsyslog
from .render_unit import render_unit
from .sanitize import sanitize
from .ServiceConfig import ServiceConfig
from .ServiceDraft import ServiceDraft
from .ServiceError import CommandError, ProvisionError, RemovalError, ServiceError, WriteError
from .ServiceOpt import (
    ServiceOpt,
    with_environment,
    with_exec_reload,
    with_journal,
    with_limit_nofile,
    with_logrotate,
    with_logrotate_dir,
    with_notify_access,
    with_rsyslog_dir,
    with_service_line,
    with_service_name,
    with_stream,
    with_streams,
    with_systemd_file,
    with_umask,
    with_unique_name,
    with_watchdog,
)

__all__ = [
    "CommandError",
    "CommandRunner",
    "Manager",
    "Notifier",
    "ProvisionError",
    "RemovalError",
    "RenderedFile",
    "ServiceConfig",
    "ServiceDraft",
    "ServiceError",
    "ServiceOpt",
    "WriteError",
    "derive_unique_name",
    "new_service_config",
    "render_logrotate",
    "render_rsyslog",
    "render_unit",
    "sanitize",
    "with_environment",
    "with_exec_reload",
    "with_journal",
    "with_limit_nofile",
    "with_logrotate",
    "with_logrotate_dir",
    "with_notify_access",
    "with_rsyslog_dir",
    "with_service_line",
    "with_service_name",
    "with_stream",
    "with_streams",
    "with_systemd_file",
    "with_umask",
    "with_unique_name",
    "with_watchdog",
]
