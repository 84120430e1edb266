"""Mutable in-progress record that ServiceOpt adjustments operate on."""

from dataclasses import dataclass, field

from ...constants import LOGROTATE_DIR, RSYSLOG_DIR


@dataclass
class ServiceDraft:
    """Fields of a ServiceConfig while the builder is still applying adjustments.

    Identity fields left empty are filled with derived defaults after all
    adjustments have run.
    """

    user: str
    group: str
    binary_path: str
    log_dir: str = ""
    unique_name: str = ""
    service_name: str = ""
    systemd_file: str = ""
    service_lines: list[str] = field(default_factory=list)
    make_logrotate: bool = False
    streams: dict[str, str] = field(default_factory=dict)
    rsyslog_dir: str = RSYSLOG_DIR
    logrotate_dir: str = LOGROTATE_DIR
