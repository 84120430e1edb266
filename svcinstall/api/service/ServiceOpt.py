"""Adjustments applied to a ServiceDraft by new_service_config().

Each `with_*` factory returns a function that mutates the draft in place.
Adjustments run left to right, so line-appending options accumulate in call
order and stream options merge with last write winning per stream name.
"""

from collections.abc import Callable, Mapping

from .ServiceDraft import ServiceDraft

ServiceOpt = Callable[[ServiceDraft], None]


def with_service_line(line: str) -> ServiceOpt:
    """Append an arbitrary line to the [Service] block."""

    def apply(draft: ServiceDraft) -> None:
        draft.service_lines.append(line)

    return apply


def with_watchdog(sec: str) -> ServiceOpt:
    """Set WatchdogSec."""
    return with_service_line(f"WatchdogSec={sec}")


def with_journal() -> ServiceOpt:
    """Route stdio to journald (StandardOutput/StandardError)."""

    def apply(draft: ServiceDraft) -> None:
        draft.service_lines.extend(["StandardOutput=journal", "StandardError=journal"])

    return apply


def with_umask(umask: str) -> ServiceOpt:
    return with_service_line(f"UMask={umask}")


def with_limit_nofile(limit: str) -> ServiceOpt:
    return with_service_line(f"LimitNOFILE={limit}")


def with_exec_reload(restart: str, start: str, stop: str) -> ServiceOpt:
    """Reload via SIGHUP plus restart delay and start/stop timeouts."""

    def apply(draft: ServiceDraft) -> None:
        draft.service_lines.extend(
            [
                "ExecReload=/bin/kill -HUP $MAINPID",
                f"RestartSec={restart}",
                "KillSignal=SIGTERM",
                f"TimeoutStartSec={start}",
                f"TimeoutStopSec={stop}",
            ]
        )

    return apply


def with_notify_access() -> ServiceOpt:
    return with_service_line("NotifyAccess=main")


def with_environment(key: str, value: str) -> ServiceOpt:
    return with_service_line(f"Environment={key}={value}")


def with_logrotate() -> ServiceOpt:
    """Request one logrotate policy per stream (ignored without a log directory)."""

    def apply(draft: ServiceDraft) -> None:
        draft.make_logrotate = True

    return apply


def with_stream(name: str, file: str) -> ServiceOpt:
    """Route messages tagged `stream=<name>` to `<log_dir>/<file>`."""

    def apply(draft: ServiceDraft) -> None:
        draft.streams[name] = file

    return apply


def with_streams(streams: Mapping[str, str]) -> ServiceOpt:
    # Copy now so later mutation of the caller's mapping has no effect
    snapshot = dict(streams)

    def apply(draft: ServiceDraft) -> None:
        draft.streams.update(snapshot)

    return apply


def with_unique_name(unique_name: str) -> ServiceOpt:
    """Override the slug derived from the binary path."""

    def apply(draft: ServiceDraft) -> None:
        draft.unique_name = unique_name

    return apply


def with_service_name(service_name: str) -> ServiceOpt:
    def apply(draft: ServiceDraft) -> None:
        draft.service_name = service_name

    return apply


def with_systemd_file(path: str) -> ServiceOpt:
    """Install the unit file somewhere other than /etc/systemd/system."""

    def apply(draft: ServiceDraft) -> None:
        draft.systemd_file = path

    return apply


def with_rsyslog_dir(path: str) -> ServiceOpt:
    def apply(draft: ServiceDraft) -> None:
        draft.rsyslog_dir = path

    return apply


def with_logrotate_dir(path: str) -> ServiceOpt:
    def apply(draft: ServiceDraft) -> None:
        draft.logrotate_dir = path

    return apply
