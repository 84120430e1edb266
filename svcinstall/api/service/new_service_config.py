"""Build a ServiceConfig from required fields plus adjustments."""

import posixpath
from dataclasses import asdict

from ...constants import SERVICE_SUFFIX, SYSTEMD_DIR
from .sanitize import sanitize
from .ServiceConfig import ServiceConfig
from .ServiceDraft import ServiceDraft
from .ServiceOpt import ServiceOpt


def derive_unique_name(binary_path: str) -> str:
    """Derive `<parent>-<base>` from the last two segments of a binary path.

    The path is normalized lexically first (trailing slashes, `.` and `..`
    segments). Pure string manipulation; the filesystem is never consulted.

    Examples:
        >>> derive_unique_name("/opt/my@app/bin/my-app!")
        'bin-my-app'
    """
    path = posixpath.normpath(binary_path)
    base = sanitize(posixpath.basename(path))
    parent = sanitize(posixpath.basename(posixpath.dirname(path)))
    return f"{parent}-{base}"


def new_service_config(user: str, group: str, binary_path: str, log_dir: str, *opts: ServiceOpt) -> ServiceConfig:
    """Build the service descriptor, apply opts in order, and fill derived fields.

    Derived fields (unique_name, service_name, systemd_file) are only filled
    when no adjustment set them explicitly.

    Args:
        user: System user that owns the process
        group: Primary group
        binary_path: Absolute path to the executable
        log_dir: Log directory, or "" to disable rsyslog/logrotate generation
        *opts: Adjustments from ServiceOpt, applied left to right

    Returns:
        Frozen ServiceConfig
    """
    draft = ServiceDraft(user=user, group=group, binary_path=binary_path, log_dir=log_dir)
    for opt in opts:
        opt(draft)

    if not draft.unique_name:
        draft.unique_name = derive_unique_name(binary_path)
    if not draft.service_name:
        draft.service_name = draft.unique_name + SERVICE_SUFFIX
    if not draft.systemd_file:
        draft.systemd_file = f"{SYSTEMD_DIR}/{draft.service_name}"

    return ServiceConfig(**asdict(draft))
