"""Render logrotate policies, one per stream."""

from ...constants import (
    LOGROTATE_CADENCE,
    LOGROTATE_CREATE_MODE,
    LOGROTATE_KEEP,
    LOGROTATE_POSTROTATE,
    LOGROTATE_SIZE,
)
from .RenderedFile import RenderedFile
from .ServiceConfig import ServiceConfig


def render_logrotate(config: ServiceConfig) -> list[RenderedFile]:
    """Render a logrotate policy for every stream.

    Returns an empty list when logrotate is disabled or there are no streams.
    The postrotate hook HUPs rsyslog so it reopens the rotated files.
    """
    if not config.make_logrotate or not config.streams:
        return []

    files = []
    for stream in sorted(config.streams):
        policy = f"""{config.log_dir}/{config.streams[stream]} {{
    {LOGROTATE_CADENCE}
    rotate {LOGROTATE_KEEP}
    size {LOGROTATE_SIZE}
    compress
    delaycompress
    missingok
    notifempty
    create {LOGROTATE_CREATE_MODE} {config.user} {config.group}
    sharedscripts
    postrotate
        {LOGROTATE_POSTROTATE}
    endscript
}}
"""
        files.append(RenderedFile(path=config.logrotate_path(stream), content=policy))
    return files
