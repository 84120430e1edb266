"""Render the rsyslog routing config."""

from ...constants import RSYSLOG_DIR_CREATE_MODE, RSYSLOG_FILE_CREATE_MODE
from .RenderedFile import RenderedFile
from .ServiceConfig import ServiceConfig

_ERE_SPECIAL = set("\\.[]()*+?{}|^$")


def stream_pattern(stream: str) -> str:
    """POSIX ERE matching the tag `stream=<stream>` and nothing longer.

    The tag must be followed by a blank or the end of the message, so a
    stream named `HTTP` never claims messages tagged `stream=HTTP_ACCESS`.
    """
    escaped = "".join(f"\\{ch}" if ch in _ERE_SPECIAL else ch for ch in stream)
    return f"stream={escaped}([ \t]|$)"


def _quote(value: str) -> str:
    # RainerScript single-quoted strings treat backslash as an escape
    return value.replace("\\", "\\\\").replace("'", "\\'").replace("\t", "\\t")


def _stream_rule(config: ServiceConfig, stream: str, file: str) -> str:
    return f"""if re_match($msg, '{_quote(stream_pattern(stream))}') then {{
  action(type="omfile" file="{config.log_dir}/{file}" template="{config.unique_name}"
         dirCreateMode="{RSYSLOG_DIR_CREATE_MODE}" fileCreateMode="{RSYSLOG_FILE_CREATE_MODE}"
         fileOwner="{config.user}" fileGroup="{config.group}")
  stop
}}
"""


def render_rsyslog(config: ServiceConfig) -> RenderedFile | None:
    """Render one filter-and-route rule per stream.

    Returns None when there are no streams (nothing should be written).
    Streams are emitted sorted by name so output is reproducible.
    """
    if not config.streams:
        return None

    header = f"""template(name="{config.unique_name}" type="string"
         string="%msg%\\n")
"""
    rules = [_stream_rule(config, stream, config.streams[stream]) for stream in sorted(config.streams)]
    content = "\n".join([header, *rules])
    return RenderedFile(path=config.rsyslog_path(), content=content)
