"""Render the systemd unit file."""

from .RenderedFile import RenderedFile
from .ServiceConfig import ServiceConfig


def render_unit(config: ServiceConfig) -> RenderedFile:
    """Render the unit file for `config.systemd_file`.

    Values are spliced in verbatim. Nothing is escaped or quoted, so callers
    must not pass newlines or systemd specifiers they do not intend.
    """
    extra = "".join(f"{line}\n" for line in config.service_lines)

    unit = f"""[Unit]
Description={config.unique_name}
After=network.target

[Service]
Type=notify
ExecStart={config.binary_path}
Restart=on-failure
User={config.user}
Group={config.group}
{extra}[Install]
WantedBy=multi-user.target
"""
    return RenderedFile(path=config.systemd_file, content=unit)
