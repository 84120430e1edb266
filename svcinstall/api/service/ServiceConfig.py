"""Service descriptor with Pydantic validation."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...constants import LOGROTATE_DIR, RSYSLOG_DIR, SYSTEMD_DIR


class ServiceConfig(BaseModel):
    """Immutable description of one systemd service and its log wiring.

    `service_lines` is stored as a tuple and `streams` as a read-only mapping,
    so a built descriptor cannot change underneath a Manager.

    Build instances with `new_service_config()`, which derives `unique_name`,
    `service_name` and `systemd_file` from the binary path. Direct construction
    (including `model_validate` from a file) goes through the same defaulting
    validator, so logrotate can never be enabled without a log directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    user: str = Field(..., description="System user that owns the process")
    group: str = Field(..., description="Primary group of the process")
    unique_name: str = Field(..., description="Slug used to name generated files")
    service_name: str = Field(..., description="Systemd unit name (e.g., 'bin-app.service')")
    binary_path: str = Field(..., description="Absolute path to the executable")

    log_dir: str = Field("", description="Log directory; empty disables rsyslog and logrotate output")
    systemd_file: str = Field("", description="Unit file path; defaults to /etc/systemd/system/<service_name>")

    service_lines: tuple[str, ...] = Field((), description="Raw lines appended to [Service]")
    make_logrotate: bool = Field(False, description="Generate one logrotate policy per stream")
    streams: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Stream name -> log file name"
    )

    rsyslog_dir: str = Field(RSYSLOG_DIR, description="Directory receiving the rsyslog config")
    logrotate_dir: str = Field(LOGROTATE_DIR, description="Directory receiving logrotate policies")

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        if not values.get("systemd_file") and values.get("service_name"):
            values["systemd_file"] = f"{SYSTEMD_DIR}/{values['service_name']}"
        # logrotate only rotates files under log_dir
        if not values.get("log_dir"):
            values["make_logrotate"] = False
        return values

    @field_validator("streams", mode="after")
    @classmethod
    def freeze_streams(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    def rsyslog_path(self) -> str:
        """Path of the rsyslog routing config for this service."""
        return f"{self.rsyslog_dir}/{self.unique_name}.conf"

    def logrotate_path(self, stream: str) -> str:
        """Path of the logrotate policy for one stream."""
        return f"{self.logrotate_dir}/{self.unique_name}-{stream}"

    def logrotate_paths(self) -> list[str]:
        """Paths of every logrotate policy, one per stream, sorted by stream name."""
        return [self.logrotate_path(stream) for stream in sorted(self.streams)]
