"""On-disk description of one service, validated with Pydantic."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..service.new_service_config import new_service_config
from ..service.ServiceConfig import ServiceConfig
from ..service.ServiceOpt import (
    ServiceOpt,
    with_journal,
    with_logrotate,
    with_logrotate_dir,
    with_rsyslog_dir,
    with_service_line,
    with_streams,
    with_systemd_file,
    with_unique_name,
    with_watchdog,
)
from .ConfigError import ConfigError
from .get_config_path import get_config_path


class InstallConfig(BaseModel):
    """Service config file contents.

    Converted to a ServiceConfig through new_service_config() so derived names
    are computed the same way as for programmatic callers.
    """

    model_config = ConfigDict(extra="forbid")

    user: str = Field(..., min_length=1, description="System user that owns the process")
    group: str = Field(..., min_length=1, description="Primary group")
    binary_path: str = Field(..., description="Absolute path to the executable")
    log_dir: str = Field("", description="Log directory; empty disables rsyslog/logrotate")
    streams: dict[str, str] = Field(default_factory=dict, description="Stream name -> log file name")
    logrotate: bool = Field(False, description="Generate logrotate policies per stream")
    service_lines: list[str] = Field(default_factory=list, description="Raw lines appended to [Service]")
    watchdog_sec: str | None = Field(None, description="WatchdogSec value")
    journal: bool = Field(False, description="Route stdout/stderr to journald")
    unique_name: str | None = Field(None, description="Override derived slug")
    systemd_file: str | None = Field(None, description="Override unit file path")
    rsyslog_dir: str | None = Field(None, description="Override rsyslog config directory")
    logrotate_dir: str | None = Field(None, description="Override logrotate config directory")

    @field_validator("binary_path")
    @classmethod
    def validate_binary_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"binary_path must be absolute, got: {v!r}")
        return v

    @field_validator("streams")
    @classmethod
    def validate_streams(cls, v: dict[str, str]) -> dict[str, str]:
        for name, file in v.items():
            if not name or not file:
                raise ValueError(f"stream names and files must be non-empty, got: {name!r} -> {file!r}")
        return v

    @classmethod
    def load(cls, config_path: Path | None = None) -> "InstallConfig":
        """Load and validate config from file.

        Raises:
            ConfigError: If the file is missing or unreadable, not JSON, or fails validation
        """
        path = get_config_path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error.get("loc", ()))
                msg = error.get("msg", str(e))
                errors.append(f"{loc}: {msg}" if loc else msg)
            raise ConfigError(errors) from e

    def options(self) -> list[ServiceOpt]:
        """Adjustments equivalent to this file, in a fixed order."""
        opts: list[ServiceOpt] = [with_service_line(line) for line in self.service_lines]
        if self.watchdog_sec:
            opts.append(with_watchdog(self.watchdog_sec))
        if self.journal:
            opts.append(with_journal())
        if self.streams:
            opts.append(with_streams(self.streams))
        if self.logrotate:
            opts.append(with_logrotate())
        if self.unique_name:
            opts.append(with_unique_name(self.unique_name))
        if self.systemd_file:
            opts.append(with_systemd_file(self.systemd_file))
        if self.rsyslog_dir:
            opts.append(with_rsyslog_dir(self.rsyslog_dir))
        if self.logrotate_dir:
            opts.append(with_logrotate_dir(self.logrotate_dir))
        return opts

    def to_service_config(self) -> ServiceConfig:
        return new_service_config(self.user, self.group, self.binary_path, self.log_dir, *self.options())
