"""svcinstall - install and remove a binary as a systemd-managed service."""

from .api.service import (
    CommandError,
    CommandRunner,
    Manager,
    ProvisionError,
    RemovalError,
    ServiceConfig,
    ServiceError,
    WriteError,
    new_service_config,
)

__all__ = [
    "CommandError",
    "CommandRunner",
    "Manager",
    "ProvisionError",
    "RemovalError",
    "ServiceConfig",
    "ServiceError",
    "WriteError",
    "new_service_config",
]
