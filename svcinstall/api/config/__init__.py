"""Config module - file-based service configuration."""

from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .InstallConfig import InstallConfig

__all__ = [
    "ConfigError",
    "InstallConfig",
    "get_config_path",
]
