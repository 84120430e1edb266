"""Resolve the service config file location."""

import os
from pathlib import Path

from ...utils.get_home_dir import get_home_dir


def get_config_path(config_path: Path | None = None) -> Path:
    """Explicit path, else $SVCINSTALL_CONFIG, else <home>/config.json."""
    if config_path is not None:
        return Path(config_path).expanduser()
    env_path = os.environ.get("SVCINSTALL_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_home_dir("config.json")
