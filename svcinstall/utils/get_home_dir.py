"""Get svcinstall home directory path or path under it."""

import os
from pathlib import Path

from ..constants import SVCINSTALL_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get svcinstall home directory path or path under it.

    Checks SVCINSTALL_HOME environment variable first, defaults to ~/.svcinstall if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.svcinstall")
        >>> get_home_dir("config.json")
        Path("/home/user/.svcinstall/config.json")
    """
    home_env = os.environ.get("SVCINSTALL_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / SVCINSTALL_HOME_EXT if user_home else Path.home() / SVCINSTALL_HOME_EXT

    return home / Path(*parts) if parts else home
