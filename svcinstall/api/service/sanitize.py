"""Restrict a path segment to characters safe in unit and file names."""

import re

_UNSAFE = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize(segment: str) -> str:
    """Strip every character outside [A-Za-z0-9_-].

    Examples:
        >>> sanitize("my@app!")
        'myapp'
    """
    return _UNSAFE.sub("", segment)
