"""A rendered config file: target path plus content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedFile:
    path: str
    content: str
