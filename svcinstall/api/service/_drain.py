"""Drain notification queues filled during a Manager call."""

import queue
from collections.abc import Iterator
from typing import Any


def _drain(conduit: queue.Queue) -> Iterator[Any]:
    """Yield every item currently in the queue without blocking."""
    while True:
        try:
            yield conduit.get_nowait()
        except queue.Empty:
            return


def _progress_messages(conduit: queue.Queue, start: float, end: float) -> Iterator[tuple[float, str]]:
    """Spread drained info messages evenly over the [start, end] progress range."""
    messages = list(_drain(conduit))
    step = (end - start) / max(len(messages), 1)
    for i, message in enumerate(messages, start=1):
        yield (start + step * i, str(message))
