"""Best-effort, non-blocking progress and error notifications."""

import asyncio
import logging
import queue
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Conduit(Protocol):
    """Anything accepting `put_nowait`, e.g. queue.Queue or asyncio.Queue.

    A full conduit signals it by raising queue.Full or asyncio.QueueFull.
    """

    def put_nowait(self, item: Any) -> None: ...


class Notifier:
    """Forward info messages and errors to optional conduits without ever blocking.

    A send that would block (full bounded queue of either kind) is dropped. Every message is
    also logged so callers without conduits still get a trail.
    """

    def __init__(self, info_conduit: Conduit | None = None, error_conduit: Conduit | None = None):
        self.info_conduit = info_conduit
        self.error_conduit = error_conduit

    def info(self, fmt: str, *args: Any) -> None:
        msg = fmt % args if args else fmt
        logger.info(msg)
        self._send(self.info_conduit, msg)

    def error(self, err: BaseException | None) -> None:
        if err is None:
            return
        logger.error(str(err))
        self._send(self.error_conduit, err)

    @staticmethod
    def _send(conduit: Conduit | None, item: Any) -> None:
        if conduit is None:
            return
        try:
            conduit.put_nowait(item)
        except (queue.Full, asyncio.QueueFull):
            pass
