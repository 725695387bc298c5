import asyncio
import logging
from typing import Optional

from catalog_ui.config import STATUS_CLEAR_DELAY
from catalog_ui.context import StatusElement

logger = logging.getLogger(__name__)


class StatusReporter:
    """Shows one short-lived, colored message at a time."""

    def __init__(
        self,
        element: StatusElement,
        delay: float = STATUS_CLEAR_DELAY,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.element = element
        self.delay = delay
        self._loop = loop
        self._pending: Optional[asyncio.TimerHandle] = None

    def report(self, message: str, color: str) -> None:
        self.element.text = message
        self.element.color = color
        logger.debug("Status %r (%s)", message, color)

        # last call wins: the previous clear must not wipe this message
        if self._pending is not None:
            self._pending.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._pending = loop.call_later(self.delay, self._clear)

    def _clear(self) -> None:
        self._pending = None
        self.element.text = ""
