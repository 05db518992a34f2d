from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from curtain_widget.application.ports.display import DisplayPort

Sleep = Callable[[float], Awaitable[None]]


class CartCountAnimator:
    """
    Steps the displayed cart count towards a target, one unit per tick.

    Only one animation runs at a time: starting a new one cancels the one in
    flight, and the new one continues from whatever value is displayed.
    """

    def __init__(self, display: DisplayPort, tick_seconds: float = 0.05, sleep: Sleep | None = None) -> None:
        self._display = display
        self._tick_seconds = tick_seconds
        self._sleep = sleep or asyncio.sleep
        self._task: asyncio.Task[None] | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, target: int) -> asyncio.Task[None]:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(target))
        self._task.add_done_callback(self._log_failure)
        return self._task

    def cancel(self) -> None:
        if self.running:
            self._logger.info("Cancelling cart count animation")
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the current animation, if any, to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    def _log_failure(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._logger.error("Cart count animation failed", extra={"error": str(error)})

    async def _run(self, target: int) -> None:
        current = self._display.get_cart_count()
        step = (target > current) - (target < current)
        if step == 0:
            return
        self._logger.info("Animating cart count", extra={"item_count": target})
        while current != target:
            await self._sleep(self._tick_seconds)
            current += step
            self._display.set_cart_count(current)
