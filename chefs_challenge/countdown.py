from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Countdown:
    """A cancellable repeating tick driven by one asyncio task.

    Contract:
      - `start()` schedules `on_tick` every `interval` seconds on the running loop.
      - `cancel()` stops it; no tick fires after `cancel()` returns.

    Starting an already running countdown restarts it.
    """

    def __init__(self, *, interval: float, on_tick: Callable[[], None]) -> None:
        self._interval = interval
        self._on_tick = on_tick
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(), name="countdown")

    def cancel(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _run(self) -> None:
        me = asyncio.current_task()
        while True:
            await asyncio.sleep(self._interval)
            # A cancel() issued from inside on_tick clears _task before we loop again.
            if self._task is not me:
                return
            logger.debug("countdown tick")
            self._on_tick()
