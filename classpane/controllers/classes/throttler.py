"""Coalescing scheduler for deferred asynchronous work."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

Process = Callable[[], Awaitable[Any]]


class Throttler:
    """Runs the most recently scheduled process once per coalescing window.

    - ``schedule`` while a run is pending only replaces the process to run.
    - ``schedule`` while a process is running arms exactly one further run,
      started after the current one completes, so runs never overlap.
    """

    def __init__(self, timeout: float = 0.0) -> None:
        self._timeout = timeout
        self._process: Process | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def is_idle(self) -> bool:
        return self._task is None or self._task.done()

    def schedule(self, process: Process) -> None:
        """Schedule ``process``; must be called from a running event loop."""
        self._process = process
        if not self.is_idle:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        while self._process is not None:
            await asyncio.sleep(self._timeout)
            process, self._process = self._process, None
            try:
                await process()
            except Exception:
                logger.exception("Throttled process failed")

    async def join(self) -> None:
        """Wait until no run is pending or in progress."""
        while self._task is not None and not self._task.done():
            await asyncio.shield(self._task)

    def cancel(self) -> None:
        """Drop any pending process and stop the current run."""
        self._process = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
