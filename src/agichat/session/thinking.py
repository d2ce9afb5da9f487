"""Animated "Thinking..." label shown while a request is pending.

The animation is a recurring asyncio task. It is acquired as an async
context manager around the pending window and always cancelled on exit,
or by close() when the owning component is torn down.
"""

import asyncio
import contextlib
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

BASE_LABEL = "Thinking"
MAX_LABEL_LENGTH = 10
TICK_INTERVAL = 0.5  # seconds


def next_label(label: str) -> str:
    """Add a dot, wrapping back to the base label once it grows too long."""
    if len(label) > MAX_LABEL_LENGTH:
        return BASE_LABEL
    return label + "."


class ThinkingIndicator:
    """Cancellable recurring task that animates a short status label.

    Usage:
        indicator = ThinkingIndicator(on_tick=status.update)
        async with indicator:
            await slow_call()
        # task cancelled here, label back to "Thinking"
    """

    def __init__(
        self,
        on_tick: Callable[[str], Any] | None = None,
        interval: float = TICK_INTERVAL,
    ) -> None:
        self._interval = interval
        self._listeners: list[Callable[[str], Any]] = [on_tick] if on_tick else []
        self._label = BASE_LABEL
        self._task: asyncio.Task | None = None

    @property
    def label(self) -> str:
        return self._label

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def add_listener(self, listener: Callable[[str], Any]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[str], Any]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self) -> None:
        """Begin animating. Must be called from a running event loop."""
        if self.running:
            return
        self._label = BASE_LABEL
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        """Cancel the animation and wait for the task to finish."""
        task, self._task = self._task, None
        self._label = BASE_LABEL
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def close(self) -> None:
        """Cancel the animation without waiting (component teardown)."""
        task, self._task = self._task, None
        self._label = BASE_LABEL
        if task is not None:
            task.cancel()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self._label = next_label(self._label)
            for listener in list(self._listeners):
                try:
                    listener(self._label)
                except Exception:
                    logger.exception("Thinking indicator listener failed")

    async def __aenter__(self) -> "ThinkingIndicator":
        self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.stop()
