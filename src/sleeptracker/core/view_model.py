"""Base class for view models.

A view model lives on one asyncio event loop (the Qt main thread in the
desktop app). Commands are launched as tasks on that loop; blocking store
calls are pushed to an executor and awaited, so observable state is only
ever touched from the loop thread.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Callable, Coroutine, Optional

from PySide6.QtCore import QObject

logger = logging.getLogger(__name__)

IO_THREAD_PREFIX = "sleeptracker-io"


class ViewModel(QObject):
    """Owns the scope in which a view model's tasks run.

    Closing the view model cancels its in-flight tasks. Cancelled work is
    abandoned; nothing is rolled back.
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize the view model scope.

        Must be called from the event-loop thread when ``loop`` is omitted.

        Args:
            executor: Executor for blocking store calls. If None, a private
                thread pool is created and shut down on ``close``.
            loop: Event loop to run tasks on (default: the running loop)
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._loop = loop or asyncio.get_running_loop()
        self._loop_thread_id = threading.get_ident()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix=IO_THREAD_PREFIX
        )
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        """Check if ``close`` has been called."""
        return self._closed

    @property
    def pending_tasks(self) -> int:
        """Number of launched tasks that have not finished yet."""
        return len(self._tasks)

    def launch(self, coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task:
        """Schedule a command coroutine on the view model's loop.

        Failures are logged and left on the returned task, so awaiting it
        re-raises them.

        Args:
            coro: Coroutine implementing the command
            name: Task name used in log messages

        Returns:
            The scheduled task

        Raises:
            RuntimeError: If the view model is closed
        """
        if self._closed:
            coro.close()
            raise RuntimeError(f"{type(self).__name__} is closed")

        task = self._loop.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug(f"Task {task.get_name()} cancelled")
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Task {task.get_name()} failed: {error}", exc_info=error)

    async def run_io(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking call on the executor and await its result."""
        return await self._loop.run_in_executor(self._executor, func, *args)

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback`` on the loop thread.

        Called from the loop thread, the callback runs immediately; from any
        other thread it is queued with ``call_soon_threadsafe``.
        """
        if threading.get_ident() == self._loop_thread_id:
            callback(*args)
        elif not self._loop.is_closed():
            self._loop.call_soon_threadsafe(callback, *args)

    def close(self) -> None:
        """End the view model's scope. Safe to call repeatedly."""
        if self._closed:
            return

        self._closed = True
        for task in list(self._tasks):
            task.cancel()

        self._on_close()

        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

        logger.info(f"{type(self).__name__} closed")

    def _on_close(self) -> None:
        """Hook for subclasses to release their collaborators."""
