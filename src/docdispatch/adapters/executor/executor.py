"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable


class SynchronousExecutor:
    """Runs each submitted task immediately in the calling thread.

    Useful in tests that want the executor code path of
    BatchSender.send_all() without real threads.
    """

    def __init__(self) -> None:
        self.submitted = 0

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Execute fn now and return an already completed future.

        Exceptions raised by fn are stored on the future and re-raised
        by Future.result(), as with a real pool.
        """
        self.submitted += 1
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        """Enter context manager."""
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager (nothing to shut down)."""
        return None


class ThreadPoolExecutorAdapter:
    """Adapter wrapping ThreadPoolExecutor to implement ExecutorPort.

    A fresh pool is created each time the adapter is entered, so one
    adapter can serve several send_all() calls on the same BatchSender.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize thread pool executor adapter.

        Args:
            max_workers: Maximum number of worker threads. None uses default.
        """
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Submit function to the thread pool.

        Raises:
            RuntimeError: If called outside a ``with`` block.
        """
        if self._executor is None:
            raise RuntimeError("ThreadPoolExecutorAdapter must be entered before use")
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        """Start a worker pool."""
        self._executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="docdispatch"
        )
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Wait for pending tasks and shut the pool down."""
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        return None
