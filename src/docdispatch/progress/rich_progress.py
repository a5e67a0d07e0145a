"""Rich-based batch progress reporter for terminal output."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


if TYPE_CHECKING:
    from types import TracebackType

    from docdispatch.core.models import Item


class RichBatchReporter:
    """Progress reporter using Rich for terminal display.

    Shows a single bar for the batch with running sent/skipped counts.
    Safe to use with a parallel executor.

    Example:
        with RichBatchReporter() as reporter:
            result = sender.send_all(items, certificate, progress=reporter)
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the progress display.

        Args:
            console: Console to render to. Defaults to Rich's global console.
        """
        self._progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("[green]{task.fields[sent]} sent"),
            TextColumn("[red]{task.fields[skipped]} skipped"),
            TimeElapsedColumn(),
            console=console,
        )
        self._task: TaskID | None = None
        self._lock = threading.Lock()
        self._started = False
        self.sent = 0
        self.skipped = 0

    def __enter__(self) -> RichBatchReporter:
        """Start the progress display."""
        self._progress.start()
        self._started = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Stop the progress display."""
        self._progress.stop()
        self._started = False

    def start_batch(self, total: int) -> None:
        """Add a bar for a new batch of ``total`` items."""
        # Auto-start if not in context manager
        if not self._started:
            self._progress.start()
            self._started = True

        with self._lock:
            self.sent = 0
            self.skipped = 0
            self._task = self._progress.add_task(
                "Sending", total=total, sent=0, skipped=0
            )

    def item_done(self, item: Item, sent: bool) -> None:
        """Advance the bar by one item."""
        with self._lock:
            if sent:
                self.sent += 1
            else:
                self.skipped += 1
            if self._task is not None:
                self._progress.update(
                    self._task,
                    advance=1,
                    description=item.name,
                    sent=self.sent,
                    skipped=self.skipped,
                )

    def finish_batch(self) -> None:
        """Mark the batch bar complete."""
        with self._lock:
            if self._task is not None:
                task = self._progress.tasks[self._task]
                self._progress.update(
                    self._task, completed=task.total, description="Done"
                )
