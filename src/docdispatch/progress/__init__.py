"""Progress reporting adapters."""

from docdispatch.progress.rich_progress import RichBatchReporter


__all__ = ["RichBatchReporter"]
