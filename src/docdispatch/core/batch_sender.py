"""Batch pipeline that recognizes, validates, signs and transmits items."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from docdispatch.config import SenderConfig
from docdispatch.core.freshness import is_fresh, now_like
from docdispatch.core.models import BatchResult, Item, ParsedItem, SkipReason
from docdispatch.core.ports import (
    BatchReporter,
    ExecutorPort,
    NullBatchReporter,
    Recognizer,
    Signer,
    Transmitter,
)


logger = logging.getLogger(__name__)


class BatchSender:
    """Sends a batch of items, isolating per-item failures.

    Each item passes four gates in order: recognition, format check,
    freshness check, then signing and transmission. The first failing
    gate skips the item; later items are processed regardless.

    Example:
        sender = BatchSender(recognizer, signer, transmitter)
        result = sender.send_all(items, certificate)
        for item in result.skipped:
            print(f"not sent: {item.name}")
    """

    def __init__(
        self,
        recognizer: Recognizer,
        signer: Signer,
        transmitter: Transmitter,
        config: SenderConfig | None = None,
        executor: ExecutorPort | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._recognizer = recognizer
        self._signer = signer
        self._transmitter = transmitter
        self._config = config if config is not None else SenderConfig()
        self._executor = executor
        self._clock = clock

    @property
    def config(self) -> SenderConfig:
        """The validation rules in effect."""
        return self._config

    def check_format(self, parsed: ParsedItem) -> bool:
        """Whether the parsed item's format is an accepted version."""
        return parsed.format in self._config.accepted_formats

    def check_fresh(self, parsed: ParsedItem) -> bool:
        """Whether the parsed item is younger than the freshness window."""
        now = self._clock() if self._clock is not None else now_like(parsed.created)
        return is_fresh(parsed.created, self._config.freshness_window, now)

    def _process(self, item: Item, context: Any) -> SkipReason | None:
        """Run one item through the pipeline.

        Returns:
            The reason the item was skipped, or None if it was sent.
        """
        parsed = self._recognizer.try_recognize(item)
        if parsed is None:
            return SkipReason.NOT_RECOGNIZED
        if not self.check_format(parsed):
            return SkipReason.BAD_FORMAT
        if not self.check_fresh(parsed):
            return SkipReason.STALE

        signed = self._signer.sign(parsed.content, context)
        if not self._transmitter.try_send(signed):
            return SkipReason.SEND_FAILED
        return None

    def try_send(self, item: Item, context: Any) -> bool:
        """Send a single item.

        Args:
            item: The item to send.
            context: Opaque signing context passed through to the Signer.

        Returns:
            True if the item was confirmed transmitted, False if any gate
            rejected it.
        """
        reason = self._process(item, context)
        if reason is not None:
            logger.debug("Skipping item %r: %s", item.name, reason.value)
            return False
        return True

    def send_all(
        self,
        items: Iterable[Item],
        context: Any,
        progress: BatchReporter | None = None,
        max_workers: int | None = None,
    ) -> BatchResult:
        """Send every item and collect the ones that were skipped.

        Items are processed sequentially unless an executor was injected
        and max_workers is not 1. Either way the skipped items come back
        in input order.

        Args:
            items: Items to send.
            context: Opaque signing context passed through to the Signer.
            progress: Optional reporter for per-item feedback.
            max_workers: Use 1 to force sequential processing. Parallelism
                itself is configured on the injected executor.

        Returns:
            BatchResult listing the skipped items.
        """
        if progress is None:
            progress = NullBatchReporter()

        batch = list(items)
        progress.start_batch(len(batch))

        def send_one(item: Item) -> bool:
            sent = self.try_send(item, context)
            progress.item_done(item, sent)
            return sent

        # Sequential execution for max_workers=1 or when no executor provided
        if max_workers == 1 or self._executor is None:
            outcomes = [send_one(item) for item in batch]
        else:
            executor = self._executor
            with executor:
                futures = [executor.submit(send_one, item) for item in batch]
                # Futures are read in submission order, which restores input order
                outcomes = [bool(future.result()) for future in futures]

        progress.finish_batch()

        skipped = tuple(
            item for item, sent in zip(batch, outcomes, strict=True) if not sent
        )
        logger.info(
            "Batch finished: %d sent, %d skipped", len(batch) - len(skipped), len(skipped)
        )
        return BatchResult(skipped=skipped, total=len(batch))
