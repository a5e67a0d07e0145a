"""Parallel batch sending with a thread pool.

Items are independent, so a BatchSender can fan them out to an executor.
Skipped items still come back in input order.
"""

from datetime import datetime

from docdispatch import (
    BatchSender,
    Item,
    ParsedItem,
    ThreadPoolExecutorAdapter,
    load_config,
)


class JsonLikeRecognizer:
    def try_recognize(self, item: Item) -> ParsedItem | None:
        return ParsedItem(item.name, item.content, datetime.now(), "4.0")


class NullSigner:
    def sign(self, content: bytes, context: object) -> bytes:
        return content


class FlakyTransmitter:
    def try_send(self, payload: bytes) -> bool:
        return not payload.endswith(b"3")


# Reads [tool.docdispatch] from pyproject.toml if present
config = load_config()

sender = BatchSender(
    JsonLikeRecognizer(),
    NullSigner(),
    FlakyTransmitter(),
    config=config,
    executor=ThreadPoolExecutorAdapter(max_workers=4),
)

items = [Item(f"doc{i}", f"payload {i}".encode()) for i in range(20)]
result = sender.send_all(items, context=None)

print(f"{result.sent_count}/{result.total} sent")
print("skipped:", [item.name for item in result.skipped])

# Force sequential processing for one call
result = sender.send_all(items, context=None, max_workers=1)
