"""Sending a batch of signed documents.

This example wires BatchSender to toy collaborators: a recognizer that
reads a "format;created;body" header, an HMAC signer and a transmitter
that prints what it sends. Items that fail any check are reported as
skipped without stopping the batch.
"""

import hashlib
import hmac
from datetime import datetime, timedelta

from docdispatch import BatchSender, Item, ParsedItem, RichBatchReporter, SenderConfig


class HeaderRecognizer:
    def try_recognize(self, item: Item) -> ParsedItem | None:
        try:
            format, created, body = item.content.decode().split(";", 2)
            return ParsedItem(
                name=item.name,
                content=body.encode(),
                created=datetime.fromisoformat(created),
                format=format,
            )
        except ValueError:
            return None


class HmacSigner:
    def sign(self, content: bytes, context: bytes) -> bytes:
        return hmac.new(context, content, hashlib.sha256).digest() + content


class PrintingTransmitter:
    def try_send(self, payload: bytes) -> bool:
        print(f"sent {len(payload)} bytes")
        return True


today = datetime.now()
items = [
    Item("fresh.txt", f"4.0;{today.isoformat()};hello".encode()),
    Item("old.txt", f"3.1;{(today - timedelta(days=90)).isoformat()};stale".encode()),
    Item("legacy.txt", f"2.0;{today.isoformat()};legacy".encode()),
    Item("garbage.bin", b"\x00\x01"),
]

sender = BatchSender(
    HeaderRecognizer(),
    HmacSigner(),
    PrintingTransmitter(),
    config=SenderConfig(),  # accepts 4.0 and 3.1, one calendar month
)

with RichBatchReporter() as progress:
    result = sender.send_all(items, b"secret-key", progress=progress)

for item in result.skipped:
    print(f"skipped: {item.name}")
