"""Tests validating that example code patterns work correctly.

These tests ensure the examples in the examples/ directory represent
working, copy-pasteable code patterns.
"""

from datetime import datetime, timedelta

import pytest

from docdispatch import (
    BatchSender,
    CallableLookup,
    Item,
    LookupCache,
    ParsedItem,
    ThreadPoolExecutorAdapter,
)


@pytest.mark.core
class TestLookupCacheExample:
    """Tests for lookup_cache.py example pattern."""

    def test_callable_lookup_through_cache(self) -> None:
        catalogue = {"TheDress": "blue and black", "CoolBoots": None}
        calls: list[str] = []

        def service(key: str) -> str | None:
            calls.append(key)
            return catalogue[key]

        cache = LookupCache(CallableLookup(service))

        assert cache.get("TheDress") == "blue and black"
        assert cache.get("TheDress") == "blue and black"
        assert cache.get("CoolBoots") is None
        assert cache.get("CoolBoots") is None
        assert cache.get("Unknown") is None
        assert cache.get("Unknown") is None
        assert calls == ["TheDress", "CoolBoots", "Unknown", "Unknown"]


class HeaderRecognizer:
    def try_recognize(self, item: Item) -> ParsedItem | None:
        try:
            format, created, body = item.content.decode().split(";", 2)
            return ParsedItem(item.name, body.encode(), datetime.fromisoformat(created), format)
        except ValueError:
            return None


class EchoSigner:
    def sign(self, content: bytes, context: object) -> bytes:
        return content


class AcceptAll:
    def try_send(self, payload: bytes) -> bool:
        return True


@pytest.mark.sender
class TestBatchSendExample:
    """Tests for batch_send.py and parallel_send.py example patterns."""

    def test_mixed_batch(self) -> None:
        today = datetime.now()
        items = [
            Item("fresh.txt", f"4.0;{today.isoformat()};hello".encode()),
            Item("old.txt", f"3.1;{(today - timedelta(days=90)).isoformat()};x".encode()),
            Item("legacy.txt", f"2.0;{today.isoformat()};legacy".encode()),
            Item("garbage.bin", b"\xff\xfe"),
        ]
        sender = BatchSender(HeaderRecognizer(), EchoSigner(), AcceptAll())

        result = sender.send_all(items, b"key")

        assert [item.name for item in result.skipped] == [
            "old.txt",
            "legacy.txt",
            "garbage.bin",
        ]

    def test_parallel_batch(self) -> None:
        today = datetime.now().isoformat()
        items = [Item(f"doc{i}", f"4.0;{today};{i}".encode()) for i in range(20)]
        sender = BatchSender(
            HeaderRecognizer(),
            EchoSigner(),
            AcceptAll(),
            executor=ThreadPoolExecutorAdapter(max_workers=4),
        )

        result = sender.send_all(items, context=None)

        assert result.sent_count == 20
