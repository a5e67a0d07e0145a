"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
in-memory fakes for the collaborator ports. The fakes record every call
so tests can assert on call counts and arguments.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

import pytest

from docdispatch.core.models import Found, Item, ParsedItem


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "cache: LookupCache behaviour")
    config.addinivalue_line("markers", "sender: BatchSender pipeline")
    config.addinivalue_line("markers", "config: Configuration loading")
    config.addinivalue_line("markers", "progress: Rich progress integration")
    config.addinivalue_line("markers", "property: Hypothesis property tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeLookup:
    """Lookup resolving keys from a dict and recording every read."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = dict(values or {})
        self.calls: list[str] = []

    def try_read(self, key: str) -> Found[Any] | None:
        self.calls.append(key)
        if key in self.values:
            return Found(self.values[key])
        return None

    def call_count(self, key: str) -> int:
        return self.calls.count(key)


class FakeRecognizer:
    """Recognizer returning preconfigured ParsedItems by item name."""

    def __init__(self, documents: dict[str, ParsedItem] | None = None) -> None:
        self.documents = dict(documents or {})
        self.calls: list[Item] = []

    def try_recognize(self, item: Item) -> ParsedItem | None:
        self.calls.append(item)
        return self.documents.get(item.name)


class FakeSigner:
    """Signer that prefixes content with the context and records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, Any]] = []

    def sign(self, content: bytes, context: Any) -> bytes:
        self.calls.append((content, context))
        return b"signed:" + content


class FakeTransmitter:
    """Transmitter replaying a sequence of results, then a default."""

    def __init__(self, results: Iterable[bool] = (), default: bool = True) -> None:
        self._results = list(results)
        self.default = default
        self.calls: list[bytes] = []

    def try_send(self, payload: bytes) -> bool:
        self.calls.append(payload)
        if self._results:
            return self._results.pop(0)
        return self.default


def make_document(
    item: Item, format: str = "3.1", created: datetime | None = None
) -> ParsedItem:
    """Build the ParsedItem a recognizer would produce for item."""
    return ParsedItem(
        name=item.name,
        content=item.content,
        created=created if created is not None else datetime.now(),
        format=format,
    )


@pytest.fixture
def item() -> Item:
    """A single item with a small payload."""
    return Item("someFile", b"\x01\x02\x03")


@pytest.fixture
def certificate() -> object:
    """An opaque signing context."""
    return object()


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


@pytest.fixture
def recognizer() -> FakeRecognizer:
    return FakeRecognizer()


@pytest.fixture
def signer() -> FakeSigner:
    return FakeSigner()


@pytest.fixture
def transmitter() -> FakeTransmitter:
    return FakeTransmitter()
