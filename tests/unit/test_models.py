"""Unit tests for domain models."""

from datetime import datetime

import pytest

from docdispatch.core.models import BatchResult, Found, Item, ParsedItem, SkipReason


@pytest.mark.core
class TestItem:
    """Tests for Item."""

    def test_item_holds_name_and_content(self) -> None:
        item = Item("invoice.xml", b"<invoice/>")

        assert item.name == "invoice.xml"
        assert item.content == b"<invoice/>"

    def test_item_is_immutable(self) -> None:
        item = Item("invoice.xml", b"")

        with pytest.raises(AttributeError):
            item.name = "other.xml"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name cannot be empty"):
            Item("", b"data")

    def test_empty_content_allowed(self) -> None:
        assert Item("empty", b"").content == b""


@pytest.mark.core
class TestParsedItem:
    """Tests for ParsedItem."""

    def test_parsed_item_fields(self) -> None:
        created = datetime(2024, 1, 10)
        parsed = ParsedItem(name="a", content=b"x", created=created, format="4.0")

        assert parsed.created == created
        assert parsed.format == "4.0"


@pytest.mark.core
class TestFound:
    """Tests for Found."""

    def test_found_none_is_distinct_from_missing(self) -> None:
        found = Found(None)

        assert found is not None
        assert found.value is None

    def test_found_equality(self) -> None:
        assert Found(1) == Found(1)
        assert Found(1) != Found(2)


@pytest.mark.core
class TestBatchResult:
    """Tests for BatchResult."""

    def test_default_is_empty(self) -> None:
        result = BatchResult()

        assert result.skipped == ()
        assert result.total == 0
        assert result.all_sent

    def test_sent_count(self) -> None:
        item = Item("a", b"")
        result = BatchResult(skipped=(item,), total=4)

        assert result.sent_count == 3
        assert not result.all_sent


@pytest.mark.core
def test_skip_reasons_cover_each_gate() -> None:
    assert {reason.name for reason in SkipReason} == {
        "NOT_RECOGNIZED",
        "BAD_FORMAT",
        "STALE",
        "SEND_FAILED",
    }
