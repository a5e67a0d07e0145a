"""Core domain models for docdispatch.

These models are pure Python dataclasses with no I/O dependencies.
They represent the items flowing through the batch pipeline and the
result values exchanged with collaborator ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar


if TYPE_CHECKING:
    from datetime import datetime


V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Item:
    """A named binary payload submitted for processing.

    Attributes:
        name: Human-readable identifier (e.g., the original file name).
        content: Raw bytes of the payload.

    Example:
        >>> invoice = Item(name="invoice.xml", content=b"<invoice/>")
        >>> invoice.name
        'invoice.xml'
    """

    name: str
    content: bytes

    def __post_init__(self) -> None:
        """Validate item fields after initialization."""
        if not self.name:
            raise ValueError("Item name cannot be empty")


@dataclass(frozen=True, slots=True)
class ParsedItem:
    """The structured form of an Item, produced by a Recognizer.

    Attributes:
        name: Name of the item this was recognized from.
        content: Payload bytes to be signed.
        created: Creation timestamp declared by the payload.
        format: Format version tag (e.g., "4.0").
    """

    name: str
    content: bytes
    created: datetime
    format: str


@dataclass(frozen=True, slots=True)
class Found(Generic[V]):
    """A resolved lookup value.

    Lookups return ``Found(value)`` when a key resolves and ``None`` when
    it does not, so a resolved ``None`` stays distinct from a miss.

    Attributes:
        value: The resolved value. May itself be None or empty.
    """

    value: V


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Outcome of a BatchSender.send_all() run.

    Attributes:
        skipped: Items that were not sent, in input relative order.
        total: Number of items submitted in the batch.
    """

    skipped: tuple[Item, ...] = ()
    total: int = 0

    @property
    def sent_count(self) -> int:
        """Number of items that were confirmed transmitted."""
        return self.total - len(self.skipped)

    @property
    def all_sent(self) -> bool:
        """True when no item in the batch was skipped."""
        return not self.skipped


class SkipReason(Enum):
    """The pipeline gate that rejected an item."""

    NOT_RECOGNIZED = "not recognized"
    BAD_FORMAT = "unsupported format"
    STALE = "older than freshness window"
    SEND_FAILED = "transmission failed"
