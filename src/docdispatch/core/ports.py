"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
Every collaborator reports failure through its return value; raising
is outside the contract.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from concurrent.futures import Future

    from docdispatch.core.models import Found, Item, ParsedItem

V_co = TypeVar("V_co", covariant=True)


@runtime_checkable
class Lookup(Protocol[V_co]):
    """Slow or unreliable key lookup service fronted by LookupCache."""

    def try_read(self, key: str) -> Found[V_co] | None:
        """Resolve a key.

        Args:
            key: The key to resolve.

        Returns:
            Found wrapping the value (possibly None) if the key resolves,
            None if it does not or the service failed.
        """
        ...


@runtime_checkable
class Recognizer(Protocol):
    """Classifies raw item content into a ParsedItem."""

    def try_recognize(self, item: Item) -> ParsedItem | None:
        """Recognize an item, or return None if it cannot be parsed."""
        ...


@runtime_checkable
class Signer(Protocol):
    """Produces a signed payload from content and a signing context."""

    def sign(self, content: bytes, context: Any) -> bytes:
        """Sign content.

        Args:
            content: Bytes to sign.
            context: Opaque signing context (e.g., a certificate handle).

        Returns:
            The signed payload.
        """
        ...


@runtime_checkable
class Transmitter(Protocol):
    """Attempts delivery of a signed payload."""

    def try_send(self, payload: bytes) -> bool:
        """Send a signed payload. Returns True if delivery was confirmed."""
        ...


@runtime_checkable
class BatchReporter(Protocol):
    """Reports batch progress to the user.

    The core domain uses this to report progress without depending
    on any specific UI library.
    """

    def start_batch(self, total: int) -> None:
        """Start tracking a batch.

        Args:
            total: Number of items in the batch.
        """
        ...

    def item_done(self, item: Item, sent: bool) -> None:
        """Record the outcome of one item.

        Args:
            item: The processed item.
            sent: True if the item was transmitted, False if skipped.
        """
        ...

    def finish_batch(self) -> None:
        """Mark the batch as complete."""
        ...


class NullBatchReporter:
    """A BatchReporter that produces no output.

    Used as the default when no progress reporting is desired.
    """

    def start_batch(self, total: int) -> None:
        """Do nothing."""
        _ = total  # Unused but required by protocol

    def item_done(self, item: Item, sent: bool) -> None:  # noqa: ARG002
        """Do nothing."""
        return None

    def finish_batch(self) -> None:
        """Do nothing."""
        return None


@runtime_checkable
class ExecutorPort(Protocol):
    """Executor for parallel task execution.

    Abstracts over concurrent.futures executors to allow dependency injection
    and testing. The core domain uses this protocol instead of directly
    importing ThreadPoolExecutor, maintaining "concurrency at the edges".
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Submit a function for execution.

        Args:
            fn: Function to execute.
            *args: Positional arguments to pass to fn.
            **kwargs: Keyword arguments to pass to fn.

        Returns:
            Future representing the pending result.
        """
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager."""
        ...
