"""In-memory Lookup adapters implementing the Lookup port."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Generic, TypeVar

from docdispatch.core.models import Found


V = TypeVar("V")

_MISSING = object()


class MappingLookup(Generic[V]):
    """Lookup backed by a mapping.

    A key present in the mapping resolves, even when its value is None.

    Attributes:
        data: The mapping consulted on each read.
    """

    def __init__(self, data: Mapping[str, V]) -> None:
        self.data = data

    def try_read(self, key: str) -> Found[V] | None:
        """Resolve key from the mapping, or None if it is absent."""
        value = self.data.get(key, _MISSING)
        if value is _MISSING:
            return None
        return Found(value)  # type: ignore[arg-type]


class CallableLookup(Generic[V]):
    """Lookup wrapping a function that signals failure by raising.

    Adapts services that raise on unknown keys or transport errors to the
    Lookup contract, where failure is reported as None.
    """

    def __init__(
        self,
        fn: Callable[[str], V],
        errors: tuple[type[Exception], ...] = (KeyError, LookupError),
    ) -> None:
        """Initialize the adapter.

        Args:
            fn: Function resolving a key to a value.
            errors: Exception types that mean "not found". Anything else
                propagates.
        """
        self._fn = fn
        self._errors = errors

    def try_read(self, key: str) -> Found[V] | None:
        """Call the wrapped function, mapping configured errors to None."""
        try:
            return Found(self._fn(key))
        except self._errors:
            return None
