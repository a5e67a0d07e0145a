"""In-memory Lookup adapters."""

from docdispatch.adapters.lookup.memory import CallableLookup, MappingLookup


__all__ = ["CallableLookup", "MappingLookup"]
