"""Core domain module for docdispatch.

This module contains pure Python domain models and port definitions.
It has no I/O dependencies and can be tested in isolation.
"""

from docdispatch.core.models import BatchResult, Found, Item, ParsedItem, SkipReason
from docdispatch.core.ports import (
    BatchReporter,
    ExecutorPort,
    Lookup,
    Recognizer,
    Signer,
    Transmitter,
)


__all__ = [
    "BatchReporter",
    "BatchResult",
    "ExecutorPort",
    "Found",
    "Item",
    "Lookup",
    "ParsedItem",
    "Recognizer",
    "Signer",
    "SkipReason",
    "Transmitter",
]
