"""docdispatch - Memoized lookups and fault-isolated batch sending.

This library provides two small building blocks: a LookupCache that
memoizes a slow or unreliable lookup service, and a BatchSender that
recognizes, validates, signs and transmits a batch of items, skipping
the ones that fail without aborting the rest.

Example:
    >>> from docdispatch import LookupCache, MappingLookup
    >>> cache = LookupCache(MappingLookup({"TheDress": "blue and black"}))
    >>> cache.get("TheDress")
    'blue and black'
    >>> cache.get("CoolBoots") is None
    True
"""

from docdispatch.adapters.executor import (
    SynchronousExecutor,
    ThreadPoolExecutorAdapter,
)
from docdispatch.adapters.lookup import CallableLookup, MappingLookup
from docdispatch.config import (
    DEFAULT_ACCEPTED_FORMATS,
    SenderConfig,
    find_project_root,
    load_config,
)
from docdispatch.core.batch_sender import BatchSender
from docdispatch.core.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    DocdispatchError,
)
from docdispatch.core.lookup_cache import LookupCache
from docdispatch.core.models import BatchResult, Found, Item, ParsedItem, SkipReason
from docdispatch.core.ports import (
    BatchReporter,
    ExecutorPort,
    Lookup,
    NullBatchReporter,
    Recognizer,
    Signer,
    Transmitter,
)
from docdispatch.progress import RichBatchReporter


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ACCEPTED_FORMATS",
    "BatchReporter",
    "BatchResult",
    "BatchSender",
    "CallableLookup",
    "ConfigLoadError",
    "ConfigurationError",
    "DocdispatchError",
    "ExecutorPort",
    "Found",
    "Item",
    "Lookup",
    "LookupCache",
    "MappingLookup",
    "NullBatchReporter",
    "ParsedItem",
    "Recognizer",
    "RichBatchReporter",
    "Signer",
    "SenderConfig",
    "SkipReason",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "Transmitter",
    "__version__",
    "find_project_root",
    "load_config",
]
