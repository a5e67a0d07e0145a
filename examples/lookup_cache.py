"""Memoizing a slow lookup service.

This example wraps a flaky catalogue service in a LookupCache. Keys the
service resolves are fetched once; failures are retried on the next get().
"""

import time

from docdispatch import CallableLookup, LookupCache


CATALOGUE = {"TheDress": "blue and black", "CoolBoots": None}


def slow_catalogue(key: str) -> str | None:
    """Pretend to be a remote service; raises KeyError for unknown keys."""
    time.sleep(0.5)
    return CATALOGUE[key]


cache = LookupCache(CallableLookup(slow_catalogue))

# First call hits the service, second is served from memory
print(cache.get("TheDress"))
print(cache.get("TheDress"))

# "CoolBoots" exists but has no description: cached as None
print(cache.get("CoolBoots"))

# Unknown keys are not cached and will be looked up again
print(cache.get("Unknown"))

print(cache.statistics())
