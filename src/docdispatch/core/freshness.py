"""Freshness window arithmetic.

A window is either a fixed ``timedelta`` or a calendar-aware
``relativedelta``. Calendar months clamp to the last day of the target
month, so Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta


FreshnessWindow = timedelta | relativedelta

ONE_MONTH: relativedelta = relativedelta(months=1)


def expires_at(created: datetime, window: FreshnessWindow) -> datetime:
    """Return the instant at which an item created at ``created`` goes stale."""
    return created + window


def now_like(created: datetime) -> datetime:
    """Current time in the same timezone flavour as ``created``.

    Naive timestamps are compared against local naive time, aware ones
    against the current time in their own zone.
    """
    return datetime.now(created.tzinfo)


def is_fresh(created: datetime, window: FreshnessWindow, now: datetime) -> bool:
    """Check whether ``created + window`` is strictly after ``now``.

    Args:
        created: Creation timestamp of the item.
        window: Maximum allowed age.
        now: Evaluation time.

    Returns:
        True if the item is still inside its freshness window.
    """
    return expires_at(created, window) > now


def is_positive(window: FreshnessWindow) -> bool:
    """Whether a window moves time forward.

    A relativedelta has no total ordering, so it is applied to a fixed
    anchor date and compared.
    """
    if isinstance(window, timedelta):
        return window > timedelta(0)
    anchor = datetime(2000, 1, 1)
    return anchor + window > anchor
