"""Reusable field predicates.

Pure, total functions over optional values. Polarity is inverted:
``True`` means the value VIOLATES the rule, ``False`` means it passes.

NOTE: ``future_date``, ``past_date`` and ``before_1905`` report an absent
value as a violation, while ``must_be_entered`` is the dedicated presence
check. Pipelines that test presence first never reach that branch; it is
kept for standalone callers.
"""

from __future__ import annotations

from collections.abc import Sized
from datetime import date, datetime
from typing import Any

MAX_LENGTH = 32  # exclusive: length 33 fails, 32 passes
THRESHOLD_DATE = date(1905, 1, 1)

DateLike = date | datetime


def _as_comparable(value: DateLike, now: datetime | None) -> tuple[DateLike, DateLike]:
    """Pair *value* with a "now" of the same granularity.

    A plain ``date`` is compared against today's date; a ``datetime`` against
    the current instant. An aware value sees "now" in its own timezone; a
    naive value sees an aware "now" as naive local time.
    """
    current = now if now is not None else datetime.now(getattr(value, "tzinfo", None))
    if not isinstance(value, datetime):
        return value, current.date()
    if value.tzinfo is not None and current.tzinfo is None:
        current = current.astimezone(value.tzinfo)
    elif value.tzinfo is None and current.tzinfo is not None:
        current = current.astimezone().replace(tzinfo=None)
    return value, current


def must_be_entered(value: Any | None) -> bool:
    """Return True if *value* is absent.

    Examples:
        >>> must_be_entered(None)
        True
        >>> must_be_entered("")
        False
    """
    return value is None


def max_length(value: Sized | None) -> bool:
    """Return True if *value* is present and longer than :data:`MAX_LENGTH`.

    Works for any sized value: text, lists, tuples.
    """
    if value is None:
        return False
    return len(value) > MAX_LENGTH


def future_date(value: DateLike | None, *, now: datetime | None = None) -> bool:
    """Return True if *value* is absent or strictly later than *now*."""
    if value is None:
        return True
    candidate, current = _as_comparable(value, now)
    return candidate > current


def past_date(value: DateLike | None, *, now: datetime | None = None) -> bool:
    """Return True if *value* is absent or strictly earlier than *now*."""
    if value is None:
        return True
    candidate, current = _as_comparable(value, now)
    return candidate < current


def before_1905(value: DateLike | None) -> bool:
    """Return True if *value* is absent or strictly before 1905-01-01."""
    if value is None:
        return True
    if isinstance(value, datetime):
        value = value.date()
    return value < THRESHOLD_DATE
