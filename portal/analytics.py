"""
Aggregations behind the admin dashboard charts.

These are plain functions over records (or dicts) so they can be tested
without a database.  Results are recomputed on every request.
"""
from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, Iterable, List, Dict


def _value(row: Any, key: str) -> Any:
    value = row.get(key) if isinstance(row, dict) else getattr(row, key, None)
    if isinstance(value, Enum):
        return value.value
    return value


def count_by(rows: Iterable[Any], key: str) -> List[Dict[str, Any]]:
    """Count rows per value of ``key``.

    Returns ``[{'name': value, 'value': count}, ...]`` in the order each
    value was first seen.
    """
    counts: Dict[Any, int] = {}
    for row in rows:
        name = _value(row, key)
        counts[name] = counts.get(name, 0) + 1
    return [{'name': name, 'value': value} for name, value in counts.items()]


def _as_date(value: Any) -> dt.date | None:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str) and value:
        return dt.date.fromisoformat(value[:10])
    return None


def daily_series(rows: Iterable[Any], key: str, last: int = 7) -> List[Dict[str, Any]]:
    """Counts per calendar date of ``key``, oldest first, last ``last`` dates only."""
    counts: Dict[dt.date, int] = {}
    for row in rows:
        day = _as_date(_value(row, key))
        if day is None:
            continue
        counts[day] = counts.get(day, 0) + 1
    days = sorted(counts)
    if last:
        days = days[-last:]
    return [{'name': day.isoformat(), 'value': counts[day]} for day in days]
