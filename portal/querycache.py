"""
Query cache for data-access reads.

Reads are cached per ``(entity, filters)`` in Django's cache framework
for the entity's freshness window.  Entities without a window are
always fetched.  Each mutation names the entities it makes stale; the
cache invalidates them by bumping a per-entity version number, which
orphans every key built with the old version.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

T = TypeVar('T')

KEY_PREFIX = 'qc'

DEFAULT_FRESHNESS: dict[str, int] = {
    'doctors': 300,
    'appointments': 60,
    'hospital-contacts': 3600,
}

INVALIDATES: dict[str, tuple[str, ...]] = {
    'book_appointment': ('appointments', 'appointments-count', 'patients-count'),
    'cancel_appointment': ('appointments',),
    'submit_enquiry': ('enquiries', 'enquiries-count', 'recent-enquiries'),
    'update_enquiry_status': ('enquiries', 'recent-enquiries'),
}


def freshness(entity: str) -> int:
    """Seconds a cached read of ``entity`` stays fresh (0 = never cached)."""
    windows = {**DEFAULT_FRESHNESS, **getattr(settings, 'QUERY_FRESHNESS', {})}
    return int(windows.get(entity, 0))


def _version_key(entity: str) -> str:
    return f'{KEY_PREFIX}:v:{entity}'


def entity_version(entity: str) -> int:
    return int(cache.get(_version_key(entity), 1))


def cache_key(entity: str, filters: dict[str, Any] | None = None) -> str:
    parts = [f'{k}={"" if v is None else v}' for k, v in sorted((filters or {}).items())]
    return f'{KEY_PREFIX}:{entity}:{entity_version(entity)}:' + '&'.join(parts)


def fetch(entity: str, loader: Callable[[], T], **filters: Any) -> T:
    """Return the cached result for ``entity``/``filters`` or call ``loader``."""
    ttl = freshness(entity)
    if ttl <= 0:
        return loader()
    key = cache_key(entity, filters)
    hit = cache.get(key)
    if hit is not None:
        return hit
    value = loader()
    cache.set(key, value, ttl)
    return value


def invalidate(entities: Iterable[str]) -> list[str]:
    bumped = []
    for entity in entities:
        vkey = _version_key(entity)
        # add() is a no-op when the key exists, so incr() never misses
        cache.add(vkey, 1, None)
        try:
            cache.incr(vkey)
        except ValueError:
            cache.set(vkey, 2, None)
        bumped.append(entity)
    return bumped


def invalidate_after(mutation: str) -> list[str]:
    """Invalidate every entity made stale by ``mutation``."""
    entities = INVALIDATES.get(mutation, ())
    bumped = invalidate(entities)
    logger.debug("query cache invalidated after %s: %s", mutation, ", ".join(bumped))
    return bumped
