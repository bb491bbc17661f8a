"""
Cache Key Registry & Invalidator.

One application-scoped registry shared by every request. It remembers which
list keys were populated under which namespace so a write can drop all of
them at once.

Key layout:
    <namespace><identifier>:<json of the query with None values dropped>

    DEPARTMENT:findDepartments:{"offset": 0, "limit": 10}
    GENERAL:single-department:{"id": 3}

Policy:
- List caches are tagged with the namespace of every entity type whose rows
  they contain and dropped with `invalidate_all`.
- Single-entity caches live under GENERAL: and are dropped with `invalidate`.
- Read/populate failures fall back to the loader (warning only); invalidation
  failures propagate.
- Every invalidation bumps a generation counter of the namespace (or the
  single key). A loader that ran across a bump does not populate the cache,
  so a value read before a write is never stored after that write's
  invalidation.
"""

import json
import logging
import threading
from typing import Any, Awaitable, Callable, Mapping, Optional

from tracker.config.settings import Config
from tracker.domain.enums import EntityType, Namespace
from tracker.domain.ports import CacheStore

logger = logging.getLogger(__name__)


def generate_cache_key(
    namespace: str, identifier: str, query: Optional[Mapping[str, Any]] = None
) -> str:
    shape = {k: v for k, v in (query or {}).items() if v is not None}
    return f"{namespace}{identifier}:{json.dumps(shape, default=str)}"


def detail_key(entity_type: EntityType, entity_id: int) -> str:
    return generate_cache_key(
        Namespace.GENERAL.value, entity_type.identifier, {"id": entity_id}
    )


class CacheKeyRegistry:
    def __init__(self, cache: CacheStore, ttl: Optional[int] = None):
        self._cache = cache
        self._ttl = ttl if ttl is not None else Config.CACHE_TTL
        self._keys: dict[str, set[str]] = {}
        # Bumped by every invalidation of a namespace or a single key
        self._generations: dict[str, int] = {}
        self._lock = threading.Lock()

    def key_for(
        self, namespace: str, identifier: str, query: Optional[Mapping[str, Any]] = None
    ) -> str:
        return generate_cache_key(namespace, identifier, query)

    def remember(self, key: str, *namespaces: str) -> None:
        with self._lock:
            for namespace in namespaces:
                self._keys.setdefault(namespace, set()).add(key)

    def remembered(self, namespace: str) -> set[str]:
        with self._lock:
            return set(self._keys.get(namespace, ()))

    def remember_all(self, keys: set[str], namespace: str) -> None:
        with self._lock:
            self._keys.setdefault(namespace, set()).update(keys)

    def _generation(self, *tags: str) -> tuple[int, ...]:
        with self._lock:
            return tuple(self._generations.get(tag, 0) for tag in tags)

    def _bump(self, tag: str) -> None:
        self._generations[tag] = self._generations.get(tag, 0) + 1

    async def invalidate_all(self, *namespaces: str) -> None:
        for namespace in namespaces:
            with self._lock:
                self._bump(namespace)
                keys = self._keys.pop(namespace, set())
            pending = set(keys)
            try:
                for key in keys:
                    await self._cache.delete(key)
                    pending.discard(key)
            except Exception:
                # keep what was not deleted so the next write retries it
                self.remember_all(pending, namespace)
                raise
            if keys:
                logger.debug(f"[Cache] Cleared {len(keys)} key(s) of {namespace}")

    async def invalidate(self, key: str) -> None:
        with self._lock:
            self._bump(key)
        await self._cache.delete(key)
        logger.debug(f"[Cache] Cleared {key}")

    async def read_through(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        *namespaces: str,
    ) -> Any:
        try:
            cached = await self._cache.get(key)
            if cached is not None:
                logger.debug(f"Cache HIT for {key}")
                return cached
        except Exception as e:
            logger.warning(f"Cache read error for {key}: {str(e)}")

        logger.debug(f"Cache MISS for {key}")
        tags = (key, *namespaces)
        before = self._generation(*tags)
        value = await loader()
        if value is None:
            return value

        # An invalidation ran while loading: the value may predate that write
        if self._generation(*tags) != before:
            logger.debug(f"Cache SKIP for {key}: invalidated while loading")
            return value

        try:
            await self._cache.set(key, value, self._ttl)
        except Exception as e:
            logger.warning(f"Cache write error for {key}: {str(e)}")
            return value

        with self._lock:
            if tuple(self._generations.get(tag, 0) for tag in tags) == before:
                for namespace in namespaces:
                    self._keys.setdefault(namespace, set()).add(key)
                stale = False
            else:
                stale = True
        if stale:
            await self._drop_stale(key, namespaces)

        return value

    async def _drop_stale(self, key: str, namespaces: tuple[str, ...]) -> None:
        try:
            await self._cache.delete(key)
        except Exception as e:
            # registered, so the next invalidation of its namespaces removes it
            logger.warning(f"Cache delete error for {key}: {str(e)}")
            self.remember(key, *namespaces)
