"""
Redis Cache Store - CacheStore port backed by Redis STRING values.

Serialization:
- value -> JSON string (datetimes via default=str) -> SETEX with the TTL
- JSON string -> value on read
- Values come back as plain JSON types (datetimes as ISO strings)
"""

import json
import logging
from typing import Any, Optional

from redis.asyncio import Redis

from tracker.domain.ports import CacheStore

logger = logging.getLogger(__name__)


class RedisCacheStore(CacheStore):
    def __init__(self, redis: Redis):
        self._redis = redis

    async def get(self, key: str) -> Optional[Any]:
        raw = await self._redis.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        payload = json.dumps(value, default=str)
        if ttl:
            await self._redis.setex(key, ttl, payload)
        else:
            await self._redis.set(key, payload)

    async def delete(self, key: str) -> None:
        await self._redis.delete(key)

    async def keys(self, pattern: str = "*") -> list[str]:
        return [key async for key in self._redis.scan_iter(match=pattern)]
