"""
Cache Store Port - Interface for the key/value lookup cache.
Implementation: tracker/infrastructure/cache/redis_cache_store.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class CacheStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]: ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None: ...

    @abstractmethod
    async def delete(self, key: str) -> None: ...

    async def keys(self, pattern: str = "*") -> list[str]:
        """Best effort; stores that cannot enumerate return nothing."""
        return []
