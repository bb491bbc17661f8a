from tracker.infrastructure.cache.redis_cache_store import RedisCacheStore
from tracker.infrastructure.cache.redis_client import create_redis_client, close_redis_client

__all__ = ["RedisCacheStore", "create_redis_client", "close_redis_client"]
