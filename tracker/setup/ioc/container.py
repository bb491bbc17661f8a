"""
Dishka DI Container Setup.

- InfrastructureProvider maps ports to the Prisma / Redis / passlib adapters
- ApplicationProvider (tracker.setup.ioc.application) wires the services
- Scope.APP = created ONCE when the app starts, shared across all requests
- Scope.REQUEST = new instance per HTTP request

Flow:
  Container → provides → PrismaGateway → to → ChangeTracker → to → DepartmentService
                              ↓
                  uses PersistenceGateway interface
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from tracker.application.common.cache_registry import CacheKeyRegistry
from tracker.config.settings import Config
from tracker.domain.ports import CacheStore, PasswordHasher, PersistenceGateway
from tracker.infrastructure.cache import (
    RedisCacheStore,
    close_redis_client,
    create_redis_client,
)
from tracker.infrastructure.persistence import PrismaGateway
from tracker.infrastructure.security import Argon2PasswordHasher
from tracker.setup.ioc.application import ApplicationProvider


class InfrastructureProvider(Provider):
    """Registers clients and adapters behind the domain ports."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_gateway(self, prisma: Prisma) -> PersistenceGateway:
        """
        - Return type is ABSTRACT (PersistenceGateway)
        - Implementation is CONCRETE (PrismaGateway)
        """
        return PrismaGateway(prisma)

    # ==================== CACHE ====================

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client()
        yield client
        await close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_cache_store(self, redis: Redis) -> CacheStore:
        return RedisCacheStore(redis)

    @provide(scope=Scope.APP)
    def get_cache_registry(self, cache: CacheStore) -> CacheKeyRegistry:
        """One registry for the whole process; every request shares its key sets."""
        return CacheKeyRegistry(cache, ttl=Config.CACHE_TTL)

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return Argon2PasswordHasher()


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup.
    """
    return make_async_container(InfrastructureProvider(), ApplicationProvider())
