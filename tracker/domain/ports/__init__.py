from tracker.domain.ports.persistence_gateway import (
    PersistenceGateway,
    PersistenceError,
    RecordNotFoundError,
    UniqueConstraintError,
    ForeignKeyConstraintError,
    Record,
    Where,
    OrderBy,
)
from tracker.domain.ports.cache_store import CacheStore
from tracker.domain.ports.password_hasher import PasswordHasher

__all__ = [
    "PersistenceGateway",
    "PersistenceError",
    "RecordNotFoundError",
    "UniqueConstraintError",
    "ForeignKeyConstraintError",
    "Record",
    "Where",
    "OrderBy",
    "CacheStore",
    "PasswordHasher",
]
