"""
Persistence Gateway Port - Interface for entity persistence.
Implementation: tracker/infrastructure/persistence/prisma_gateway.py

Records are plain dicts keyed by the schema's field names (camelCase).
Filters use the Prisma `where` dialect (equality, in, contains/mode,
gte/lte, OR, AND) so services can build them once for every adapter.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from tracker.domain.enums import EntityType

Record = dict[str, Any]
Where = dict[str, Any]
OrderBy = dict[str, str]


class PersistenceError(Exception):
    """Gateway failure that does not fit a more specific category."""


class RecordNotFoundError(PersistenceError):
    """The record to update or delete does not exist."""


class UniqueConstraintError(PersistenceError):
    def __init__(self, fields: list[str]):
        super().__init__(f"Unique constraint failed on: {', '.join(fields)}")
        self.fields = fields


class ForeignKeyConstraintError(PersistenceError):
    def __init__(self, field: Optional[str] = None):
        super().__init__(f"Foreign key constraint failed on: {field or 'unknown field'}")
        self.field = field


class PersistenceGateway(ABC):
    @abstractmethod
    async def create(self, entity_type: EntityType, data: Record) -> Record: ...

    @abstractmethod
    async def find_first(
        self, entity_type: EntityType, where: Where
    ) -> Optional[Record]: ...

    @abstractmethod
    async def find_many(
        self,
        entity_type: EntityType,
        where: Optional[Where] = None,
        order_by: Optional[OrderBy] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[Record]: ...

    @abstractmethod
    async def count(self, entity_type: EntityType, where: Optional[Where] = None) -> int: ...

    @abstractmethod
    async def update(
        self, entity_type: EntityType, entity_id: int, data: Record
    ) -> Record: ...

    @abstractmethod
    async def delete(self, entity_type: EntityType, entity_id: int) -> Record: ...
