"""
Prisma Persistence Gateway Implementation.

- Implements PersistenceGateway port from domain layer
- One adapter for every model: EntityType.value is the Prisma client attribute
  (prisma.department, prisma.task, ...)
- Prisma models are returned as plain dicts keyed by schema field names;
  relation fields are never loaded, so they are left out
- prisma.errors are translated into the port's errors so services can
  classify them without knowing Prisma
"""

from contextlib import contextmanager
from typing import Any, Optional

from prisma import Json, Prisma
from prisma import errors as prisma_errors

from tracker.domain.enums import EntityType
from tracker.domain.ports import (
    ForeignKeyConstraintError,
    OrderBy,
    PersistenceError,
    PersistenceGateway,
    Record,
    RecordNotFoundError,
    UniqueConstraintError,
    Where,
)

JSON_FIELDS: dict[EntityType, tuple[str, ...]] = {EntityType.LOG: ("logs",)}


def _unique_fields(error: prisma_errors.UniqueViolationError) -> list[str]:
    target = (getattr(error, "meta", None) or {}).get("target")
    if isinstance(target, str):
        return [target]
    return list(target or ["unknown"])


@contextmanager
def translate_errors():
    try:
        yield
    except prisma_errors.UniqueViolationError as e:
        raise UniqueConstraintError(_unique_fields(e)) from e
    except prisma_errors.ForeignKeyViolationError as e:
        field = (getattr(e, "meta", None) or {}).get("field_name")
        raise ForeignKeyConstraintError(field) from e
    except prisma_errors.RecordNotFoundError as e:
        raise RecordNotFoundError(str(e)) from e
    except prisma_errors.PrismaError as e:
        raise PersistenceError(str(e)) from e


class PrismaGateway(PersistenceGateway):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _actions(self, entity_type: EntityType):
        return getattr(self._prisma, entity_type.value)

    def _to_record(self, model: Any) -> Record:
        """Map Prisma model to a plain dict."""
        return model.model_dump(exclude_unset=True)

    def _to_data(self, entity_type: EntityType, data: Record) -> Record:
        json_fields = JSON_FIELDS.get(entity_type, ())
        return {k: Json(v) if k in json_fields else v for k, v in data.items()}

    async def create(self, entity_type: EntityType, data: Record) -> Record:
        with translate_errors():
            model = await self._actions(entity_type).create(
                data=self._to_data(entity_type, data)
            )
        return self._to_record(model)

    async def find_first(self, entity_type: EntityType, where: Where) -> Optional[Record]:
        with translate_errors():
            model = await self._actions(entity_type).find_first(where=where)
        return self._to_record(model) if model else None

    async def find_many(
        self,
        entity_type: EntityType,
        where: Optional[Where] = None,
        order_by: Optional[OrderBy] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[Record]:
        with translate_errors():
            models = await self._actions(entity_type).find_many(
                where=where or {},
                order=order_by,
                skip=skip,
                take=take,
            )
        return [self._to_record(model) for model in models]

    async def count(self, entity_type: EntityType, where: Optional[Where] = None) -> int:
        with translate_errors():
            return await self._actions(entity_type).count(where=where or {})

    async def update(self, entity_type: EntityType, entity_id: int, data: Record) -> Record:
        with translate_errors():
            model = await self._actions(entity_type).update(
                where={"id": entity_id}, data=self._to_data(entity_type, data)
            )
        if model is None:
            raise RecordNotFoundError(f"{entity_type.label} {entity_id} does not exist.")
        return self._to_record(model)

    async def delete(self, entity_type: EntityType, entity_id: int) -> Record:
        with translate_errors():
            model = await self._actions(entity_type).delete(where={"id": entity_id})
        if model is None:
            raise RecordNotFoundError(f"{entity_type.label} {entity_id} does not exist.")
        return self._to_record(model)
