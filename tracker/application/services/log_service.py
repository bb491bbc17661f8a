"""
Log service - read-only access to the audit log.

Log rows are written by AuditLogWriter and never updated or deleted. Lists
are read straight from the gateway since every mutation appends a row;
single rows are immutable and read through the cache.
"""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import ListQuery, equals_where
from tracker.application.services.base import EntityService
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import BadRequestError
from tracker.domain.ports import Where


class LogService(EntityService):
    entity_type = EntityType.LOG

    async def _list(self, query: ListQuery, where: Where) -> dict:
        self._check_sort(self.entity_type, query)
        logs = await self._gateway.find_many(
            self.entity_type,
            where=where,
            order_by=query.order_by or {"createdAt": "desc"},
            skip=query.offset,
            take=query.limit,
        )
        count = await self._gateway.count(self.entity_type, where=where)
        return {"message": "Logs loaded successfully.", "count": count, "logs": logs}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        return await self._list(
            query,
            equals_where(
                logTypeId=query.type_id,
                logMethodId=query.method_id,
                editedBy=query.edited_by,
            ),
        )

    @handle_errors
    async def find_by_type(self, type_id: int, query: ListQuery) -> dict:
        try:
            LogType(type_id)
        except ValueError as e:
            raise BadRequestError(f"Log type {type_id} does not exist.") from e
        return await self._list(
            query, equals_where(logTypeId=type_id, editedBy=query.edited_by)
        )

    @handle_errors
    async def find_by_method(self, method_id: int, query: ListQuery) -> dict:
        try:
            LogMethod(method_id)
        except ValueError as e:
            raise BadRequestError(f"Log method {method_id} does not exist.") from e
        return await self._list(
            query, equals_where(logMethodId=method_id, editedBy=query.edited_by)
        )

    @handle_errors
    async def find_one(self, log_id: int) -> dict:
        log = await self._find_detail(self.entity_type, log_id)
        return {"message": "Log loaded successfully.", "log": log}
