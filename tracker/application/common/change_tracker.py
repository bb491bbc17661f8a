"""
Change-tracked writes shared by every resource service.

    update: fetch current -> diff -> write -> audit log -> invalidate
    delete: fetch current -> write -> audit log (full prior record) -> invalidate
    create: write -> audit log (full new record) -> invalidate

The mutation and its log row are not wrapped in a transaction; a log
failure surfaces as an internal error after the write has happened.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from tracker.application.common.audit_log import AuditLogWriter
from tracker.application.common.cache_registry import CacheKeyRegistry, detail_key
from tracker.domain.entities import LogEntry
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import EntityNotFoundError
from tracker.domain.ports import PersistenceGateway, Record
from tracker.domain.services.change_diff import diff_fields


@dataclass(frozen=True)
class TrackedChange:
    record: Record
    log: LogEntry


class ChangeTracker:
    def __init__(
        self,
        gateway: PersistenceGateway,
        audit_log: AuditLogWriter,
        registry: CacheKeyRegistry,
    ):
        self._gateway = gateway
        self._audit_log = audit_log
        self._registry = registry

    async def current(self, entity_type: EntityType, entity_id: int) -> Record:
        record = await self._gateway.find_first(entity_type, {"id": entity_id})
        if not record:
            raise EntityNotFoundError(
                f"{entity_type.label} with the id {entity_id} not found."
            )
        return record

    async def create(
        self,
        entity_type: EntityType,
        data: Record,
        edited_by: int,
        log_type: Optional[LogType] = None,
        namespaces: Iterable[str] = (),
    ) -> TrackedChange:
        record = await self._gateway.create(entity_type, data)
        log = await self._audit_log.record(
            log_type or entity_type.log_type, LogMethod.CREATE, edited_by, record
        )
        await self._registry.invalidate_all(entity_type.namespace, *namespaces)
        return TrackedChange(record=record, log=log)

    async def update(
        self,
        entity_type: EntityType,
        entity_id: int,
        data: Record,
        edited_by: int,
        log_type: Optional[LogType] = None,
        namespaces: Iterable[str] = (),
        current: Optional[Record] = None,
    ) -> TrackedChange:
        original = current or await self.current(entity_type, entity_id)
        changes = diff_fields(original, data)
        record = await self._gateway.update(entity_type, entity_id, data)
        log = await self._audit_log.record(
            log_type or entity_type.log_type, LogMethod.UPDATE, edited_by, changes
        )
        await self._invalidate(entity_type, entity_id, namespaces)
        return TrackedChange(record=record, log=log)

    async def delete(
        self,
        entity_type: EntityType,
        entity_id: int,
        edited_by: int,
        log_type: Optional[LogType] = None,
        namespaces: Iterable[str] = (),
        current: Optional[Record] = None,
    ) -> TrackedChange:
        original = current or await self.current(entity_type, entity_id)
        await self._gateway.delete(entity_type, entity_id)
        log = await self._audit_log.record(
            log_type or entity_type.log_type, LogMethod.DELETE, edited_by, original
        )
        await self._invalidate(entity_type, entity_id, namespaces)
        return TrackedChange(record=original, log=log)

    async def _invalidate(
        self, entity_type: EntityType, entity_id: int, namespaces: Iterable[str]
    ) -> None:
        await self._registry.invalidate(detail_key(entity_type, entity_id))
        await self._registry.invalidate_all(entity_type.namespace, *namespaces)
