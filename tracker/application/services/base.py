"""
Common plumbing for resource services: lookups, read-through detail and
list caching, and the namespaces a delete cascades into.
"""

import logging
from typing import Any, Optional

from tracker.application.common.cache_registry import CacheKeyRegistry, detail_key
from tracker.application.common.change_tracker import ChangeTracker
from tracker.application.common.queries import ListQuery
from tracker.application.common.validation import filter_records, sanitize_user
from tracker.domain.enums import EntityType
from tracker.domain.exceptions import BadRequestError, EntityNotFoundError
from tracker.domain.ports import PersistenceGateway, Record, Where

logger = logging.getLogger(__name__)

_TIMESTAMPS = ("id", "createdAt", "updatedAt")

SORTABLE_FIELDS: dict[EntityType, frozenset[str]] = {
    EntityType.DEPARTMENT: frozenset({*_TIMESTAMPS, "code", "description", "divisionId"}),
    EntityType.DIVISION: frozenset({*_TIMESTAMPS, "code", "description"}),
    EntityType.USER: frozenset(
        {
            *_TIMESTAMPS,
            "employeeId",
            "email",
            "firstName",
            "middleName",
            "lastName",
            "departmentId",
            "divisionId",
        }
    ),
    EntityType.PROJECT: frozenset(
        {*_TIMESTAMPS, "name", "title", "description", "status", "startDate", "endDate", "authorId"}
    ),
    EntityType.WORK: frozenset(
        {
            *_TIMESTAMPS,
            "name",
            "type",
            "description",
            "status",
            "startDate",
            "endDate",
            "projectId",
            "authorId",
        }
    ),
    EntityType.TASK: frozenset(
        {
            *_TIMESTAMPS,
            "title",
            "description",
            "type",
            "status",
            "startDate",
            "endDate",
            "workId",
            "assignedToId",
            "parentId",
        }
    ),
    EntityType.COMMENT: frozenset({*_TIMESTAMPS, "message", "userId", "taskId"}),
    EntityType.MENTION: frozenset({"id", "createdAt", "commentId", "userId"}),
    EntityType.LOG: frozenset({"id", "createdAt", "editedBy", "logTypeId", "logMethodId"}),
}

# Rows removed or rewritten by the database when an entity is deleted
# (onDelete: Cascade, or SetNull for optional relations)
CASCADES: dict[EntityType, tuple[EntityType, ...]] = {
    EntityType.DIVISION: (EntityType.DEPARTMENT, EntityType.USER),
    EntityType.USER: (EntityType.MENTION,),
    EntityType.PROJECT: (EntityType.WORK, EntityType.TASK, EntityType.COMMENT, EntityType.MENTION),
    EntityType.WORK: (EntityType.TASK, EntityType.COMMENT, EntityType.MENTION),
    EntityType.TASK: (EntityType.TASK, EntityType.COMMENT, EntityType.MENTION),
    EntityType.COMMENT: (EntityType.MENTION,),
}


def cascade_namespaces(entity_type: EntityType) -> tuple[str, ...]:
    namespaces: list[str] = []
    for child in CASCADES.get(entity_type, ()):
        namespaces += [child.namespace, child.detail_namespace]
    return tuple(namespaces)


def not_found_message(entity_type: EntityType, entity_id: Any) -> str:
    return f"{entity_type.label} with the id {entity_id} not found."


class EntityService:
    entity_type: EntityType

    def __init__(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ):
        self._gateway = gateway
        self._registry = registry
        self._tracker = tracker

    # ==================== LOOKUPS ====================

    async def _require(
        self, entity_type: EntityType, entity_id: int, message: Optional[str] = None
    ) -> Record:
        """Uncached existence check used before writes."""
        record = await self._gateway.find_first(entity_type, {"id": entity_id})
        if not record:
            raise EntityNotFoundError(message or not_found_message(entity_type, entity_id))
        return record

    async def _find_detail(
        self, entity_type: EntityType, entity_id: int, message: Optional[str] = None
    ) -> Record:
        async def load() -> Record:
            record = await self._require(entity_type, entity_id, message)
            return sanitize_user(record) if entity_type is EntityType.USER else record

        return await self._registry.read_through(
            detail_key(entity_type, entity_id), load, entity_type.detail_namespace
        )

    async def _find_member(
        self,
        entity_type: EntityType,
        entity_id: int,
        parent_field: str,
        parent_id: int,
        message: str,
    ) -> Record:
        """Cached detail lookup that must belong to the given parent."""
        record = await self._find_detail(entity_type, entity_id, message)
        if record.get(parent_field) != parent_id:
            raise EntityNotFoundError(message)
        return record

    # ==================== LISTS ====================

    def _check_sort(self, entity_type: EntityType, query: ListQuery) -> None:
        if query.sort_by and query.sort_by not in SORTABLE_FIELDS[entity_type]:
            raise BadRequestError(
                f"Cannot sort {entity_type.label.lower()}s by {query.sort_by}."
            )

    async def _find_page(
        self,
        entity_type: EntityType,
        identifier: str,
        query: ListQuery,
        where: Where,
        *namespaces: str,
        **scope: Any,
    ) -> tuple[list[Record], int]:
        """
        One page of `entity_type` rows plus the total matching `where`.

        Cached under this service's namespace; the key is tagged with the
        listed entity's namespace too, plus any extra `namespaces`.
        """
        self._check_sort(entity_type, query)
        key = self._registry.key_for(
            self.entity_type.namespace, identifier, query.as_key(**scope)
        )

        async def load() -> dict[str, Any]:
            records = await self._gateway.find_many(
                entity_type,
                where=where,
                order_by=query.order_by,
                skip=query.offset,
                take=query.limit,
            )
            count = await self._gateway.count(entity_type, where=where)
            if entity_type is EntityType.USER:
                records = [sanitize_user(r) for r in records]
            return {"records": records, "count": count}

        page = await self._registry.read_through(
            key, load, self.entity_type.namespace, entity_type.namespace, *namespaces
        )
        return page["records"], page["count"]

    async def _find_users(
        self,
        identifier: str,
        user_ids_loader,
        query: ListQuery,
        *namespaces: str,
        **scope: Any,
    ) -> tuple[list[Record], int]:
        """
        Users gathered through a relation (mentions, subtask assignees).

        The full, unfiltered list is cached; search, sort and paging run in memory.
        """
        self._check_sort(EntityType.USER, query)
        key = self._registry.key_for(self.entity_type.namespace, identifier, scope)

        async def load() -> list[Record]:
            user_ids = list(dict.fromkeys(await user_ids_loader()))
            if not user_ids:
                return []
            users = await self._gateway.find_many(
                EntityType.USER, where={"id": {"in": user_ids}}
            )
            return [sanitize_user(u) for u in users]

        users = await self._registry.read_through(
            key, load, self.entity_type.namespace, EntityType.USER.namespace, *namespaces
        )
        return filter_records(
            users,
            query.search,
            ("firstName", "middleName", "lastName"),
            query.order_by,
            query.offset,
            query.limit,
        )
