"""
In-memory implementations of the ports for service and API tests.

InMemoryGateway understands the subset of the Prisma `where` dialect the
services use (equality, equals, in, contains/mode, gte/lte, OR, AND) and
counts calls per (method, entity) so tests can tell cache hits from misses.
"""

import copy
import json
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Optional

from dishka import Provider, Scope, provide

from tracker.application.common.cache_registry import CacheKeyRegistry
from tracker.domain.enums import EntityType
from tracker.domain.ports import (
    CacheStore,
    PasswordHasher,
    PersistenceGateway,
    RecordNotFoundError,
    UniqueConstraintError,
)

UNIQUE_FIELDS: dict[EntityType, list[tuple[str, ...]]] = {
    EntityType.DEPARTMENT: [("code",)],
    EntityType.DIVISION: [("code",)],
    EntityType.USER: [("email",), ("employeeId",)],
    EntityType.MENTION: [("commentId", "userId")],
}

DEFAULTS: dict[EntityType, dict[str, Any]] = {
    EntityType.PROJECT: {"status": "pending", "title": None},
    EntityType.WORK: {"status": "pending"},
    EntityType.TASK: {"status": "pending", "parentId": None},
    EntityType.DEPARTMENT: {"divisionId": None},
    EntityType.USER: {
        "middleName": None,
        "employeeId": None,
        "refreshToken": None,
        "divisionId": None,
    },
}

NO_UPDATED_AT = {EntityType.MENTION, EntityType.LOG}

EDITOR_ID = 1


def utc(year, month, day):
    return datetime(year, month, day, tzinfo=timezone.utc)


def _match_field(value: Any, condition: dict[str, Any]) -> bool:
    insensitive = condition.get("mode") == "insensitive"
    for op, operand in condition.items():
        if op == "mode":
            continue
        if op == "equals":
            ok = value == operand
        elif op == "in":
            ok = value in operand
        elif op == "contains":
            if value is None:
                return False
            ok = (
                operand.lower() in str(value).lower()
                if insensitive
                else operand in str(value)
            )
        elif op == "gte":
            ok = value is not None and value >= operand
        elif op == "lte":
            ok = value is not None and value <= operand
        else:
            raise ValueError(f"Unsupported filter operator: {op}")
        if not ok:
            return False
    return True


def matches(record: dict[str, Any], where: Optional[dict[str, Any]]) -> bool:
    for key, condition in (where or {}).items():
        if key == "OR":
            if not any(matches(record, w) for w in condition):
                return False
        elif key == "AND":
            if not all(matches(record, w) for w in condition):
                return False
        elif isinstance(condition, dict):
            if not _match_field(record.get(key), condition):
                return False
        elif record.get(key) != condition:
            return False
    return True


class InMemoryGateway(PersistenceGateway):
    def __init__(self):
        self.tables: dict[EntityType, dict[int, dict[str, Any]]] = {
            entity_type: {} for entity_type in EntityType
        }
        self.calls: Counter = Counter()
        self._ids: Counter = Counter()
        self._failures: dict[tuple[str, EntityType], Exception] = {}

    # ==================== TEST HELPERS ====================

    def fail_on(self, method: str, entity_type: EntityType, error: Exception) -> None:
        self._failures[(method, entity_type)] = error

    def seed(self, entity_type: EntityType, **data: Any) -> dict[str, Any]:
        return self._insert(entity_type, data)

    def rows(self, entity_type: EntityType) -> list[dict[str, Any]]:
        return [copy.deepcopy(r) for r in self.tables[entity_type].values()]

    def _enter(self, method: str, entity_type: EntityType) -> None:
        self.calls[(method, entity_type)] += 1
        error = self._failures.get((method, entity_type))
        if error is not None:
            raise error

    def _check_unique(self, entity_type: EntityType, record: dict[str, Any]) -> None:
        for fields in UNIQUE_FIELDS.get(entity_type, []):
            if any(record.get(f) is None for f in fields):
                continue
            for other in self.tables[entity_type].values():
                if other["id"] != record["id"] and all(
                    other.get(f) == record.get(f) for f in fields
                ):
                    raise UniqueConstraintError(list(fields))

    def _insert(self, entity_type: EntityType, data: dict[str, Any]) -> dict[str, Any]:
        self._ids[entity_type] += 1
        now = datetime.now(timezone.utc)
        record = {
            "id": data.get("id") or self._ids[entity_type],
            **DEFAULTS.get(entity_type, {}),
            **copy.deepcopy(data),
            "createdAt": now,
        }
        if entity_type not in NO_UPDATED_AT:
            record["updatedAt"] = now
        self._ids[entity_type] = max(self._ids[entity_type], record["id"])
        self._check_unique(entity_type, record)
        self.tables[entity_type][record["id"]] = record
        return copy.deepcopy(record)

    # ==================== PORT ====================

    async def create(self, entity_type, data):
        self._enter("create", entity_type)
        return self._insert(entity_type, data)

    async def find_first(self, entity_type, where):
        self._enter("find_first", entity_type)
        for record in self.tables[entity_type].values():
            if matches(record, where):
                return copy.deepcopy(record)
        return None

    async def find_many(self, entity_type, where=None, order_by=None, skip=None, take=None):
        self._enter("find_many", entity_type)
        records = [r for r in self.tables[entity_type].values() if matches(r, where)]
        if order_by:
            (field, direction), = order_by.items()
            records.sort(key=lambda r: (r.get(field) is None, r.get(field)))
            if direction == "desc":
                records.reverse()
        skip = skip or 0
        records = records[skip : skip + take] if take is not None else records[skip:]
        return [copy.deepcopy(r) for r in records]

    async def count(self, entity_type, where=None):
        self._enter("count", entity_type)
        return sum(1 for r in self.tables[entity_type].values() if matches(r, where))

    async def update(self, entity_type, entity_id, data):
        self._enter("update", entity_type)
        current = self.tables[entity_type].get(entity_id)
        if current is None:
            raise RecordNotFoundError(f"{entity_type.label} {entity_id} does not exist.")
        updated = {**current, **copy.deepcopy(data)}
        if entity_type not in NO_UPDATED_AT:
            updated["updatedAt"] = datetime.now(timezone.utc)
        self._check_unique(entity_type, updated)
        self.tables[entity_type][entity_id] = updated
        return copy.deepcopy(updated)

    async def delete(self, entity_type, entity_id):
        self._enter("delete", entity_type)
        record = self.tables[entity_type].pop(entity_id, None)
        if record is None:
            raise RecordNotFoundError(f"{entity_type.label} {entity_id} does not exist.")
        return record


class InMemoryCacheStore(CacheStore):
    """Stores JSON text like Redis does, so cached values lose their Python types."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, Optional[int]] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.fail_deletes = False

    async def get(self, key):
        if self.fail_reads:
            raise ConnectionError("cache unavailable")
        raw = self.data.get(key)
        return None if raw is None else json.loads(raw)

    async def set(self, key, value, ttl=None):
        if self.fail_writes:
            raise ConnectionError("cache unavailable")
        self.data[key] = json.dumps(value, default=str)
        self.ttls[key] = ttl

    async def delete(self, key):
        if self.fail_deletes:
            raise ConnectionError("cache unavailable")
        self.data.pop(key, None)

    async def keys(self, pattern="*"):
        prefix = pattern.rstrip("*")
        return [k for k in self.data if k.startswith(prefix)]


class PlainHasher(PasswordHasher):
    def hash(self, password):
        return f"hashed:{password}"

    def verify(self, password, hashed):
        return hashed == self.hash(password)


class FakeInfrastructureProvider(Provider):
    """Serves one shared gateway / cache for every request of a test app."""

    def __init__(self, gateway: InMemoryGateway, cache: InMemoryCacheStore):
        super().__init__()
        self._gateway = gateway
        self._cache = cache

    @provide(scope=Scope.APP)
    def get_gateway(self) -> PersistenceGateway:
        return self._gateway

    @provide(scope=Scope.APP)
    def get_cache_registry(self) -> CacheKeyRegistry:
        return CacheKeyRegistry(self._cache, ttl=60)

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return PlainHasher()


def seed_task_tree(gateway: InMemoryGateway) -> tuple[dict, dict, dict]:
    """One project (2024), one work inside it (Feb-Jun) and one task (March)."""
    project = gateway.seed(
        EntityType.PROJECT,
        name="Records migration",
        description="Move paper records to the new system",
        startDate=utc(2024, 1, 1),
        endDate=utc(2024, 12, 31),
        authorId=EDITOR_ID,
    )
    work = gateway.seed(
        EntityType.WORK,
        name="Schema",
        type="backend",
        description="Design the tables",
        startDate=utc(2024, 2, 1),
        endDate=utc(2024, 6, 30),
        projectId=project["id"],
        authorId=EDITOR_ID,
    )
    task = gateway.seed(
        EntityType.TASK,
        title="Patient tables",
        description="",
        type="feature",
        startDate=utc(2024, 3, 1),
        endDate=utc(2024, 3, 31),
        workId=work["id"],
        assignedToId=EDITOR_ID,
    )
    return project, work, task
