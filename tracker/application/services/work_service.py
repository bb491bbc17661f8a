"""Work service - CRUD plus the work's tasks. Work dates stay inside the project's."""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import (
    ListQuery,
    combine,
    date_within_where,
    equals_where,
    search_where,
)
from tracker.application.common.validation import as_utc, ensure_date_order, ensure_within
from tracker.application.dto.work import CreateWorkDTO, UpdateWorkDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType


class WorkService(EntityService):
    entity_type = EntityType.WORK

    @handle_errors
    async def create(self, dto: CreateWorkDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        ensure_date_order(data["startDate"], data["endDate"], "Work")

        data["authorId"] = data.get("authorId") or edited_by
        await self._require(EntityType.USER, data["authorId"])
        project = await self._require(EntityType.PROJECT, data["projectId"])
        ensure_within(data, project, "work", "project")

        change = await self._tracker.create(self.entity_type, data, edited_by)
        return {"message": "Work created successfully.", "work": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "name", "description"),
            date_within_where(query.date_within),
            equals_where(type=query.type, status=query.status, authorId=query.author_id),
        )
        works, count = await self._find_page(self.entity_type, "findWorks", query, where)
        return {"message": "Works loaded successfully.", "count": count, "works": works}

    @handle_errors
    async def find_one(self, work_id: int) -> dict:
        work = await self._find_detail(self.entity_type, work_id)
        return {"message": "Work loaded successfully.", "work": work}

    @handle_errors
    async def find_tasks(self, work_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, work_id)
        where = combine(
            search_where(query.search, "title", "description"),
            date_within_where(query.date_within),
            equals_where(workId=work_id, type=query.type, status=query.status),
        )
        tasks, count = await self._find_page(
            EntityType.TASK, "findWorkTasks", query, where, workId=work_id
        )
        return {"message": "Work tasks loaded successfully.", "count": count, "tasks": tasks}

    @handle_errors
    async def find_task(self, work_id: int, task_id: int) -> dict:
        task = await self._find_member(
            EntityType.TASK,
            task_id,
            "workId",
            work_id,
            f"Task with the id {task_id} of the work {work_id} not found.",
        )
        return {"message": "Task of the work loaded successfully.", "task": task}

    @handle_errors
    async def update(self, work_id: int, dto: UpdateWorkDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        work = await self._tracker.current(self.entity_type, work_id)

        if "startDate" in data or "endDate" in data:
            span = {**work, **data}
            ensure_date_order(span["startDate"], span["endDate"], "Work")
            project = await self._require(EntityType.PROJECT, work["projectId"])
            ensure_within(span, project, "work", "project")

        change = await self._tracker.update(
            self.entity_type, work_id, data, edited_by, current=work
        )
        return {"message": "Work updated successfully.", "work": change.record}

    @handle_errors
    async def remove(self, work_id: int, edited_by: int) -> dict:
        await self._tracker.delete(
            self.entity_type,
            work_id,
            edited_by,
            namespaces=cascade_namespaces(self.entity_type),
        )
        return {"message": "Work deleted successfully."}
