"""Project service - CRUD plus the project's works."""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import (
    ListQuery,
    combine,
    date_within_where,
    equals_where,
    search_where,
)
from tracker.application.common.validation import as_utc, ensure_date_order, ensure_within
from tracker.application.dto.project import CreateProjectDTO, UpdateProjectDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType
from tracker.domain.exceptions import BadRequestError


class ProjectService(EntityService):
    entity_type = EntityType.PROJECT

    @handle_errors
    async def create(self, dto: CreateProjectDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        ensure_date_order(data["startDate"], data["endDate"], "Project")

        data["authorId"] = data.get("authorId") or edited_by
        await self._require(EntityType.USER, data["authorId"])

        change = await self._tracker.create(self.entity_type, data, edited_by)
        return {"message": "Project created successfully.", "project": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "name", "description"),
            date_within_where(query.date_within),
            equals_where(status=query.status, authorId=query.author_id),
        )
        projects, count = await self._find_page(
            self.entity_type, "findProjects", query, where
        )
        return {
            "message": "Projects loaded successfully.",
            "count": count,
            "projects": projects,
        }

    @handle_errors
    async def find_one(self, project_id: int) -> dict:
        project = await self._find_detail(self.entity_type, project_id)
        return {"message": "Project loaded successfully.", "project": project}

    @handle_errors
    async def find_works(self, project_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, project_id)
        where = combine(
            search_where(query.search, "name", "description"),
            date_within_where(query.date_within),
            equals_where(projectId=project_id, type=query.type, status=query.status),
        )
        works, count = await self._find_page(
            EntityType.WORK, "findProjectWorks", query, where, projectId=project_id
        )
        return {
            "message": "Works of the project loaded successfully.",
            "count": count,
            "works": works,
        }

    @handle_errors
    async def find_work(self, project_id: int, work_id: int) -> dict:
        work = await self._find_member(
            EntityType.WORK,
            work_id,
            "projectId",
            project_id,
            f"Work with the id {work_id} of the project {project_id} not found.",
        )
        return {"message": "Work of the project loaded successfully.", "work": work}

    @handle_errors
    async def update(self, project_id: int, dto: UpdateProjectDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        project = await self._tracker.current(self.entity_type, project_id)

        if "startDate" in data or "endDate" in data:
            span = {**project, **data}
            ensure_date_order(span["startDate"], span["endDate"], "Project")
            works = await self._gateway.find_many(
                EntityType.WORK, where={"projectId": project_id}
            )
            for work in works:
                try:
                    ensure_within(work, span, "work", "project")
                except BadRequestError as e:
                    raise BadRequestError(
                        f"The project dates must contain work {work['id']}. {e.message}"
                    ) from e

        change = await self._tracker.update(
            self.entity_type, project_id, data, edited_by, current=project
        )
        return {"message": "Project updated successfully.", "project": change.record}

    @handle_errors
    async def remove(self, project_id: int, edited_by: int) -> dict:
        await self._tracker.delete(
            self.entity_type,
            project_id,
            edited_by,
            namespaces=cascade_namespaces(self.entity_type),
        )
        return {"message": "Project deleted successfully."}
