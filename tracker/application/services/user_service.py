"""
User service - CRUD plus the user's comments, works, tasks and projects.

Passwords are hashed with the injected PasswordHasher; users are always
returned without password / refreshToken, and neither ever reaches a log row.
"""

from tracker.application.common.change_tracker import ChangeTracker
from tracker.application.common.cache_registry import CacheKeyRegistry
from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import (
    ListQuery,
    combine,
    date_within_where,
    equals_where,
    search_where,
)
from tracker.application.common.validation import sanitize_user
from tracker.application.dto.user import CreateUserDTO, UpdateUserDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType
from tracker.domain.ports import PasswordHasher, PersistenceGateway, Record


class UserService(EntityService):
    entity_type = EntityType.USER

    def __init__(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
        hasher: PasswordHasher,
    ):
        super().__init__(gateway, registry, tracker)
        self._hasher = hasher

    async def _check_relations(self, data: Record) -> None:
        if data.get("departmentId") is not None:
            await self._require(EntityType.DEPARTMENT, data["departmentId"])
        if data.get("divisionId") is not None:
            await self._require(EntityType.DIVISION, data["divisionId"])

    @handle_errors
    async def create(self, dto: CreateUserDTO, edited_by: int) -> dict:
        data = dto.to_data()
        await self._check_relations(data)
        data["password"] = self._hasher.hash(data["password"])

        change = await self._tracker.create(self.entity_type, data, edited_by)
        return {"message": "User created successfully.", "user": sanitize_user(change.record)}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "firstName", "middleName", "lastName"),
            equals_where(departmentId=query.department_id, divisionId=query.division_id),
        )
        users, count = await self._find_page(self.entity_type, "findUsers", query, where)
        return {"message": "Users loaded successfully.", "count": count, "users": users}

    @handle_errors
    async def find_one(self, user_id: int) -> dict:
        user = await self._find_detail(self.entity_type, user_id)
        return {"message": "User loaded successfully.", "user": user}

    # ==================== COMMENTS ====================

    @handle_errors
    async def find_comments(self, user_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, user_id)
        where = combine(search_where(query.search, "message"), {"userId": user_id})
        comments, count = await self._find_page(
            EntityType.COMMENT, "findUserComments", query, where, userId=user_id
        )
        return {
            "message": "Comments of the user loaded successfully.",
            "count": count,
            "comments": comments,
        }

    @handle_errors
    async def find_comment(self, user_id: int, comment_id: int) -> dict:
        comment = await self._find_member(
            EntityType.COMMENT,
            comment_id,
            "userId",
            user_id,
            f"Comment with the id {comment_id} of the user {user_id} not found.",
        )
        return {"message": "Comment of the user loaded successfully.", "comment": comment}

    # ==================== WORKS ====================

    @handle_errors
    async def find_works(self, user_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, user_id)
        where = combine(
            search_where(query.search, "name", "description"),
            date_within_where(query.date_within),
            equals_where(authorId=user_id, type=query.type, status=query.status),
        )
        works, count = await self._find_page(
            EntityType.WORK, "findUserWorks", query, where, userId=user_id
        )
        return {
            "message": "Works of the user loaded successfully.",
            "count": count,
            "works": works,
        }

    @handle_errors
    async def find_work(self, user_id: int, work_id: int) -> dict:
        work = await self._find_member(
            EntityType.WORK,
            work_id,
            "authorId",
            user_id,
            f"Work with the id {work_id} of the user {user_id} not found.",
        )
        return {"message": "User's work loaded successfully.", "work": work}

    # ==================== TASKS ====================

    @handle_errors
    async def find_tasks(self, user_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, user_id)
        where = combine(
            search_where(query.search, "title", "description"),
            date_within_where(query.date_within),
            equals_where(assignedToId=user_id, type=query.type, status=query.status),
        )
        tasks, count = await self._find_page(
            EntityType.TASK, "findUserTasks", query, where, userId=user_id
        )
        return {"message": "Tasks loaded successfully.", "count": count, "tasks": tasks}

    @handle_errors
    async def find_task(self, user_id: int, task_id: int) -> dict:
        task = await self._find_member(
            EntityType.TASK,
            task_id,
            "assignedToId",
            user_id,
            f"Task with the id {task_id} of the user {user_id} not found.",
        )
        return {"message": "Task of the user loaded successfully.", "task": task}

    # ==================== PROJECTS ====================

    @handle_errors
    async def find_projects(self, user_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, user_id)
        where = combine(
            search_where(query.search, "name", "description"),
            date_within_where(query.date_within),
            equals_where(authorId=user_id, status=query.status),
        )
        projects, count = await self._find_page(
            EntityType.PROJECT, "findUserProjects", query, where, userId=user_id
        )
        return {
            "message": "Projects loaded successfully.",
            "count": count,
            "projects": projects,
        }

    @handle_errors
    async def find_project(self, user_id: int, project_id: int) -> dict:
        project = await self._find_member(
            EntityType.PROJECT,
            project_id,
            "authorId",
            user_id,
            f"Project with the id {project_id} of the user {user_id} not found.",
        )
        return {"message": "Project of the user loaded successfully.", "project": project}

    # ==================== WRITES ====================

    @handle_errors
    async def update(self, user_id: int, dto: UpdateUserDTO, edited_by: int) -> dict:
        data = dto.to_data()
        await self._check_relations(data)
        if "password" in data:
            data["password"] = self._hasher.hash(data["password"])

        change = await self._tracker.update(self.entity_type, user_id, data, edited_by)
        return {"message": "User updated successfully.", "user": sanitize_user(change.record)}

    @handle_errors
    async def remove(self, user_id: int, edited_by: int) -> dict:
        await self._tracker.delete(
            self.entity_type,
            user_id,
            edited_by,
            namespaces=cascade_namespaces(self.entity_type),
        )
        return {"message": "User deleted successfully."}
