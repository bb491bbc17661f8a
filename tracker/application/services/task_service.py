"""
Task service - tasks and subtasks.

A task with a parentId is a subtask: it must lie inside its parent's dates,
its parent must be a top-level task of the same work, and its audit rows are
tagged SUBTASK instead of TASK.
"""

from typing import Any, Optional

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import (
    ListQuery,
    combine,
    date_within_where,
    equals_where,
    search_where,
)
from tracker.application.common.validation import as_utc, ensure_date_order, ensure_within
from tracker.application.dto.task import CreateTaskDTO, UpdateTaskDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType, LogType
from tracker.domain.exceptions import BadRequestError, EntityNotFoundError
from tracker.domain.ports import Record


def task_log_type(task: Record) -> LogType:
    return LogType.SUBTASK if task.get("parentId") else LogType.TASK


class TaskService(EntityService):
    entity_type = EntityType.TASK

    async def _check_placement(self, task: dict[str, Any], task_id: Optional[int] = None) -> None:
        """Dates, work and parent of a task as it will be stored."""
        ensure_date_order(task["startDate"], task["endDate"], "Task")

        work = await self._require(EntityType.WORK, task["workId"])
        ensure_within(task, work, "task", "work")

        parent_id = task.get("parentId")
        if not parent_id:
            return
        if parent_id == task_id:
            raise BadRequestError("A task cannot be its own parent.")

        parent = await self._require(
            EntityType.TASK, parent_id, "Parent task not found."
        )
        if parent.get("parentId"):
            raise BadRequestError("A subtask cannot have subtasks.")
        if parent["workId"] != task["workId"]:
            raise BadRequestError("A subtask must belong to the work of its parent task.")
        ensure_within(task, parent, "subtask", "task")

    @handle_errors
    async def create(self, dto: CreateTaskDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        await self._require(EntityType.USER, data["assignedToId"])
        await self._check_placement(data)

        change = await self._tracker.create(
            self.entity_type, data, edited_by, log_type=task_log_type(data)
        )
        return {"message": "Task created successfully.", "task": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "title", "description"),
            date_within_where(query.date_within),
            equals_where(type=query.type, status=query.status),
        )
        tasks, count = await self._find_page(self.entity_type, "findTasks", query, where)
        return {"message": "Tasks loaded successfully.", "count": count, "tasks": tasks}

    @handle_errors
    async def find_one(self, task_id: int) -> dict:
        task = await self._find_detail(self.entity_type, task_id)
        return {"message": "Task loaded successfully.", "task": task}

    # ==================== SUBTASKS ====================

    @handle_errors
    async def find_subtasks(self, task_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, task_id)
        where = combine(
            search_where(query.search, "title", "description"),
            date_within_where(query.date_within),
            equals_where(parentId=task_id, type=query.type, status=query.status),
        )
        subtasks, count = await self._find_page(
            self.entity_type, "findSubtasks", query, where, taskId=task_id
        )
        return {
            "message": "Subtasks loaded successfully.",
            "count": count,
            "subtasks": subtasks,
        }

    @handle_errors
    async def find_subtask(self, task_id: int, subtask_id: int) -> dict:
        subtask = await self._find_member(
            self.entity_type,
            subtask_id,
            "parentId",
            task_id,
            f"Subtask with the id {subtask_id} of the task {task_id} not found.",
        )
        return {"message": "Sub Task loaded successfully.", "subtask": subtask}

    # ==================== USERS ====================

    async def _subtask_assignees(self, task_id: int) -> list[int]:
        subtasks = await self._gateway.find_many(
            self.entity_type, where={"parentId": task_id}, order_by={"id": "asc"}
        )
        return [s["assignedToId"] for s in subtasks]

    @handle_errors
    async def find_users(self, task_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, task_id)
        users, count = await self._find_users(
            "findTaskUsers",
            lambda: self._subtask_assignees(task_id),
            query,
            taskId=task_id,
        )
        return {
            "message": "Users of the task loaded successfully.",
            "count": count,
            "users": users,
        }

    @handle_errors
    async def find_user(self, task_id: int, user_id: int) -> dict:
        await self._find_detail(self.entity_type, task_id)
        assigned = await self._gateway.find_first(
            self.entity_type, {"parentId": task_id, "assignedToId": user_id}
        )
        if not assigned:
            raise EntityNotFoundError(
                f"User with the id {user_id} is not assigned to a subtask of the task {task_id}."
            )
        user = await self._find_detail(EntityType.USER, user_id)
        return {"message": "User of the task loaded successfully.", "user": user}

    # ==================== COMMENTS ====================

    @handle_errors
    async def find_comments(self, task_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, task_id)
        where = combine(search_where(query.search, "message"), {"taskId": task_id})
        comments, count = await self._find_page(
            EntityType.COMMENT, "findTaskComments", query, where, taskId=task_id
        )
        return {
            "message": "Task comments successfully loaded.",
            "count": count,
            "comments": comments,
        }

    @handle_errors
    async def find_comment(self, task_id: int, comment_id: int) -> dict:
        comment = await self._find_member(
            EntityType.COMMENT,
            comment_id,
            "taskId",
            task_id,
            f"Comment with the id {comment_id} of the task {task_id} not found.",
        )
        return {"message": "Comment loaded successfully.", "comment": comment}

    # ==================== WRITES ====================

    @handle_errors
    async def update(self, task_id: int, dto: UpdateTaskDTO, edited_by: int) -> dict:
        data = {k: as_utc(v) for k, v in dto.to_data().items()}
        task = await self._tracker.current(self.entity_type, task_id)

        if data.get("assignedToId") is not None:
            await self._require(EntityType.USER, data["assignedToId"])
        if data.keys() & {"startDate", "endDate", "workId", "parentId"}:
            await self._check_placement({**task, **data}, task_id)

        change = await self._tracker.update(
            self.entity_type,
            task_id,
            data,
            edited_by,
            log_type=task_log_type({**task, **data}),
            current=task,
        )
        return {"message": "Task updated successfully.", "task": change.record}

    @handle_errors
    async def remove(self, task_id: int, edited_by: int) -> dict:
        task = await self._tracker.current(self.entity_type, task_id)
        await self._tracker.delete(
            self.entity_type,
            task_id,
            edited_by,
            log_type=task_log_type(task),
            namespaces=cascade_namespaces(self.entity_type),
            current=task,
        )
        return {"message": "Task deleted successfully."}
