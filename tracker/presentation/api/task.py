"""Task / subtask API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.task import CreateTaskDTO, UpdateTaskDTO
from tracker.application.services import TaskService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/task", tags=["task"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_task(
    request: CreateTaskDTO,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_tasks(
    service: FromDishka[TaskService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{task_id}")
@inject
async def find_task(
    task_id: int,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(task_id)


@router.get("/{task_id}/subtasks")
@inject
async def find_subtasks(
    task_id: int,
    service: FromDishka[TaskService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_subtasks(task_id, query)


@router.get("/{task_id}/subtasks/{subtask_id}")
@inject
async def find_subtask(
    task_id: int,
    subtask_id: int,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_subtask(task_id, subtask_id)


@router.get("/{task_id}/users")
@inject
async def find_task_users(
    task_id: int,
    service: FromDishka[TaskService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_users(task_id, query)


@router.get("/{task_id}/users/{user_id}")
@inject
async def find_task_user(
    task_id: int,
    user_id: int,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_user(task_id, user_id)


@router.get("/{task_id}/comments")
@inject
async def find_task_comments(
    task_id: int,
    service: FromDishka[TaskService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_comments(task_id, query)


@router.get("/{task_id}/comments/{comment_id}")
@inject
async def find_task_comment(
    task_id: int,
    comment_id: int,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_comment(task_id, comment_id)


@router.patch("/{task_id}")
@inject
async def update_task(
    task_id: int,
    request: UpdateTaskDTO,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(task_id, request, current_user.id)


@router.delete("/{task_id}")
@inject
async def remove_task(
    task_id: int,
    service: FromDishka[TaskService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(task_id, current_user.id)
