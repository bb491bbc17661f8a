"""User API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.user import CreateUserDTO, UpdateUserDTO
from tracker.application.services import UserService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/user", tags=["user"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    request: CreateUserDTO,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_users(
    service: FromDishka[UserService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{user_id}")
@inject
async def find_user(
    user_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(user_id)


# ==================== RELATED ====================


@router.get("/{user_id}/comments")
@inject
async def find_user_comments(
    user_id: int,
    service: FromDishka[UserService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_comments(user_id, query)


@router.get("/{user_id}/comments/{comment_id}")
@inject
async def find_user_comment(
    user_id: int,
    comment_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_comment(user_id, comment_id)


@router.get("/{user_id}/works")
@inject
async def find_user_works(
    user_id: int,
    service: FromDishka[UserService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_works(user_id, query)


@router.get("/{user_id}/works/{work_id}")
@inject
async def find_user_work(
    user_id: int,
    work_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_work(user_id, work_id)


@router.get("/{user_id}/tasks")
@inject
async def find_user_tasks(
    user_id: int,
    service: FromDishka[UserService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_tasks(user_id, query)


@router.get("/{user_id}/tasks/{task_id}")
@inject
async def find_user_task(
    user_id: int,
    task_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_task(user_id, task_id)


@router.get("/{user_id}/projects")
@inject
async def find_user_projects(
    user_id: int,
    service: FromDishka[UserService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_projects(user_id, query)


@router.get("/{user_id}/projects/{project_id}")
@inject
async def find_user_project(
    user_id: int,
    project_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_project(user_id, project_id)


# ==================== WRITES ====================


@router.patch("/{user_id}")
@inject
async def update_user(
    user_id: int,
    request: UpdateUserDTO,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(user_id, request, current_user.id)


@router.delete("/{user_id}")
@inject
async def remove_user(
    user_id: int,
    service: FromDishka[UserService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(user_id, current_user.id)
