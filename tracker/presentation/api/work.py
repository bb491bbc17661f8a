"""Work API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.work import CreateWorkDTO, UpdateWorkDTO
from tracker.application.services import WorkService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/work", tags=["work"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_work(
    request: CreateWorkDTO,
    service: FromDishka[WorkService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_works(
    service: FromDishka[WorkService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{work_id}")
@inject
async def find_work(
    work_id: int,
    service: FromDishka[WorkService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(work_id)


@router.get("/{work_id}/tasks")
@inject
async def find_work_tasks(
    work_id: int,
    service: FromDishka[WorkService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_tasks(work_id, query)


@router.get("/{work_id}/tasks/{task_id}")
@inject
async def find_work_task(
    work_id: int,
    task_id: int,
    service: FromDishka[WorkService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_task(work_id, task_id)


@router.patch("/{work_id}")
@inject
async def update_work(
    work_id: int,
    request: UpdateWorkDTO,
    service: FromDishka[WorkService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(work_id, request, current_user.id)


@router.delete("/{work_id}")
@inject
async def remove_work(
    work_id: int,
    service: FromDishka[WorkService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(work_id, current_user.id)
