"""Project API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.project import CreateProjectDTO, UpdateProjectDTO
from tracker.application.services import ProjectService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/project", tags=["project"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_project(
    request: CreateProjectDTO,
    service: FromDishka[ProjectService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_projects(
    service: FromDishka[ProjectService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{project_id}")
@inject
async def find_project(
    project_id: int,
    service: FromDishka[ProjectService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(project_id)


@router.get("/{project_id}/works")
@inject
async def find_project_works(
    project_id: int,
    service: FromDishka[ProjectService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_works(project_id, query)


@router.get("/{project_id}/works/{work_id}")
@inject
async def find_project_work(
    project_id: int,
    work_id: int,
    service: FromDishka[ProjectService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_work(project_id, work_id)


@router.patch("/{project_id}")
@inject
async def update_project(
    project_id: int,
    request: UpdateProjectDTO,
    service: FromDishka[ProjectService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(project_id, request, current_user.id)


@router.delete("/{project_id}")
@inject
async def remove_project(
    project_id: int,
    service: FromDishka[ProjectService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(project_id, current_user.id)
