"""
Department API Router.

Thin layer: HTTP concerns only. Services arrive through Dishka and return
the response body ({"message": ..., <entity or list>, "count"?}).
"""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.department import CreateDepartmentDTO, UpdateDepartmentDTO
from tracker.application.services import DepartmentService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/department", tags=["department"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_department(
    request: CreateDepartmentDTO,
    service: FromDishka[DepartmentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_departments(
    service: FromDishka[DepartmentService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{department_id}")
@inject
async def find_department(
    department_id: int,
    service: FromDishka[DepartmentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(department_id)


@router.get("/{department_id}/users")
@inject
async def find_department_users(
    department_id: int,
    service: FromDishka[DepartmentService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_users(department_id, query)


@router.get("/{department_id}/users/{user_id}")
@inject
async def find_department_user(
    department_id: int,
    user_id: int,
    service: FromDishka[DepartmentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_user(department_id, user_id)


@router.patch("/{department_id}")
@inject
async def update_department(
    department_id: int,
    request: UpdateDepartmentDTO,
    service: FromDishka[DepartmentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(department_id, request, current_user.id)


@router.delete("/{department_id}")
@inject
async def remove_department(
    department_id: int,
    service: FromDishka[DepartmentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(department_id, current_user.id)
