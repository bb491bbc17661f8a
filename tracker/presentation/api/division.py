"""Division API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.division import CreateDivisionDTO, UpdateDivisionDTO
from tracker.application.services import DivisionService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/division", tags=["division"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_division(
    request: CreateDivisionDTO,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_divisions(
    service: FromDishka[DivisionService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{division_id}")
@inject
async def find_division(
    division_id: int,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(division_id)


@router.get("/{division_id}/users")
@inject
async def find_division_users(
    division_id: int,
    service: FromDishka[DivisionService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_users(division_id, query)


@router.get("/{division_id}/users/{user_id}")
@inject
async def find_division_user(
    division_id: int,
    user_id: int,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_user(division_id, user_id)


@router.get("/{division_id}/departments")
@inject
async def find_division_departments(
    division_id: int,
    service: FromDishka[DivisionService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_departments(division_id, query)


@router.get("/{division_id}/departments/{department_id}")
@inject
async def find_division_department(
    division_id: int,
    department_id: int,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_department(division_id, department_id)


@router.patch("/{division_id}")
@inject
async def update_division(
    division_id: int,
    request: UpdateDivisionDTO,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(division_id, request, current_user.id)


@router.delete("/{division_id}")
@inject
async def remove_division(
    division_id: int,
    service: FromDishka[DivisionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(division_id, current_user.id)
