"""Log API Router - read-only."""

from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.services import LogService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/log", tags=["log"])


@router.get("")
@inject
async def find_logs(
    service: FromDishka[LogService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/type/{type_id}")
@inject
async def find_logs_by_type(
    type_id: int,
    service: FromDishka[LogService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_by_type(type_id, query)


@router.get("/method/{method_id}")
@inject
async def find_logs_by_method(
    method_id: int,
    service: FromDishka[LogService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_by_method(method_id, query)


@router.get("/{log_id}")
@inject
async def find_log(
    log_id: int,
    service: FromDishka[LogService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(log_id)
