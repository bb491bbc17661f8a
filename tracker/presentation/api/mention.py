"""Mention API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.mention import CreateMentionDTO
from tracker.application.services import MentionService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/mention", tags=["mention"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_mention(
    request: CreateMentionDTO,
    service: FromDishka[MentionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_mentions(
    service: FromDishka[MentionService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{mention_id}")
@inject
async def find_mention(
    mention_id: int,
    service: FromDishka[MentionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(mention_id)


@router.delete("/{mention_id}")
@inject
async def remove_mention(
    mention_id: int,
    service: FromDishka[MentionService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(mention_id, current_user.id)
