"""Comment API Router. Mutations act on the caller's own comments."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from tracker.application.common.queries import ListQuery
from tracker.application.dto.comment import CreateCommentDTO, UpdateCommentDTO
from tracker.application.services import CommentService
from tracker.presentation.dependencies.auth import AuthUser, get_current_user
from tracker.presentation.dependencies.pagination import list_params

router = APIRouter(prefix="/comment", tags=["comment"])


@router.post("", status_code=status.HTTP_201_CREATED)
@inject
async def create_comment(
    request: CreateCommentDTO,
    service: FromDishka[CommentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.create(request, current_user.id)


@router.get("")
@inject
async def find_comments(
    service: FromDishka[CommentService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_all(query)


@router.get("/{comment_id}")
@inject
async def find_comment(
    comment_id: int,
    service: FromDishka[CommentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_one(comment_id)


@router.get("/{comment_id}/mentions")
@inject
async def find_mentioned_users(
    comment_id: int,
    service: FromDishka[CommentService],
    query: ListQuery = Depends(list_params),
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_mentioned_users(comment_id, query)


@router.get("/{comment_id}/mentions/{user_id}")
@inject
async def find_mentioned_user(
    comment_id: int,
    user_id: int,
    service: FromDishka[CommentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.find_mentioned_user(comment_id, user_id)


@router.patch("/{comment_id}")
@inject
async def update_comment(
    comment_id: int,
    request: UpdateCommentDTO,
    service: FromDishka[CommentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.update(comment_id, request, current_user.id)


@router.delete("/{comment_id}")
@inject
async def remove_comment(
    comment_id: int,
    service: FromDishka[CommentService],
    current_user: AuthUser = Depends(get_current_user),
):
    return await service.remove(comment_id, current_user.id)
