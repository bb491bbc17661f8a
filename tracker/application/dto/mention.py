"""Mention DTOs for API request bodies."""

from tracker.application.dto.base import CamelModel


class CreateMentionDTO(CamelModel):
    comment_id: int
    user_id: int
