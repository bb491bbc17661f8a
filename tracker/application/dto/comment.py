"""Comment DTOs for API request bodies."""

from typing import Optional

from pydantic import Field, field_validator

from tracker.application.dto.base import CamelModel


def parse_mentions(value):
    """Mentions arrive as a list of user ids or as "3, 5,7"."""
    if value is None or isinstance(value, list):
        return value
    if isinstance(value, int):
        return [value]
    return [part.strip() for part in str(value).split(",") if part.strip()]


class CreateCommentDTO(CamelModel):
    message: str = Field(min_length=1)
    task_id: int
    mentions: Optional[list[int]] = None

    @field_validator("mentions", mode="before")
    @classmethod
    def split_mentions(cls, value):
        return parse_mentions(value)


class UpdateCommentDTO(CamelModel):
    message: Optional[str] = Field(default=None, min_length=1)
    mentions: Optional[list[int]] = None

    @field_validator("mentions", mode="before")
    @classmethod
    def split_mentions(cls, value):
        return parse_mentions(value)
