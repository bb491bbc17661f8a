"""Project DTOs for API request bodies."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateProjectDTO(CamelModel):
    name: str = Field(min_length=1)
    title: Optional[str] = None
    description: str = Field(min_length=1)
    status: Optional[str] = None
    start_date: datetime
    end_date: datetime
    author_id: Optional[int] = None


class UpdateProjectDTO(CamelModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"title"})

    name: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=1)
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
