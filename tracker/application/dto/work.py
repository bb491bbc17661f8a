"""Work DTOs for API request bodies."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateWorkDTO(CamelModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status: Optional[str] = None
    start_date: datetime
    end_date: datetime
    project_id: int
    author_id: Optional[int] = None


class UpdateWorkDTO(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
