"""Task / subtask DTOs for API request bodies."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateTaskDTO(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    type: str = Field(min_length=1)
    status: Optional[str] = None
    start_date: datetime
    end_date: datetime
    work_id: int
    assigned_to_id: int
    parent_id: Optional[int] = None


class UpdateTaskDTO(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[str] = Field(default=None, min_length=1)
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    work_id: Optional[int] = None
    assigned_to_id: Optional[int] = None
    parent_id: Optional[int] = None
