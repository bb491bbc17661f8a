"""Department DTOs for API request bodies."""

from typing import ClassVar, Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateDepartmentDTO(CamelModel):
    code: str = Field(min_length=1)
    description: str = Field(min_length=1)
    division_id: Optional[int] = None


class UpdateDepartmentDTO(CamelModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"divisionId"})

    code: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    division_id: Optional[int] = None
