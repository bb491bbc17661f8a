"""Division DTOs for API request bodies."""

from typing import Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateDivisionDTO(CamelModel):
    code: str = Field(min_length=1)
    description: str = Field(min_length=1)


class UpdateDivisionDTO(CamelModel):
    code: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
