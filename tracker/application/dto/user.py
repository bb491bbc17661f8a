"""User DTOs for API request bodies."""

from typing import ClassVar, Optional

from pydantic import Field

from tracker.application.dto.base import CamelModel


class CreateUserDTO(CamelModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=8)
    first_name: str = Field(min_length=1)
    middle_name: Optional[str] = None
    last_name: str = Field(min_length=1)
    employee_id: Optional[int] = None
    department_id: int
    division_id: Optional[int] = None


class UpdateUserDTO(CamelModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"middleName", "employeeId", "divisionId"})

    email: Optional[str] = Field(default=None, min_length=3)
    password: Optional[str] = Field(default=None, min_length=8)
    first_name: Optional[str] = Field(default=None, min_length=1)
    middle_name: Optional[str] = None
    last_name: Optional[str] = Field(default=None, min_length=1)
    employee_id: Optional[int] = None
    department_id: Optional[int] = None
    division_id: Optional[int] = None
