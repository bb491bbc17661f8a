from tracker.application.dto.base import CamelModel
from tracker.application.dto.department import CreateDepartmentDTO, UpdateDepartmentDTO
from tracker.application.dto.division import CreateDivisionDTO, UpdateDivisionDTO
from tracker.application.dto.user import CreateUserDTO, UpdateUserDTO
from tracker.application.dto.project import CreateProjectDTO, UpdateProjectDTO
from tracker.application.dto.work import CreateWorkDTO, UpdateWorkDTO
from tracker.application.dto.task import CreateTaskDTO, UpdateTaskDTO
from tracker.application.dto.comment import CreateCommentDTO, UpdateCommentDTO
from tracker.application.dto.mention import CreateMentionDTO

__all__ = [
    "CamelModel",
    "CreateDepartmentDTO",
    "UpdateDepartmentDTO",
    "CreateDivisionDTO",
    "UpdateDivisionDTO",
    "CreateUserDTO",
    "UpdateUserDTO",
    "CreateProjectDTO",
    "UpdateProjectDTO",
    "CreateWorkDTO",
    "UpdateWorkDTO",
    "CreateTaskDTO",
    "UpdateTaskDTO",
    "CreateCommentDTO",
    "UpdateCommentDTO",
    "CreateMentionDTO",
]
