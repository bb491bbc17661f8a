from tracker.application.services.department_service import DepartmentService
from tracker.application.services.division_service import DivisionService
from tracker.application.services.user_service import UserService
from tracker.application.services.project_service import ProjectService
from tracker.application.services.work_service import WorkService
from tracker.application.services.task_service import TaskService
from tracker.application.services.comment_service import CommentService
from tracker.application.services.mention_service import MentionService
from tracker.application.services.log_service import LogService

__all__ = [
    "DepartmentService",
    "DivisionService",
    "UserService",
    "ProjectService",
    "WorkService",
    "TaskService",
    "CommentService",
    "MentionService",
    "LogService",
]
