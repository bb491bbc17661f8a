"""
API Routers - FastAPI endpoint definitions.
"""

from tracker.presentation.api.department import router as department_router
from tracker.presentation.api.division import router as division_router
from tracker.presentation.api.user import router as user_router
from tracker.presentation.api.project import router as project_router
from tracker.presentation.api.work import router as work_router
from tracker.presentation.api.task import router as task_router
from tracker.presentation.api.comment import router as comment_router
from tracker.presentation.api.mention import router as mention_router
from tracker.presentation.api.log import router as log_router

__all__ = [
    "department_router",
    "division_router",
    "user_router",
    "project_router",
    "work_router",
    "task_router",
    "comment_router",
    "mention_router",
    "log_router",
]
