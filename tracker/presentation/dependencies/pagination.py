"""
Common list query parameters (?search=&offset=&limit=&sortBy=&sortOrder=...).

Id filters are named filter_* in Python: FastAPI binds a dependency
parameter that shares a path parameter's name (/user/{user_id}/comments)
to the path. The wire names are the camelCase aliases.
"""

from datetime import datetime
from typing import Optional

from fastapi import Query

from tracker.application.common.queries import ListQuery
from tracker.application.common.validation import as_utc
from tracker.config.settings import Config
from tracker.domain.enums import SortOrder


def list_params(
    search: Optional[str] = None,
    offset: int = Query(Config.PAGINATION_OFFSET, ge=0),
    limit: int = Query(Config.PAGINATION_LIMIT, ge=1, le=Config.PAGINATION_MAX_LIMIT),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.ASC, alias="sortOrder"),
    status: Optional[str] = None,
    type: Optional[str] = None,
    filter_author_id: Optional[int] = Query(None, alias="authorId"),
    filter_department_id: Optional[int] = Query(None, alias="departmentId"),
    filter_division_id: Optional[int] = Query(None, alias="divisionId"),
    date_within: Optional[datetime] = Query(None, alias="dateWithin"),
    filter_comment_id: Optional[int] = Query(None, alias="commentId"),
    filter_user_id: Optional[int] = Query(None, alias="userId"),
    filter_type_id: Optional[int] = Query(None, alias="typeId"),
    filter_method_id: Optional[int] = Query(None, alias="methodId"),
    filter_edited_by: Optional[int] = Query(None, alias="editedBy"),
) -> ListQuery:
    return ListQuery(
        search=search or None,
        offset=offset,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        status=status,
        type=type,
        author_id=filter_author_id,
        department_id=filter_department_id,
        division_id=filter_division_id,
        date_within=as_utc(date_within),
        comment_id=filter_comment_id,
        user_id=filter_user_id,
        type_id=filter_type_id,
        method_id=filter_method_id,
        edited_by=filter_edited_by,
    )
