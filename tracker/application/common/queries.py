"""List query shared by every list operation, plus Prisma `where` builders."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Optional

from tracker.domain.enums import PaginationDefault, SortOrder
from tracker.domain.ports import OrderBy, Where


@dataclass(frozen=True)
class ListQuery:
    search: Optional[str] = None
    offset: int = PaginationDefault.OFFSET.value
    limit: int = PaginationDefault.LIMIT.value
    sort_by: Optional[str] = None
    sort_order: SortOrder = SortOrder.ASC
    status: Optional[str] = None
    type: Optional[str] = None
    author_id: Optional[int] = None
    department_id: Optional[int] = None
    division_id: Optional[int] = None
    date_within: Optional[datetime] = None
    comment_id: Optional[int] = None
    user_id: Optional[int] = None
    type_id: Optional[int] = None
    method_id: Optional[int] = None
    edited_by: Optional[int] = None

    @property
    def order_by(self) -> Optional[OrderBy]:
        if not self.sort_by:
            return None
        return {self.sort_by: SortOrder(self.sort_order).value}

    def as_key(self, **scope: Any) -> dict[str, Any]:
        """Query shape used for cache keys; scope ids (parent ids) come first."""
        shape = dict(scope)
        for name, value in asdict(self).items():
            if isinstance(value, SortOrder):
                value = value.value
            shape[name] = value
        return shape


def search_where(search: Optional[str], *fields: str) -> Where:
    if not search:
        return {}
    return {
        "OR": [
            {field: {"contains": search, "mode": "insensitive"}} for field in fields
        ]
    }


def date_within_where(date_within: Optional[datetime]) -> Where:
    """Rows whose startDate <= date_within <= endDate."""
    if date_within is None:
        return {}
    return {"startDate": {"lte": date_within}, "endDate": {"gte": date_within}}


def equals_where(**filters: Any) -> Where:
    return {name: value for name, value in filters.items() if value is not None}


def combine(*parts: Where) -> Where:
    """Merge where fragments; two OR fragments are joined with AND."""
    where: Where = {}
    ands: list[Where] = []
    for part in parts:
        for key, value in part.items():
            if key == "OR" and "OR" in where:
                ands.append({"OR": value})
            else:
                where[key] = value
    if ands:
        where["AND"] = ands
    return where
