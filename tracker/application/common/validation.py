"""Input checks and record helpers shared by the resource services."""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from tracker.domain.exceptions import BadRequestError
from tracker.domain.ports import OrderBy, Record

CREDENTIAL_FIELDS = ("password", "refreshToken")


def as_utc(value: Any) -> Any:
    """Naive datetimes are taken as UTC; other values are returned unchanged."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return as_utc(value)
    return as_utc(datetime.fromisoformat(str(value).replace("Z", "+00:00")))


def ensure_date_order(start: Any, end: Any, label: str) -> None:
    start, end = _as_datetime(start), _as_datetime(end)
    if start and end and start > end:
        raise BadRequestError(f"{label} start date must not be later than its end date.")


def ensure_within(
    child: Mapping[str, Any],
    parent: Mapping[str, Any],
    child_label: str,
    parent_label: str,
) -> None:
    """Child startDate/endDate must lie inside the parent's range."""
    parent_start = _as_datetime(parent.get("startDate"))
    parent_end = _as_datetime(parent.get("endDate"))
    child_start = _as_datetime(child.get("startDate"))
    child_end = _as_datetime(child.get("endDate"))

    if child_start and parent_start and child_start < parent_start:
        raise BadRequestError(
            f"The {child_label} start date must not be earlier than the {parent_label} start date."
        )
    if child_end and parent_end and child_end > parent_end:
        raise BadRequestError(
            f"The {child_label} end date must not be later than the {parent_label} end date."
        )


def sanitize_user(user: Record) -> Record:
    return {k: v for k, v in user.items() if k not in CREDENTIAL_FIELDS}


def filter_records(
    records: Iterable[Record],
    search: Optional[str],
    fields: Iterable[str],
    order_by: Optional[OrderBy],
    offset: int,
    limit: int,
) -> tuple[list[Record], int]:
    """
    In-memory search, sort and paging for lists assembled from several queries.

    Returns the requested page and the number of records matching the search.
    """
    fields = tuple(fields)
    matched = list(records)
    if search:
        needle = search.lower()
        matched = [
            r
            for r in matched
            if any(needle in str(r.get(f) or "").lower() for f in fields)
        ]

    if order_by:
        (sort_by, sort_order), = order_by.items()
        # None sorts last in either direction
        present = [r for r in matched if r.get(sort_by) is not None]
        missing = [r for r in matched if r.get(sort_by) is None]
        present.sort(key=lambda r: r[sort_by], reverse=sort_order == "desc")
        matched = present + missing

    return matched[offset : offset + limit], len(matched)
