"""
LogEntry Entity - One audit row: who changed what, how, on which entity type.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from tracker.domain.enums import LogMethod, LogType


@dataclass(frozen=True)
class LogEntry:
    id: int
    edited_by: int
    log_type: LogType
    log_method: LogMethod
    logs: dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "LogEntry":
        return cls(
            id=record["id"],
            edited_by=record["editedBy"],
            log_type=LogType(record["logTypeId"]),
            log_method=LogMethod(record["logMethodId"]),
            logs=record.get("logs") or {},
            created_at=record.get("createdAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "editedBy": self.edited_by,
            "logTypeId": int(self.log_type),
            "logMethodId": int(self.log_method),
            "logs": self.logs,
            "createdAt": self.created_at,
        }
