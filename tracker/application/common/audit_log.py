"""
Audit Log Writer - persists who changed what, via which method, on which entity type.

Called after the primary mutation succeeds and before the response is
returned. A failed write aborts the operation with AuditLogWriteError,
which callers observe as an internal error.
"""

import json
import logging
from typing import Any, Mapping

from tracker.domain.entities import LogEntry
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import InternalServerError
from tracker.domain.ports import PersistenceGateway

logger = logging.getLogger(__name__)

CREDENTIAL_FIELDS = frozenset({"password", "refreshToken"})


class AuditLogWriteError(InternalServerError):
    def __init__(self, message: str = "There was a problem in creating a log."):
        super().__init__(message)


def to_log_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """JSON-safe copy of the payload without credential fields."""
    cleaned = {k: v for k, v in payload.items() if k not in CREDENTIAL_FIELDS}
    return json.loads(json.dumps(cleaned, default=str))


class AuditLogWriter:
    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    async def record(
        self,
        log_type: LogType,
        method: LogMethod,
        edited_by: int,
        payload: Mapping[str, Any],
    ) -> LogEntry:
        try:
            record = await self._gateway.create(
                EntityType.LOG,
                {
                    "logs": to_log_payload(payload),
                    "editedBy": edited_by,
                    "logTypeId": int(log_type),
                    "logMethodId": int(method),
                },
            )
        except Exception as e:
            logger.error(
                f"[AuditLog] Failed to write {method.name} log for {log_type.name}: {e}",
                exc_info=e,
            )
            raise AuditLogWriteError() from e

        entry = LogEntry.from_record(record)
        logger.debug(
            f"[AuditLog] {method.name} {log_type.name} by {edited_by} (log {entry.id})"
        )
        return entry
