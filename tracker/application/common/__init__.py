from tracker.application.common.audit_log import AuditLogWriter, AuditLogWriteError
from tracker.application.common.cache_registry import (
    CacheKeyRegistry,
    detail_key,
    generate_cache_key,
)
from tracker.application.common.change_tracker import ChangeTracker, TrackedChange
from tracker.application.common.error_classifier import classify_error, handle_errors
from tracker.application.common.queries import ListQuery

__all__ = [
    "AuditLogWriter",
    "AuditLogWriteError",
    "CacheKeyRegistry",
    "detail_key",
    "generate_cache_key",
    "ChangeTracker",
    "TrackedChange",
    "classify_error",
    "handle_errors",
    "ListQuery",
]
