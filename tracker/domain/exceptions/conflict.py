"""
ConflictError - Raised when a write conflicts with related records.
Maps to: HTTP 409 Conflict
"""

from tracker.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    def __init__(self, message: str):
        super().__init__(message)
