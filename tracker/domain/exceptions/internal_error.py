"""
InternalServerError - Raised for unexpected failures. The cause is logged, never returned.
Maps to: HTTP 500 Internal Server Error
"""

from tracker.domain.exceptions.base import DomainError


class InternalServerError(DomainError):
    def __init__(self, message: str = "Internal server error."):
        super().__init__(message)
