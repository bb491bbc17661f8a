"""
BadRequestError - Raised when input breaks a business rule or a uniqueness constraint.
Maps to: HTTP 400 Bad Request
"""

from tracker.domain.exceptions.base import DomainError


class BadRequestError(DomainError):
    """Exception raised for invalid input."""

    def __init__(self, message: str):
        super().__init__(message)
