"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by services and caught by the presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from tracker.domain.exceptions.base import DomainError
from tracker.domain.exceptions.entity_not_found import EntityNotFoundError
from tracker.domain.exceptions.bad_request import BadRequestError
from tracker.domain.exceptions.conflict import ConflictError
from tracker.domain.exceptions.internal_error import InternalServerError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "BadRequestError",
    "ConflictError",
    "InternalServerError",
]
