"""
Error classification at the service boundary.

Every public service operation runs under `handle_errors`, which turns
gateway failures into caller-facing domain errors:

    UniqueConstraintError      -> BadRequestError (names the fields)
    RecordNotFoundError        -> EntityNotFoundError
    ForeignKeyConstraintError  -> ConflictError
    anything else              -> InternalServerError (generic message)

Domain errors raised by the services themselves pass through unchanged.
Nothing is retried.
"""

import functools
import logging
from typing import NoReturn

from tracker.domain.exceptions import (
    BadRequestError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    InternalServerError,
)
from tracker.domain.ports import (
    ForeignKeyConstraintError,
    RecordNotFoundError,
    UniqueConstraintError,
)

logger = logging.getLogger(__name__)


def classify_error(error: Exception, entity_name: str) -> NoReturn:
    if isinstance(error, DomainError):
        logger.warning(f"[{entity_name}] {type(error).__name__}: {error.message}")
        raise error

    if isinstance(error, UniqueConstraintError):
        fields = ", ".join(error.fields)
        logger.warning(f"[{entity_name}] Unique constraint failed on {fields}")
        raise BadRequestError(
            f"{entity_name} with the same {fields} already exists."
        ) from error

    if isinstance(error, RecordNotFoundError):
        logger.warning(f"[{entity_name}] Record to operate on not found: {error}")
        raise EntityNotFoundError(f"{entity_name} not found.") from error

    if isinstance(error, ForeignKeyConstraintError):
        logger.warning(f"[{entity_name}] Foreign key constraint failed: {error}")
        field = f" ({error.field})" if error.field else ""
        raise ConflictError(
            f"{entity_name} conflicts with a related record{field}."
        ) from error

    logger.error(
        f"[{entity_name}] Unexpected error: {type(error).__name__}: {error}",
        exc_info=error,
    )
    raise InternalServerError() from error


def handle_errors(func):
    """
    Decorator for async service methods.

    The entity label comes from the service's `entity_type`.
    """

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except Exception as e:
            classify_error(e, self.entity_type.label)

    return wrapper
