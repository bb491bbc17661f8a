import logging

import pytest

from tracker.application.common.error_classifier import classify_error, handle_errors
from tracker.domain.enums import EntityType
from tracker.domain.exceptions import (
    BadRequestError,
    ConflictError,
    EntityNotFoundError,
    InternalServerError,
)
from tracker.domain.ports import (
    ForeignKeyConstraintError,
    PersistenceError,
    RecordNotFoundError,
    UniqueConstraintError,
)


def test_domain_errors_pass_through_unchanged():
    error = EntityNotFoundError("Department with the id 9 not found.")

    with pytest.raises(EntityNotFoundError) as exc_info:
        classify_error(error, "Department")

    assert exc_info.value is error


def test_unique_violation_names_the_field():
    with pytest.raises(BadRequestError) as exc_info:
        classify_error(UniqueConstraintError(["email"]), "User")

    assert "email" in exc_info.value.message


def test_record_not_found_becomes_not_found():
    with pytest.raises(EntityNotFoundError):
        classify_error(RecordNotFoundError("missing"), "Task")


def test_foreign_key_violation_becomes_conflict():
    with pytest.raises(ConflictError):
        classify_error(ForeignKeyConstraintError("User_departmentId_fkey"), "Department")


def test_unexpected_error_is_logged_and_hidden(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(InternalServerError) as exc_info:
            classify_error(PersistenceError("password=hunter2 connection refused"), "Work")

    assert "hunter2" not in exc_info.value.message
    assert "connection refused" in caplog.text


class _Service:
    entity_type = EntityType.PROJECT

    def __init__(self, error):
        self.error = error
        self.calls = 0

    @handle_errors
    async def run(self):
        self.calls += 1
        raise self.error


@pytest.mark.asyncio
async def test_decorator_classifies_and_never_retries():
    service = _Service(RuntimeError("boom"))

    with pytest.raises(InternalServerError):
        await service.run()

    assert service.calls == 1
