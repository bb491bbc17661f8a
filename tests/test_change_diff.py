from datetime import datetime, timezone

from tracker.domain.services.change_diff import diff_fields


def test_diff_keeps_previous_value_of_changed_field():
    original = {"id": 2, "code": "HR", "description": "Human Resource"}
    update = {"code": "HR", "description": "HR Ops"}

    assert diff_fields(original, update) == {"description": "Human Resource"}


def test_empty_update_yields_empty_diff():
    assert diff_fields({"id": 1, "code": "HR"}, {}) == {}


def test_keys_missing_from_original_are_ignored():
    assert diff_fields({"code": "HR"}, {"unknown": 1, "code": "IT"}) == {"code": "HR"}


def test_unchanged_values_are_omitted():
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    original = {"startDate": start, "status": "pending"}

    assert diff_fields(original, {"startDate": start, "status": "pending"}) == {}


def test_null_to_value_counts_as_change():
    assert diff_fields({"middleName": None}, {"middleName": "Lee"}) == {"middleName": None}
