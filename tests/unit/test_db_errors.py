from fastapi import HTTPException

from fithub.core.db_errors import to_http_exception, TRAINER_CAPACITY_MESSAGE


def test_capacity_trigger_maps_to_conflict(db_error):
    exc = to_http_exception(db_error("Trainer has reached maximum client capacity", code="P0001"))
    assert exc.status_code == 409
    assert exc.detail == TRAINER_CAPACITY_MESSAGE


def test_unique_violation_maps_to_conflict(db_error):
    assert to_http_exception(db_error("duplicate key", code="23505")).status_code == 409


def test_foreign_key_violation_maps_to_not_found(db_error):
    assert to_http_exception(db_error("violates foreign key constraint", code="23503")).status_code == 404


def test_http_exception_passes_through():
    original = HTTPException(status_code=404, detail="Workout not found")
    assert to_http_exception(original) is original


def test_unknown_errors_are_server_errors():
    exc = to_http_exception(RuntimeError("connection reset"), default_detail="Could not save")
    assert exc.status_code == 500
    assert exc.detail == "Could not save"
