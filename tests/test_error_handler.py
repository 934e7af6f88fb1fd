import pytest

from weddinggame.error_handler import error_response, handle_error
from weddinggame.errors import (
    AccessTokenNotFoundError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

ACCESS_DENIED = '{"message":"access denied","status":"error"}'


def test_no_error_gives_no_response():
    assert handle_error(None) is None
    assert error_response(None) is None


@pytest.mark.parametrize(
    "error",
    [AccessTokenNotFoundError(), AuthenticationError("test_error"), AuthorizationError()],
)
def test_auth_errors_are_forbidden(error):
    response = error_response(error)
    assert response.status_code == 403
    assert response.get_data(as_text=True) == ACCESS_DENIED


def test_validation_error_is_bad_request():
    response = error_response(ValidationError("test_error"))
    assert response.status_code == 400
    assert response.get_data(as_text=True) == '{"message":"test_error","status":"error"}'


def test_field_validation_message_is_bad_request():
    message = "Key: 'X.Name' Error:Field validation for 'Name' failed on the 'required' tag"
    status, payload = handle_error(Exception(message))
    assert status == 400
    assert payload == {"status": "error", "message": message}


def test_not_found_error():
    response = error_response(NotFoundError("test_entity", "test_key"))
    assert response.status_code == 404
    assert (
        response.get_data(as_text=True)
        == '{"message":"test_entity with key test_key not found.","status":"error"}'
    )


def test_unexpected_error():
    response = error_response(RuntimeError("unexpected error"))
    assert response.status_code == 500
    assert (
        response.get_data(as_text=True)
        == '{"message":"An unexpected error occurred.","status":"error"}'
    )
    assert response.mimetype == "application/json"