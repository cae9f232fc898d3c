from rest_framework import exceptions, status
from rest_framework_simplejwt.exceptions import InvalidToken

from core.exceptions import EnquiryNotFound, api_exception_handler, flatten_errors


def test_flatten_errors_keeps_field_order():
    detail = {
        "clientName": ["Client name is required"],
        "phone": ["Phone number must be valid (10 digits)"],
        "links": {1: ["Not a valid string."]},
        "non_field_errors": ["Something else"],
    }
    assert flatten_errors(detail) == [
        {"field": "clientName", "msg": "Client name is required"},
        {"field": "phone", "msg": "Phone number must be valid (10 digits)"},
        {"field": "links[1]", "msg": "Not a valid string."},
        {"field": None, "msg": "Something else"},
    ]


def test_flatten_errors_plain_list():
    assert flatten_errors(["one", "two"]) == [
        {"field": None, "msg": "one"},
        {"field": None, "msg": "two"},
    ]


def test_validation_error_body():
    exc = exceptions.ValidationError({"budget": ["Budget must be a number"]})
    response = api_exception_handler(exc, {})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {
        "message": "Budget must be a number",
        "errors": [{"field": "budget", "msg": "Budget must be a number"}],
    }


def test_not_found_body():
    response = api_exception_handler(EnquiryNotFound(), {})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data == {"message": "Enquiry not found"}


def test_auth_error_bodies():
    response = api_exception_handler(exceptions.NotAuthenticated(), {})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.data == {"message": "Not authorized, no token"}

    response = api_exception_handler(InvalidToken(), {})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.data == {"message": "Not authorized, token failed"}


def test_unexpected_error_is_hidden():
    response = api_exception_handler(KeyError("internal detail"), {})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data == {"message": "Server Error"}
