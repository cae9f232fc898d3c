"""
Error taxonomy for the API and the DRF exception handler that renders it.

Every error body carries a ``message`` key; validation errors additionally
list one ``{"field", "msg"}`` entry per failed rule, in field order.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class EnquiryNotFound(exceptions.NotFound):
    default_detail = "Enquiry not found"
    default_code = "not_found"


class StorageFault(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server Error"
    default_code = "server_error"


def flatten_errors(detail, field=None):
    """Turn a serializer error structure into an ordered list of field errors."""
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            if field is None:
                name = None if key == "non_field_errors" else str(key)
            else:
                name = f"{field}[{key}]" if isinstance(key, int) else f"{field}.{key}"
            errors.extend(flatten_errors(value, name))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(flatten_errors(item, field))
        return errors
    return [{"field": field, "msg": str(detail)}]


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}",
            exc_info=exc,
        )
        return Response(
            {"message": StorageFault.default_detail},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = flatten_errors(exc.detail)
        message = errors[0]["msg"] if errors else "Invalid input"
        response.data = {"message": message, "errors": errors}
    elif isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"message": "Not authorized, no token"}
    elif isinstance(exc, InvalidToken):
        response.data = {"message": "Not authorized, token failed"}
    elif isinstance(exc.detail, (list, dict)):
        errors = flatten_errors(exc.detail)
        response.data = {"message": errors[0]["msg"] if errors else str(exc)}
    else:
        response.data = {"message": str(exc.detail)}

    return response
