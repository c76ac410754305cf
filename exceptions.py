import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.views import exception_handler

from ContentGeneration.exceptions import ContentStudioError

logger = logging.getLogger(__name__)

STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UNSUPPORTED_MEDIA_TYPE",
    status.HTTP_429_TOO_MANY_REQUESTS: "THROTTLED",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "INTERNAL_SERVER_ERROR",
}

# Headers DRF sets on auth and throttling errors that clients rely on
PRESERVED_HEADERS = ('WWW-Authenticate', 'Retry-After', 'Allow')


def unified_exception_handler(exc, context):
    """
    Render every API error as:

        {
            "status": "error",
            "code": "ERROR_CODE",
            "message": "Human readable error message",
            "errors": ["field: detail", ...]
        }
    """
    if isinstance(exc, ContentStudioError):
        view = context.get('view')
        logger.warning("%s in %s: %s", exc.code,
                       view.__class__.__name__ if view else 'view', exc.message)
        errors = [f"{key}: {value}" for key, value in exc.details.items()]
        return _error_response(exc.status_code, exc.code, exc.message, errors)

    response = exception_handler(exc, context)
    if response is not None:
        json_response = _error_response(
            response.status_code,
            _error_code(exc, response.status_code),
            _main_message(exc, response.data),
            _flatten_errors(response.data),
        )
        for header in PRESERVED_HEADERS:
            if header in response:
                json_response[header] = response[header]
        return json_response

    return _unhandled_exception_response(exc)


def _error_response(status_code, code, message, errors):
    return JsonResponse({
        "status": "error",
        "code": code,
        "message": message,
        "errors": errors,
    }, status=status_code)


def _unhandled_exception_response(exc):
    if isinstance(exc, DjangoValidationError):
        status_code, code, message = (
            status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Validation failed")
    elif isinstance(exc, IntegrityError):
        status_code, code, message = (
            status.HTTP_409_CONFLICT, "CONFLICT",
            "The resource was modified concurrently, please retry")
    else:
        status_code, code, message = (
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR",
            "An internal server error occurred, please try again later.")

    if status_code >= 500:
        logger.error("Unhandled exception: %s", exc, exc_info=True)
    else:
        logger.warning("Request rejected: %s", exc)

    # Internal error text is only exposed for client-side validation failures
    errors = []
    if isinstance(exc, DjangoValidationError):
        errors = [str(message) for message in exc.messages]
    return _error_response(status_code, code, message, errors)


def _error_code(exc, status_code):
    if isinstance(exc, ValidationError):
        return "VALIDATION_ERROR"
    if isinstance(exc, NotAuthenticated):
        return "UNAUTHORIZED"
    return STATUS_CODES.get(status_code, "API_ERROR")


def _main_message(exc, data):
    """First human readable message found in DRF's error payload."""
    if isinstance(data, dict):
        detail = data.get('detail')
        if isinstance(detail, str):
            return detail
        flattened = _flatten_errors(data)
        if flattened:
            return flattened[0]
    elif isinstance(data, list) and data:
        return str(data[0])
    return str(exc)


def _flatten_errors(data, prefix=''):
    """Flatten nested serializer errors into "field.sub: message" strings."""
    if isinstance(data, dict):
        errors = []
        for field, value in data.items():
            if field == 'detail' and not prefix:
                continue
            if field == 'non_field_errors':
                errors.extend(_flatten_errors(value, prefix))
            else:
                errors.extend(_flatten_errors(
                    value, f"{prefix}.{field}" if prefix else field))
        return errors
    if isinstance(data, list):
        return [error for item in data for error in _flatten_errors(item, prefix)]
    return [f"{prefix}: {data}" if prefix else str(data)]
