import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error
from rest_framework.views import exception_handler, set_rollback

from playgrounds.services.validation_service import INVALID_INPUT

logger = logging.getLogger(__name__)

STORE_ERROR_MSG = "There was an error trying to access the playground store."


def _first_error(detail, field=None):
    if isinstance(detail, dict):
        for key, value in detail.items():
            found = _first_error(value, field=key if field is None else field)
            if found:
                return found
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            found = _first_error(value, field=field)
            if found:
                return found
        return None
    return field, detail


def validation_message(detail) -> str:
    found = _first_error(detail)
    if not found:
        return "Invalid params."
    field, message = found
    if getattr(message, "code", None) == INVALID_INPUT or field in (None, "non_field_errors"):
        return str(message)
    return f"Invalid params, '{field}': {message}"


def playground_exception_handler(exc, context):
    """
    Render every API error as ``{"msg": ...}``.

    Validation failures become 422; store failures are logged and reported as
    a generic 500 without echoing the underlying error.
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail=as_serializer_error(exc))

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Store error while handling %s.", view.__class__.__name__ if view else "request")
        set_rollback()
        return Response({"msg": STORE_ERROR_MSG}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        msg = validation_message(exc.detail)
        logger.error("Rejected request with invalid params: %s", msg)
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        msg = str(detail) if detail is not None else "Request failed."
        kind = getattr(exc, "kind", None) or "HTTP_%s" % response.status_code
        if response.status_code >= 500:
            logger.error("Request failed (%s): %s", kind, msg)
        else:
            logger.info("Request failed (%s): %s", kind, msg)

    response.data = {"msg": msg}
    return response
