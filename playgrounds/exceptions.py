"""
Error taxonomy for playground requests.

Every error carries a ``kind`` and an HTTP status; the API exception handler
renders them as ``{"msg": ...}`` bodies.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class PlaygroundError(APIException):
    kind = "INTERNAL"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "There was an error trying to process the playground."
    default_code = "internal"


class InvalidPlaygroundInput(PlaygroundError):
    kind = "INVALID_INPUT"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Invalid params."
    default_code = "invalid_input"


class PlaygroundNotFound(PlaygroundError):
    kind = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "No playground found."
    default_code = "not_found"


class PlaygroundConflict(PlaygroundError):
    kind = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The playground was modified concurrently, try again."
    default_code = "conflict"


class PlaygroundStoreError(PlaygroundError):
    default_detail = "There was an error trying to save the playground."
    default_code = "store_error"


class SlugMismatchError(PlaygroundError):
    default_code = "slug_mismatch"
