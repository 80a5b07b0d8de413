import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from playgrounds.exceptions import PlaygroundNotFound
from playgrounds.services.legacy_service import LegacyPlaygroundService
from playgrounds.services.validation_service import parse_version
from .serializers import LegacyPlaygroundWriteSerializer, legacy_response

logger = logging.getLogger(__name__)


def _load_version(playground_id: str, version: int) -> Response:
    item = LegacyPlaygroundService.get_playground(playground_id, version)

    if item is None:
        msg = f"No playground found with ID: {playground_id}, or no version {version} exists."
        logger.info(msg)
        raise PlaygroundNotFound(msg)

    logger.debug("Loaded playground using ID: %s@%s", playground_id, version)
    return Response(legacy_response(item))


class LegacyPlaygroundCreateView(APIView):
    """POST /api: creates a playground at version 0."""

    def post(self, request):
        serializer = LegacyPlaygroundWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = LegacyPlaygroundService.create_playground(**serializer.validated_data)
        return Response(legacy_response(item), status=status.HTTP_201_CREATED)


class LegacyPlaygroundView(APIView):
    """
    GET /api/<id>: version 0 of the playground.
    POST /api/<id>: stores a new version of the playground.
    """

    def get(self, request, playground_id):
        return _load_version(playground_id, 0)

    def post(self, request, playground_id):
        serializer = LegacyPlaygroundWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = LegacyPlaygroundService.create_playground_version(
            playground_id, **serializer.validated_data
        )
        return Response(legacy_response(item), status=status.HTTP_201_CREATED)


class LegacyPlaygroundVersionView(APIView):
    """GET /api/<id>/<version>: the exact snapshot stored for that version."""

    def get(self, request, playground_id, version):
        return _load_version(playground_id, parse_version(version))
