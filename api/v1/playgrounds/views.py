import logging

from django.urls import reverse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from playgrounds.exceptions import InvalidPlaygroundInput, PlaygroundNotFound
from playgrounds.models import Tag
from playgrounds.services.playground_repository import PlaygroundRepository
from playgrounds.services.playground_service import PlaygroundService
from playgrounds.services.validation_service import validate_slug
from .serializers import (
    PlaygroundSerializer,
    PlaygroundSummarySerializer,
    PlaygroundUpdateSerializer,
    PlaygroundWriteSerializer,
    TagSerializer,
)

logger = logging.getLogger(__name__)


class PlaygroundSearchView(APIView):
    """
    GET /api/playgrounds?q=<query>

    200 with the matching public playgrounds, 404 when nothing matches,
    422 when the query is empty.
    """

    def get(self, request):
        query = request.query_params.get("q", "")

        if not query:
            msg = "Failed to search playgrounds, query param is empty."
            logger.error(msg)
            raise InvalidPlaygroundInput(msg)

        playgrounds = PlaygroundRepository().search(query)

        if not playgrounds:
            msg = "No playgrounds found during search."
            logger.info("%s Query: %s", msg, query)
            raise PlaygroundNotFound(msg)

        logger.info("Loaded %s playgrounds by searching.", len(playgrounds))
        return Response(PlaygroundSummarySerializer(playgrounds, many=True).data)


class PlaygroundCreateView(APIView):
    """
    POST /api/playground

    201 with the new playground; its URL is in the Location header.
    """

    def post(self, request):
        serializer = PlaygroundWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        playground = PlaygroundService().create(serializer.to_payload())

        return Response(
            PlaygroundSerializer(playground).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": reverse("playground-detail", kwargs={"slug": playground.slug})},
        )


class PlaygroundDetailView(APIView):
    """
    GET /api/playground/<slug>
    PUT /api/playground/<slug>

    PUT replaces the playground's fields (and tags, when sent) and adds a version.
    """

    def get(self, request, slug):
        playground = PlaygroundRepository().find_by_slug(slug)

        if playground is None:
            msg = f"No playground found with slug: {slug}"
            logger.info(msg)
            raise PlaygroundNotFound(msg)

        logger.info("Loaded playground using slug: %s", slug)
        return Response(PlaygroundSerializer(playground).data)

    def put(self, request, slug):
        validate_slug(slug)

        serializer = PlaygroundUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        playground = PlaygroundService().update(
            serializer.validated_data.get("id"),
            slug,
            serializer.to_payload(),
        )
        return Response(PlaygroundSerializer(playground).data, status=status.HTTP_200_OK)


class TagListView(APIView):
    """GET /api/tags: tags that playgrounds may reference by id."""

    def get(self, request):
        return Response(TagSerializer(Tag.objects.all(), many=True).data)
