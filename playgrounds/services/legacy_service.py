import logging
from typing import Optional

from django.db import transaction
from django.db.models import Max

from playgrounds.exceptions import PlaygroundNotFound
from playgrounds.models import LegacyPlayground, LegacyPlaygroundVersion

logger = logging.getLogger(__name__)


class LegacyPlaygroundService:
    """Snapshot-per-version storage behind the legacy API."""

    @staticmethod
    def get_playground(playground_id: str, version: int) -> Optional[LegacyPlaygroundVersion]:
        return (
            LegacyPlaygroundVersion.objects.select_related("playground")
            .filter(playground_id=playground_id, version=version)
            .first()
        )

    @staticmethod
    @transaction.atomic
    def create_playground(
        *,
        name: str,
        author: str,
        contents: str,
        is_public: bool = True,
        is_featured: bool = False,
        is_official: bool = False,
    ) -> LegacyPlaygroundVersion:
        playground = LegacyPlayground.objects.create()
        item = LegacyPlaygroundVersion.objects.create(
            playground=playground,
            version=0,
            name=name,
            author=author,
            is_public=is_public,
            is_featured=is_featured,
            is_official=is_official,
            contents=contents,
        )
        logger.info("Created a new legacy playground: %s", playground.id)
        return item

    @staticmethod
    @transaction.atomic
    def create_playground_version(
        playground_id: str,
        *,
        name: str,
        author: str,
        contents: str,
        is_public: bool = True,
        is_featured: bool = False,
        is_official: bool = False,
    ) -> LegacyPlaygroundVersion:
        # Row lock serializes concurrent version appends for the same playground.
        playground = (
            LegacyPlayground.objects.select_for_update()
            .filter(id=playground_id)
            .first()
        )
        if playground is None:
            raise PlaygroundNotFound(f"No playground found with ID: {playground_id}.")

        latest = playground.versions.aggregate(latest=Max("version"))["latest"]
        item = LegacyPlaygroundVersion.objects.create(
            playground=playground,
            version=0 if latest is None else latest + 1,
            name=name,
            author=author,
            is_public=is_public,
            is_featured=is_featured,
            is_official=is_official,
            contents=contents,
        )
        logger.info(
            "Created new playground version using ID: %s, added version %s",
            playground_id,
            item.version,
        )
        return item
