import json
import logging
from typing import Any, Iterable, List

from django.db import DEFAULT_DB_ALIAS

from playgrounds.models import Playground, Tag

logger = logging.getLogger(__name__)


def _describe(entry: Any) -> str:
    try:
        return json.dumps(entry)
    except (TypeError, ValueError):
        return repr(entry)


def _tag_id(entry: Any):
    if not isinstance(entry, dict):
        return None
    tag_id = entry.get("id")
    # bool is an int subclass, but never a valid tag reference
    if isinstance(tag_id, bool) or not isinstance(tag_id, int):
        return None
    return tag_id


class TagAssociationService:
    """
    Resolves caller-supplied tag references and attaches them to playgrounds.

    Malformed references are skipped with a warning; this service never raises
    for bad input.
    """

    def __init__(self, *, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def prepare_tags(self, tags_data: Iterable[Any]) -> List[Tag]:
        if tags_data is not None and not isinstance(tags_data, (list, tuple)):
            logger.warning("Tags must be a list, skipping. Tags: %s", _describe(tags_data))
            tags_data = []

        tag_ids = []
        for entry in tags_data or []:
            tag_id = _tag_id(entry)
            if tag_id is None:
                logger.warning("Invalid tag listed in request, skipping. Tag: %s", _describe(entry))
                continue
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)

        tags = list(Tag.objects.using(self.using).filter(id__in=tag_ids))

        missing = set(tag_ids) - {tag.id for tag in tags}
        for tag_id in sorted(missing):
            logger.warning("Unknown tag id listed in request, skipping. Tag id: %s", tag_id)

        return tags

    def replace(self, playground: Playground, tags_data: Iterable[Any]) -> List[Tag]:
        """Set the playground's tags to exactly the valid entries of ``tags_data``."""
        tags = self.prepare_tags(tags_data)
        playground.tags.set(tags)
        return tags
