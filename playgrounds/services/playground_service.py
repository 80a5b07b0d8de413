import logging
from functools import partial
from typing import Callable, Optional

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction

from playgrounds.exceptions import PlaygroundStoreError
from playgrounds.models import Playground
from playgrounds.services.payloads import PlaygroundPayload
from playgrounds.services.playground_repository import PlaygroundRepository
from playgrounds.services.tag_service import TagAssociationService

logger = logging.getLogger(__name__)


def _default_purge_dispatcher(slug: str) -> None:
    from playgrounds.tasks import dispatch_cache_purge

    dispatch_cache_purge(slug)


class PlaygroundService:
    """
    Runs playground writes as one atomic unit: the record change and the tag
    replacement commit together or not at all.
    """

    def __init__(
        self,
        *,
        repository: Optional[PlaygroundRepository] = None,
        tags: Optional[TagAssociationService] = None,
        purge_dispatcher: Optional[Callable[[str], None]] = None,
        using: str = DEFAULT_DB_ALIAS,
    ):
        self.using = using
        self.repository = repository or PlaygroundRepository(using=using)
        self.tags = tags or TagAssociationService(using=using)
        self.purge_dispatcher = purge_dispatcher or _default_purge_dispatcher

    def create(self, payload: PlaygroundPayload) -> Playground:
        try:
            with transaction.atomic(using=self.using):
                playground = self.repository.create(payload)
                if payload.tags:
                    self.tags.replace(playground, payload.tags)
                return self.repository.reload(playground)
        except DatabaseError as exc:
            logger.exception("Failed to create playground.")
            raise PlaygroundStoreError() from exc

    def update(self, playground_id, slug: str, payload: PlaygroundPayload) -> Playground:
        try:
            with transaction.atomic(using=self.using):
                playground = self.repository.update(playground_id, slug, payload)
                if payload.tags is not None:
                    self.tags.replace(playground, payload.tags)
                playground = self.repository.reload(playground)
                transaction.on_commit(partial(self.purge_dispatcher, slug), using=self.using)
                return playground
        except DatabaseError as exc:
            logger.exception("Failed to save playground %s.", slug)
            raise PlaygroundStoreError() from exc
