import logging
from typing import List, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import F, Q
from django.utils import timezone

from playgrounds.exceptions import (
    PlaygroundConflict,
    PlaygroundNotFound,
    SlugMismatchError,
)
from playgrounds.models import Playground
from playgrounds.services.payloads import PlaygroundPayload

logger = logging.getLogger(__name__)


class PlaygroundRepository:
    """
    Create/read/update access to stored playgrounds.

    Writes must run inside a transaction opened on the same database alias;
    the caller owns the commit/rollback decision.
    """

    def __init__(self, *, using: str = DEFAULT_DB_ALIAS, max_retries: Optional[int] = None):
        self.using = using
        if max_retries is None:
            max_retries = settings.PLAYGROUND_UPDATE_MAX_RETRIES
        if max_retries < 1:
            raise ImproperlyConfigured(
                f"PLAYGROUND_UPDATE_MAX_RETRIES must be at least 1, got {max_retries}."
            )
        self.max_retries = max_retries

    def _queryset(self):
        return Playground.objects.using(self.using)

    # =================================================
    # READS
    # =================================================
    def search(self, query: str) -> List[Playground]:
        limit = settings.PLAYGROUND_SEARCH_LIMIT
        matches = (
            self._queryset()
            .filter(is_public=True)
            .filter(
                Q(name__icontains=query)
                | Q(description__icontains=query)
                | Q(author__icontains=query)
                | Q(tags__name__icontains=query)
            )
            .order_by()
            .values_list("pk", flat=True)
            .distinct()
        )
        return list(
            self._queryset()
            .filter(pk__in=matches)
            .defer("contents")
            .prefetch_related("tags")
            .order_by("-updated_at")[:limit]
        )

    def find_by_slug(self, slug: str) -> Optional[Playground]:
        return self._queryset().prefetch_related("tags").filter(slug=slug).first()

    def reload(self, playground: Playground) -> Playground:
        return self._queryset().prefetch_related("tags").get(pk=playground.pk)

    # =================================================
    # WRITES
    # =================================================
    def create(self, payload: PlaygroundPayload) -> Playground:
        self._require_transaction()
        playground = Playground(versions_count=0, **payload.model_fields())
        playground.save(using=self.using)
        logger.info("Created a new playground: %s", playground.slug)
        return playground

    def update(self, playground_id, slug: str, payload: PlaygroundPayload) -> Playground:
        """
        Apply ``payload`` to the playground ``playground_id`` and bump its version.

        The write is guarded by the ``versions_count`` that was read; if another
        writer committed in between, the row is read again and the update retried.
        """
        self._require_transaction()
        changes = payload.model_fields()

        for attempt in range(1, self.max_retries + 1):
            playground = self._load(playground_id)
            if playground is None:
                raise PlaygroundNotFound(f"No playground found with id: {playground_id}.")

            if self._apply_update(playground, changes, self.using):
                playground.refresh_from_db(using=self.using)
                break

            logger.warning(
                "Playground %s changed during update (attempt %s of %s), retrying.",
                playground_id,
                attempt,
                self.max_retries,
            )
        else:
            raise PlaygroundConflict(
                f"Playground with id: {playground_id} was modified concurrently, try again."
            )

        if playground.slug != slug:
            msg = (
                f"Playground found with id: {playground_id}, but has mismatched slug. "
                f"Expected '{slug}', but got '{playground.slug}'."
            )
            logger.error(msg)
            raise SlugMismatchError(msg)

        logger.info(
            "Updated playground with slug: %s, added version: %s",
            slug,
            playground.versions_count,
        )
        return playground

    def _load(self, playground_id) -> Optional[Playground]:
        if playground_id is None:
            return None
        return self._queryset().filter(pk=playground_id).first()

    @staticmethod
    def _apply_update(playground: Playground, changes: dict, using: str) -> int:
        return (
            Playground.objects.using(using)
            .filter(pk=playground.pk, versions_count=playground.versions_count)
            .update(
                versions_count=F("versions_count") + 1,
                updated_at=timezone.now(),
                **changes,
            )
        )

    def _require_transaction(self):
        if not transaction.get_connection(self.using).in_atomic_block:
            raise RuntimeError("Playground writes must run inside a transaction.")
