import logging

from celery import shared_task

from playgrounds.services.cache_purge_service import CachePurgeService

logger = logging.getLogger(__name__)


@shared_task
def purge_playground_cache(slug: str) -> bool:
    """Request invalidation of the cached public URLs of a playground."""
    return CachePurgeService().purge_playground(slug)


def dispatch_cache_purge(slug: str) -> None:
    """
    Queue a cache purge for ``slug``. Runs after the update has committed;
    a broker failure is logged and dropped.
    """
    try:
        purge_playground_cache.delay(slug)
    except Exception:
        logger.exception("Failed to queue cache purge for playground %s.", slug)
