import logging
from typing import Iterable, List, Optional

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

PURGE_SCHEMES = ("https", "http")

_shared_client: Optional[httpx.Client] = None


def get_purge_client() -> httpx.Client:
    """
    Return the process-wide HTTP client used for purge calls.

    Callers must not close it; ``close_purge_client`` runs on worker shutdown.
    """
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.Client(timeout=settings.CACHE_PURGE_TIMEOUT)
    return _shared_client


def close_purge_client() -> None:
    global _shared_client
    if _shared_client is not None and not _shared_client.is_closed:
        _shared_client.close()
    _shared_client = None


def playground_urls(slug: str, hosts: Optional[Iterable[str]] = None) -> List[str]:
    """Every publicly cached URL variant serving the playground ``slug``."""
    hosts = list(hosts if hosts is not None else settings.PLAYGROUND_PUBLIC_HOSTS)
    return [
        f"{scheme}://{host}/api/playground/{slug}"
        for scheme in PURGE_SCHEMES
        for host in hosts
    ]


class CachePurgeService:
    """Best-effort Cloudflare cache purge. Failures are logged, never raised."""

    def __init__(
        self,
        *,
        client: Optional[httpx.Client] = None,
        zone_id: Optional[str] = None,
        api_token: Optional[str] = None,
        api_url: Optional[str] = None,
    ):
        self.client = client
        self.zone_id = zone_id if zone_id is not None else settings.CLOUDFLARE_ZONE_ID
        self.api_token = api_token if api_token is not None else settings.CLOUDFLARE_API_TOKEN
        self.api_url = (api_url or settings.CLOUDFLARE_API_URL).rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self.zone_id and self.api_token)

    def purge_urls(self, urls: List[str]) -> bool:
        if not urls:
            return True

        if not self.configured:
            logger.info("Cache purge skipped, Cloudflare is not configured. Urls: %s", urls)
            return False

        client = self.client or get_purge_client()
        try:
            response = client.post(
                f"{self.api_url}/zones/{self.zone_id}/purge_cache",
                json={"files": urls},
                headers={"Authorization": f"Bearer {self.api_token}"},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to purge cache for urls %s: %s", urls, exc)
            return False

        logger.info("Purged cache for urls: %s", urls)
        return True

    def purge_playground(self, slug: str) -> bool:
        return self.purge_urls(playground_urls(slug))
