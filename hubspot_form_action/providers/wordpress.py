from typing import Optional

import httpx

from hubspot_form_action.config.settings import settings
from hubspot_form_action.errors import ContentLookupError
from hubspot_form_action.models.schemas import ResolvedContent
from hubspot_form_action.providers.base import ContentResolver
from hubspot_form_action.utils.http import make_client, retryable
from hubspot_form_action.utils.log import get_logger

logger = get_logger("wordpress-resolver")

# private / draft content answers 401 or 403 to anonymous REST calls
NOT_VISIBLE_STATUSES = (401, 403, 404)

class WordPressContentResolver(ContentResolver):
    """Looks posts (then pages) up through the WordPress REST API."""
    name = "wordpress"

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        base_url = base_url or settings.WORDPRESS_BASE_URL
        if not base_url:
            raise ValueError("WORDPRESS_BASE_URL is not set")
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def resolve(self, post_id: int) -> Optional[ResolvedContent]:
        try:
            return await self._lookup(post_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("WordPress lookup of post %s failed: %s", post_id, e)
            raise ContentLookupError(f"Post lookup failed: {e}", cause=e) from e

    async def _lookup(self, post_id: int) -> Optional[ResolvedContent]:
        async with make_client(transport=self.transport) as client:
            for kind in ("posts", "pages"):
                @retryable()
                async def do():
                    return await client.get(f"{self.base_url}/wp-json/wp/v2/{kind}/{post_id}")
                resp = await do()
                if resp.status_code in NOT_VISIBLE_STATUSES:
                    continue
                resp.raise_for_status()
                data = resp.json()
                if not isinstance(data, dict):
                    data = {}
                title = ((data.get("title") or {}).get("rendered")) or ""
                return ResolvedContent(title=title, url=data.get("link") or "")
        return None
