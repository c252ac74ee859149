from typing import List

import httpx
import orjson

from hubspot_form_action.config.settings import settings
from hubspot_form_action.errors import DeliveryError
from hubspot_form_action.models.schemas import HubSpotForm, SubmissionPayload
from hubspot_form_action.utils.http import make_client, retryable
from hubspot_form_action.utils.log import get_logger

logger = get_logger("hubspot-client")

BAD_REQUEST_MESSAGE = "Bad Request: The server could not understand the request due to invalid syntax."

class HubSpotClient:
    def __init__(self, access_token: str, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = settings.HUBSPOT_BASE_URL.rstrip("/")
        self.forms_base_url = settings.HUBSPOT_FORMS_BASE_URL.rstrip("/")
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    def submit_url(self, portal_id: str, form_guid: str) -> str:
        return f"{self.forms_base_url}/submissions/v3/integration/secure/submit/{portal_id}/{form_guid}"

    async def submit_form(self, portal_id: str, form_guid: str, payload: SubmissionPayload) -> httpx.Response:
        """Send one submission. Exactly one attempt; only HTTP 400 counts as a rejected request."""
        url = self.submit_url(portal_id, form_guid)
        async with make_client(headers=self.headers, transport=self.transport) as client:
            try:
                resp = await client.post(url, content=orjson.dumps(payload.model_dump()))
            except httpx.TransportError as e:
                logger.error("HubSpot submission to form %s failed: %s", form_guid, e)
                raise DeliveryError(str(e), cause=e) from e
        if resp.status_code == 400:
            logger.warning("HubSpot rejected submission to form %s: %s", form_guid, resp.text[:500])
            raise DeliveryError(BAD_REQUEST_MESSAGE, status_code=400)
        logger.info("Submitted form %s to portal %s (HTTP %s)", form_guid, portal_id, resp.status_code)
        return resp

    async def list_forms(self) -> List[HubSpotForm]:
        """Best effort: any failure degrades to an empty list."""
        url = f"{self.base_url}/forms/v2/forms"
        try:
            async with make_client(headers=self.headers, transport=self.transport) as client:

                @retryable()
                async def do():
                    resp = await client.get(url)
                    resp.raise_for_status()
                    return resp.json() if resp.content else None

                data = await do()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Could not list HubSpot forms: %s", e)
            return []
        if not isinstance(data, list):
            return []
        return [
            HubSpotForm(guid=str(item.get("guid") or ""), name=str(item.get("name") or ""))
            for item in data
            if isinstance(item, dict)
        ]
