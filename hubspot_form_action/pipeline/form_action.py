from typing import Any, Callable, Dict

from hubspot_form_action.config import options
from hubspot_form_action.config.options import ConfigStore, DictConfigStore
from hubspot_form_action.errors import DeliveryError, MissingReferenceError
from hubspot_form_action.hubspot.client import HubSpotClient
from hubspot_form_action.models.schemas import ActionSettings, FormRecord, SubmissionOutcome
from hubspot_form_action.pipeline.payload import build_payload
from hubspot_form_action.pipeline.validation import resolve_post, selected_form_guid
from hubspot_form_action.providers.base import ContentResolver
from hubspot_form_action.utils.log import get_logger

logger = get_logger("hubspot-form-action")

ClientFactory = Callable[[str], HubSpotClient]

def snapshot(config: ConfigStore) -> DictConfigStore:
    """Read every option once so a single run sees consistent values."""
    return DictConfigStore({key: config.get(key) for key in options.OPTION_KEYS})

class HubSpotFormAction:
    """Form action that forwards a submission to HubSpot after the form is submitted."""

    name = "hubspot"
    label = "Hubspot"

    def __init__(self, config: ConfigStore, resolver: ContentResolver, client_factory: ClientFactory = HubSpotClient):
        self.config = config
        self.resolver = resolver
        self.client_factory = client_factory

    async def run(self, record: FormRecord) -> SubmissionOutcome:
        action = ActionSettings.from_form_settings(record.form_settings)
        form_guid = selected_form_guid(action)
        if form_guid is None:
            logger.debug("HubSpot action not configured for this form, skipping")
            return SubmissionOutcome(status="precondition_not_met")

        config = snapshot(self.config)
        try:
            content = await resolve_post(record.fields, self.resolver)
        except MissingReferenceError as e:
            logger.info("Submission rejected: %s", e.message)
            return SubmissionOutcome(status="missing_reference", message=e.message)

        payload = build_payload(record.fields, config, content, hutk=record.hutk, client_ip=record.client_ip)
        client = self.client_factory(config.get(options.ACCESS_TOKEN))
        try:
            await client.submit_form(config.get(options.PORTAL_ID), form_guid, payload)
        except DeliveryError as e:
            return SubmissionOutcome(status="delivery_failed", message=e.message)
        return SubmissionOutcome(status="ok")

    async def form_options(self) -> Dict[str, str]:
        """GUID -> name for the form picker drop-down."""
        client = self.client_factory(self.config.get(options.ACCESS_TOKEN))
        return {f.guid: f.name for f in await client.list_forms() if f.guid}

    @staticmethod
    def on_export(element: Dict[str, Any]) -> Dict[str, Any]:
        """Clear the form-specific setting from exported element settings."""
        element.pop("hubspot_formid", None)
        return element
