"""
Shared fixtures for the HubSpot form action tests.
"""

import httpx
import pytest

from hubspot_form_action.config.options import DictConfigStore
from hubspot_form_action.config.settings import settings
from hubspot_form_action.hubspot.client import HubSpotClient
from hubspot_form_action.models.schemas import FormField, ResolvedContent
from hubspot_form_action.providers.static import StaticContentResolver


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed."""

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)


def make_fields(**values) -> dict[str, FormField]:
    return {key: FormField(id=key, value=value) for key, value in values.items()}


@pytest.fixture(autouse=True)
def no_retry_waits(monkeypatch):
    """Lookups retry on transport errors; keep tests fast."""
    monkeypatch.setattr(settings, "MAX_RETRIES", 1)


@pytest.fixture
def config() -> DictConfigStore:
    return DictConfigStore({
        "hubspot_access_token": "tok",
        "hubspot_portalid": "123",
        "hubspot_consenttoprocess": "We process your data",
        "hubspot_consent_option_1_id": "text1",
        "hubspot_consent_option_1_text": "sub1",
    })


@pytest.fixture
def resolver() -> StaticContentResolver:
    return StaticContentResolver({
        42: ResolvedContent(title="Contact Us", url="https://site/contact"),
    })


@pytest.fixture
def action_settings() -> dict:
    return {
        "hubspot_access_token": "yes",
        "hubspot_portalid": "yes",
        "use_dropdown": "yes",
        "hubspot_formid_dropdown": "G",
    }


@pytest.fixture
def ok_transport() -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(200, json={"inlineMessage": "Thanks"}))


@pytest.fixture
def client_factory(ok_transport):
    return lambda token: HubSpotClient(token, transport=ok_transport)
