"""
Central place for the plugin option names.

These are the keys of the flat options mapping the settings screen writes
and the form action reads. Unset keys read as the empty string.
"""
from typing import Mapping, Protocol

from hubspot_form_action.config.settings import Settings, settings

ACCESS_TOKEN = "hubspot_access_token"
PORTAL_ID = "hubspot_portalid"
CONSENT_TO_PROCESS = "hubspot_consenttoprocess"

CONSENT_OPTION_COUNT = 5
CONSENT_OPTION_INDEXES = range(1, CONSENT_OPTION_COUNT + 1)


def consent_option_id_key(index: int) -> str:
    return f"hubspot_consent_option_{index}_id"


def consent_option_text_key(index: int) -> str:
    return f"hubspot_consent_option_{index}_text"


OPTION_KEYS = [ACCESS_TOKEN, PORTAL_ID, CONSENT_TO_PROCESS] + [
    key
    for i in CONSENT_OPTION_INDEXES
    for key in (consent_option_id_key(i), consent_option_text_key(i))
]


class ConfigStore(Protocol):
    def get(self, key: str) -> str: ...


class SettingsConfigStore:
    """Options backed by the environment / .env settings."""

    def __init__(self, source: Settings | None = None):
        self._settings = source or settings

    def get(self, key: str) -> str:
        value = getattr(self._settings, key.upper(), None)
        return value if value is not None else ""


class DictConfigStore:
    def __init__(self, options: Mapping[str, str | None] | None = None):
        self._options = dict(options or {})

    def get(self, key: str) -> str:
        value = self._options.get(key)
        return value if value is not None else ""
