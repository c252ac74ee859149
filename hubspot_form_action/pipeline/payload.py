"""
Mapping of a form submission onto the HubSpot secure-submit request body.

Everything here is pure: configuration, resolved content, the tracking
cookie and the client IP are passed in, nothing is looked up.
"""
from typing import Dict, List, Mapping, Optional

from hubspot_form_action.config import options
from hubspot_form_action.config.options import ConfigStore
from hubspot_form_action.models.schemas import (
    Consent,
    ConsentRecord,
    FieldEntry,
    FormField,
    LegalConsentOptions,
    ResolvedContent,
    SubmissionContext,
    SubmissionPayload,
)
from hubspot_form_action.pipeline.sanitize import sanitize_text, sanitize_url, validate_ip
from hubspot_form_action.pipeline.validation import POST_ID_FIELD

PRIVACY_CONSENT_FIELD = "privacy_consent"
CONTACT_OBJECT_TYPE_ID = "0-1"

def forwardable_fields(raw_fields: Mapping[str, FormField]) -> Dict[str, str]:
    """Field key -> value, without the privacy consent checkbox."""
    return {key: f.value for key, f in raw_fields.items() if f.id != PRIVACY_CONSENT_FIELD}

def pop_consent_records(fields: Dict[str, str], config: ConfigStore) -> List[ConsentRecord]:
    """Turn consent option fields into communications entries. Consumed fields are removed from `fields`."""
    records: List[ConsentRecord] = []
    for i in options.CONSENT_OPTION_INDEXES:
        key = options.consent_option_id_key(i)
        if key not in fields:
            continue
        records.append(ConsentRecord(
            value=fields.pop(key) != "",
            subscriptionTypeId=config.get(options.consent_option_id_key(i)),
            text=config.get(options.consent_option_text_key(i)),
        ))
    return records

def build_payload(
    raw_fields: Mapping[str, FormField],
    config: ConfigStore,
    content: ResolvedContent,
    hutk: Optional[str] = None,
    client_ip: Optional[str] = None,
) -> SubmissionPayload:
    fields = forwardable_fields(raw_fields)
    communications = pop_consent_records(fields, config)
    fields.pop(POST_ID_FIELD, None)

    context = SubmissionContext(
        hutk=hutk,
        pageUri=sanitize_url(content.url),
        ipAddress=validate_ip(client_ip),
        pageName=sanitize_text(content.title),
    )
    consent = Consent(
        consentToProcess=True,
        text=sanitize_text(config.get(options.CONSENT_TO_PROCESS)),
        communications=communications,
    )
    return SubmissionPayload(
        fields=[FieldEntry(objectTypeId=CONTACT_OBJECT_TYPE_ID, name=k, value=v) for k, v in fields.items()],
        context=context,
        legalConsentOptions=LegalConsentOptions(consent=consent),
    )
