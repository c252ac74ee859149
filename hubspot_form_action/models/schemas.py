from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any, Literal

class FormField(BaseModel):
    id: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            # multi-value inputs (checkboxes) arrive as a list
            return ", ".join(str(x) for x in v)
        return v if isinstance(v, str) else str(v)

class FormRecord(BaseModel):
    """One submission as handed over by the form host."""
    fields: Dict[str, FormField] = Field(default_factory=dict)
    form_settings: Dict[str, Any] = Field(default_factory=dict)
    hutk: Optional[str] = Field(None, description="hubspotutk cookie value")
    client_ip: Optional[str] = None

def _text(v: Any) -> Optional[str]:
    if v is None or v == "":
        return None
    return v if isinstance(v, str) else str(v)

class ActionSettings(BaseModel):
    use_dropdown: bool = False
    form_id_dropdown: Optional[str] = None
    form_id_dynamic: Optional[str] = None
    access_token_present: bool = False
    portal_id_present: bool = False

    @classmethod
    def from_form_settings(cls, raw: Dict[str, Any]) -> "ActionSettings":
        return cls(
            use_dropdown=raw.get("use_dropdown") == "yes",
            form_id_dropdown=_text(raw.get("hubspot_formid_dropdown")),
            form_id_dynamic=_text(raw.get("hubspot_formid_dynamic")),
            access_token_present=_text(raw.get("hubspot_access_token")) is not None,
            portal_id_present=_text(raw.get("hubspot_portalid")) is not None,
        )

    @property
    def form_guid(self) -> Optional[str]:
        return self.form_id_dropdown if self.use_dropdown else self.form_id_dynamic

class ResolvedContent(BaseModel):
    title: str = ""
    url: str = ""

class FieldEntry(BaseModel):
    objectTypeId: str = "0-1"  # contact
    name: str
    value: str

class ConsentRecord(BaseModel):
    value: bool
    subscriptionTypeId: str
    text: str

class SubmissionContext(BaseModel):
    hutk: Optional[str] = None
    pageUri: str = ""
    ipAddress: Optional[str] = None
    pageName: str = ""

class Consent(BaseModel):
    consentToProcess: bool = True
    text: str = ""
    communications: List[ConsentRecord] = Field(default_factory=list)

class LegalConsentOptions(BaseModel):
    consent: Consent

class SubmissionPayload(BaseModel):
    fields: List[FieldEntry] = Field(default_factory=list)
    context: SubmissionContext
    legalConsentOptions: LegalConsentOptions

class HubSpotForm(BaseModel):
    guid: str = ""
    name: str = ""

class SubmissionOutcome(BaseModel):
    status: Literal["ok", "precondition_not_met", "missing_reference", "delivery_failed"]
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in ("ok", "precondition_not_met")

class SubmissionRequest(BaseModel):
    fields: Dict[str, FormField] = Field(default_factory=dict)
    form_settings: Dict[str, Any] = Field(default_factory=dict)
