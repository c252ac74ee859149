from fastapi import Depends, FastAPI, HTTPException, Request
from hubspot_form_action.config.options import SettingsConfigStore
from hubspot_form_action.config.settings import settings
from hubspot_form_action.models.schemas import FormRecord, SubmissionRequest
from hubspot_form_action.pipeline.form_action import HubSpotFormAction
from hubspot_form_action.providers.base import ContentResolver
from hubspot_form_action.providers.static import StaticContentResolver
from hubspot_form_action.providers.wordpress import WordPressContentResolver
from hubspot_form_action.utils.log import get_logger

logger = get_logger("hubspot-form-action")

app = FastAPI(title="HubSpot Form Action", version="0.11.0")

HUTK_COOKIE = "hubspotutk"

def default_resolver() -> ContentResolver:
    if settings.CONTENT_INDEX_PATH:
        return StaticContentResolver.from_file(settings.CONTENT_INDEX_PATH)
    if settings.WORDPRESS_BASE_URL:
        return WordPressContentResolver()
    logger.warning("Neither CONTENT_INDEX_PATH nor WORDPRESS_BASE_URL is set; every post_id will be unknown")
    return StaticContentResolver()

def get_form_action() -> HubSpotFormAction:
    return HubSpotFormAction(SettingsConfigStore(), default_resolver())

def client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/hubspot/forms")
async def hubspot_forms(action: HubSpotFormAction = Depends(get_form_action)):
    return {"options": await action.form_options()}

@app.post("/forms/hubspot/submit")
async def submit_form(body: SubmissionRequest, request: Request, action: HubSpotFormAction = Depends(get_form_action)):
    record = FormRecord(
        fields=body.fields,
        form_settings=body.form_settings,
        hutk=request.cookies.get(HUTK_COOKIE),
        client_ip=client_ip(request),
    )
    outcome = await action.run(record)
    if outcome.status == "missing_reference":
        raise HTTPException(status_code=422, detail=outcome.message)
    if outcome.status == "delivery_failed":
        raise HTTPException(status_code=502, detail=outcome.message)
    return {"ok": True, "status": "skipped" if outcome.status == "precondition_not_met" else "ok"}
