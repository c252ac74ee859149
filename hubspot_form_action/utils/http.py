import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from hubspot_form_action.config.settings import settings

def make_client(headers: dict | None = None, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.HTTP_TIMEOUT_S,
        headers=headers or {},
        follow_redirects=True,
        transport=transport,
    )

def retryable():
    """Retry transient transport failures. Only for idempotent lookups, never for submissions."""
    return retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=6),
        reraise=True,
    )
