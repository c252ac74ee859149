import re
from decimal import Decimal
from typing import Mapping, Optional

from hubspot_form_action.errors import MissingReferenceError
from hubspot_form_action.models.schemas import ActionSettings, FormField, ResolvedContent
from hubspot_form_action.providers.base import ContentResolver

POST_ID_FIELD = "post_id"

POST_ID_MISSING = "post_id not provided"
POST_NOT_FOUND = "Post does not exist"

# signed decimals and exponents count as numeric, same as PHP is_numeric
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

def selected_form_guid(action: ActionSettings) -> Optional[str]:
    """Form GUID to submit to, or None when a precondition is not met (silent abort)."""
    if not action.access_token_present:
        return None
    if not action.portal_id_present:
        return None
    return action.form_guid or None

def parse_post_id(fields: Mapping[str, FormField]) -> Optional[int]:
    """
    Content id from the post_id field.

    Raises when the field is missing or not numeric. Returns None for a
    numeric value that cannot name a content item (zero, negative, fractional).
    """
    field = fields.get(POST_ID_FIELD)
    raw = field.value if field is not None else ""
    if not _NUMERIC_RE.match(raw):
        raise MissingReferenceError(POST_ID_MISSING)
    number = Decimal(raw.strip())
    if number <= 0 or number.adjusted() > 18 or number != number.to_integral_value():
        return None
    return int(number)

async def resolve_post(fields: Mapping[str, FormField], resolver: ContentResolver) -> ResolvedContent:
    post_id = parse_post_id(fields)
    content = await resolver.resolve(post_id) if post_id is not None else None
    if content is None:
        raise MissingReferenceError(POST_NOT_FOUND)
    return content
