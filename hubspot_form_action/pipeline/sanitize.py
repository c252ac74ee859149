"""Scrubbing of values that end up in the submission context."""
import ipaddress
import re
import unicodedata

_TAG_RE = re.compile(r"<[^>]*>?")
_URL_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")
_KEEP_CONTROL = {"\n", "\t"}


def sanitize_text(value: str | None) -> str:
    """Strip markup and drop control / non-printable characters. Newlines and tabs are kept."""
    if not value:
        return ""
    value = _TAG_RE.sub("", value)
    return "".join(
        ch for ch in value
        if ch in _KEEP_CONTROL or unicodedata.category(ch)[0] != "C"
    )


def sanitize_url(value: str | None) -> str:
    if not value:
        return ""
    return _URL_DISALLOWED_RE.sub("", value)


def validate_ip(value: str | None) -> str | None:
    if not value:
        return None
    value = value.strip()
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return None
    return value
