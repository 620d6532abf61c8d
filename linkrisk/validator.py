import validators
import tldextract
from datetime import datetime, timezone

# bundled public-suffix snapshot only; never fetch the list over the network
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def validate_url(url: str) -> bool:
    """Return True when ``url`` is a well-formed http(s) URL with a real domain.

    Only the CLI / web layer uses this (strict mode). ``analyze`` itself accepts
    any string.
    """
    if not url or not isinstance(url, str):
        return False

    url = url.strip()

    if not (url.startswith('http://') or url.startswith('https://')):
        return False

    if not validators.url(url):
        return False

    extracted = _EXTRACT(url)
    if not extracted.domain:
        return False

    return True


def iso_utc_now() -> str:
    """Return timestamp UTC ISO-8601 format ex: 2025-01-01T12:00:00Z"""
    return datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + 'Z'
