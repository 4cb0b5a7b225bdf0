"""Outlet naming and attribution links for source URLs."""
import re
from urllib.parse import urlparse

FALLBACK_OUTLET_NAME = "Primary Source"

# Display names that simple capitalisation gets wrong
OUTLET_NAME_MAP = {
    "cnbc": "CNBC",
    "reuters": "Reuters",
    "bloomberg": "Bloomberg",
    "benzinga": "Benzinga",
}

LINKED_REPORTED_PATTERN = re.compile(r'<a href="[^"]*">reported</a>', re.IGNORECASE)
REPORTED_PATTERN = re.compile(r"\breported\b", re.IGNORECASE)


def get_outlet_name_from_url(url: str) -> str:
    """
    Derive a display name for the outlet that published ``url``.

    ``https://www.cnbc.com/...`` becomes ``CNBC``, ``https://foo.example.com``
    becomes ``Foo``. Anything that does not parse as an absolute URL yields
    ``FALLBACK_OUTLET_NAME``.
    """
    try:
        parsed = urlparse((url or "").strip())
        hostname = parsed.hostname
    except ValueError:
        return FALLBACK_OUTLET_NAME

    if not parsed.scheme or not hostname:
        return FALLBACK_OUTLET_NAME

    domain = re.sub(r"^www\.", "", hostname)
    parts = domain.split(".")
    if len(parts) >= 2:
        name = parts[0].lower()
        return OUTLET_NAME_MAP.get(name) or name[:1].upper() + name[1:]
    return domain


def insert_link_on_reported(text: str, outlet_name: str, url: str) -> str:
    """Link the first unlinked "reported", preferring the one after the outlet name."""
    linked_reported = f'<a href="{url}">reported</a>'

    if LINKED_REPORTED_PATTERN.search(text):
        return text

    outlet_pattern = re.compile(rf"\b{re.escape(outlet_name)}\s+reported\b", re.IGNORECASE)
    if outlet_pattern.search(text):
        return outlet_pattern.sub(lambda _: f"{outlet_name} {linked_reported}", text, count=1)

    if REPORTED_PATTERN.search(text):
        return REPORTED_PATTERN.sub(lambda _: linked_reported, text, count=1)

    return f"{outlet_name} {linked_reported}:\n\n{text}"
