"""Best-effort resolution of page references against the page URL."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit


def resolve_url(base_url: str, ref: str) -> str:
    """Resolve *ref* against *base_url* (RFC 3986 reference resolution).

    If either value cannot be parsed, *ref* is returned verbatim so a single
    malformed attribute never aborts extraction.
    """
    try:
        urlsplit(base_url)
        urlsplit(ref)
        return urljoin(base_url, ref)
    except ValueError:
        return ref
