"""Target URL validation, run before any network activity."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

import httpx

from webscraper.scraper.errors import InvalidURLError, MissingURLError

_ALLOWED_SCHEMES = ("http", "https")

# Whitespace, ASCII control characters and delimiters that never appear in
# a host name.
_BAD_HOST_CHARS = re.compile(r"[\s\x00-\x1f\x7f<>\"`{}|\\^]")


def validate_url(url: str | None) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL.

    Raises:
        MissingURLError: If *url* is ``None`` or empty.
        InvalidURLError: If *url* does not parse, has another scheme, or
            carries no usable host.
    """
    if not url:
        raise MissingURLError()

    try:
        parts = urlsplit(url)
        # .port validates the authority; it raises on a malformed port.
        _ = parts.port
        # httpx rejects what urlsplit lets through (control characters and
        # other non-printable ASCII anywhere in the URL).
        httpx.URL(url)
    except (ValueError, httpx.InvalidURL) as exc:
        raise InvalidURLError() from exc

    if parts.scheme not in _ALLOWED_SCHEMES or not parts.hostname:
        raise InvalidURLError()
    if _BAD_HOST_CHARS.search(parts.hostname):
        raise InvalidURLError()
    return url
