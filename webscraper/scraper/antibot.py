"""Anti-bot / WAF fingerprinting from response headers.

Only consulted when a fetch comes back with a non-2xx status.  Checks run in
a fixed order and the first match wins.
"""

from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Tuple

import httpx


def _present(headers: httpx.Headers, *names: str) -> bool:
    return any(headers.get(name, "") != "" for name in names)


_RULES: List[Tuple[str, Callable[[httpx.Headers], bool]]] = [
    (
        "Cloudflare",
        lambda h: h.get("Server", "") == "cloudflare" or _present(h, "CF-Ray"),
    ),
    (
        "Akamai",
        lambda h: _present(h, "X-Akamai-Transformed", "X-Akamai-Session-Info"),
    ),
    (
        "AWS WAF",
        lambda h: _present(h, "X-Amzn-RequestId", "X-Amzn-Trace-Id"),
    ),
    (
        "Imperva/Incapsula",
        lambda h: _present(h, "X-Iinfo") or h.get("X-CDN", "") == "Incapsula",
    ),
    ("DataDome", lambda h: _present(h, "X-DataDome")),
    ("Sucuri", lambda h: _present(h, "X-Sucuri-ID", "X-Sucuri-Cache")),
    ("PerimeterX", lambda h: "PerimeterX" in h.get("Server", "")),
]


def detect_antibot_service(headers: Mapping[str, str]) -> Optional[str]:
    """Return the protection-service label matching *headers*, or ``None``.

    Header names are matched case-insensitively; values are compared
    exactly as sent.
    """
    normalized = headers if isinstance(headers, httpx.Headers) else httpx.Headers(headers)
    for label, matches in _RULES:
        if matches(normalized):
            return label
    return None
