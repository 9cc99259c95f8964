"""Deadline-bound HTTP fetcher with browser-like request headers.

The whole exchange runs on ``httpx.AsyncClient`` inside an
``anyio.fail_after`` scope, so the time budget is a wall-clock limit: a
server that trickles its headers or body is cut off when it runs out, not
only when a single read stalls.
"""

from __future__ import annotations

import logging

import anyio
import httpx

from webscraper.config import settings
from webscraper.scraper.antibot import detect_antibot_service
from webscraper.scraper.errors import FetchTimeoutError, ScrapeFailedError
from webscraper.scraper.models import FetchedPage

logger = logging.getLogger(__name__)

# No Accept-Encoding here: httpx negotiates compression and decodes the body
# itself, so the parser never sees compressed bytes.
BROWSER_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

# The diagnostic read of an error body stops this long before the fetch
# deadline, so debug logging never turns a status failure into a timeout.
_DIAGNOSTIC_MARGIN = 0.1


def _request_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent, **BROWSER_HEADERS}


def _timed_out(budget: float) -> FetchTimeoutError:
    return FetchTimeoutError(f"request timed out after {budget:g}s")


async def _log_blocked(
    response: httpx.Response, protection: str | None, debug: bool, deadline: float
) -> None:
    logger.warning("Request blocked - status: %d", response.status_code)
    if protection:
        logger.warning("Anti-bot service detected: %s", protection)
    if not debug:
        return

    logger.info("Response headers: %s", dict(response.headers))
    body = b""
    with anyio.move_on_after(deadline - anyio.current_time() - _DIAGNOSTIC_MARGIN) as scope:
        try:
            body = await response.aread()
        except httpx.HTTPError as exc:
            logger.info("Could not read error response body: %s", exc)
            return
    if scope.cancelled_caught:
        logger.info("Error response body not read before the deadline")
    elif 0 < len(body) < settings.error_body_limit:
        logger.info("Response body: %s", body.decode("utf-8", errors="replace"))


async def _read_body(response: httpx.Response, budget: float) -> bytes:
    """Read the whole (decoded) body."""
    chunks: list[bytes] = []
    try:
        async for chunk in response.aiter_bytes():
            chunks.append(chunk)
    except httpx.TimeoutException as exc:
        raise _timed_out(budget) from exc
    except httpx.HTTPError as exc:
        raise ScrapeFailedError(f"failed to read response body: {exc}") from exc
    return b"".join(chunks)


def _log_fetched(page: FetchedPage) -> None:
    logger.info("Successfully fetched %s", page.url)
    logger.info("Response size: %d bytes", len(page.body))
    logger.info("Content-Type: %s", page.content_type)
    preview = page.body.decode("utf-8", errors="replace")
    if len(preview) > settings.preview_chars:
        preview = preview[: settings.preview_chars] + "..."
    logger.info("HTML preview:\n%s", preview)


async def _fetch(url: str, budget: float, debug: bool, deadline: float) -> FetchedPage:
    async with httpx.AsyncClient(
        headers=_request_headers(),
        timeout=budget,
        follow_redirects=True,
    ) as client:
        async with client.stream("GET", url) as response:
            if not response.is_success:
                protection = detect_antibot_service(response.headers)
                await _log_blocked(response, protection, debug, deadline)
                message = f"unexpected status code: {response.status_code}"
                if protection:
                    message += f" (detected: {protection})"
                raise ScrapeFailedError(
                    message,
                    status_code=response.status_code,
                    protection=protection,
                )

            content_type = response.headers.get("Content-Type", "")
            if "text/html" not in content_type:
                raise ScrapeFailedError(f"content type is not HTML: {content_type}")

            body = await _read_body(response, budget)
            return FetchedPage(
                url=url,
                body=body,
                content_type=content_type,
                status_code=response.status_code,
                encoding=response.charset_encoding,
            )


async def _fetch_within_budget(url: str, budget: float, debug: bool) -> FetchedPage:
    try:
        with anyio.fail_after(budget):
            deadline = anyio.current_time() + budget
            return await _fetch(url, budget, debug, deadline)
    except TimeoutError as exc:
        raise _timed_out(budget) from exc
    except httpx.TimeoutException as exc:
        raise _timed_out(budget) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ScrapeFailedError(f"failed to fetch URL: {exc}") from exc


def fetch_page(url: str, *, timeout: float | None = None, debug: bool = False) -> FetchedPage:
    """Fetch *url* once and return its HTML body.

    The whole exchange (connect, request, headers and body) must finish within
    *timeout* seconds (``settings.request_timeout`` by default); past that the
    request is abandoned.  Redirects are followed; no retries are made.

    Blocks the calling thread, which must not be running an event loop.

    Raises:
        FetchTimeoutError: If the time budget is exceeded.
        ScrapeFailedError: On a transport error, a non-2xx final status (with
            the detected anti-bot label, if any) or a non-HTML content type.
    """
    budget = settings.request_timeout if timeout is None else timeout
    page = anyio.run(_fetch_within_budget, url, budget, debug)

    if debug:
        _log_fetched(page)
    return page
