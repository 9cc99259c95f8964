"""Scrape pipeline — URL variant.

``scrape_page`` runs the full pipeline for one target URL:

    validate → fetch → parse → extract

Each call is self-contained; nothing is shared between invocations, so the
API can run as many of them side by side as it has worker threads.
"""

from __future__ import annotations

from webscraper.scraper.extractor import extract
from webscraper.scraper.fetcher import fetch_page
from webscraper.scraper.models import ScrapedResult
from webscraper.scraper.parser import parse_html
from webscraper.scraper.validator import validate_url


def scrape_page(
    url: str | None,
    *,
    debug: bool = False,
    timeout: float | None = None,
) -> ScrapedResult:
    """Fetch *url* and return its structured summary.

    Args:
        url: Target page; must be an absolute http(s) URL.
        debug: Emit diagnostic logging (headers, body preview, counts).
            Never changes the result.
        timeout: Override the fetch time budget in seconds.

    Raises:
        MissingURLError: *url* is empty.
        InvalidURLError: *url* is not an absolute http(s) URL.
        ScrapeFailedError: The page could not be fetched or parsed.
    """
    target = validate_url(url)
    page = fetch_page(target, timeout=timeout, debug=debug)
    document = parse_html(page.body, page.encoding)
    return extract(document, target, debug=debug)
