"""Scrape endpoint.

Routes
------
GET /scrape?url=<target>    → structured page summary
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from webscraper.scraper.errors import MethodNotAllowedError, ScrapeFailedError
from webscraper.scraper.pipeline import scrape_page

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class LinkOut(BaseModel):
    href: str
    text: str


class HeadingOut(BaseModel):
    level: int
    text: str


class ScrapeResponse(BaseModel):
    url: str
    title: str
    description: str
    keywords: str
    links: List[LinkOut]
    meta_tags: Dict[str, str]
    images: List[str]
    headings: List[HeadingOut]


class ErrorResponse(BaseModel):
    error: str
    message: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "/scrape",
    response_model=ScrapeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def scrape(request: Request, url: Optional[str] = None) -> Dict[str, Any]:
    """Fetch *url* and return its title, meta tags, links, images and headings.

    A plain ``def`` so FastAPI runs each scrape in its thread pool.
    """
    debug = request.app.state.debug
    try:
        result = scrape_page(url, debug=debug)
    except ScrapeFailedError as exc:
        logger.error("Error scraping %s: %s", url, exc.message)
        raise ScrapeFailedError(
            f"Failed to scrape URL: {exc.message}",
            status_code=exc.status_code,
            protection=exc.protection,
        ) from exc
    return result.to_dict()


@router.api_route(
    "/scrape",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def scrape_wrong_method() -> None:
    raise MethodNotAllowedError()
