"""FastAPI application factory.

Diagnostics
-----------
The diagnostic flag is fixed when the app is built and stored on
``app.state.debug``; routes read it and pass it down explicitly.

Errors
------
Every :class:`~webscraper.scraper.errors.ScraperError` is rendered as
``{"error": <category>, "message": <text>}`` with the status its class
declares.  Unsupported methods get the same shape.

Routers
-------
    /scrape    — fetch a page and return its structured summary
    /health    — liveness probe
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from webscraper.config import settings
from webscraper.scraper.errors import MethodNotAllowedError, ScraperError

from webscraper.api.routers import health as health_router
from webscraper.api.routers import scrape as scrape_router


def _error_response(exc: ScraperError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.category, "message": exc.message},
    )


async def _scraper_error_handler(request: Request, exc: ScraperError) -> JSONResponse:
    return _error_response(exc)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return _error_response(MethodNotAllowedError())
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(debug: bool | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        debug: Diagnostic logging for every scrape served by this app;
            defaults to ``settings.debug``.
    """
    app = FastAPI(
        title="Web Scraper API",
        description=(
            "Fetches a single web page and returns its title, description, "
            "keywords, meta tags, links, images and headings."
        ),
        version="1.0.0",
    )
    app.state.debug = settings.debug if debug is None else debug

    app.add_exception_handler(ScraperError, _scraper_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(scrape_router.router, tags=["scrape"])
    app.include_router(health_router.router, tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn webscraper.api.app:app
app = create_app()
