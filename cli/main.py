"""Web scraper CLI — entry-point for running the pipeline or the API.

Usage:
    python cli/main.py --help

Commands:
    scrape    → fetch one page and print its structured summary
    serve     → run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from webscraper.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from webscraper.config import settings
from webscraper.scraper.errors import ScraperError
from webscraper.scraper.pipeline import scrape_page

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="webscraper",
    help="Single-page web scraper CLI.",
    no_args_is_help=True,
)


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Scrape command
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="URL to scrape."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
) -> None:
    """Scrape a URL and print its title, links, images and headings."""
    _setup_logging(debug)

    try:
        result = scrape_page(url, debug=debug)
    except ScraperError as exc:
        typer.echo(f"[scrape] {exc.category}: {exc.message}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    typer.echo(f"[scrape] Title       : {result.title.strip() or '(none)'}")
    typer.echo(f"[scrape] Description : {result.description or '(none)'}")
    typer.echo(f"[scrape] Links       : {len(result.links)}")
    typer.echo(f"[scrape] Images      : {len(result.images)}")
    typer.echo(f"[scrape] Meta tags   : {len(result.meta_tags)}")
    typer.echo(f"[scrape] Headings    : {len(result.headings)}")
    for heading in result.headings:
        typer.echo(f"  {'#' * heading.level} {heading.text}")


# ---------------------------------------------------------------------------
# Serve command
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, help="Bind port (default from settings)."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Run the scraper HTTP API."""
    import uvicorn

    from webscraper.api.app import create_app

    debug = debug or settings.debug
    _setup_logging(debug)

    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Web Scraper API starting on %s:%d", bind_host, bind_port)
    if debug:
        logger.info("Debug mode enabled")
    logger.info(
        "Example usage: curl 'http://localhost:%d/scrape?url=http://example.com'",
        bind_port,
    )

    uvicorn.run(create_app(debug=debug), host=bind_host, port=bind_port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
