"""Scraper package — web fetch & structural extraction."""

from webscraper.scraper.antibot import detect_antibot_service
from webscraper.scraper.errors import (
    FetchTimeoutError,
    InvalidURLError,
    MethodNotAllowedError,
    MissingURLError,
    ScrapeFailedError,
    ScraperError,
)
from webscraper.scraper.extractor import extract
from webscraper.scraper.fetcher import fetch_page
from webscraper.scraper.models import FetchedPage, Heading, Link, ScrapedResult
from webscraper.scraper.parser import parse_html
from webscraper.scraper.pipeline import scrape_page
from webscraper.scraper.resolver import resolve_url
from webscraper.scraper.validator import validate_url

__all__ = [
    "scrape_page",
    "validate_url",
    "fetch_page",
    "detect_antibot_service",
    "parse_html",
    "resolve_url",
    "extract",
    "FetchedPage",
    "ScrapedResult",
    "Link",
    "Heading",
    "ScraperError",
    "MissingURLError",
    "InvalidURLError",
    "MethodNotAllowedError",
    "ScrapeFailedError",
    "FetchTimeoutError",
]
