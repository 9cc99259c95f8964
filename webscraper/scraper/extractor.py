"""Structural extraction: turns a parsed document into a :class:`ScrapedResult`.

One pre-order walk over the tree.  Every element is inspected before its
children, and the walk always descends, whatever the tag.
"""

from __future__ import annotations

import logging

from bs4.element import PageElement, Tag

from webscraper.scraper.models import Heading, Link, ResultBuilder, ScrapedResult
from webscraper.scraper.parser import first_attr, last_attr, text_content, walk
from webscraper.scraper.resolver import resolve_url

logger = logging.getLogger(__name__)

_HEADING_LEVELS = {f"h{level}": level for level in range(1, 7)}


# ---------------------------------------------------------------------------
# Per-tag handlers
# ---------------------------------------------------------------------------

def _extract_title(tag: Tag, result: ResultBuilder) -> None:
    # Not trimmed; a later <title> overwrites an earlier one.
    result.title = text_content(tag)


def _extract_meta(tag: Tag, result: ResultBuilder) -> None:
    name = last_attr(tag, "name")
    prop = last_attr(tag, "property")
    content = last_attr(tag, "content")

    if name:
        result.meta_tags[name] = content
        if name == "description":
            result.description = content
        elif name == "keywords":
            result.keywords = content
    elif prop:
        result.meta_tags[prop] = content


def _extract_link(tag: Tag, result: ResultBuilder) -> None:
    href = first_attr(tag, "href")
    if not href:
        return
    result.links.append(
        Link(
            href=resolve_url(result.source_url, href),
            text=text_content(tag).strip(),
        )
    )


def _extract_image(tag: Tag, result: ResultBuilder) -> None:
    src = first_attr(tag, "src")
    if src:
        result.images.append(resolve_url(result.source_url, src))


def _extract_heading(tag: Tag, result: ResultBuilder) -> None:
    text = text_content(tag).strip()
    if text:
        result.headings.append(Heading(level=_HEADING_LEVELS[tag.name], text=text))


_HANDLERS = {
    "title": _extract_title,
    "meta": _extract_meta,
    "a": _extract_link,
    "img": _extract_image,
    **{name: _extract_heading for name in _HEADING_LEVELS},
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract(document: PageElement, source_url: str, *, debug: bool = False) -> ScrapedResult:
    """Extract title, meta tags, links, images and headings from *document*.

    ``href``/``src`` values are resolved against *source_url*; values that
    cannot be resolved are kept as written.

    Args:
        document: Root of the parsed tree (see :func:`~webscraper.scraper.parser.parse_html`).
        source_url: The URL the page was fetched from.
        debug: Log a summary of what was extracted.
    """
    result = ResultBuilder(source_url=source_url)

    for node in walk(document):
        if not isinstance(node, Tag):
            continue
        handler = _HANDLERS.get(node.name)
        if handler is not None:
            handler(node, result)

    scraped = result.build()
    if debug:
        logger.info(
            "Extraction results: title=%r, links=%d, images=%d, headings=%d, meta_tags=%d",
            scraped.title,
            len(scraped.links),
            len(scraped.images),
            len(scraped.headings),
            len(scraped.meta_tags),
        )
    return scraped
