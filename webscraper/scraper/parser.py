"""Markup parsing on top of BeautifulSoup's ``html.parser`` builder.

BeautifulSoup normally collapses a repeated attribute to a single value.
The extractor needs every occurrence (``href``/``src`` take the first one,
meta ``name``/``property``/``content`` the last one), so repeats are kept
as an :class:`AttributeOccurrences` list in document order.

``html.parser`` does not apply the HTML5 tree-construction rules for
misnested markup. An unclosed ``<a>`` is not closed by the next ``<a>``,
so ``<a href="/1">one<a href="/2">two</a>`` nests the second link inside
the first and the outer link text is ``"onetwo"`` rather than ``"one"``.
Well-formed documents build the same tree either way.
"""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from webscraper.scraper.errors import ScrapeFailedError


class AttributeOccurrences(list):
    """All values of an attribute that appeared more than once on a tag."""


def _keep_every_occurrence(attrs: dict, key: str, value: str) -> None:
    existing = attrs[key]
    if isinstance(existing, AttributeOccurrences):
        existing.append(value)
    else:
        attrs[key] = AttributeOccurrences([existing, value])


def parse_html(markup: bytes | str, encoding: str | None = None) -> BeautifulSoup:
    """Parse *markup* into a document tree.

    Raises:
        ScrapeFailedError: If the parser rejects the markup outright.
    """
    try:
        return BeautifulSoup(
            markup,
            "html.parser",
            from_encoding=encoding if isinstance(markup, bytes) else None,
            multi_valued_attributes=None,
            on_duplicate_attribute=_keep_every_occurrence,
        )
    except Exception as exc:
        raise ScrapeFailedError(f"failed to parse HTML: {exc}") from exc


def first_attr(tag: Tag, key: str) -> str:
    """Value of the first *key* attribute on *tag*, or ``""``."""
    value = tag.attrs.get(key, "")
    if isinstance(value, AttributeOccurrences):
        return value[0]
    return value


def last_attr(tag: Tag, key: str) -> str:
    """Value of the last *key* attribute on *tag*, or ``""``."""
    value = tag.attrs.get(key, "")
    if isinstance(value, AttributeOccurrences):
        return value[-1]
    return value


def is_text(node: PageElement) -> bool:
    """True for character data; comments, doctypes and CDATA don't count."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def text_content(node: PageElement) -> str:
    """Flattened text of *node*'s subtree in document order."""
    if is_text(node):
        return str(node)
    if not isinstance(node, Tag):
        return ""
    return "".join(str(d) for d in node.descendants if is_text(d))


def walk(root: PageElement) -> Iterator[PageElement]:
    """Yield *root* and every node below it in pre-order.

    Iterative, so document depth is not bounded by the recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Tag):
            stack.extend(reversed(node.contents))
