"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class FetchedPage:
    """The raw HTTP body of a successful fetch."""

    url: str
    body: bytes
    content_type: str
    status_code: int = 200
    encoding: str | None = None


@dataclass(frozen=True)
class Link:
    href: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"href": self.href, "text": self.text}


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "text": self.text}


@dataclass(frozen=True)
class ScrapedResult:
    """Structured summary of a single page.

    Instances are produced once per extraction run and never mutated
    afterwards; sequences are tuples and ``meta_tags`` is a read-only view.
    """

    source_url: str
    title: str = ""
    description: str = ""
    keywords: str = ""
    links: Tuple[Link, ...] = ()
    meta_tags: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    images: Tuple[str, ...] = ()
    headings: Tuple[Heading, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the wire shape; absent values are empty, never omitted."""
        return {
            "url": self.source_url,
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            "links": [link.to_dict() for link in self.links],
            "meta_tags": dict(self.meta_tags),
            "images": list(self.images),
            "headings": [heading.to_dict() for heading in self.headings],
        }


@dataclass
class ResultBuilder:
    """Mutable accumulator filled in by the extractor during its traversal."""

    source_url: str
    title: str = ""
    description: str = ""
    keywords: str = ""
    links: List[Link] = field(default_factory=list)
    meta_tags: Dict[str, str] = field(default_factory=dict)
    images: List[str] = field(default_factory=list)
    headings: List[Heading] = field(default_factory=list)

    def build(self) -> ScrapedResult:
        return ScrapedResult(
            source_url=self.source_url,
            title=self.title,
            description=self.description,
            keywords=self.keywords,
            links=tuple(self.links),
            meta_tags=MappingProxyType(dict(self.meta_tags)),
            images=tuple(self.images),
            headings=tuple(self.headings),
        )
