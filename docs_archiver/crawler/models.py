# docs_archiver/crawler/models.py
"""
Data models for the documentation crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class PageData:
    """Raw markup of a fetched page."""

    url: str
    content: str


@dataclass(slots=True)
class PageDescriptor:
    """Structured payload embedded in a page (the ``__NEXT_DATA__`` block).

    ``navigation`` and ``compiled_source`` are lifted out of ``next_data`` by
    :func:`docs_archiver.parser.next_data.parse_page`; either may be missing.
    """

    url: str
    next_data: Dict[str, Any]
    navigation: Optional[Dict[str, Any]] = None
    compiled_source: Optional[str] = None


@dataclass(slots=True)
class ConvertedPage:
    """A page ready for the archive: its descriptor plus the converted text."""

    descriptor: PageDescriptor
    content: str

    @property
    def url(self) -> str:
        return self.descriptor.url


@dataclass(slots=True)
class CrawlReport:
    """Outcome of one crawl, URLs listed in the order they were handled."""

    start_url: str
    processed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    navigation_links: int = 0

    @property
    def total(self) -> int:
        return len(self.processed) + len(self.skipped) + len(self.failed)
