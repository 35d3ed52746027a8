# docs_archiver/crawler/navigation.py
"""
Flattening of the site navigation tree into page identifiers.

The tree has the shape::

    {"tabs": [{"tab": "Guides",
               "groups": [{"group": "Start",
                           "pages": ["intro", {"group": "Sub", "pages": ["b/c"]}]}]}]}
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple

from docs_archiver.crawler.models import PageDescriptor

DEFAULT_MAX_DEPTH = 64

logger = logging.getLogger("DocsArchiver")

_END = object()


def _entries(group: Any) -> Iterator[Any]:
    pages = group.get("pages") if isinstance(group, dict) else None
    return iter(pages if isinstance(pages, list) else ())


def _flatten_group(group: Any, max_depth: int, out: List[str]) -> None:
    # explicit stack of iterators keeps the pre-order without recursion
    stack: List[Tuple[Iterator[Any], int]] = [(_entries(group), 1)]
    while stack:
        entries, depth = stack[-1]
        entry = next(entries, _END)
        if entry is _END:
            stack.pop()
        elif isinstance(entry, str):
            out.append(entry)
        elif isinstance(entry, dict):
            if depth >= max_depth:
                logger.warning(
                    "Navigation group %r nested deeper than %d levels, skipped",
                    entry.get("group"), max_depth,
                )
                continue
            stack.append((_entries(entry), depth + 1))


def extract_navigation_pages(navigation: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> List[str]:
    """
    Return page identifiers of *navigation* in depth-first pre-order.

    Tabs and groups that are not mappings, and page entries that are neither
    strings nor groups, are ignored.
    """
    pages: List[str] = []
    if not isinstance(navigation, dict):
        return pages
    tabs = navigation.get("tabs")
    for tab in tabs if isinstance(tabs, list) else ():
        groups = tab.get("groups") if isinstance(tab, dict) else None
        for group in groups if isinstance(groups, list) else ():
            _flatten_group(group, max_depth, pages)
    return pages


def navigation_links(
    descriptor: Optional[PageDescriptor],
    base_url: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[str]:
    """Absolute URLs (``base_url/page``) of every navigation entry of *descriptor*."""
    if descriptor is None or descriptor.navigation is None:
        return []
    return [f"{base_url}/{page}" for page in extract_navigation_pages(descriptor.navigation, max_depth)]


__all__ = ["extract_navigation_pages", "navigation_links", "DEFAULT_MAX_DEPTH"]
