# docs_archiver/crawler/link_extractor.py
"""
Link discovery inside converted page text.
"""
from __future__ import annotations

import re
from typing import List

HREF_RE = re.compile(r"""href=["']([^"']*?)["']""")


def find_content_links(text: str, base_url: str) -> List[str]:
    """
    Return root-relative ``href`` targets of *text* resolved against *base_url*.

    Only values starting with a single ``/`` are kept, so absolute and
    protocol-relative (``//host/...``) links are ignored. Order of appearance
    is preserved and duplicates are not removed.
    """
    links: List[str] = []
    for match in HREF_RE.finditer(text):
        href = match.group(1)
        if href.startswith("/") and not href.startswith("//"):
            links.append(f"{base_url}{href}")
    return links


__all__ = ["find_content_links", "HREF_RE"]
