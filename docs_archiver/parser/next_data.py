# === FILE: docs_archiver/parser/next_data.py ===
"""Extraction of the ``__NEXT_DATA__`` payload from server-rendered pages.

Next.js embeds the page props as JSON in::

    <script id="__NEXT_DATA__" type="application/json">{...}</script>

For MDX documentation sites the interesting parts live under
``props.pageProps.mdxSource``:

* ``compiledSource``: the compiled page body that gets converted to text;
* ``scope.config.navigation``: the site menu (tabs → groups → pages).

Nothing else in the markup is inspected.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Optional

from bs4 import BeautifulSoup

from docs_archiver.crawler.models import PageDescriptor

__all__: Sequence[str] = ("extract_next_data", "parse_page", "dig")

logger = logging.getLogger("DocsArchiver")

NEXT_DATA_ID = "__NEXT_DATA__"


def dig(data: Any, *keys: str) -> Any:
    """Follow *keys* through nested mappings, ``None`` on the first miss."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def extract_next_data(html: str) -> Optional[dict[str, Any]]:
    """Return the decoded ``__NEXT_DATA__`` object, or ``None`` if absent or unparseable."""
    soup = BeautifulSoup(html, "html.parser")
    script = soup.find("script", id=NEXT_DATA_ID)
    if script is None:
        logger.info("No __NEXT_DATA__ found")
        return None

    try:
        data = json.loads(script.get_text())
    except (ValueError, RecursionError) as exc:
        logger.warning("Error parsing __NEXT_DATA__: %s", exc)
        return None

    if not isinstance(data, dict):
        logger.warning("Unexpected __NEXT_DATA__ payload: %s", type(data).__name__)
        return None
    return data


def parse_page(url: str, html: str) -> Optional[PageDescriptor]:
    """Build a :class:`PageDescriptor` for *url* from its raw markup."""
    next_data = extract_next_data(html)
    if next_data is None:
        return None

    mdx_source = dig(next_data, "props", "pageProps", "mdxSource")
    compiled = dig(mdx_source, "compiledSource")
    navigation = dig(mdx_source, "scope", "config", "navigation")

    return PageDescriptor(
        url=url,
        next_data=next_data,
        navigation=navigation if isinstance(navigation, dict) else None,
        compiled_source=compiled if isinstance(compiled, str) and compiled else None,
    )
