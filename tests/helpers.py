# File: tests/helpers.py
"""Page builders and fake collaborators shared by the tests."""
import json
from collections.abc import AsyncIterator
from typing import Any, Dict, List, Optional

from aiohttp import web

from docs_archiver.crawler.models import PageData

BASE_URL = "https://docs.example.com"


def next_data_page(
    compiled_source: Optional[str] = "compiled",
    navigation: Optional[Dict[str, Any]] = None,
) -> str:
    """Return HTML with a ``__NEXT_DATA__`` block shaped like a Mintlify page."""
    mdx_source: Dict[str, Any] = {}
    if compiled_source is not None:
        mdx_source["compiledSource"] = compiled_source
    if navigation is not None:
        mdx_source["scope"] = {"config": {"navigation": navigation}}
    payload = {"props": {"pageProps": {"mdxSource": mdx_source}}}
    return (
        "<html><head><title>Docs</title></head><body><div id=\"__next\"></div>"
        f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(payload)}</script>'
        "</body></html>"
    )


def navigation(*pages: Any) -> Dict[str, Any]:
    """One tab with one group holding *pages*."""
    return {"tabs": [{"tab": "Docs", "groups": [{"group": "Main", "pages": list(pages)}]}]}


class FakeFetcher:
    """Serves canned markup and records every fetched URL."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> Optional[PageData]:
        self.calls.append(url)
        html = self.pages.get(url)
        return None if html is None else PageData(url, html)


class FakeConverter:
    """Returns the compiled source unchanged, or a fixed mapping."""

    def __init__(self, mapping: Optional[Dict[str, str]] = None) -> None:
        self.mapping = mapping or {}
        self.calls: List[str] = []

    async def convert(self, compiled_source: str) -> str:
        self.calls.append(compiled_source)
        return self.mapping.get(compiled_source, compiled_source)




async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
