# === FILE: docs_archiver/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Deque, Iterable, Optional, Protocol, Set

from aiohttp import ClientSession, ClientTimeout

from docs_archiver.archive import ArchiveStore
from docs_archiver.config import ArchiverConfig
from docs_archiver.converter import AnthropicConverter
from docs_archiver.crawler.fetcher import Fetcher
from docs_archiver.crawler.link_extractor import find_content_links
from docs_archiver.crawler.models import ConvertedPage, CrawlReport, PageData, PageDescriptor
from docs_archiver.crawler.navigation import navigation_links
from docs_archiver.parser.next_data import parse_page

__all__ = ("DocsArchiver", "PageFetcher", "PageConverter")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> Optional[PageData]: ...


class PageConverter(Protocol):
    async def convert(self, compiled_source: str) -> str: ...


class DocsArchiver:
    """Breadth-first crawler that archives every reachable documentation page.

    One URL is handled end-to-end (fetch, convert, persist, harvest links)
    before the next one is dequeued. The navigation tree of the start page is
    read once per crawl; links found in converted text are a fallback channel.
    """

    def __init__(
        self,
        config: ArchiverConfig,
        *,
        fetcher: Optional[PageFetcher] = None,
        converter: Optional[PageConverter] = None,
        store: Optional[ArchiveStore] = None,
    ) -> None:
        self.config = config
        self.base_url: str = config.base_url
        self.fetcher = fetcher
        self.converter = converter
        self.store = store if store is not None else ArchiveStore(config.output_dir)
        self.visited: Set[str] = set()
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("DocsArchiver")

    async def __aenter__(self) -> DocsArchiver:
        if self.fetcher is None or self.converter is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            if self.fetcher is None:
                self.fetcher = Fetcher(self.session, self.config)
            if self.converter is None:
                self.converter = AnthropicConverter(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def crawl(self, start_url: Optional[str] = None) -> CrawlReport:
        if self.fetcher is None or self.converter is None:
            raise RuntimeError("Collaborators not initialized; use 'async with DocsArchiver(...)'")

        start_url = start_url or self.config.start_url
        self.logger.info("Start crawl: %s (base %s)", start_url, self.base_url)
        report = CrawlReport(start_url)
        self.visited = set()
        queue: Deque[str] = deque([start_url])
        navigation_extracted = False

        while queue:
            url = queue.popleft()
            if url in self.visited:
                continue
            self.visited.add(url)

            if self.config.skip_existing and self.store.exists(url):
                self.logger.info("Skipping already archived: %s", url)
                report.skipped.append(url)
                # the start page still has to be read for its navigation tree
                if url == start_url and not navigation_extracted:
                    self.logger.info("Fetching navigation from start page...")
                    descriptor = await self._fetch_descriptor(url)
                    if descriptor is not None:
                        report.navigation_links = self._enqueue_navigation(descriptor, queue)
                        navigation_extracted = True
                continue

            page = await self._fetch_page(url)
            if page is None:
                report.failed.append(url)
                continue

            try:
                self.store.write(url, page.content)
            except (OSError, ValueError) as exc:
                self.logger.error("Error saving %s: %s", url, exc)
                report.failed.append(url)
            else:
                report.processed.append(url)

                if url == start_url and not navigation_extracted:
                    report.navigation_links = self._enqueue_navigation(page.descriptor, queue)
                    navigation_extracted = True

                self._enqueue(find_content_links(page.content, self.base_url), queue)

            # the page was fetched and converted even if saving failed
            if self.config.delay:
                await asyncio.sleep(self.config.delay)

        self.logger.info(
            "Finished: %d archived, %d skipped, %d failed",
            len(report.processed), len(report.skipped), len(report.failed),
        )
        return report

    async def _fetch_descriptor(self, url: str) -> Optional[PageDescriptor]:
        self.logger.info("Fetching: %s", url)
        raw = await self.fetcher.fetch(url)
        if raw is None:
            return None
        return parse_page(url, raw.content)

    async def _fetch_page(self, url: str) -> Optional[ConvertedPage]:
        descriptor = await self._fetch_descriptor(url)
        if descriptor is None:
            return None
        if descriptor.compiled_source is None:
            self.logger.info("No MDX source found for %s", url)
            return None
        content = await self.converter.convert(descriptor.compiled_source)
        return ConvertedPage(descriptor, content)

    def _enqueue_navigation(self, descriptor: PageDescriptor, queue: Deque[str]) -> int:
        links = navigation_links(descriptor, self.base_url, self.config.max_nav_depth)
        added = self._enqueue(links, queue)
        self.logger.info("Found %d navigation links", added)
        return added

    def _enqueue(self, links: Iterable[str], queue: Deque[str]) -> int:
        fresh = [link for link in links if link not in self.visited]
        queue.extend(fresh)
        return len(fresh)

    # alias for compatibility
    run = crawl
