# docs_archiver/crawler/fetcher.py
"""
Fetcher module: plain HTTP GET of documentation pages with a bounded timeout.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError, ClientSession, ClientTimeout

from docs_archiver.config import ArchiverConfig
from docs_archiver.crawler.models import PageData

logger = logging.getLogger("DocsArchiver")


class Fetcher:
    """Fetches page markup. Failures are logged and reported as ``None``; nothing is retried."""

    def __init__(self, session: ClientSession, config: ArchiverConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.timeout)

    async def fetch(self, url: str) -> PageData | None:
        """
        GET *url* and return its markup.

        Returns None on HTTP errors (status >= 400), transport errors and timeout.
        """
        try:
            async with self.session.get(url, timeout=self._timeout, raise_for_status=False) as resp:
                if resp.status >= 400:
                    logger.warning("Error fetching %s: HTTP %s", url, resp.status)
                    return None
                text = await resp.text()
                return PageData(url, text)
        except asyncio.TimeoutError:
            logger.warning("Error fetching %s: timed out after %.1f s", url, self.config.timeout)
            return None
        except ClientError as exc:
            logger.warning("Error fetching %s: %s", url, exc)
            return None
        except UnicodeDecodeError as exc:
            logger.warning("Error decoding %s: %s", url, exc)
            return None
