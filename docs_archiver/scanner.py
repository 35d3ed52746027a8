# === FILE: docs_archiver/scanner.py ===
"""
Wrapper that runs one archiving crawl.
"""
from typing import Optional

from docs_archiver.config import ArchiverConfig
from docs_archiver.crawler.crawler import DocsArchiver
from docs_archiver.crawler.models import CrawlReport


async def start_archive(cfg: ArchiverConfig, start_url: Optional[str] = None) -> CrawlReport:
    """
    Run :class:`DocsArchiver` inside its context and return the crawl report.

    Parameters
    ----------
    cfg : ArchiverConfig
        Settings of the run.
    start_url : str, optional
        Overrides ``cfg.start_url``.
    """
    async with DocsArchiver(cfg) as archiver:
        report = await archiver.crawl(start_url)
    return report

__all__ = ["start_archive"]
