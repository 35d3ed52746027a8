# File: docs_archiver/archive.py
"""docs_archiver.archive: the on-disk archive of converted pages.

Every URL maps to exactly one file in a flat directory. The mapping only
looks at the URL path, so repeated runs address the same file for the same URL.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, Union
from urllib.parse import urlparse

__all__: Sequence[str] = ("ArchiveStore", "render_entry", "INDEX_FILENAME", "INDEX_PATHS")

INDEX_FILENAME = "index.md"
#: paths archived as the landing page
INDEX_PATHS = ("/", "/starthere")
EXTENSION = ".md"

logger = logging.getLogger("DocsArchiver")


def _timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_entry(url: str, content: str, archived_at: Optional[datetime] = None) -> str:
    """Front-matter header (source URL, archive time) followed by *content*."""
    moment = archived_at or datetime.now(timezone.utc)
    return f"---\nurl: {url}\narchived_at: {_timestamp(moment)}\n---\n\n{content}"


class ArchiveStore:
    """Flat directory of archived pages."""

    def __init__(self, output_dir: Union[str, Path]) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def filename_for(url: str) -> str:
        """File name for *url*: the landing page is ``index.md``, ``/a/b`` is ``_a_b.md``."""
        path = urlparse(url).path or "/"
        if path in INDEX_PATHS:
            return INDEX_FILENAME
        return path.replace("/", "_") + EXTENSION

    def path_for(self, url: str) -> Path:
        return self.output_dir / self.filename_for(url)

    def exists(self, url: str) -> bool:
        """``True`` if *url* is archived; a path the OS rejects counts as absent."""
        try:
            return self.path_for(url).is_file()
        except (OSError, ValueError) as exc:
            logger.warning("Cannot check archive entry for %s: %s", url, exc)
            return False

    def write(self, url: str, content: str, archived_at: Optional[datetime] = None) -> Path:
        """Write (or overwrite) the entry of *url* and return its path."""
        path = self.path_for(url)
        path.write_text(render_entry(url, content, archived_at), encoding="utf-8")
        logger.info("Saved: %s", path)
        return path
