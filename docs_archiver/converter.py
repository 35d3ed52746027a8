# === FILE: docs_archiver/converter.py ===
"""Conversion of compiled MDX page bodies into readable markdown.

The conversion is delegated to the Anthropic Messages API. A failed call never
fails the page: :meth:`AnthropicConverter.convert` logs the problem and hands
back the unconverted source so the archive still receives something useful.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from aiohttp import ClientError, ClientSession, ClientTimeout

from docs_archiver.config import ArchiverConfig

logger = logging.getLogger("DocsArchiver")

ANTHROPIC_VERSION = "2023-06-01"

PROMPT = (
    "Convert this compiled React/MDX source code to clean markdown format. "
    "Extract the main content and remove any React/JSX syntax, keeping only "
    "the readable documentation content:\n\n"
)


class ConversionError(Exception):
    """The conversion API did not return a usable answer."""


def first_text_block(data: Any) -> str:
    """Text of the first content block of a Messages API response.

    An empty string is returned when that block is not a text block.
    """
    content = data.get("content") if isinstance(data, Mapping) else None
    if not isinstance(content, list) or not content:
        raise ConversionError(f"response without content blocks: {data!r:.200}")
    block = content[0]
    if not isinstance(block, Mapping):
        raise ConversionError(f"malformed content block: {block!r:.200}")
    if block.get("type") != "text":
        return ""
    return str(block.get("text", ""))


class AnthropicConverter:
    """Turns ``compiledSource`` blobs into markdown via the Messages API."""

    def __init__(self, session: ClientSession, config: ArchiverConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.convert_timeout)

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.config.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def _payload(self, compiled_source: str) -> dict[str, Any]:
        return {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "messages": [{"role": "user", "content": PROMPT + compiled_source}],
        }

    async def _request(self, compiled_source: str) -> str:
        async with self.session.post(
            self.config.api_url,
            json=self._payload(compiled_source),
            headers=self._headers(),
            timeout=self._timeout,
            raise_for_status=False,
        ) as resp:
            if resp.status != 200:
                body = await resp.text()
                raise ConversionError(f"HTTP {resp.status}: {body[:200]}")
            data = await resp.json(content_type=None)
        return first_text_block(data)

    async def convert(self, compiled_source: str) -> str:
        """Markdown for *compiled_source*, or *compiled_source* itself if the call fails."""
        try:
            return await self._request(compiled_source)
        except asyncio.TimeoutError:
            logger.error("Error converting with Anthropic: timed out after %.1f s", self.config.convert_timeout)
        except (ClientError, ConversionError, ValueError) as exc:
            logger.error("Error converting with Anthropic: %s", exc)
        return compiled_source


__all__ = ["AnthropicConverter", "ConversionError", "first_text_block", "PROMPT"]
