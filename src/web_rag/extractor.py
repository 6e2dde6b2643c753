"""Web text extractor — fetches a page with httpx and pulls readable text
out of it with trafilatura."""

import asyncio
import logging

import httpx
import trafilatura

from web_rag.config import ExtractorConfig
from web_rag.errors import ExtractionError

logger = logging.getLogger(__name__)

_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class WebTextExtractor:
    """Best-effort article text extraction for a URL.

    Network failures and non-2xx responses raise
    :class:`ExtractionError`. A page that loads but has no readable
    article content yields an empty string.
    """

    provider_name = "web_extractor"

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        cfg = config or ExtractorConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(cfg.timeout),
            headers={"User-Agent": cfg.user_agent, "Accept": _ACCEPT},
            follow_redirects=True,
        )

    async def extract(self, url: str) -> str:
        """Fetch *url* and return its readable text, or ``""`` if none."""
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise ExtractionError(
                f"Timeout fetching {url}: {exc}", self.provider_name
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ExtractionError(
                f"HTTP {exc.response.status_code} for {url}", self.provider_name
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractionError(
                f"HTTP error fetching {url}: {exc}", self.provider_name
            ) from exc

        text = await asyncio.to_thread(
            trafilatura.extract,
            response.text,
            url=url,
            include_comments=False,
            include_tables=True,
        )
        if not text:
            logger.warning("No readable content found at %s", url)
            return ""

        logger.debug("Extracted %d characters from %s", len(text), url)
        return text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
