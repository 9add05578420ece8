# src/knowledge_inbox/loaders/url.py
"""URL loader - fetches a web page and extracts its readable text."""

import logging

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from knowledge_inbox.exceptions import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "knowledge-inbox/0.1 (+https://github.com/knowledge-inbox)"


class LoadedPage(BaseModel):
    """Readable text extracted from a fetched page."""

    url: str
    title: str
    text: str


class UrlLoader:
    """Fetch a URL and reduce the HTML to whitespace-collapsed body text.

    Scripts, styles, and page chrome (navigation, header, footer) are
    removed before extraction. The response body is read up to
    ``max_bytes``; anything beyond is discarded.
    """

    # Tags to remove entirely (including their content)
    REMOVE_TAGS = ["script", "style", "nav", "footer", "header", "aside", "noscript"]

    def __init__(
        self,
        timeout: float = 10.0,
        max_bytes: int = 2_000_000,
        min_chars: int = 50,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            timeout: Seconds allowed for connecting and reading.
            max_bytes: Cap on response body bytes read.
            min_chars: Minimum extracted text length for a usable page.
            transport: Optional httpx transport (for tests or proxies).
        """
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.min_chars = min_chars
        self._transport = transport

    async def load(self, url: str) -> LoadedPage:
        """Fetch and extract a page.

        Raises:
            FetchError: On transport failures, non-2xx responses, or pages
                        with too little text.
        """
        logger.info("Fetching content from %s", url)
        html = await self._fetch(url)
        title, text = self.extract(html)

        if len(text) < self.min_chars:
            raise FetchError(f"Insufficient text content extracted from URL: {url}")

        return LoadedPage(url=url, title=title or url, text=text)

    async def _fetch(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
                transport=self._transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    if not response.is_success:
                        raise FetchError(
                            f"Failed to fetch URL: HTTP {response.status_code} "
                            f"{response.reason_phrase}"
                        )
                    raw = await self._read_capped(response)
                    encoding = response.encoding or "utf-8"
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch URL: {e}") from e

        return raw.decode(encoding, errors="replace")

    async def _read_capped(self, response: httpx.Response) -> bytes:
        buffer = bytearray()
        async for block in response.aiter_bytes():
            buffer.extend(block)
            if len(buffer) >= self.max_bytes:
                logger.warning("Response body truncated at %d bytes", self.max_bytes)
                return bytes(buffer[: self.max_bytes])
        return bytes(buffer)

    def extract(self, html: str) -> tuple[str | None, str]:
        """Return (title, text) for an HTML document."""
        soup = BeautifulSoup(html, "html.parser")

        # Extract title before cleaning
        title = soup.title.get_text(strip=True) if soup.title else None

        for tag in soup(self.REMOVE_TAGS):
            tag.decompose()

        root = soup.body or soup
        text = " ".join(root.get_text(" ").split())
        return title or None, text
