# app/utils/http.py
import asyncio
import logging
import httpx
from app import config
from app.errors import FetchFailed

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": config.USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "de-DE,de;q=0.9,en;q=0.8",
}


class Http:
    """Single-shot page fetcher: one attempt, fixed timeout, no retries."""

    def __init__(self, *, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = config.HTTP_TIMEOUT if timeout is None else timeout
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            http2=True,
            headers=DEFAULT_HEADERS,
            transport=transport,
        )

    async def get_text(self, url: str) -> str:
        try:
            # httpx limits each phase; this bounds the whole fetch
            r = await asyncio.wait_for(self.client.get(url), self.timeout)
            r.raise_for_status()
            return r.text
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error("Timeout fetching %s: %r", url, e)
            raise FetchFailed() from e
        except httpx.HTTPError as e:
            # transport errors and non-2xx responses alike
            logger.error("Fetching %s failed: %r", url, e)
            raise FetchFailed() from e

    async def close(self):
        await self.client.aclose()


async def get_http():
    """FastAPI dependency: one client per request, closed afterwards."""
    http = Http()
    try:
        yield http
    finally:
        await http.close()
