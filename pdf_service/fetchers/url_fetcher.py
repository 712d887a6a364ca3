"""Fetcher that downloads a remote PDF into memory."""

import asyncio
import time
from typing import Optional

import httpx

from ..core.config import Settings, get_settings
from ..core.exceptions import (
    DownloadFailedError,
    DownloadTimeoutError,
    PayloadTooLargeError,
)
from ..core.logging import get_logger
from ..models.extraction import RawDocument

logger = get_logger(__name__)


class URLFetcher:
    """Download a URL's body under a wall-clock timeout and a size ceiling.

    A single instance is shared by every request in the process. It holds no
    per-request state: the timeout, the ceiling and the pooled client are
    fixed at construction. Downloads are never retried.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        max_bytes: Optional[int] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = timeout if timeout is not None else self.settings.download_timeout
        self.max_bytes = max_bytes if max_bytes is not None else self.settings.max_download_bytes
        self.client = client or httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.settings.user_agent},
            follow_redirects=True,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch(self, url: str) -> RawDocument:
        """Fetch ``url`` and return its full body.

        Raises:
            DownloadTimeoutError: the whole download took longer than ``timeout``.
            PayloadTooLargeError: the body is, or grows, past ``max_bytes``.
            DownloadFailedError: non-2xx status or a transport-level failure.
        """
        start_time = time.time()
        logger.debug("Fetching URL", url=url, timeout=self.timeout, max_bytes=self.max_bytes)

        try:
            document = await asyncio.wait_for(self._download(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Download timed out", url=url, timeout=self.timeout)
            raise DownloadTimeoutError(self.timeout) from None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Failed to fetch URL", url=url, error=str(e))
            raise DownloadFailedError(f"Failed to fetch {url}: {e}") from e

        document.fetch_time = time.time() - start_time
        logger.debug(
            "Successfully fetched URL",
            url=url,
            content_type=document.content_type,
            file_size=document.size,
            fetch_time=document.fetch_time,
        )
        return document

    async def _download(self, url: str) -> RawDocument:
        async with self.client.stream("GET", url) as response:
            if not response.is_success:
                raise DownloadFailedError(
                    f"Upstream responded with status {response.status_code}",
                    upstream_status=response.status_code,
                )

            declared = self._declared_length(response)
            if declared is not None and declared > self.max_bytes:
                raise PayloadTooLargeError(self.max_bytes, declared)

            # Content-Length can be absent or wrong, so count as we go.
            buffer = bytearray()
            async for chunk in response.aiter_bytes():
                buffer.extend(chunk)
                if len(buffer) > self.max_bytes:
                    raise PayloadTooLargeError(self.max_bytes)

            # model_construct skips validation, which would coerce the
            # buffer to bytes and double peak memory at the ceiling
            return RawDocument.model_construct(
                content=buffer,
                size=len(buffer),
                content_type=response.headers.get("content-type"),
            )

    @staticmethod
    def _declared_length(response: httpx.Response) -> Optional[int]:
        value = response.headers.get("content-length")
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None
