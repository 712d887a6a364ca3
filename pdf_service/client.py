"""Async client used by the main application to call the parsing service."""

from typing import Any, Dict, Optional

import httpx

from .core.config import get_settings
from .core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_TEXT_LENGTH = 10


class ParsingServiceError(Exception):
    """The service answered with something other than a 200."""

    def __init__(self, status_code: int, envelope: Optional[Dict[str, Any]] = None):
        envelope = envelope or {}
        message = f"PDF service request failed: {status_code} {envelope.get('error', '')}".rstrip()
        super().__init__(message)
        self.status_code = status_code
        self.error = envelope.get("error")
        self.details = envelope.get("details")


class InsufficientTextError(Exception):
    """The extracted text is too short to be worth analyzing."""

    def __init__(self, length: int, min_length: int):
        super().__init__(
            f"Extracted text is empty or too short ({length} chars, need at least {min_length})"
        )
        self.length = length
        self.min_length = min_length


class ParsingServiceClient:
    """Thin wrapper around ``POST /parse``.

    The service never retries and neither does this client; callers decide
    whether a failed extraction is worth another attempt.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.pdf_service_url).rstrip("/")
        # Leave headroom over the service's own download budget
        timeout = timeout if timeout is not None else settings.download_timeout + 30
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    async def health(self) -> bool:
        """Return True when the service answers its liveness probe."""
        try:
            response = await self.client.get(f"{self.base_url}/")
        except httpx.HTTPError as e:
            logger.warning("PDF service health check failed", base_url=self.base_url, error=str(e))
            return False
        return response.status_code == 200 and response.json().get("status") == "ok"

    async def extract_text(self, url: str, min_length: int = DEFAULT_MIN_TEXT_LENGTH) -> str:
        """Ask the service for the text of the PDF at ``url``.

        Raises:
            ParsingServiceError: the service rejected the request or failed.
            InsufficientTextError: fewer than ``min_length`` characters came back.
        """
        logger.info("Requesting text parsing", base_url=self.base_url, url=url)
        response = await self.client.post(f"{self.base_url}/parse", json={"url": url})

        if response.status_code != 200:
            try:
                envelope = response.json()
            except ValueError:
                envelope = None
            if not isinstance(envelope, dict):
                envelope = {"error": response.text}
            logger.error(
                "PDF service request failed",
                status_code=response.status_code,
                details=envelope.get("details"),
            )
            raise ParsingServiceError(response.status_code, envelope)

        text = response.json().get("text") or ""
        if len(text.strip()) < min_length:
            raise InsufficientTextError(len(text.strip()), min_length)

        logger.info("Text extracted", url=url, chars=len(text))
        return text
