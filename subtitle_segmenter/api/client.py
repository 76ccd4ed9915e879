"""Async HTTP client for the remote punctuation/segmentation service.

WHY: Recognizer transcripts arrive without punctuation or casing, so the
wrapped subtitles would read as one endless run-on line. A remote service
restores punctuation before the text is wrapped. This module hides the
HTTP details behind a single client class.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. PunctuationClient is an
async context manager — enter it to get a client bound to the selected
service, exit to close the connection pool. punctuate() POSTs the raw
transcript as form data and returns the response body.

RULES:
- Always use the async context manager (async with PunctuationClient() as client:)
- The request is a form POST with a single "text" field
- Non-2xx responses and empty bodies raise PunctuationServiceError
- Network errors (httpx.HTTPError) propagate unchanged; no retries here
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from subtitle_segmenter.config import (
    DEFAULT_SERVICE_ID,
    PUNCTUATION_TIMEOUT_S,
    resolve_service_url,
)
from subtitle_segmenter.core.errors import SegmenterError

logger = logging.getLogger(__name__)


class PunctuationServiceError(SegmenterError):
    """Raised when the punctuation service returns an error response.

    WHY: Callers need a typed exception to distinguish service errors from
    network errors or engine failures.

    RULES:
    - Always include status_code and message
    - message is the response body text or a summary
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Punctuation service error {status_code}: {message}")


class PunctuationClient:
    """Async client for a text punctuation service.

    HOW: Wraps httpx.AsyncClient. The endpoint is chosen by service id
    from config.PUNCTUATION_SERVICES unless base_url is given.

    RULES:
    - Use as: async with PunctuationClient() as client: ...
    - service_id defaults to config.DEFAULT_SERVICE_ID
    - transport is for tests (httpx.MockTransport)
    """

    def __init__(
        self,
        service_id: int | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._service_id = DEFAULT_SERVICE_ID if service_id is None else service_id
        self._url = base_url or resolve_service_url(self._service_id)
        self._timeout = PUNCTUATION_TIMEOUT_S if timeout is None else timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> PunctuationClient:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout, connect=30.0),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "PunctuationClient must be used as an async context manager: "
                "async with PunctuationClient() as client: ..."
            )
        return self._client

    async def punctuate(
        self,
        text: str,
        on_status: Callable[[str], None] | None = None,
    ) -> str:
        """Send raw transcript text to the service and return punctuated text.

        Args:
            text: The raw, unpunctuated transcript.
            on_status: Optional callback for status updates.

        Returns:
            The punctuated transcript, stripped of surrounding whitespace.

        Raises:
            PunctuationServiceError: On a non-2xx response or an empty body.
            httpx.HTTPError: On network failures.
        """
        client = self._ensure_client()
        if on_status:
            on_status("Punctuating transcript ({} chars)...".format(len(text)))

        logger.info("POST %s (%d chars)", self._url, len(text))
        resp = await client.post(self._url, data={"text": text})

        if not 200 <= resp.status_code < 300:
            raise PunctuationServiceError(resp.status_code, resp.text)

        punctuated = resp.text.strip()
        if not punctuated:
            raise PunctuationServiceError(resp.status_code, "empty response body")

        logger.debug("Punctuation service returned %d chars", len(punctuated))
        return punctuated
