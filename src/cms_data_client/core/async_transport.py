"""Async HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import CmsClientConfig
from .errors import CmsTransportError, classify_http_status
from .transport_shared import build_default_headers, build_default_timeout

logger = logging.getLogger("cms_data_client")


class AsyncTransportClient(Protocol):
    async def get(self, url: str) -> httpx.Response: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the CMS data API.

    Issues exactly one GET per call. There is no retry; any network failure
    or non-2xx status surfaces as :class:`CmsTransportError`.
    """

    def __init__(
        self,
        config: CmsClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, url: str) -> httpx.Response:
        if self._closed:
            raise CmsTransportError("transport is already closed")

        logger.debug("request start url=%s", url)
        try:
            response = await self._client.get(url)
        except Exception as exc:
            logger.error(
                "request network error url=%s error=%s",
                url,
                exc.__class__.__name__,
            )
            raise CmsTransportError(
                f"network/transport error: {exc}",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received url=%s http_status=%s", url, http_status)
        mapped_error = classify_http_status(http_status)
        if mapped_error is not None:
            logger.error("request failed url=%s http_status=%s", url, http_status)
            raise mapped_error

        logger.info("request success url=%s", url)
        return response


__all__ = [
    "AsyncTransport",
]
