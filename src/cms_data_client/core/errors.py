"""Error types and status mapping."""

from __future__ import annotations


class CmsApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class CmsInvalidArgumentError(CmsApiError, ValueError):
    """Invalid input passed to the client or its builder."""


class CmsParseError(CmsApiError):
    """Response headers or body could not be decoded."""


class CmsTransportError(CmsApiError):
    """Network/transport-level failure or non-success HTTP status."""


class CmsStateError(CmsApiError):
    """Client reached an inconsistent internal state."""


class CmsClientClosedError(CmsApiError):
    """Raised when client is used after close."""


def classify_http_status(http_status: int | None) -> CmsApiError | None:
    """Map a non-success HTTP status to a transport error."""

    if http_status is None:
        return CmsTransportError("response has no HTTP status", cause="http_status")
    if 200 <= http_status < 300:
        return None
    return CmsTransportError(
        f"unexpected HTTP status {http_status}",
        http_status=http_status,
        cause="http_status",
    )


__all__ = [
    "CmsApiError",
    "CmsInvalidArgumentError",
    "CmsParseError",
    "CmsTransportError",
    "CmsStateError",
    "CmsClientClosedError",
    "classify_http_status",
]
