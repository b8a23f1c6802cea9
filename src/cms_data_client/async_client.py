"""Public async client entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import TracebackType

from .client_shared import resolve_client_options, validate_client_config
from .config import ClientOptions, CmsClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import CmsClientClosedError, CmsStateError
from .resource.fetcher import AsyncResourceFetcher
from .resource.models import FetchedResult, FreshnessInfo
from .resource.params import build_resource_url
from .resource.queries import OutputFormat, ResourceQuery
from .resource.validators import (
    normalize_columns,
    validate_filter,
    validate_limit,
    validate_resource_id,
)

logger = logging.getLogger("cms_data_client")


class AsyncCmsClient:
    """Fluent async client for one CMS dataset resource.

    ``select``, ``filter`` and ``limit`` update the query in place and return
    the client itself; ``get`` is the only method that performs I/O. The
    query persists across ``get`` calls.
    """

    def __init__(
        self,
        resource_id: str,
        options: ClientOptions | Mapping[str, object] | None = None,
        *,
        config: CmsClientConfig | None = None,
        transport: AsyncTransport | None = None,
        fetcher: AsyncResourceFetcher | None = None,
    ) -> None:
        self._config = config or CmsClientConfig()
        validate_client_config(self._config)
        resolved_options = resolve_client_options(options)

        self._query = ResourceQuery(
            resource_id=validate_resource_id(resource_id),
            output=OutputFormat(resolved_options.output),
            include_metadata=resolved_options.include_metadata,
        )
        self._transport = transport or AsyncTransport(self._config)
        self._fetcher = fetcher or AsyncResourceFetcher(self._transport, self._config)
        self._closed = False

        self.is_outdated = False
        self.last_modified = ""

    @property
    def resource_id(self) -> str:
        return self._query.resource_id

    @property
    def query(self) -> ResourceQuery:
        return self._query

    def select(self, columns: str | Sequence[str]) -> "AsyncCmsClient":
        self._query = self._query.with_columns(normalize_columns(columns))
        return self

    def filter(self, column: str, value: str) -> "AsyncCmsClient":
        column, value = validate_filter(column, value)
        self._query = self._query.with_filter(column, value)
        return self

    def limit(self, limit: int) -> "AsyncCmsClient":
        if limit:
            self._query = self._query.with_limit(validate_limit(limit))
        return self

    def build_url(self) -> str:
        return build_resource_url(self._config, self._query)

    async def get(self) -> FetchedResult:
        self._ensure_open()
        result = await self._fetcher.fetch(self._query, on_freshness=self._record_freshness)
        if result is None:
            raise CmsStateError("data not fetched")

        if self.is_outdated:
            logger.warning(
                "data is outdated resource_id=%s last_modified=%s",
                self.resource_id,
                self.last_modified,
            )
        return result

    def _record_freshness(self, freshness: FreshnessInfo) -> None:
        self.is_outdated = freshness.is_outdated
        self.last_modified = freshness.last_modified or ""

    def _ensure_open(self) -> None:
        if self._closed:
            raise CmsClientClosedError("AsyncCmsClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncCmsClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


def create_client(
    resource_id: str,
    options: ClientOptions | Mapping[str, object] | None = None,
    *,
    config: CmsClientConfig | None = None,
    transport: AsyncTransport | None = None,
) -> AsyncCmsClient:
    """Validate ``resource_id`` and return a new client for that dataset."""

    return AsyncCmsClient(resource_id, options, config=config, transport=transport)


__all__ = [
    "AsyncCmsClient",
    "create_client",
]
