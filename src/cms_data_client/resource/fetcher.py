"""Single-call fetch sequencing for a resource query."""

from __future__ import annotations

from collections.abc import Callable

from ..config import CmsClientConfig
from ..core.async_transport import AsyncTransport
from ..core.response_parsing import parse_json_object
from .models import FetchedResult, FreshnessInfo
from .params import build_metadata_url, build_resource_url
from .parser import build_fetched_result, parse_data, parse_fields, parse_freshness
from .queries import ResourceQuery

FreshnessCallback = Callable[[FreshnessInfo], None]


class AsyncResourceFetcher:
    """Fetches one resource query and normalizes the response.

    ``on_freshness`` receives the freshness headers as soon as they are read,
    before the metadata request and the body decoding. The metadata request,
    when enabled, is issued only after the data response headers were parsed
    successfully.
    """

    def __init__(self, transport: AsyncTransport, config: CmsClientConfig) -> None:
        self._transport = transport
        self._config = config

    async def fetch(
        self,
        query: ResourceQuery,
        *,
        on_freshness: FreshnessCallback | None = None,
    ) -> FetchedResult:
        response = await self._transport.request(build_resource_url(self._config, query))

        fields = parse_fields(response, config=self._config)
        freshness = parse_freshness(response, config=self._config)
        if on_freshness is not None:
            on_freshness(freshness)

        metadata: dict[str, object] | None = None
        if query.include_metadata:
            metadata = await self.fetch_metadata(query.resource_id)

        return build_fetched_result(
            fields=fields,
            freshness=freshness,
            data=parse_data(response, output=query.output),
            metadata=metadata,
        )

    async def fetch_metadata(self, resource_id: str) -> dict[str, object]:
        response = await self._transport.request(build_metadata_url(self._config, resource_id))
        return parse_json_object(response, http_status=response.status_code)


__all__ = [
    "AsyncResourceFetcher",
]
