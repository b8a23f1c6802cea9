"""Normalization of resource responses into result objects."""

from __future__ import annotations

import httpx

from ..config import CmsClientConfig
from ..core.response_parsing import (
    parse_fields_header,
    parse_flag_header,
    parse_json_body,
    parse_text_body,
    read_header,
)
from .models import FetchedResult, FreshnessInfo, ResourceData
from .queries import OutputFormat


def parse_fields(response: httpx.Response, *, config: CmsClientConfig) -> tuple[str, ...]:
    value = read_header(response.headers, config.fields_header)
    return parse_fields_header(value, header_name=config.fields_header)


def parse_freshness(response: httpx.Response, *, config: CmsClientConfig) -> FreshnessInfo:
    return FreshnessInfo(
        is_outdated=parse_flag_header(read_header(response.headers, config.out_of_date_header)),
        last_modified=read_header(response.headers, "Last-Modified"),
    )


def parse_data(response: httpx.Response, *, output: OutputFormat) -> ResourceData:
    if output is OutputFormat.CSV:
        return parse_text_body(response)
    return parse_json_body(response, http_status=response.status_code)


def build_fetched_result(
    *,
    fields: tuple[str, ...],
    freshness: FreshnessInfo,
    data: ResourceData,
    metadata: dict[str, object] | None,
) -> FetchedResult:
    return FetchedResult(
        data=data,
        fields=fields,
        metadata=metadata if metadata is not None else {},
        freshness=freshness,
    )


__all__ = [
    "parse_fields",
    "parse_freshness",
    "parse_data",
    "build_fetched_result",
]
