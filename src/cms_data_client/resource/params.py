"""Request URL builders for resource endpoints."""

from __future__ import annotations

from urllib.parse import quote

from ..config import CmsClientConfig
from .queries import ResourceQuery

_RESOURCE_PATH = "resource"
_METADATA_PATH = "api/views/metadata/v1"
# SoQL keeps these readable in query values.
_SAFE_VALUE_CHARS = ",$*():'"


def build_resource_params(query: ResourceQuery) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    if query.limit > 0:
        params.append(("$limit", str(query.limit)))
    if query.has_filter:
        params.append((query.filter_column, query.filter_value))
    if query.columns:
        params.append(("$select", query.columns))
    return params


def encode_params(params: list[tuple[str, str]]) -> str:
    return "&".join(
        f"{quote(key, safe='$')}={quote(value, safe=_SAFE_VALUE_CHARS)}"
        for key, value in params
    )


def build_resource_url(config: CmsClientConfig, query: ResourceQuery) -> str:
    """Compose the data request URL.

    Always ends the path with ``?`` so an unconfigured query still yields a
    stable URL; parameters follow in ``$limit``, filter, ``$select`` order.
    """

    base = config.base_url.rstrip("/")
    path = f"{base}/{_RESOURCE_PATH}/{quote(query.resource_id, safe='')}.{query.output.value}"
    return f"{path}?{encode_params(build_resource_params(query))}"


def build_metadata_url(config: CmsClientConfig, resource_id: str) -> str:
    base = config.base_url.rstrip("/")
    return f"{base}/{_METADATA_PATH}/{quote(resource_id, safe='')}"


__all__ = [
    "build_resource_params",
    "encode_params",
    "build_resource_url",
    "build_metadata_url",
]
