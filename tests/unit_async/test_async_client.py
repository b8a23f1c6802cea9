from __future__ import annotations

import logging

import httpx
import pytest

from cms_data_client.async_client import AsyncCmsClient, create_client
from cms_data_client.core.async_transport import AsyncTransport
from cms_data_client.core.errors import (
    CmsClientClosedError,
    CmsParseError,
    CmsStateError,
    CmsTransportError,
)
from tests.shared.transport import AsyncSequencedClient, build_config, make_response


RESOURCE_ID = "abcd-1234"


def _client(steps, options=None):
    http_client = AsyncSequencedClient(steps)
    transport = AsyncTransport(build_config(), client=http_client)
    return create_client(RESOURCE_ID, options, transport=transport), http_client


@pytest.mark.asyncio
async def test_get_returns_fields_and_parsed_json_rows():
    client, http_client = _client([make_response(fields="a,b,c", json=[{"a": 1}])])

    result = await client.get()

    assert result.fields == ("a", "b", "c")
    assert result.data == [{"a": 1}]
    assert result.metadata == {}
    assert http_client.urls == ["https://data.cms.gov/resource/abcd-1234.json?"]


@pytest.mark.asyncio
async def test_get_returns_raw_text_for_csv_output():
    body = '"a","b"\n"1","2"\n'
    client, http_client = _client([make_response(text=body)], {"output": "csv"})

    result = await client.get()

    assert result.data == body
    assert http_client.urls == ["https://data.cms.gov/resource/abcd-1234.csv?"]


@pytest.mark.asyncio
async def test_get_fetches_metadata_after_data_when_requested():
    metadata = {"name": "Hospital General Information", "columns": []}
    client, http_client = _client(
        [make_response(json=[]), httpx.Response(200, json=metadata)],
        {"include_metadata": True},
    )

    result = await client.get()

    assert result.metadata == metadata
    assert http_client.urls == [
        "https://data.cms.gov/resource/abcd-1234.json?",
        "https://data.cms.gov/api/views/metadata/v1/abcd-1234",
    ]


@pytest.mark.asyncio
async def test_failed_primary_request_never_fetches_metadata():
    client, http_client = _client(
        [httpx.ConnectError("boom"), httpx.Response(200, json={})],
        {"include_metadata": True},
    )

    with pytest.raises(CmsTransportError):
        await client.get()

    assert http_client.calls == 1


@pytest.mark.asyncio
async def test_missing_fields_header_fails_before_metadata_fetch():
    client, http_client = _client(
        [make_response(fields=None), httpx.Response(200, json={})],
        {"include_metadata": True},
    )

    with pytest.raises(CmsParseError):
        await client.get()

    assert http_client.calls == 1


@pytest.mark.asyncio
async def test_metadata_failure_is_surfaced():
    client, _ = _client(
        [make_response(json=[]), httpx.Response(503, json={})],
        {"include_metadata": True},
    )

    with pytest.raises(CmsTransportError) as exc_info:
        await client.get()

    assert exc_info.value.http_status == 503


@pytest.mark.asyncio
async def test_invalid_json_body_raises_parse_error():
    client, _ = _client([make_response(text="not json")])

    with pytest.raises(CmsParseError) as exc_info:
        await client.get()

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_get_records_freshness_on_client_and_overwrites_it():
    client, _ = _client(
        [
            make_response(out_of_date="true", last_modified="Mon, 01 Jan 2024 00:00:00 GMT"),
            make_response(out_of_date="false", last_modified=None),
        ]
    )

    first = await client.get()
    assert first.freshness.is_outdated is True
    assert client.is_outdated is True
    assert client.last_modified == "Mon, 01 Jan 2024 00:00:00 GMT"

    await client.get()
    assert client.is_outdated is False
    assert client.last_modified == ""


@pytest.mark.asyncio
async def test_outdated_data_logs_warning(caplog):
    client, _ = _client([make_response(out_of_date="true")])

    with caplog.at_level(logging.WARNING, logger="cms_data_client"):
        await client.get()

    assert any("data is outdated" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_fresh_data_does_not_log_warning(caplog):
    client, _ = _client([make_response(out_of_date="false")])

    with caplog.at_level(logging.WARNING, logger="cms_data_client"):
        await client.get()

    assert not any("data is outdated" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_query_state_persists_across_get_calls():
    client, http_client = _client([make_response(), make_response()])
    client.select("name").filter("state", "CA").limit(5)

    await client.get()
    await client.get()

    expected = "https://data.cms.gov/resource/abcd-1234.json?$limit=5&state=CA&$select=name"
    assert http_client.urls == [expected, expected]


@pytest.mark.asyncio
async def test_get_raises_state_error_when_fetcher_returns_nothing():
    class _EmptyFetcher:
        async def fetch(self, query, *, on_freshness=None):
            return None

    transport = AsyncTransport(build_config(), client=AsyncSequencedClient([]))
    client = AsyncCmsClient(RESOURCE_ID, transport=transport, fetcher=_EmptyFetcher())  # type: ignore[arg-type]
    with pytest.raises(CmsStateError, match="data not fetched"):
        await client.get()


@pytest.mark.asyncio
async def test_client_context_manager_closes_transport():
    client, _ = _client([])
    async with client as entered:
        assert entered is client
    assert client._transport.closed is True


@pytest.mark.asyncio
async def test_client_raises_when_used_after_close():
    client, http_client = _client([make_response()])
    await client.close()

    with pytest.raises(CmsClientClosedError):
        await client.get()

    assert http_client.calls == 0


@pytest.mark.asyncio
async def test_freshness_is_recorded_even_when_body_fails_to_parse():
    client, _ = _client(
        [
            make_response(
                out_of_date="true",
                last_modified="Mon, 01 Jan 2024 00:00:00 GMT",
                text="not json",
            )
        ]
    )

    with pytest.raises(CmsParseError):
        await client.get()

    assert client.is_outdated is True
    assert client.last_modified == "Mon, 01 Jan 2024 00:00:00 GMT"


@pytest.mark.asyncio
async def test_freshness_is_recorded_even_when_metadata_fetch_fails():
    client, http_client = _client(
        [
            make_response(out_of_date="true", last_modified="Tue, 02 Jan 2024 00:00:00 GMT"),
            httpx.Response(500, json={}),
        ],
        {"include_metadata": True},
    )
    assert client.is_outdated is False

    with pytest.raises(CmsTransportError):
        await client.get()

    assert http_client.calls == 2
    assert client.is_outdated is True
    assert client.last_modified == "Tue, 02 Jan 2024 00:00:00 GMT"
