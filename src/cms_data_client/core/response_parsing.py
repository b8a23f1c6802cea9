"""Response header and body decoding helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol

from .errors import CmsParseError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


class TextPayloadResponse(Protocol):
    @property
    def text(self) -> str: ...


def parse_fields_header(value: str | None, *, header_name: str) -> tuple[str, ...]:
    """Parse the field listing header into ordered column names.

    The live API sends a JSON array (``["a","b"]``); a bare comma list
    (``a,b``) is accepted as well.
    """

    if value is None:
        raise CmsParseError(f"response header {header_name} is missing")
    text = value.strip()
    if text == "":
        raise CmsParseError(f"response header {header_name} is empty")

    if text.startswith("["):
        try:
            parsed = json.loads(text)
        except ValueError as exc:
            raise CmsParseError(f"response header {header_name} is not valid JSON") from exc
        if not isinstance(parsed, list) or any(not isinstance(item, str) for item in parsed):
            raise CmsParseError(f"response header {header_name} must be a list of str")
        return tuple(parsed)

    fields = tuple(item.strip().strip('"') for item in text.split(","))
    if any(item == "" for item in fields):
        raise CmsParseError(f"response header {header_name} contains an empty field name")
    return fields


def parse_flag_header(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() == "true"


def read_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    # Plain mappings are not case-insensitive like httpx.Headers.
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def parse_json_body(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> Any:
    """Parse response JSON body and map decode failures to domain errors."""

    try:
        return response.json()
    except Exception as exc:
        raise CmsParseError(
            "response body is not valid JSON",
            http_status=http_status,
            cause="json",
        ) from exc


def parse_json_object(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    payload = parse_json_body(response, http_status=http_status)
    if not isinstance(payload, dict):
        raise CmsParseError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    return payload


def parse_text_body(response: TextPayloadResponse) -> str:
    return response.text


__all__ = [
    "parse_fields_header",
    "parse_flag_header",
    "read_header",
    "parse_json_body",
    "parse_json_object",
    "parse_text_body",
]
