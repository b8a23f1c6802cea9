"""Shared helpers for client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import ClientOptions, CmsClientConfig
from .core.errors import CmsInvalidArgumentError

_OPTION_KEYS = frozenset({"output", "include_metadata"})


def validate_client_config(config: CmsClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise CmsInvalidArgumentError(str(exc)) from exc


def resolve_client_options(
    options: ClientOptions | Mapping[str, Any] | None,
) -> ClientOptions:
    if options is None:
        resolved = ClientOptions()
    elif isinstance(options, ClientOptions):
        resolved = options
    elif isinstance(options, Mapping):
        unknown = sorted(set(options) - _OPTION_KEYS)
        if unknown:
            raise CmsInvalidArgumentError(f"unknown client options: {', '.join(unknown)}")
        resolved = ClientOptions(**options)
    else:
        raise CmsInvalidArgumentError("options must be ClientOptions or Mapping")

    try:
        resolved.validate()
    except ValueError as exc:
        raise CmsInvalidArgumentError(str(exc)) from exc
    return resolved


__all__ = [
    "validate_client_config",
    "resolve_client_options",
]
