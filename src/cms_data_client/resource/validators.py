"""Argument validation for the query builder."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.errors import CmsInvalidArgumentError


def validate_resource_id(resource_id: object) -> str:
    if not isinstance(resource_id, str) or resource_id == "":
        raise CmsInvalidArgumentError(f"Invalid argument: {resource_id!r}")
    return resource_id


def normalize_columns(columns: str | Sequence[str]) -> str:
    """Collapse a column name or a sequence of names into one comma-joined string."""

    if isinstance(columns, str):
        return columns
    if not isinstance(columns, Sequence):
        raise CmsInvalidArgumentError("columns must be str or Sequence[str]")
    for column in columns:
        if not isinstance(column, str):
            raise CmsInvalidArgumentError("columns entries must be str")
    return ",".join(columns)


def validate_filter(column: object, value: object) -> tuple[str, str]:
    if not column or not value:
        raise CmsInvalidArgumentError(
            "Missing params: include column & value to be filtered"
        )
    return str(column), str(value)


def validate_limit(limit: object) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise CmsInvalidArgumentError("limit must be int")
    return limit


__all__ = [
    "validate_resource_id",
    "normalize_columns",
    "validate_filter",
    "validate_limit",
]
