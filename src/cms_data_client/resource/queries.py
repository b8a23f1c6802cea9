"""Query models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class OutputFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


@dataclass(slots=True, frozen=True)
class ResourceQuery:
    """Snapshot of the query configuration for one dataset resource.

    ``columns`` is the comma-joined selection (empty selects every column).
    ``filter_column`` and ``filter_value`` are either both set or both empty.
    ``limit`` is only sent when greater than zero.
    """

    resource_id: str
    output: OutputFormat = OutputFormat.JSON
    columns: str = ""
    filter_column: str = ""
    filter_value: str = ""
    limit: int = 0
    include_metadata: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "output", OutputFormat(self.output))

    @property
    def has_filter(self) -> bool:
        return bool(self.filter_column) and bool(self.filter_value)

    def with_columns(self, columns: str) -> "ResourceQuery":
        return replace(self, columns=columns)

    def with_filter(self, column: str, value: str) -> "ResourceQuery":
        return replace(self, filter_column=column, filter_value=value)

    def with_limit(self, limit: int) -> "ResourceQuery":
        return replace(self, limit=limit)


__all__ = [
    "OutputFormat",
    "ResourceQuery",
]
