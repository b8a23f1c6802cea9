"""Resource response models."""

from __future__ import annotations

from dataclasses import dataclass, field

ResourceData = list[object] | dict[str, object] | str


@dataclass(slots=True, frozen=True)
class FreshnessInfo:
    is_outdated: bool = False
    last_modified: str | None = None


@dataclass(slots=True, frozen=True)
class FetchedResult:
    data: ResourceData
    fields: tuple[str, ...] | list[str]
    metadata: dict[str, object] = field(default_factory=dict)
    freshness: FreshnessInfo = field(default_factory=FreshnessInfo)

    def __post_init__(self) -> None:
        if isinstance(self.fields, tuple):
            return
        object.__setattr__(self, "fields", tuple(self.fields))


__all__ = [
    "ResourceData",
    "FreshnessInfo",
    "FetchedResult",
]
