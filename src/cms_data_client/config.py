"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .resource.queries import OutputFormat


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ClientOptions:
    """Per-client request options."""

    output: OutputFormat | str = OutputFormat.JSON
    include_metadata: bool = False

    def validate(self) -> None:
        try:
            OutputFormat(self.output)
        except ValueError:
            raise ValueError(f"output must be one of: json, csv (got {self.output!r})") from None
        if not isinstance(self.include_metadata, bool):
            raise ValueError("include_metadata must be bool")


@dataclass(slots=True, frozen=True)
class CmsClientConfig:
    """Runtime configuration for CMS client."""

    base_url: str = "https://data.cms.gov"
    user_agent: str = "cms-data-client/0.1.0"
    fields_header: str = "x-soda2-fields"
    out_of_date_header: str = "x-soda2-data-out-of-date"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.fields_header:
            raise ValueError("fields_header must not be empty")
        if not self.out_of_date_header:
            raise ValueError("out_of_date_header must not be empty")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "ClientOptions",
    "CmsClientConfig",
]
