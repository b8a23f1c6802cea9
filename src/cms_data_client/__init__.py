"""Public package exports for CMS data client."""

from .async_client import AsyncCmsClient, create_client
from .config import ClientOptions, CmsClientConfig
from .resource.models import FetchedResult
from .resource.queries import OutputFormat

__all__ = [
    "create_client",
    "AsyncCmsClient",
    "ClientOptions",
    "CmsClientConfig",
    "FetchedResult",
    "OutputFormat",
]
