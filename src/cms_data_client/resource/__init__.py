"""Public resource query and result models."""

from .models import FetchedResult, FreshnessInfo
from .queries import OutputFormat, ResourceQuery

__all__ = [
    "ResourceQuery",
    "OutputFormat",
    "FetchedResult",
    "FreshnessInfo",
]
