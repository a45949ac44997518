"""Data Transfer Objects for API contracts.

These Pydantic models mirror the GitHub Actions cache REST API.
Field names match the JSON schema exactly so responses validate
without aliases.
"""

from .requests import CacheQuery, QueryParams
from .responses import (
    ActionsCache,
    CacheUsageResponse,
    DeleteCachesResponse,
    ListCachesResponse,
)

__all__ = [
    "CacheQuery",
    "QueryParams",
    "ActionsCache",
    "ListCachesResponse",
    "DeleteCachesResponse",
    "CacheUsageResponse",
]
