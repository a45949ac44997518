"""Response DTOs for the Actions cache endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActionsCache(BaseModel):
    """Single cache entry (in actions_caches array)."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Cache identifier")
    ref: str = Field(..., description="Git reference the cache was created for")
    key: str = Field(..., description="Cache key")
    version: str = Field(..., description="Hash of the cache paths and compression method")
    size_in_bytes: int = Field(..., description="Size of the cache archive", ge=0)
    created_at: datetime = Field(..., description="When the cache was created")
    last_accessed_at: datetime = Field(..., description="When the cache was last restored")


class ListCachesResponse(BaseModel):
    """Response DTO for listing caches.

    total_count covers the whole query, not just the returned page.
    """

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(..., description="Number of caches matching the query", ge=0)
    actions_caches: list[ActionsCache] = Field(..., description="Caches on this page")


class DeleteCachesResponse(BaseModel):
    """Response DTO for deleting caches by key."""

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(..., description="Number of caches deleted", ge=0)
    actions_caches: list[ActionsCache] = Field(
        default_factory=list,
        description="The deleted caches, when the API echoes them",
    )


class CacheUsageResponse(BaseModel):
    """Response DTO for repository cache usage."""

    model_config = ConfigDict(frozen=True)

    active_caches_size_in_bytes: float = Field(..., description="Total size of active caches")
    active_caches_count: int | None = Field(None, description="Number of active caches")
    full_name: str | None = Field(None, description="Repository full name")
