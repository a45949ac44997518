"""Request DTOs for API query strings."""

from collections.abc import Mapping, Sequence
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CacheQuery(BaseModel):
    """Filters and ordering for the list and delete endpoints.

    Only the fields that are set end up in the query string.
    """

    model_config = ConfigDict(extra="forbid")

    key: str | None = Field(None, description="Cache key, or key prefix when listing", min_length=1)
    ref: str | None = Field(
        None,
        description="Git reference, e.g. refs/heads/main or refs/pull/42/merge",
        min_length=1,
    )
    sort: Literal["created_at", "last_accessed_at", "size_in_bytes"] | None = Field(
        None,
        description="Property to sort the results by",
    )
    direction: Literal["asc", "desc"] | None = Field(None, description="Sort direction")
    page: int | None = Field(None, description="Page number, starting at 1", ge=1)
    per_page: int | None = Field(None, description="Results per page", ge=1, le=100)

    def to_params(self) -> dict[str, str]:
        """Return the set fields as query string parameters."""
        return {name: str(value) for name, value in self.model_dump(exclude_none=True).items()}


# Anything the service accepts as a query, a sequence value repeats the key
QueryParams = Union[Mapping[str, str | int | Sequence[str | int]], CacheQuery]
