"""Actions Cache - client for the GitHub Actions cache management API.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (RestClient)
    - repositories: HTTP transport implementations
    - services: Cache queries and pagination
    - dto: Wire models of the REST API
    - entities: Domain models (internal)

Usage:
    ```python
    from actions_cache import CacheQueryService, RepositoryRef

    repo = RepositoryRef.parse("octo-org/hello-world")
    caches = CacheQueryService.create(repo, command="list", version="1.0.0")
    print(caches.get_usage())
    ```
"""

from actions_cache.config import get_settings, settings
from actions_cache.dto import (
    ActionsCache,
    CacheQuery,
    CacheUsageResponse,
    DeleteCachesResponse,
    ListCachesResponse,
)
from actions_cache.entities import RepositoryRef
from actions_cache.errors import ActionsCacheError, DecodeError, HTTPError, TransportError
from actions_cache.protocols import RestClient
from actions_cache.repositories import GitHubRestClient
from actions_cache.services import PAGE_SIZE, CacheQueryService

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "RestClient",
    # Services (business logic)
    "CacheQueryService",
    "PAGE_SIZE",
    # Repositories (data access)
    "GitHubRestClient",
    # Entities (domain models)
    "RepositoryRef",
    # DTOs (API contracts)
    "ActionsCache",
    "CacheQuery",
    "ListCachesResponse",
    "DeleteCachesResponse",
    "CacheUsageResponse",
    # Errors
    "ActionsCacheError",
    "TransportError",
    "HTTPError",
    "DecodeError",
]
