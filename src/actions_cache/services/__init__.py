"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with a fake transport.

Architecture:
    Caller (CLI) -> Service -> RestClient
                    (Queries)  (HTTP)

Usage:
    ```python
    from actions_cache.services import CacheQueryService

    # Using factory method (recommended)
    caches = CacheQueryService.create(repo, command="list", version="1.0.0")

    # Or manual creation
    caches = CacheQueryService(repo=repo, client=client)
    ```
"""

from .cache_service import PAGE_SIZE, CacheQueryService

__all__ = [
    "CacheQueryService",
    "PAGE_SIZE",
]
