"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the HTTP transport without touching the service
- Unit testing with fake implementations instead of live network calls

Usage:
    ```python
    from actions_cache.protocols import RestClient

    client: RestClient = GitHubRestClient.create(host="github.com")  # works
    client: RestClient = FakeRestClient()                            # also works
    ```
"""

from .rest_client import QueryValues, RestClient

__all__ = [
    "RestClient",
    "QueryValues",
]
