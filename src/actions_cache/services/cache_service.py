"""Cache query service for the Actions cache endpoints.

This service turns cache queries for one repository into REST calls
through the RestClient protocol and drains paginated listings.
"""

import logging
import math

from actions_cache.config import Settings, settings
from actions_cache.dto import (
    ActionsCache,
    CacheQuery,
    CacheUsageResponse,
    DeleteCachesResponse,
    ListCachesResponse,
    QueryParams,
)
from actions_cache.entities import RepositoryRef
from actions_cache.errors import HTTPError
from actions_cache.protocols import RestClient
from actions_cache.repositories import GitHubRestClient

logger = logging.getLogger(__name__)

# Fixed by the API, whatever per_page the caller asks for
PAGE_SIZE = 100


class CacheQueryService:
    """Lists, measures and deletes Actions caches of one repository.

    The service depends on the RestClient PROTOCOL, so tests can hand it
    a fake transport while production code uses GitHubRestClient.

    Errors from the transport propagate unchanged. The only condition
    handled here is a 404 on delete, which means nothing matched.

    Example:
        ```python
        from actions_cache import CacheQueryService, RepositoryRef

        repo = RepositoryRef.parse("octo-org/hello-world")
        with CacheQueryService.create(repo, command="list", version="1.0.0") as caches:
            entries = caches.list_all_caches({"ref": "refs/heads/main"})
        ```
    """

    def __init__(self, repo: RepositoryRef, client: RestClient) -> None:
        """Initialize the cache query service.

        Args:
            repo: Repository whose caches are queried.
            client: REST transport bound to the repository host (required).
        """
        self._repo = repo
        self._client = client

    @classmethod
    def create(
        cls,
        repo: RepositoryRef,
        command: str,
        version: str,
        config: Settings | None = None,
    ) -> "CacheQueryService":
        """Factory method wiring a GitHubRestClient for the repository host.

        Args:
            repo: Repository whose caches are queried.
            command: Name of the calling command, sent in the User-Agent.
            version: Version of the calling tool, sent in the User-Agent.
            config: Settings override. If None, uses global settings.

        Returns:
            Configured CacheQueryService

        Raises:
            TransportError: If the HTTP client cannot be initialized.
        """
        config = config or settings
        client = GitHubRestClient.create(
            host=repo.host,
            user_agent=config.user_agent(command, version),
            config=config,
        )
        return cls(repo=repo, client=client)

    def _path(self, suffix: str) -> str:
        return f"repos/{self._repo.owner}/{self._repo.name}/actions/{suffix}"

    def get_usage(self) -> float:
        """Get the total size of the repository's active caches.

        Returns:
            active_caches_size_in_bytes as reported by the API
        """
        return self.get_usage_details().active_caches_size_in_bytes

    def get_usage_details(self) -> CacheUsageResponse:
        """Get the full cache usage record of the repository."""
        return self._client.get(self._path("cache/usage"), CacheUsageResponse)

    def list_caches(self, query: QueryParams | None = None) -> ListCachesResponse:
        """List a single page of caches.

        Args:
            query: Filters such as key, ref, sort, direction or page

        Returns:
            The page of caches and the total count of the whole query
        """
        return self._client.get(self._path("caches"), ListCachesResponse, _to_params(query))

    def delete_caches(self, query: QueryParams | None = None) -> int:
        """Delete the caches matching a key, optionally restricted to a ref.

        Args:
            query: Filters, usually key and ref

        Returns:
            Number of caches deleted, 0 if none matched
        """
        try:
            result = self._client.delete(
                self._path("caches"), DeleteCachesResponse, _to_params(query)
            )
        except HTTPError as e:
            if e.is_not_found:
                logger.debug("No caches matched delete query for %s", self._repo.full_name)
                return 0
            raise
        return result.total_count

    def list_all_caches(self, query: QueryParams | None = None) -> list[ActionsCache]:
        """List every cache matching the query, following pagination.

        The number of pages comes from the total reported by the first
        page. A total that changes while draining is not re-checked.

        Args:
            query: Filters such as key, ref, sort or direction

        Returns:
            All caches, in page order
        """
        params = _to_params(query)
        first = self.list_caches(params)
        caches = list(first.actions_caches)

        if first.total_count > PAGE_SIZE:
            last_page = math.ceil(first.total_count / PAGE_SIZE)
            for page in range(2, last_page + 1):
                params["page"] = str(page)
                logger.debug(
                    "Fetching caches page %d/%d for %s", page, last_page, self._repo.full_name
                )
                caches.extend(self.list_caches(params).actions_caches)

        return caches

    @property
    def repo(self) -> RepositoryRef:
        """Get the repository this service is bound to."""
        return self._repo

    @property
    def client(self) -> RestClient:
        """Get the underlying REST client (for testing)."""
        return self._client

    def close(self) -> None:
        """Close the underlying REST client."""
        self._client.close()

    def __enter__(self) -> "CacheQueryService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _to_params(query: QueryParams | None) -> dict[str, str | list[str]]:
    """Copy a query into a fresh dict of string parameters.

    List and tuple values become repeated keys in the query string.

    Raises:
        TypeError: If a value is neither a string, an int nor a list of those
    """
    if query is None:
        return {}
    if isinstance(query, CacheQuery):
        return dict(query.to_params())

    params: dict[str, str | list[str]] = {}
    for name, value in query.items():
        if isinstance(value, (list, tuple)):
            params[str(name)] = [_scalar(name, item) for item in value]
        else:
            params[str(name)] = _scalar(name, value)
    return params


def _scalar(name: str, value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(
            f"Query parameter {name!r} must be a string, an int or a list of those, "
            f"got {type(value).__name__}"
        )
    return str(value)
