"""httpx implementation of RestClient for the GitHub REST API.

Resolves the API base URL for github.com, GHE.com tenancies and
GitHub Enterprise Server hosts, sends the standard GitHub headers and
turns every failure into one of the package exceptions.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from actions_cache.config import Settings, settings
from actions_cache.errors import DecodeError, HTTPError, TransportError
from actions_cache.protocols import QueryValues

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def rest_base_url(host: str) -> str:
    """Return the REST API base URL for a GitHub host.

    Args:
        host: Hostname such as "github.com" or "ghe.example.com"

    Returns:
        Base URL ending with a slash
    """
    host = host.strip().lower()
    if host == "github.com":
        return "https://api.github.com/"
    if host == "github.localhost":
        return "http://api.github.localhost/"
    if host.endswith(".ghe.com"):
        return f"https://api.{host}/"
    # GitHub Enterprise Server
    return f"https://{host}/api/v3/"


class GitHubRestClient:
    """httpx-based implementation of RestClient protocol.

    This class satisfies the RestClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GitHubRestClient.create(
            host="github.com",
            user_agent="gh-actions-cache/1.0.0/list",
        )
        usage = client.get("repos/octo/hello/actions/cache/usage", CacheUsageResponse)
        ```
    """

    def __init__(
        self,
        host: str,
        user_agent: str,
        token: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client and its connection pool.

        Args:
            host: GitHub host the repository lives on.
            user_agent: Value of the User-Agent header.
            token: Bearer token. Requests are anonymous when None.
            api_version: Value of the X-GitHub-Api-Version header.
            timeout: Request timeout in seconds.
            transport: Custom httpx transport (tests use httpx.MockTransport).

        Raises:
            TransportError: If the HTTP client cannot be set up.
        """
        self._host = host
        self._base_url = rest_base_url(host)

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        if api_version:
            headers["X-GitHub-Api-Version"] = api_version
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            self._client = httpx.Client(
                base_url=self._base_url,
                headers=headers,
                timeout=timeout or settings.request_timeout,
                transport=transport,
                follow_redirects=True,
            )
        except (httpx.HTTPError, OSError, ValueError) as e:
            raise TransportError(f"Failed to initialize HTTP client for {host}: {e}") from e

    @classmethod
    def create(
        cls,
        host: str,
        user_agent: str,
        config: Settings | None = None,
    ) -> "GitHubRestClient":
        """Factory method to create GitHubRestClient from settings.

        Args:
            host: GitHub host the repository lives on.
            user_agent: Value of the User-Agent header.
            config: Settings to read token, API version and timeout from.
                    Defaults to the global settings.

        Returns:
            Configured GitHubRestClient
        """
        config = config or settings
        return cls(
            host=host,
            user_agent=user_agent,
            token=config.token,
            api_version=config.api_version,
            timeout=config.request_timeout,
        )

    @property
    def base_url(self) -> str:
        """Get the resolved API base URL."""
        return self._base_url

    def get(
        self,
        path: str,
        response_model: type[ModelT],
        params: QueryValues | None = None,
    ) -> ModelT:
        """Issue a GET request and decode the response into response_model."""
        return self._request("GET", path, response_model, params)

    def delete(
        self,
        path: str,
        response_model: type[ModelT],
        params: QueryValues | None = None,
    ) -> ModelT:
        """Issue a DELETE request and decode the response into response_model."""
        return self._request("DELETE", path, response_model, params)

    def _request(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        params: QueryValues | None,
    ) -> ModelT:
        try:
            response = self._client.request(method, path, params=dict(params) if params else None)
        except httpx.RequestError as e:
            raise TransportError(f"Cannot connect to API at {self._base_url}: {e}") from e

        url = str(response.request.url)
        logger.debug("%s %s -> %d", method, url, response.status_code)

        if not response.is_success:
            raise HTTPError(response.status_code, url, _error_message(response))

        # JSON mode keeps ISO timestamps valid while strict rejects mistyped fields
        try:
            return response_model.model_validate_json(response.content, strict=True)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response shape from {url} for {response_model.__name__}: {e}"
            ) from e

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "GitHubRestClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _error_message(response: httpx.Response) -> str:
    """Extract the GitHub error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
