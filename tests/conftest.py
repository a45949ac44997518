"""Shared test fixtures for actions_cache tests."""

from collections.abc import Mapping

import pytest

from actions_cache.entities import RepositoryRef
from actions_cache.errors import HTTPError
from actions_cache.services import CacheQueryService


def make_cache(cache_id: int, ref: str = "refs/heads/main") -> dict:
    """Return one cache entry as the API serializes it."""
    return {
        "id": cache_id,
        "ref": ref,
        "key": f"Linux-node-{cache_id:04d}",
        "version": "73885106f58cc52a7df9ec4d4a5622a5614813162cb516c759a30af6bf56e6f0",
        "size_in_bytes": 1024 * cache_id,
        "created_at": "2026-08-10T12:32:11Z",
        "last_accessed_at": "2026-08-11T09:01:00Z",
    }


def make_pages(total_count: int, page_sizes: list[int]) -> dict[int, dict]:
    """Build list responses keyed by page number with consecutive cache ids."""
    pages = {}
    next_id = 1
    for number, size in enumerate(page_sizes, start=1):
        pages[number] = {
            "total_count": total_count,
            "actions_caches": [make_cache(i) for i in range(next_id, next_id + size)],
        }
        next_id += size
    return pages


class FakeRestClient:
    """In-memory RestClient that records every call.

    GET responses for the list endpoint are looked up by the "page"
    parameter (missing page means page 1). Setting ``error`` makes the
    next request raise it instead.
    """

    def __init__(
        self,
        pages: dict[int, dict] | None = None,
        usage: dict | None = None,
        deleted: dict | None = None,
        error: Exception | None = None,
    ) -> None:
        self.pages = pages or {1: {"total_count": 0, "actions_caches": []}}
        self.usage = usage or {"active_caches_size_in_bytes": 0}
        self.deleted = deleted or {"total_count": 0}
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def get(self, path, response_model, params: Mapping[str, str] | None = None):
        params = dict(params or {})
        self.calls.append(("GET", path, params))
        if self.error is not None:
            raise self.error
        if path.endswith("/cache/usage"):
            return response_model.model_validate(self.usage)
        return response_model.model_validate(self.pages[int(params.get("page", 1))])

    def delete(self, path, response_model, params: Mapping[str, str] | None = None):
        self.calls.append(("DELETE", path, dict(params or {})))
        if self.error is not None:
            raise self.error
        return response_model.model_validate(self.deleted)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def repo():
    """Return the repository used across tests."""
    return RepositoryRef(owner="octo-org", name="hello-world", host="github.com")


@pytest.fixture
def fake_client():
    """Return an empty fake REST client."""
    return FakeRestClient()


@pytest.fixture
def service(repo, fake_client):
    """Create a service bound to the fake client."""
    return CacheQueryService(repo=repo, client=fake_client)


@pytest.fixture
def not_found():
    """Return the error the transport raises for a 404."""
    return HTTPError(
        404,
        "https://api.github.com/repos/octo-org/hello-world/actions/caches?key=missing",
        "Not Found",
    )
