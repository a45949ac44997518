"""Repository layer for data access.

This layer hides the HTTP transport behind the RestClient protocol
(structural typing, not inheritance). Any class implementing the
required methods satisfies the protocol.
"""

from actions_cache.protocols import RestClient

from .github_rest_client import GitHubRestClient, rest_base_url

__all__ = [
    "RestClient",
    "GitHubRestClient",
    "rest_base_url",
]
