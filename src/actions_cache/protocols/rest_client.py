"""REST client protocol.

Defines the interface the cache service needs from an HTTP transport:
GET and DELETE against a path relative to the API base, with the JSON
response decoded into a pydantic model.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

# Query string parameters, a sequence value repeats the key
QueryValues = Mapping[str, str | Sequence[str]]


@runtime_checkable
class RestClient(Protocol):
    """Protocol for REST transports.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Implementations must raise:
        HTTPError: for a non-2xx response (exposes status_code)
        TransportError: when no response was received
        DecodeError: when the body is not JSON or does not fit the model
    """

    def get(
        self,
        path: str,
        response_model: type[ModelT],
        params: QueryValues | None = None,
    ) -> ModelT:
        """Issue a GET request and decode the response.

        Args:
            path: Path relative to the API base URL
            response_model: Pydantic model to validate the JSON body against
            params: Query string parameters, list values repeat the key

        Returns:
            The decoded response model
        """
        ...

    def delete(
        self,
        path: str,
        response_model: type[ModelT],
        params: QueryValues | None = None,
    ) -> ModelT:
        """Issue a DELETE request and decode the response.

        Args:
            path: Path relative to the API base URL
            response_model: Pydantic model to validate the JSON body against
            params: Query string parameters, list values repeat the key

        Returns:
            The decoded response model
        """
        ...

    def close(self) -> None:
        """Release the underlying connections."""
        ...
