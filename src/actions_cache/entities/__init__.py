"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT wire contracts - the pydantic models
in the dto package describe what the API sends back.
"""

from .repository_ref import RepositoryRef

__all__ = ["RepositoryRef"]
