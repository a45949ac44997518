"""Repository reference domain entity."""

from dataclasses import dataclass, field

from actions_cache.config import settings


@dataclass(frozen=True)
class RepositoryRef:
    """Identifies the repository whose caches are managed.

    Attributes:
        owner: User or organization that owns the repository
        name: Repository name
        host: GitHub host (github.com or a GitHub Enterprise hostname)
    """

    owner: str
    name: str
    host: str = field(default_factory=lambda: settings.default_host)

    def __post_init__(self) -> None:
        if not self.owner or not self.name or not self.host:
            raise ValueError(
                f"Repository owner, name and host are required, got {self.owner!r}/{self.name!r} on {self.host!r}"
            )

    @classmethod
    def parse(cls, full_name: str) -> "RepositoryRef":
        """Build a reference from "OWNER/NAME" or "HOST/OWNER/NAME".

        Args:
            full_name: Repository name with optional host prefix

        Returns:
            The parsed RepositoryRef

        Raises:
            ValueError: If the string has any other shape

        Example:
            ```python
            RepositoryRef.parse("actions/cache")
            RepositoryRef.parse("ghe.example.com/platform/builds")
            ```
        """
        parts = full_name.strip().split("/")
        if any(not part for part in parts):
            raise ValueError(f"Expected the \"[HOST/]OWNER/REPO\" format, got {full_name!r}")

        if len(parts) == 2:
            return cls(owner=parts[0], name=parts[1])
        if len(parts) == 3:
            return cls(owner=parts[1], name=parts[2], host=parts[0])

        raise ValueError(f"Expected the \"[HOST/]OWNER/REPO\" format, got {full_name!r}")

    @property
    def full_name(self) -> str:
        """Return "owner/name"."""
        return f"{self.owner}/{self.name}"
