import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Client settings loaded from environment variables."""

    # GitHub
    default_host: str = os.getenv("GH_HOST", "github.com")
    token: str | None = os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN")
    api_version: str = os.getenv("GITHUB_API_VERSION", "2022-11-28")

    # Transport
    request_timeout: float = float(os.getenv("ACTIONS_CACHE_TIMEOUT", "30.0"))
    user_agent_prefix: str = os.getenv("ACTIONS_CACHE_USER_AGENT", "gh-actions-cache")

    def user_agent(self, command: str, version: str) -> str:
        """Build the User-Agent header value for a command.

        Args:
            command: Name of the command issuing requests (e.g. "list")
            version: Version of the calling tool

        Returns:
            Header value in the form "<prefix>/<version>/<command>"
        """
        return f"{self.user_agent_prefix}/{version}/{command}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.default_host:
            raise ValueError("GH_HOST must not be empty")

        if self.request_timeout <= 0:
            raise ValueError(
                f"ACTIONS_CACHE_TIMEOUT must be positive, got {self.request_timeout}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
