"""GitHub REST transport."""

from .client import GitHubClient, parse_repository, DEFAULT_API_URL

__all__ = ["GitHubClient", "parse_repository", "DEFAULT_API_URL"]
